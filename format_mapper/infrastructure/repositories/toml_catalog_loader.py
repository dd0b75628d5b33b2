"""Load lookup tables and bin specs from a TOML format catalog.

    [lookups.region]
    default = "Unknown"
    values = { E = "Europe", SA = "South America" }

    [lookups.sex]
    key_type = "int"
    values = { 1 = "Male", 2 = "Female" }

    [bins.age_group]
    boundaries = [0, 40, 60, 100]
    labels = ["Young", "Middle-Aged", "Old"]
    include_lowest = true

Bin boundaries may be TOML dates, or ``-inf`` / ``inf`` (as floats or strings)
for open-ended bins. Bins without ``closed`` / ``include_lowest`` take the
defaults passed to the loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
import math
from pathlib import Path
import tomllib
from typing import Any, cast

from ...constants import Defaults
from ...domain.entities.bin_spec import BinSpec
from ...domain.entities.format_catalog import FormatCatalog
from ...domain.entities.lookup_table import LookupTable
from ...domain.exceptions import FormatMapperError
from ..io.exceptions import CatalogLoadError

_INFINITY_TEXT = {"inf": math.inf, "+inf": math.inf, "-inf": -math.inf}


def load_toml_catalog(
    path: Path,
    *,
    closed: str = Defaults.CLOSED,
    include_lowest: bool = Defaults.INCLUDE_LOWEST,
) -> FormatCatalog:
    if not path.exists():
        raise CatalogLoadError(f"Catalog not found: {path}")
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise CatalogLoadError(f"Invalid TOML in {path}: {exc}") from exc
    catalog = FormatCatalog()
    for name, table in _tables(data, "lookups", path).items():
        try:
            catalog.add_lookup(name, _build_lookup(name, table))
        except (FormatMapperError, TypeError, ValueError) as exc:
            raise CatalogLoadError(f"Lookup {name!r} in {path}: {exc}") from exc
    for name, table in _tables(data, "bins", path).items():
        try:
            catalog.add_bin(
                name, _build_bin(table, closed=closed, include_lowest=include_lowest)
            )
        except (FormatMapperError, TypeError, ValueError) as exc:
            raise CatalogLoadError(f"Bins {name!r} in {path}: {exc}") from exc
    return catalog


def _tables(
    data: Mapping[str, object], key: str, path: Path
) -> dict[str, Mapping[str, Any]]:
    section = data.get(key, {})
    if not isinstance(section, Mapping):
        raise CatalogLoadError(f"[{key}] in {path} must be a table")
    tables: dict[str, Mapping[str, Any]] = {}
    for name, table in cast("Mapping[str, object]", section).items():
        if not isinstance(table, Mapping):
            raise CatalogLoadError(f"[{key}.{name}] in {path} must be a table")
        tables[name] = cast("Mapping[str, Any]", table)
    return tables


def _build_lookup(name: str, table: Mapping[str, Any]) -> LookupTable:
    values = table.get("values", {})
    if not isinstance(values, Mapping):
        raise TypeError("values must be a table")
    key_type = table.get("key_type", "str")
    if key_type not in ("str", "int"):
        raise ValueError(f"key_type must be 'str' or 'int', got {key_type!r}")
    entries = [
        (int(key) if key_type == "int" else key, value)
        for key, value in cast("Mapping[str, Any]", values).items()
    ]
    options: dict[str, Any] = {
        "case_insensitive": _flag(table, "case_insensitive", False),
        "name": name,
    }
    if "default" in table:
        options["default"] = table["default"]
    return LookupTable(entries, **options)


def _build_bin(
    table: Mapping[str, Any], *, closed: str, include_lowest: bool
) -> BinSpec:
    raw = table.get("boundaries")
    if not isinstance(raw, list):
        raise TypeError("boundaries must be an array")
    labels = table.get("labels")
    if labels is not None and not isinstance(labels, list):
        raise TypeError("labels must be an array")
    return BinSpec(
        [_boundary(b) for b in cast("list[object]", raw)],
        cast("list[str] | None", labels),
        closed=str(table.get("closed", closed)),
        include_lowest=_flag(table, "include_lowest", include_lowest),
    )


def _boundary(value: object) -> float | int | date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _INFINITY_TEXT:
            return _INFINITY_TEXT[lowered]
        raise ValueError(f"Unsupported boundary {value!r}")
    if isinstance(value, (int, float, date)) and not isinstance(value, bool):
        return value
    raise TypeError(f"Unsupported boundary {value!r}")


def _flag(table: Mapping[str, Any], key: str, default: bool) -> bool:
    # TOML has real booleans; "false" as a string is a typo, not False
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be true or false, got {value!r}")
    return value
