"""Build lookup tables from a CNTLIN-style control CSV.

One row per formatted value, in the layout ``PROC FORMAT CNTLIN=`` reads:
``FMTNAME``, ``START``, ``LABEL`` and optionally ``TYPE`` (``C``/``N``),
``END`` and ``HLO``. A row with ``HLO = O`` supplies the ``OTHER`` label,
which becomes the table default. Range rows (``END`` different from
``START``) are rejected: declare range formats as bins in a TOML catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import CntlinColumns
from ...domain.entities.format_catalog import FormatCatalog
from ...domain.entities.lookup_table import LookupKey, LookupTable
from ...domain.exceptions import FormatMapperError
from ..io.exceptions import CatalogLoadError

if TYPE_CHECKING:
    from pathlib import Path

_TYPE_COLUMN = ["TYPE", "DataType", "Data Type", "Data_Type"]
_END_COLUMN = ["END"]


def normalize_column_names(df: pd.DataFrame) -> pd.DataFrame:
    df.columns = [str(col).strip() for col in df.columns]
    return df


def find_column(df: pd.DataFrame, candidates: list[str]) -> str | None:
    df_cols_upper = {col.upper(): col for col in df.columns}
    for candidate in candidates:
        if candidate.upper() in df_cols_upper:
            return df_cols_upper[candidate.upper()]
    return None


def _numeric_key(value: str) -> int:
    number = float(value)
    if not number.is_integer():
        raise CatalogLoadError(f"Numeric START value {value!r} is not an integer")
    return int(number)


def load_cntlin_csv(path: Path) -> FormatCatalog:
    if not path.exists():
        raise CatalogLoadError(f"CNTLIN file not found: {path}")
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Failed to read CNTLIN file {path}: {exc}") from exc
    df = normalize_column_names(df)
    format_col = find_column(df, CntlinColumns.FMTNAME)
    start_col = find_column(df, CntlinColumns.START)
    label_col = find_column(df, CntlinColumns.LABEL)
    if not format_col or not start_col or not label_col:
        raise CatalogLoadError(
            f"Could not find FMTNAME/START/LABEL columns in {path}. Found: {list(df.columns)}"
        )
    type_col = find_column(df, _TYPE_COLUMN)
    end_col = find_column(df, _END_COLUMN)
    hlo_col = find_column(df, CntlinColumns.HLO)

    entries: dict[str, list[tuple[LookupKey, Any]]] = {}
    defaults: dict[str, str] = {}
    names: dict[str, str] = {}
    for line, row in enumerate(df.to_dict("records"), start=2):
        format_name = str(row[format_col]).strip()
        if not format_name:
            continue
        key = format_name.upper()
        names.setdefault(key, format_name)
        entries.setdefault(key, [])
        label = str(row[label_col])
        hlo = str(row[hlo_col]).strip().upper() if hlo_col else ""
        if CntlinColumns.OTHER_FLAG in hlo:
            defaults[key] = label
            continue
        start = str(row[start_col]).strip()
        end = str(row[end_col]).strip() if end_col else ""
        if end and end != start:
            raise CatalogLoadError(
                f"{path}:{line}: range {start!r}-{end!r} in format {format_name!r} "
                + "is not a single value"
            )
        is_numeric = type_col is not None and str(row[type_col]).strip().upper() == "N"
        try:
            value_key: LookupKey = _numeric_key(start) if is_numeric else start
        except ValueError as exc:
            raise CatalogLoadError(
                f"{path}:{line}: numeric START {start!r} is not a number"
            ) from exc
        entries[key].append((value_key, label))

    catalog = FormatCatalog()
    for key, pairs in entries.items():
        options: dict[str, Any] = {"name": names[key]}
        if key in defaults:
            options["default"] = defaults[key]
        try:
            catalog.add_lookup(key, LookupTable(pairs, **options))
        except FormatMapperError as exc:
            raise CatalogLoadError(f"Format {names[key]!r} in {path}: {exc}") from exc
    return catalog
