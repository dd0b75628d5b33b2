from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pyreadstat

from ...domain.entities.format_catalog import FormatCatalog
from ...domain.entities.lookup_table import LookupKey, LookupTable
from ...domain.exceptions import FormatMapperError
from ..io.exceptions import CatalogLoadError

if TYPE_CHECKING:
    from pathlib import Path


def _catalog_key(value: object) -> LookupKey:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return value
    return str(value)


def load_sas_catalog(path: Path, *, encoding: str | None = None) -> FormatCatalog:
    """Read the value formats of a SAS ``.sas7bcat`` catalog as lookup tables.

    pyreadstat exposes value-to-label pairs only, so the tables carry no
    ``OTHER`` default.
    """
    if not path.exists():
        raise CatalogLoadError(f"SAS catalog not found: {path}")
    try:
        _frame, meta = pyreadstat.read_sas7bcat(str(path), encoding=encoding)
    except Exception as e:
        raise CatalogLoadError(f"Failed to read SAS catalog {path}: {e}") from e
    value_labels: dict[str, dict[Any, str]] = getattr(meta, "value_labels", None) or {}
    catalog = FormatCatalog()
    for format_name, labels in value_labels.items():
        pairs = [(_catalog_key(value), label) for value, label in labels.items()]
        try:
            catalog.add_lookup(format_name, LookupTable(pairs, name=format_name))
        except FormatMapperError as exc:
            raise CatalogLoadError(f"Format {format_name!r} in {path}: {exc}") from exc
    return catalog
