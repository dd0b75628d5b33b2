from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Defaults
from ...domain.entities.format_catalog import FormatCatalog
from ..io.exceptions import CatalogLoadError
from .cntlin_loader import load_cntlin_csv
from .sas_catalog_loader import load_sas_catalog
from .toml_catalog_loader import load_toml_catalog

if TYPE_CHECKING:
    from pathlib import Path


class FormatCatalogRepository:
    """Loads format catalogs, picking the reader from the file suffix."""

    def __init__(
        self,
        *,
        closed: str = Defaults.CLOSED,
        include_lowest: bool = Defaults.INCLUDE_LOWEST,
    ) -> None:
        self._closed = closed
        self._include_lowest = include_lowest

    def load(self, path: Path) -> FormatCatalog:
        suffix = path.suffix.lower()
        if suffix == ".toml":
            return load_toml_catalog(
                path, closed=self._closed, include_lowest=self._include_lowest
            )
        if suffix == ".csv":
            return load_cntlin_csv(path)
        if suffix == ".sas7bcat":
            return load_sas_catalog(path)
        raise CatalogLoadError(
            f"Unsupported catalog type {path.suffix!r} for {path} "
            + "(expected .toml, .csv or .sas7bcat)"
        )

    def load_many(self, paths: list[Path]) -> FormatCatalog:
        catalog = FormatCatalog()
        for path in paths:
            catalog = catalog.merge(self.load(path))
        return catalog
