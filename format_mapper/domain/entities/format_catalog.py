from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import UnknownFormatError
from .bin_spec import BinSpec
from .lookup_table import LookupTable


def _empty_lookups() -> dict[str, LookupTable]:
    return {}


def _empty_bins() -> dict[str, BinSpec]:
    return {}


@dataclass(slots=True)
class FormatCatalog:
    """Named lookup tables and bin specs, as loaded from a format catalog file."""

    lookups: dict[str, LookupTable] = field(default_factory=_empty_lookups)
    bins: dict[str, BinSpec] = field(default_factory=_empty_bins)

    def get_lookup(self, name: str) -> LookupTable:
        table = self.lookups.get(name.upper())
        if table is None:
            raise UnknownFormatError(name, self.lookups.keys())
        return table

    def get_bin(self, name: str) -> BinSpec:
        spec = self.bins.get(name.upper())
        if spec is None:
            raise UnknownFormatError(name, self.bins.keys())
        return spec

    def add_lookup(self, name: str, table: LookupTable) -> None:
        self.lookups[name.upper()] = table

    def add_bin(self, name: str, spec: BinSpec) -> None:
        self.bins[name.upper()] = spec

    def merge(self, other: FormatCatalog) -> FormatCatalog:
        return FormatCatalog(
            lookups={**self.lookups, **other.lookups},
            bins={**self.bins, **other.bins},
        )

    @property
    def is_empty(self) -> bool:
        return not self.lookups and not self.bins
