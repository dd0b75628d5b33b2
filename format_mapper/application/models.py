from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults
from ..domain.entities.format_catalog import FormatCatalog

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


def _empty_str_list() -> list[str]:
    return []


def _empty_column_map() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class FormatFileRequest:
    """Which formats to apply to which columns of one input file.

    Each mapping goes from column name to a format name: ``lookups`` and
    ``bins`` name entries of ``catalog``, ``parses`` and ``renders`` name
    registered formats. Steps run in the order parse, lookup, bin, render.
    """

    input_path: Path
    output_path: Path | None = None
    catalog: FormatCatalog = field(default_factory=FormatCatalog)
    lookups: dict[str, str] = field(default_factory=_empty_column_map)
    bins: dict[str, str] = field(default_factory=_empty_column_map)
    parses: dict[str, str] = field(default_factory=_empty_column_map)
    renders: dict[str, str] = field(default_factory=_empty_column_map)
    render_suffix: str = Defaults.RENDER_SUFFIX
    fail_safe: bool = False
    verbose: int = 0

    @property
    def column_count(self) -> int:
        return len(self.lookups) + len(self.bins) + len(self.parses) + len(self.renders)


@dataclass(slots=True)
class FormatFileResponse:
    success: bool = True
    input_path: Path | None = None
    output_path: Path | None = None
    records: int = 0
    dataframe: pd.DataFrame | None = None
    applied_transformers: list[str] = field(default_factory=_empty_str_list)
    warnings: list[str] = field(default_factory=_empty_str_list)
    errors: list[str] = field(default_factory=_empty_str_list)
    error: str | None = None

    @property
    def has_errors(self) -> bool:
        return self.error is not None or len(self.errors) > 0
