from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


@runtime_checkable
class LoggerPort(Protocol):
    """Logging interface used by the use cases and transformers."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_transformation(
        self,
        column: str,
        transform_type: str,
        *,
        format_name: str,
        details: str | None = None,
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class TableReaderPort(Protocol):
    """Reads a tabular file with every field kept as text."""

    def read(self, path: Path) -> pd.DataFrame: ...
