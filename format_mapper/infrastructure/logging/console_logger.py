from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    file_name: str = ""
    column: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


_STAT_LABELS = (
    ("files_processed", "Files processed"),
    ("rows_processed", "Rows processed"),
    ("columns_transformed", "Columns transformed"),
    ("warnings", "Warnings"),
    ("errors", "Errors"),
)


def _empty_stats() -> dict[str, int]:
    return dict.fromkeys((key for key, _label in _STAT_LABELS), 0)


class ConsoleLogger(LoggerPort):
    """Rich console logger with verbosity levels and per-run statistics."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self.set_context(file_name=filename)
        self._stats["files_processed"] += 1
        self._stats["rows_processed"] += row_count
        msg = f"Loaded {row_count:,} rows from {filename}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_transformation(
        self,
        column: str,
        transform_type: str,
        *,
        format_name: str,
        details: str | None = None,
    ) -> None:
        self.set_context(column=column, operation=transform_type)
        self._stats["columns_transformed"] += 1
        msg = f"  {transform_type.capitalize()} {column} with {format_name}"
        if details:
            msg += f" ({details})"
        self.verbose(msg)

    @override
    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        self.console.print()
        self.console.print("[dim]Processing Statistics:[/dim]")
        for key, label in _STAT_LABELS:
            count = self._stats[key]
            if key in ("warnings", "errors") and not count:
                continue
            style = {"warnings": "dim yellow", "errors": "dim red"}.get(key, "dim")
            self.console.print(f"[{style}]  {label}: {count:,}[/{style}]")

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.file_name:
            parts.append(self._context.file_name)
        if self._context.column:
            parts.append(self._context.column)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
