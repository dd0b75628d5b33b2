from typing_extensions import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    """Discards every message; used by tests and the container's quiet mode."""

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_transformation(
        self,
        column: str,
        transform_type: str,
        *,
        format_name: str,
        details: str | None = None,
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
