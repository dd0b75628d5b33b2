from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.format_file_use_case import FormatFileUseCase
from ..config import FormatMapperConfig
from ..registry import build_default_registry
from .io.csv_reader import CSVReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.catalog_repository import FormatCatalogRepository

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort
    from ..registry import FormatRegistry


class DependencyContainer:
    """Builds and caches the objects one CLI invocation needs."""

    def __init__(
        self,
        config: FormatMapperConfig | None = None,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        self.config = config or FormatMapperConfig()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._csv_reader_instance: CSVReader | None = None
        self._registry_instance: FormatRegistry | None = None
        self._catalog_repository_instance: FormatCatalogRepository | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_registry(self) -> FormatRegistry:
        if self._registry_instance is None:
            self._registry_instance = build_default_registry(self.config)
        return self._registry_instance

    def create_catalog_repository(self) -> FormatCatalogRepository:
        if self._catalog_repository_instance is None:
            self._catalog_repository_instance = FormatCatalogRepository(
                closed=self.config.closed,
                include_lowest=self.config.include_lowest,
            )
        return self._catalog_repository_instance

    def create_format_file_use_case(self) -> FormatFileUseCase:
        return FormatFileUseCase(
            logger=self.create_logger(),
            reader=self.create_csv_reader(),
            registry=self.create_registry(),
        )
