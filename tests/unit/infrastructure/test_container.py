"""Tests for the dependency injection container."""

from rich.console import Console

from format_mapper.application import FormatFileUseCase
from format_mapper.config import FormatMapperConfig
from format_mapper.infrastructure.container import DependencyContainer
from format_mapper.infrastructure.io.csv_reader import CSVReader
from format_mapper.infrastructure.logging import ConsoleLogger, NullLogger
from format_mapper.infrastructure.repositories import FormatCatalogRepository


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    def test_defaults(self):
        container = DependencyContainer()

        assert container.verbose == 0
        assert container.console is not None
        assert container.use_null_logger is False
        assert container.config == FormatMapperConfig()

    def test_console_logger_is_singleton(self):
        console = Console()
        container = DependencyContainer(verbose=2, console=console)

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger is container.create_logger()

    def test_null_logger(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_csv_reader_is_singleton(self):
        container = DependencyContainer()

        reader = container.create_csv_reader()

        assert isinstance(reader, CSVReader)
        assert reader is container.create_csv_reader()

    def test_registry_uses_config(self):
        container = DependencyContainer(config=FormatMapperConfig(currency_symbol="£"))

        registry = container.create_registry()

        assert registry.get("currency").render(12) == "£12.00"
        assert registry is container.create_registry()

    def test_catalog_repository_uses_bin_defaults(self, tmp_path):
        path = tmp_path / "formats.toml"
        path.write_text("[bins.age]\nboundaries = [0, 10, 20]\n", encoding="utf-8")
        config = FormatMapperConfig(closed="left", include_lowest=True)

        repository = DependencyContainer(config=config).create_catalog_repository()

        assert isinstance(repository, FormatCatalogRepository)
        assert repository.load(path).get_bin("age").interval_labels == (
            "[0, 10)",
            "[10, 20]",
        )

    def test_use_case_is_wired(self):
        container = DependencyContainer(use_null_logger=True)

        use_case = container.create_format_file_use_case()

        assert isinstance(use_case, FormatFileUseCase)
        assert use_case.logger is container.create_logger()
        assert use_case.registry is container.create_registry()
