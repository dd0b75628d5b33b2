"""Unit tests for FormatCatalogRepository."""

from __future__ import annotations

from pathlib import Path

import pytest

from format_mapper.infrastructure.io.exceptions import CatalogLoadError
from format_mapper.infrastructure.repositories import FormatCatalogRepository


@pytest.fixture
def toml_catalog(tmp_path: Path) -> Path:
    path = tmp_path / "formats.toml"
    path.write_text(
        '[lookups.region]\nvalues = { E = "Europe" }\n\n'
        "[bins.age]\nboundaries = [0, 50, 100]\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def cntlin_catalog(tmp_path: Path) -> Path:
    path = tmp_path / "cntlin.csv"
    path.write_text(
        "FMTNAME,START,LABEL\nREGION,E,East\nREGION,W,West\n", encoding="utf-8"
    )
    return path


class TestFormatCatalogRepository:
    def test_dispatches_on_suffix(self, toml_catalog: Path, cntlin_catalog: Path):
        repository = FormatCatalogRepository()

        assert repository.load(toml_catalog).get_lookup("region").get("E") == "Europe"
        assert repository.load(cntlin_catalog).get_lookup("region").get("W") == "West"

    def test_bin_defaults_are_passed_to_toml(self, toml_catalog: Path):
        repository = FormatCatalogRepository(closed="left", include_lowest=True)

        age = repository.load(toml_catalog).get_bin("age")

        assert age.interval_labels == ("[0, 50)", "[50, 100]")

    def test_later_catalogs_override_earlier_ones(
        self, toml_catalog: Path, cntlin_catalog: Path
    ):
        catalog = FormatCatalogRepository().load_many([toml_catalog, cntlin_catalog])

        assert catalog.get_lookup("region").get("E") == "East"
        assert catalog.get_bin("age").bin_count == 2

    def test_load_many_empty(self):
        assert FormatCatalogRepository().load_many([]).is_empty

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "formats.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="Unsupported catalog type '.json'"):
            FormatCatalogRepository().load(path)
