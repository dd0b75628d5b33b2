"""Unit tests for the SAS catalog loader (pyreadstat is stubbed per test)."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from format_mapper.infrastructure.io.exceptions import CatalogLoadError
from format_mapper.infrastructure.repositories import sas_catalog_loader
from format_mapper.infrastructure.repositories.sas_catalog_loader import (
    load_sas_catalog,
)


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "formats.sas7bcat"
    path.write_bytes(b"")
    return path


def _stub_reader(monkeypatch: pytest.MonkeyPatch, value_labels: object) -> list[str]:
    calls: list[str] = []

    def read_sas7bcat(path: str, encoding: str | None = None):
        calls.append(path)
        return None, SimpleNamespace(value_labels=value_labels)

    monkeypatch.setattr(sas_catalog_loader.pyreadstat, "read_sas7bcat", read_sas7bcat)
    return calls


class TestLoadSasCatalog:
    def test_value_labels_become_lookups(
        self, monkeypatch: pytest.MonkeyPatch, catalog_path: Path
    ):
        calls = _stub_reader(
            monkeypatch,
            {
                "SEXF": {1.0: "Male", 2.0: "Female"},
                "$REGION": {"E": "Europe", "SA": "South America"},
            },
        )

        catalog = load_sas_catalog(catalog_path)

        assert calls == [str(catalog_path)]
        assert catalog.get_lookup("sexf").get(1) == "Male"
        assert catalog.get_lookup("$region").get("SA") == "South America"
        assert not catalog.get_lookup("SEXF").has_default

    def test_non_integral_float_keys_are_stringified(
        self, monkeypatch: pytest.MonkeyPatch, catalog_path: Path
    ):
        _stub_reader(monkeypatch, {"HALF": {0.5: "half"}})

        assert load_sas_catalog(catalog_path).get_lookup("HALF").get("0.5") == "half"

    def test_empty_catalog(self, monkeypatch: pytest.MonkeyPatch, catalog_path: Path):
        _stub_reader(monkeypatch, None)

        assert load_sas_catalog(catalog_path).is_empty

    def test_reader_failure(self, monkeypatch: pytest.MonkeyPatch, catalog_path: Path):
        def read_sas7bcat(path: str, encoding: str | None = None):
            raise OSError("bad header")

        monkeypatch.setattr(sas_catalog_loader.pyreadstat, "read_sas7bcat", read_sas7bcat)

        with pytest.raises(CatalogLoadError, match="bad header"):
            load_sas_catalog(catalog_path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogLoadError, match="not found"):
            load_sas_catalog(tmp_path / "missing.sas7bcat")
