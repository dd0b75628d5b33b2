"""Unit tests for FormatRegistry and the default registry."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from format_mapper.config import FormatMapperConfig
from format_mapper.domain.entities.format_definition import FormatDefinition
from format_mapper.domain.exceptions import DuplicateFormatError, UnknownFormatError
from format_mapper.registry import (
    FormatRegistry,
    build_default_registry,
    get_default_registry,
    set_default_registry,
)


def _upper(name: str = "upper") -> FormatDefinition:
    return FormatDefinition(name, lambda v: str(v).upper(), lambda t: t.lower())


class TestFormatRegistry:
    """Tests for registration and lookup."""

    def test_register_and_get(self):
        registry = FormatRegistry()
        definition = _upper()

        registry.register(definition)

        assert registry.get("upper") is definition
        assert "upper" in registry
        assert len(registry) == 1

    def test_names_are_case_insensitive(self):
        registry = FormatRegistry([_upper()])

        assert registry.get(" UPPER ").name == "upper"

    def test_duplicate_raises(self):
        registry = FormatRegistry([_upper()])

        with pytest.raises(DuplicateFormatError, match="replace=True"):
            registry.register(_upper("Upper"))

    def test_replace_overwrites(self):
        registry = FormatRegistry([_upper()])
        replacement = _upper()

        registry.register(replacement, replace=True)

        assert registry.get("upper") is replacement

    def test_duplicate_in_constructor_raises(self):
        with pytest.raises(DuplicateFormatError):
            FormatRegistry([_upper(), _upper()])

    def test_unknown_format(self):
        registry = FormatRegistry([_upper()])

        with pytest.raises(UnknownFormatError, match="available: upper") as exc_info:
            registry.get("lower")

        assert isinstance(exc_info.value, KeyError)

    def test_unregister(self):
        registry = FormatRegistry([_upper()])

        removed = registry.unregister("upper")

        assert removed.name == "upper"
        assert "upper" not in registry
        with pytest.raises(UnknownFormatError):
            registry.unregister("upper")

    def test_snapshot_is_not_affected_by_later_writes(self):
        registry = FormatRegistry([_upper()])
        snapshot = registry.snapshot()

        registry.register(_upper("other"))

        assert "other" not in snapshot
        assert "other" in registry

    def test_snapshot_is_read_only(self):
        snapshot = FormatRegistry([_upper()]).snapshot()

        with pytest.raises(TypeError):
            snapshot["x"] = _upper("x")  # type: ignore[index]

    def test_rebuilt_from_definitions_is_independent(self):
        registry = FormatRegistry([_upper()])
        rebuilt = FormatRegistry(registry.definitions())

        rebuilt.register(_upper("other"))

        assert "other" not in registry
        assert "upper" in rebuilt

    def test_names_and_definitions_sorted(self):
        registry = FormatRegistry([_upper("b"), _upper("A")])

        assert registry.names() == ["A", "b"]
        assert [d.name for d in registry.definitions()] == ["A", "b"]

    def test_concurrent_registration(self):
        registry = FormatRegistry()

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: registry.register(_upper(f"f{i}")), range(200)))

        assert len(registry) == 200


class TestDefaultRegistry:
    """Tests for the process-wide registry."""

    def test_has_builtins(self):
        registry = get_default_registry()

        assert registry.names() == sorted(
            [
                "accounting",
                "accounting-percent",
                "comma",
                "currency",
                "date9",
                "iso-date",
                "number",
                "percent",
            ]
        )

    def test_is_shared(self):
        assert get_default_registry() is get_default_registry()

    def test_set_default_registry(self):
        custom = FormatRegistry()

        set_default_registry(custom)

        assert get_default_registry() is custom

    def test_reset_rebuilds(self):
        first = get_default_registry()

        set_default_registry(None)

        assert get_default_registry() is not first

    def test_built_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FORMAT_MAPPER_CURRENCY_SYMBOL", "€")

        assert get_default_registry().get("currency").render(2) == "€2.00"

    def test_build_from_config(self):
        registry = build_default_registry(FormatMapperConfig(decimal_places=0))

        assert registry.get("comma").render(1234.4) == "1,234"
