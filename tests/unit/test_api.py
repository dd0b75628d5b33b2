"""Unit tests for the function-style API."""

from __future__ import annotations

from datetime import date

import pytest

from format_mapper import (
    BinSpec,
    LookupTable,
    MaskedValue,
    bin_value,
    lookup,
    mask,
    parse,
    register_format,
    render,
    unwrap,
)
from format_mapper.domain.exceptions import (
    DuplicateFormatError,
    UnknownFormatError,
    UnparsableValueError,
)
from format_mapper.registry import FormatRegistry, get_default_registry


class TestLookupAndBin:
    """Tests for lookup and bin_value."""

    def test_lookup_default(self):
        table = LookupTable({"E": "Europe", "SA": "South America"}, default="Unknown")

        assert lookup(table, "AS") == "Unknown"
        assert lookup(table, "E") == "Europe"

    def test_bin_value(self):
        spec = BinSpec([0, 40, 60, 100], ["Young", "Middle-Aged", "Old"])

        assert bin_value(spec, 59) == "Middle-Aged"


class TestMaskAndRender:
    """Tests for mask, unwrap and render."""

    def test_masked_sum(self):
        register_format("pct", lambda v: f"{v}%", lambda t: float(t.rstrip("%")))

        total = mask(5, "pct") + mask(3, "pct")

        assert unwrap(total) == 8
        assert render(total) == render(mask(8, "pct"))

    def test_mask_unknown_format(self):
        with pytest.raises(UnknownFormatError):
            mask(1, "no-such-format")

    def test_unwrap_requires_masked_value(self):
        with pytest.raises(TypeError, match="MaskedValue"):
            unwrap(5)  # type: ignore[arg-type]

    def test_render_named_format(self):
        assert render(1234.5, "currency") == "$1,234.50"

    def test_render_masked_with_other_format(self):
        assert render(mask(0.5, "percent"), "number") == "0.5"

    def test_render_plain_value_needs_format(self):
        with pytest.raises(TypeError, match="format_name is required"):
            render(5)

    def test_mask_returns_masked_value(self):
        value = mask(date(2020, 1, 1), "date9")

        assert isinstance(value, MaskedValue)
        assert str(value) == "01JAN2020"


class TestParse:
    """Tests for parse."""

    def test_accounting_percent(self):
        assert parse("(82.5%)", "accounting-percent") == -0.825

    def test_currency_with_other_symbol(self):
        assert parse("£1,000.00", "currency") == 1000.0

    @pytest.mark.parametrize(
        ("name", "value"),
        [("number", 1234.5678), ("date9", date(2020, 2, 29)), ("iso-date", date(1970, 1, 1))],
    )
    def test_lossless_round_trip(self, name, value):
        assert parse(render(value, name), name) == value

    def test_unparsable(self):
        with pytest.raises(UnparsableValueError, match="with format 'currency'"):
            parse("twelve", "currency")


class TestRegisterFormat:
    """Tests for register_format."""

    def test_duplicate_raises(self):
        with pytest.raises(DuplicateFormatError):
            register_format("currency", str, float)

    def test_replace_overwrites(self):
        register_format("currency", lambda v: f"EUR {v}", float, replace=True)

        assert render(2, "currency") == "EUR 2"

    def test_explicit_registry(self):
        registry = FormatRegistry()

        definition = register_format(
            "yes-no",
            lambda v: "Yes" if v else "No",
            lambda t: t.strip().lower() == "yes",
            lossy=True,
            description="Booleans",
            registry=registry,
        )

        assert definition.lossy
        assert parse("Yes", "yes-no", registry=registry) is True
        assert "yes-no" not in get_default_registry()
