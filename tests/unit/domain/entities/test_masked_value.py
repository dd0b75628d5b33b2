"""Unit tests for MaskedValue."""

import pytest

from format_mapper.domain.entities.format_definition import FormatDefinition
from format_mapper.domain.entities.masked_value import MaskedValue
from format_mapper.domain.services.builtin_formats import currency_format, percent_format


@pytest.fixture
def percent() -> FormatDefinition:
    return percent_format()


@pytest.fixture
def dollars() -> FormatDefinition:
    return currency_format()


class TestMaskedValueDisplay:
    """Tests for rendering."""

    def test_render_uses_definition(self, percent: FormatDefinition):
        value = MaskedValue(0.825, percent)

        assert value.render() == "82.5%"
        assert str(value) == "82.5%"
        assert value.format_name == "percent"

    def test_raw_value_is_unchanged(self, percent: FormatDefinition):
        value = MaskedValue(0.825, percent)

        assert value.raw == 0.825
        assert value.unwrap() == 0.825

    def test_format_spec_applies_to_rendered_text(self, dollars: FormatDefinition):
        assert f"{MaskedValue(5, dollars):>8}" == "   $5.00"

    def test_repr(self, percent: FormatDefinition):
        assert repr(MaskedValue(0.5, percent)) == "MaskedValue(0.5, format='percent')"

    def test_with_format(self, percent: FormatDefinition, dollars: FormatDefinition):
        value = MaskedValue(2, percent).with_format(dollars)

        assert value.render() == "$2.00"


class TestMaskedValueArithmetic:
    """Tests for arithmetic on the raw value."""

    def test_sum_keeps_format(self, percent: FormatDefinition):
        total = MaskedValue(5, percent) + MaskedValue(3, percent)

        assert isinstance(total, MaskedValue)
        assert total.raw == 8
        assert total.render() == MaskedValue(8, percent).render()

    def test_left_operand_format_wins(
        self, percent: FormatDefinition, dollars: FormatDefinition
    ):
        result = MaskedValue(1, dollars) + MaskedValue(0.5, percent)

        assert result.format_name == "currency"
        assert result.raw == 1.5

    def test_plain_numbers_on_either_side(self, dollars: FormatDefinition):
        value = MaskedValue(10, dollars)

        assert (value * 2).raw == 20
        assert (2 * value).raw == 20
        assert (100 - value).raw == 90
        assert (value / 4).raw == 2.5
        assert (1 / MaskedValue(4, dollars)).raw == 0.25
        assert (value // 3).raw == 3
        assert (value % 3).raw == 1
        assert (value**2).raw == 100
        assert (2**MaskedValue(3, dollars)).raw == 8

    def test_unary_operators(self, dollars: FormatDefinition):
        value = MaskedValue(-2.345, dollars)

        assert (-value).raw == 2.345
        assert (+value).raw == -2.345
        assert abs(value).raw == 2.345
        assert round(value, 1).raw == -2.3

    def test_squared_percentage_renders_as_percentage(self, percent: FormatDefinition):
        share = MaskedValue(0.25, percent)

        assert str(share * share) == "6.2%"
        assert (share * share).raw == 0.0625


class TestMaskedValueComparison:
    """Tests for equality and ordering."""

    def test_equality_includes_format(
        self, percent: FormatDefinition, dollars: FormatDefinition
    ):
        assert MaskedValue(1, percent) == MaskedValue(1, percent)
        assert MaskedValue(1, percent) != MaskedValue(1, dollars)

    def test_ordering_uses_raw_values(self, percent: FormatDefinition):
        assert MaskedValue(1, percent) < MaskedValue(2, percent)
        assert MaskedValue(2, percent) >= 2
        assert MaskedValue(2, percent) > 1.5
        assert MaskedValue(2, percent) <= 2

    def test_is_immutable(self, percent: FormatDefinition):
        value = MaskedValue(1, percent)

        with pytest.raises(AttributeError):
            value.raw = 2  # type: ignore[misc]
