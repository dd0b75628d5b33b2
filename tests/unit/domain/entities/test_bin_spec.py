"""Unit tests for BinSpec construction and labelling."""

from datetime import date
import math

import pandas as pd
import pytest

from format_mapper.domain.entities.bin_spec import BinSpec, format_boundary
from format_mapper.domain.exceptions import (
    InvalidBoundariesError,
    LabelCountMismatchError,
)


class TestBinSpecValidation:
    """Tests for boundary and label validation."""

    def test_requires_two_boundaries(self):
        with pytest.raises(InvalidBoundariesError, match="At least two"):
            BinSpec([0])

    def test_requires_strictly_increasing(self):
        with pytest.raises(InvalidBoundariesError, match="strictly increasing"):
            BinSpec([0, 40, 40, 100])

    def test_rejects_decreasing(self):
        with pytest.raises(InvalidBoundariesError):
            BinSpec([100, 60, 0])

    def test_rejects_nan(self):
        with pytest.raises(InvalidBoundariesError, match="NaN"):
            BinSpec([0, math.nan, 10])

    def test_rejects_mixed_kinds(self):
        with pytest.raises(InvalidBoundariesError, match="mix"):
            BinSpec([date(2020, 1, 1), 10])

    def test_rejects_non_numeric(self):
        with pytest.raises(TypeError):
            BinSpec(["a", "b"])

    def test_label_count_must_match(self):
        with pytest.raises(LabelCountMismatchError) as exc_info:
            BinSpec([0, 40, 60, 100], ["Young", "Old"])

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_rejects_unknown_closure(self):
        with pytest.raises(ValueError, match="closed must be one of"):
            BinSpec([0, 1], closed="both")

    def test_boundaries_are_stored_as_tuple(self):
        spec = BinSpec([0, 40, 60, 100], ["Young", "Middle-Aged", "Old"])

        assert spec.boundaries == (0, 40, 60, 100)
        assert spec.labels == ("Young", "Middle-Aged", "Old")
        assert spec.bin_count == 3
        assert spec.lower == 0
        assert spec.upper == 100

    def test_is_hashable_and_frozen(self):
        spec = BinSpec([0, 1])

        with pytest.raises(AttributeError):
            spec.closed = "left"  # type: ignore[misc]


class TestBinSpecLabels:
    """Tests for automatically generated interval labels."""

    def test_right_closed_labels(self):
        spec = BinSpec([0, 40, 60, 100])

        assert spec.interval_labels == ("(0, 40]", "(40, 60]", "(60, 100]")

    def test_right_closed_include_lowest(self):
        spec = BinSpec([0, 40, 100], include_lowest=True)

        assert spec.interval_labels == ("[0, 40]", "(40, 100]")

    def test_left_closed_labels(self):
        spec = BinSpec([0, 40, 100], closed="left")

        assert spec.interval_labels == ("[0, 40)", "[40, 100)")

    def test_left_closed_include_lowest_closes_last(self):
        spec = BinSpec([0, 40, 100], closed="left", include_lowest=True)

        assert spec.interval_labels == ("[0, 40)", "[40, 100]")

    def test_fractional_and_infinite_boundaries(self):
        spec = BinSpec([-math.inf, 0.5, math.inf])

        assert spec.interval_labels == ("(-inf, 0.5]", "(0.5, inf]")

    def test_date_labels(self):
        spec = BinSpec([date(2020, 1, 1), date(2021, 1, 1)])

        assert spec.is_date
        assert spec.interval_labels == ("(2020-01-01, 2021-01-01]",)

    def test_duplicate_labels_allowed(self):
        spec = BinSpec([0, 10, 20, 30], ["low", "mid", "low"])

        assert spec.interval_labels == ("low", "mid", "low")

    def test_format_boundary(self):
        assert format_boundary(40.0) == "40"
        assert format_boundary(2.5) == "2.5"
        assert format_boundary(-math.inf) == "-inf"


class TestEqualWidth:
    """Tests for BinSpec.equal_width."""

    def test_boundaries_span_data(self):
        spec = BinSpec.equal_width([0, 5, 10], 2)

        assert spec.boundaries == (0.0, 5.0, 10.0)

    def test_last_boundary_is_exact_max(self):
        values = [0.1, 0.2, 0.7]

        spec = BinSpec.equal_width(values, 3)

        assert spec.upper == 0.7
        assert spec.bin_count == 3

    def test_ignores_missing_values(self):
        spec = BinSpec.equal_width(pd.Series([1.0, None, 3.0]), 2)

        assert spec.boundaries == (1.0, 2.0, 3.0)

    def test_passes_labels_and_closure(self):
        spec = BinSpec.equal_width(
            [0, 100], 2, labels=["low", "high"], include_lowest=True
        )

        assert spec.labels == ("low", "high")
        assert spec.include_lowest

    def test_rejects_constant_data(self):
        with pytest.raises(InvalidBoundariesError, match="all values equal 3"):
            BinSpec.equal_width([3, 3, 3], 2)

    def test_rejects_empty_data(self):
        with pytest.raises(InvalidBoundariesError, match="empty"):
            BinSpec.equal_width([], 2)

    @pytest.mark.parametrize("n", [0, -1, 2.5, True])
    def test_rejects_invalid_bin_count(self, n):
        with pytest.raises(InvalidBoundariesError, match="positive int"):
            BinSpec.equal_width([0, 1], n)
