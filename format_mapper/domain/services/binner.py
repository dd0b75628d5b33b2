"""Assign values to labelled intervals of a ``BinSpec``."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from datetime import date
import math
from typing import Any

import pandas as pd

from ...constants import Closure
from ...pandas_utils import ensure_series, is_missing_scalar
from ..entities.bin_spec import BinSpec, boundary_key, format_boundary
from ..exceptions import OutOfRangeError


class Binner:
    def __init__(self, spec: BinSpec) -> None:
        self.spec = spec

    def index_of(self, value: object) -> int:
        """Return the zero-based interval index for ``value``."""
        spec = self.spec
        if isinstance(value, date) != spec.is_date:
            kind = "dates" if spec.is_date else "numbers"
            raise TypeError(f"Bins are defined over {kind}, got {type(value).__name__}")
        key = boundary_key(value)
        if math.isnan(key):
            raise self._out_of_range(value)
        keys = spec.keys
        count = spec.bin_count
        if spec.closed == Closure.RIGHT:
            position = bisect_left(keys, key)
            if position == 0 and key == keys[0] and spec.include_lowest:
                position = 1
        else:
            position = bisect_right(keys, key)
            if position == count + 1 and key == keys[-1] and spec.include_lowest:
                position = count
        if not 1 <= position <= count:
            raise self._out_of_range(value)
        return position - 1

    def bin(self, value: object) -> str:
        return self.spec.interval_labels[self.index_of(value)]

    def bin_series(self, series: object) -> pd.Series[Any]:
        """Bin a column into an ordered categorical; missing values stay missing."""
        values = ensure_series(series)
        labels = [None if is_missing_scalar(v) else self.bin(v) for v in values]
        categories = list(dict.fromkeys(self.spec.interval_labels))
        return pd.Series(
            pd.Categorical(labels, categories=categories, ordered=True),
            index=values.index,
            name=values.name,
        )

    def _out_of_range(self, value: object) -> OutOfRangeError:
        return OutOfRangeError(
            value, format_boundary(self.spec.lower), format_boundary(self.spec.upper)
        )
