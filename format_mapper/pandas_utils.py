from __future__ import annotations

from typing import Any, cast

import pandas as pd

from .constants import MissingValues


def ensure_series(value: object, index: pd.Index[Any] | None = None) -> pd.Series[Any]:
    if isinstance(value, pd.Series):
        return cast("pd.Series[Any]", value)
    if isinstance(value, pd.DataFrame):
        if value.shape[1] == 0:
            return pd.Series(index=value.index, dtype="object")
        return value.iloc[:, 0]
    return pd.Series(cast("Any", value), index=index)


def ensure_numeric_series(
    value: object, index: pd.Index[Any] | None = None
) -> pd.Series[Any]:
    series = ensure_series(value, index=index)
    numeric = pd.to_numeric(series, errors="coerce")
    return ensure_series(numeric, index=series.index)


def is_missing_scalar(value: object) -> bool:
    try:
        return cast("bool", pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False


def is_missing_text(value: object) -> bool:
    if is_missing_scalar(value):
        return True
    if isinstance(value, str):
        stripped = value.strip()
        return not stripped or stripped.upper() in MissingValues.STRING_MARKERS
    return False
