from __future__ import annotations

from typing import Any

import pandas as pd

from ...pandas_utils import ensure_series, is_missing_scalar
from ..entities.format_definition import FormatDefinition
from ..entities.masked_value import MaskedValue


def render_value(value: Any, definition: FormatDefinition) -> str:
    if isinstance(value, MaskedValue):
        value = value.raw
    return definition.render(value)


def render_series(series: object, definition: FormatDefinition) -> pd.Series[Any]:
    """Render a column as text; the input column is left untouched."""
    values = ensure_series(series)
    rendered = [None if is_missing_scalar(v) else render_value(v, definition) for v in values]
    return pd.Series(rendered, index=values.index, name=values.name, dtype="object")


def mask_series(series: object, definition: FormatDefinition) -> pd.Series[Any]:
    values = ensure_series(series)
    masked = [None if is_missing_scalar(v) else MaskedValue(v, definition) for v in values]
    return pd.Series(masked, index=values.index, name=values.name, dtype="object")
