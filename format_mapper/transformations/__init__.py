"""Transformation framework.

Column transformers apply look-ups, bins, informats and display formats to
DataFrames and can be chained with ``TransformationPipeline``.
"""

from .base import (
    TransformationContext,
    TransformationResult,
    TransformerPort,
    is_transformer,
)
from .column_transformers import (
    BinTransformer,
    ColumnTransformer,
    LookupTransformer,
    ParseTransformer,
    RenderTransformer,
)
from .pipeline import TransformationPipeline

__all__ = [
    "BinTransformer",
    "ColumnTransformer",
    "LookupTransformer",
    "ParseTransformer",
    "RenderTransformer",
    "TransformationContext",
    "TransformationPipeline",
    "TransformationResult",
    "TransformerPort",
    "is_transformer",
]
