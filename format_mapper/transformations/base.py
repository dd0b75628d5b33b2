"""Shared types for the column transformers.

A transformer takes a DataFrame and returns a ``TransformationResult`` with a
new DataFrame. Values it cannot map are reported in ``errors`` rather than
raised, so a pipeline can decide whether to stop or go on:

    >>> result = LookupTransformer({"REGION": regions}).transform(
    ...     df, TransformationContext(dataset="people")
    ... )
    >>> result.errors
    []
    >>> result.metadata["columns"]
    ['REGION']
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol

import pandas as pd


def _empty_str_list() -> list[str]:
    return []


def _empty_metadata() -> dict[str, object]:
    return {}


@dataclass
class TransformationContext:
    """Where the data being transformed comes from.

    ``dataset`` names the table in messages (the file stem for CSV input).
    """

    dataset: str
    source_file: str | None = None
    metadata: dict[str, object] = field(default_factory=_empty_metadata)

    def with_metadata(self, **kwargs: object) -> TransformationContext:
        return replace(self, metadata={**self.metadata, **kwargs})


@dataclass
class TransformationResult:
    data: pd.DataFrame
    applied: bool = True
    message: str = ""
    warnings: list[str] = field(default_factory=_empty_str_list)
    errors: list[str] = field(default_factory=_empty_str_list)
    metadata: dict[str, object] = field(default_factory=_empty_metadata)

    @property
    def success(self) -> bool:
        """True when the step ran and every value could be mapped."""
        return self.applied and not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def summary(self) -> str:
        """One line per non-empty part: outcome, warnings, errors."""
        parts: list[str] = []
        if self.message:
            parts.append(
                f"Transformation {'applied' if self.applied else 'skipped'}: {self.message}"
            )
        for title, items in (("Warnings", self.warnings), ("Errors", self.errors)):
            if items:
                parts.append(f"{title} ({len(items)}): {', '.join(items)}")
        return "\n".join(parts) or "No transformation applied"


class TransformerPort(Protocol):
    """Anything with ``can_transform`` and ``transform`` can join a pipeline."""

    def can_transform(self, df: pd.DataFrame, dataset: str) -> bool: ...

    def transform(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult: ...


def is_transformer(obj: object) -> bool:
    return all(
        callable(getattr(obj, name, None)) for name in ("can_transform", "transform")
    )
