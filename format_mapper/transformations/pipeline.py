"""Transformation pipeline for chaining column transformers.

Transformers run in the order they were added, each one seeing the output of
the previous one. By default the pipeline stops at the first transformer that
reports errors or raises; with ``fail_safe=True`` the failed step is skipped
and its errors are collected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from .base import TransformationContext, TransformationResult, TransformerPort


@dataclass
class _Run:
    data: pd.DataFrame
    input_rows: int
    applied: list[dict[str, Any]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def result(self, message: str, **extra: object) -> TransformationResult:
        return TransformationResult(
            data=self.data,
            applied=bool(self.applied) or "stopped_at" in extra,
            message=message,
            warnings=self.warnings,
            errors=self.errors,
            metadata={
                "input_rows": self.input_rows,
                "output_rows": len(self.data),
                "applied_transformers": self.applied,
                "skipped_transformers": self.skipped,
                **extra,
            },
        )


class TransformationPipeline:
    """Runs transformers in sequence over one DataFrame.

    Example:
        >>> pipeline = TransformationPipeline()
        >>> pipeline.add_transformer(ParseTransformer({"SALES": currency}))
        >>> pipeline.add_transformer(BinTransformer({"AGE": age_groups}))
        >>>
        >>> result = pipeline.execute(df, TransformationContext(dataset="sales"))
        >>> if result.success:
        ...     print(result.metadata["applied_transformers"])
    """

    def __init__(self, fail_safe: bool = False):
        self.transformers: list[TransformerPort] = []
        self.fail_safe = fail_safe

    def add_transformer(self, transformer: TransformerPort) -> TransformationPipeline:
        self.transformers.append(transformer)
        return self

    def execute(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult:
        if not self.transformers:
            return TransformationResult(
                data=df,
                applied=False,
                message="Pipeline is empty (no transformers registered)",
            )

        run = _Run(data=df, input_rows=len(df))
        for transformer in self.transformers:
            name = type(transformer).__name__
            if not transformer.can_transform(run.data, context.dataset):
                run.skipped.append(name)
                continue

            try:
                result = transformer.transform(run.data, context)
            except Exception as e:
                run.errors.append(f"{name}: Unexpected error: {e}")
                if not self.fail_safe:
                    return run.result(f"Pipeline stopped: {name} raised exception", stopped_at=name)
                run.warnings.append(f"{name}: Caught exception, continuing (fail-safe mode)")
                continue

            if not result.applied:
                run.skipped.append(name)
                continue

            run.applied.append(
                {
                    "name": name,
                    "input_rows": len(run.data),
                    "output_rows": len(result.data),
                    "message": result.message,
                    "metadata": result.metadata,
                }
            )
            run.warnings.extend(f"{name}: {w}" for w in result.warnings)
            run.errors.extend(f"{name}: {e}" for e in result.errors)

            if result.success:
                run.data = result.data
            elif self.fail_safe:
                run.warnings.append(
                    f"{name}: Transformation failed but continuing (fail-safe mode)"
                )
            else:
                return run.result(f"Pipeline stopped: {name} failed", stopped_at=name)

        names = [step["name"] for step in run.applied]
        if not names:
            message = "No transformers were applicable"
        else:
            plural = "transformer" if len(names) == 1 else "transformers"
            message = f"Applied {len(names)} {plural}: {', '.join(names)}"
        return run.result(message, transformers_count=len(self.transformers))

    def clear(self) -> None:
        self.transformers.clear()

    def __len__(self) -> int:
        return len(self.transformers)

    def __repr__(self) -> str:
        names = [type(t).__name__ for t in self.transformers]
        return f"TransformationPipeline({names}, fail_safe={self.fail_safe})"
