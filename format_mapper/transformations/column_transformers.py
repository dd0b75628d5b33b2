"""Column transformers that apply the format mapping components to a DataFrame.

Each transformer is configured with a mapping of column name to rule (a
lookup table, a bin spec or a format definition). Values that cannot be
mapped are reported in ``TransformationResult.errors`` and the affected
column is left as it was; other columns are still transformed. Missing
values stay missing.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import pandas as pd

from ..constants import Defaults
from ..domain.entities.bin_spec import BinSpec
from ..domain.entities.format_definition import FormatDefinition
from ..domain.entities.lookup_table import LookupTable
from ..domain.exceptions import FormatMapperError
from ..domain.services.binner import Binner
from ..domain.services.display import render_value
from ..pandas_utils import ensure_series, is_missing_scalar, is_missing_text
from .base import TransformationContext, TransformationResult

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort

MAX_REPORTED_FAILURES = 3

R = TypeVar("R")


class ColumnTransformer(Generic[R]):
    operation: ClassVar[str] = "transformed"
    default_suffix: ClassVar[str] = ""

    def __init__(
        self,
        columns: Mapping[str, R],
        *,
        output_suffix: str | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.columns = dict(columns)
        self.output_suffix = self.default_suffix if output_suffix is None else output_suffix
        self._logger = logger

    def can_transform(self, df: pd.DataFrame, dataset: str) -> bool:
        return any(column in df.columns for column in self.columns)

    def transform(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult:
        data = df.copy()
        result = TransformationResult(data=data)
        transformed: list[str] = []
        for column, rule in self.columns.items():
            if column not in df.columns:
                result.add_warning(f"Column {column!r} not found in {context.dataset}")
                continue
            converted, failures = self._convert(ensure_series(df[column]), rule)
            if failures:
                shown = "; ".join(failures[:MAX_REPORTED_FAILURES])
                more = len(failures) - MAX_REPORTED_FAILURES
                suffix = f" (+{more} more)" if more > 0 else ""
                result.add_error(
                    f"{column}: {len(failures)} value(s) could not be {self.operation}: "
                    + f"{shown}{suffix}"
                )
                continue
            data[f"{column}{self.output_suffix}"] = converted
            transformed.append(column)
            if self._logger is not None:
                self._logger.log_transformation(
                    column, self.operation, format_name=self._rule_name(rule)
                )
        result.applied = bool(transformed) or bool(result.errors)
        result.message = f"{self.operation.capitalize()} {len(transformed)} column(s)"
        result.metadata["columns"] = transformed
        return result

    def _convert(self, series: pd.Series[Any], rule: R) -> tuple[pd.Series[Any], list[str]]:
        converted: list[Any] = []
        failures: list[str] = []
        for value in series:
            if self._is_missing(value):
                converted.append(None)
                continue
            try:
                converted.append(self._apply_value(value, rule))
            except (FormatMapperError, TypeError, ValueError) as exc:
                failures.append(str(exc))
                converted.append(None)
        return self._finish(converted, series, rule), failures

    def _is_missing(self, value: object) -> bool:
        return is_missing_scalar(value)

    def _apply_value(self, value: Any, rule: R) -> Any:
        raise NotImplementedError

    def _finish(self, values: list[Any], series: pd.Series[Any], rule: R) -> pd.Series[Any]:
        return pd.Series(values, index=series.index, name=series.name)

    def _rule_name(self, rule: R) -> str:
        return type(rule).__name__


class LookupTransformer(ColumnTransformer[LookupTable]):
    """Replace codes by their display values (a merge against a look-up table)."""

    operation = "looked up"

    def _apply_value(self, value: Any, rule: LookupTable) -> Any:
        # CSV columns are text; numeric catalogs are keyed by int
        if isinstance(value, str) and value not in rule:
            stripped = value.strip()
            if stripped.lstrip("-").isdigit() and int(stripped) in rule:
                return rule.get(int(stripped))
        return rule.get(value)

    def _rule_name(self, rule: LookupTable) -> str:
        return rule.name or "lookup table"


class BinTransformer(ColumnTransformer[BinSpec]):
    """Replace numbers or dates by interval labels (an ordered categorical).

    Text values are read as numbers, or as ISO dates when the bins are dates.
    """

    operation = "binned"

    def _apply_value(self, value: Any, rule: BinSpec) -> Any:
        if isinstance(value, str):
            text = value.strip()
            value = date.fromisoformat(text) if rule.is_date else float(text)
        return Binner(rule).bin(value)

    def _finish(
        self, values: list[Any], series: pd.Series[Any], rule: BinSpec
    ) -> pd.Series[Any]:
        categories = list(dict.fromkeys(rule.interval_labels))
        return pd.Series(
            pd.Categorical(values, categories=categories, ordered=True),
            index=series.index,
            name=series.name,
        )

    def _rule_name(self, rule: BinSpec) -> str:
        return f"{rule.bin_count} bins"


class ParseTransformer(ColumnTransformer[FormatDefinition]):
    """Read formatted text back into typed values."""

    operation = "parsed"

    def _is_missing(self, value: object) -> bool:
        return is_missing_text(value)

    def _apply_value(self, value: Any, rule: FormatDefinition) -> Any:
        return rule.parse(value)

    def _rule_name(self, rule: FormatDefinition) -> str:
        return rule.name


class RenderTransformer(ColumnTransformer[FormatDefinition]):
    """Write a rendered text copy of a column next to the raw one."""

    operation = "rendered"
    default_suffix = Defaults.RENDER_SUFFIX

    def _apply_value(self, value: Any, rule: FormatDefinition) -> Any:
        return render_value(value, rule)

    def _finish(
        self, values: list[Any], series: pd.Series[Any], rule: FormatDefinition
    ) -> pd.Series[Any]:
        return pd.Series(values, index=series.index, name=series.name, dtype="object")

    def _rule_name(self, rule: FormatDefinition) -> str:
        return rule.name
