"""Raw values that carry their display format through computation.

A ``MaskedValue`` only changes how a value is shown. Arithmetic is done on the
raw value and the result is wrapped again with the same format, so a squared
percentage still prints as a percentage:

    >>> share = MaskedValue(0.25, percent)
    >>> str(share * share)
    '6.2%'
    >>> (share * share).raw
    0.0625
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import operator
from typing import Any

from .format_definition import FormatDefinition


def _raw(value: object) -> Any:
    return value.raw if isinstance(value, MaskedValue) else value


def _forward(op: Callable[[Any, Any], Any]) -> Callable[[MaskedValue, object], MaskedValue]:
    def method(self: MaskedValue, other: object) -> MaskedValue:
        return MaskedValue(op(self.raw, _raw(other)), self.definition)

    return method


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[[MaskedValue, object], MaskedValue]:
    def method(self: MaskedValue, other: object) -> MaskedValue:
        return MaskedValue(op(_raw(other), self.raw), self.definition)

    return method


def _compare(op: Callable[[Any, Any], bool]) -> Callable[[MaskedValue, object], bool]:
    def method(self: MaskedValue, other: object) -> bool:
        return op(self.raw, _raw(other))

    return method


@dataclass(frozen=True, slots=True, repr=False)
class MaskedValue:
    raw: Any
    definition: FormatDefinition

    @property
    def format_name(self) -> str:
        return self.definition.name

    def render(self) -> str:
        return self.definition.render(self.raw)

    def unwrap(self) -> Any:
        return self.raw

    def with_format(self, definition: FormatDefinition) -> MaskedValue:
        return MaskedValue(self.raw, definition)

    # Binary operators keep the left operand's format.
    __add__ = _forward(operator.add)
    __sub__ = _forward(operator.sub)
    __mul__ = _forward(operator.mul)
    __truediv__ = _forward(operator.truediv)
    __floordiv__ = _forward(operator.floordiv)
    __mod__ = _forward(operator.mod)
    __pow__ = _forward(operator.pow)
    __radd__ = _reflected(operator.add)
    __rsub__ = _reflected(operator.sub)
    __rmul__ = _reflected(operator.mul)
    __rtruediv__ = _reflected(operator.truediv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __rmod__ = _reflected(operator.mod)
    __rpow__ = _reflected(operator.pow)

    __lt__ = _compare(operator.lt)
    __le__ = _compare(operator.le)
    __gt__ = _compare(operator.gt)
    __ge__ = _compare(operator.ge)

    def __neg__(self) -> MaskedValue:
        return MaskedValue(-self.raw, self.definition)

    def __pos__(self) -> MaskedValue:
        return MaskedValue(+self.raw, self.definition)

    def __abs__(self) -> MaskedValue:
        return MaskedValue(abs(self.raw), self.definition)

    def __round__(self, ndigits: int | None = None) -> MaskedValue:
        return MaskedValue(round(self.raw, ndigits), self.definition)

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)

    def __repr__(self) -> str:
        return f"MaskedValue({self.raw!r}, format={self.format_name!r})"
