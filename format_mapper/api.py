"""Function-style entry points for the four format mapping components.

Named formats resolve through the default registry unless a ``registry`` is
passed explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .domain.entities.bin_spec import BinSpec
from .domain.entities.format_definition import FormatDefinition
from .domain.entities.lookup_table import LookupTable
from .domain.entities.masked_value import MaskedValue
from .domain.services.binner import Binner
from .domain.services.display import render_value
from .registry import FormatRegistry, get_default_registry


def _registry(registry: FormatRegistry | None) -> FormatRegistry:
    return registry if registry is not None else get_default_registry()


def lookup(table: LookupTable, key: object) -> Any:
    return table.get(key)


def bin_value(spec: BinSpec, value: object) -> str:
    return Binner(spec).bin(value)


def mask(
    raw: Any, format_name: str, *, registry: FormatRegistry | None = None
) -> MaskedValue:
    return MaskedValue(raw, _registry(registry).get(format_name))


def unwrap(masked: MaskedValue) -> Any:
    if not isinstance(masked, MaskedValue):
        raise TypeError(f"Expected a MaskedValue, got {type(masked).__name__}")
    return masked.raw


def render(
    value: Any,
    format_name: str | None = None,
    *,
    registry: FormatRegistry | None = None,
) -> str:
    """Render ``value`` as text.

    A ``MaskedValue`` renders through its own format unless ``format_name``
    asks for another one.
    """
    if format_name is None:
        if not isinstance(value, MaskedValue):
            raise TypeError("format_name is required for values that are not masked")
        return value.render()
    return render_value(value, _registry(registry).get(format_name))


def parse(
    text: str, format_name: str, *, registry: FormatRegistry | None = None
) -> Any:
    return _registry(registry).get(format_name).parse(text)


def register_format(
    name: str,
    render_fn: Callable[[Any], str],
    parse_fn: Callable[[str], Any],
    *,
    lossy: bool = False,
    description: str = "",
    replace: bool = False,
    registry: FormatRegistry | None = None,
) -> FormatDefinition:
    definition = FormatDefinition(
        name=name,
        renderer=render_fn,
        parser=parse_fn,
        lossy=lossy,
        description=description,
    )
    return _registry(registry).register(definition, replace=replace)
