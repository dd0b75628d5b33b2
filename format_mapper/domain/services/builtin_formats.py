"""Built-in format definitions.

The names follow the SAS formats they imitate (``COMMAw.d``, ``DOLLARw.d``,
``PERCENTw.d``, ``DATE9.``). Fixed-decimal renderers round, so they are
marked lossy; ``number``, ``date9`` and ``iso-date`` round-trip exactly.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
import math
from numbers import Integral, Real
import re
from typing import Any

from ...constants import Defaults, FormatNames, Months, Patterns
from ..entities.format_definition import FormatDefinition
from ..exceptions import UnparsableValueError
from .numeric_text import group_digits, parse_decorated_number, parse_number

_DATE9 = re.compile(Patterns.DATE9)
_ISO_DATE = re.compile(Patterns.ISO_DATE)


def _require_number(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Format {name!r} renders numbers, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Format {name!r} cannot render non-finite value {value!r}")
    return number


def _require_date(value: object, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"Format {name!r} renders dates, got {type(value).__name__}")
    return value


def _named(name: str, parser: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def parse(text: Any) -> Any:
        try:
            return parser(text)
        except UnparsableValueError as exc:
            raise exc.for_format(name) from exc

    return parse


def number_format(
    *,
    name: str = FormatNames.NUMBER,
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR,
) -> FormatDefinition:
    def render(value: Any) -> str:
        number = _require_number(value, name)
        if isinstance(value, Integral):
            return str(int(value))
        return format(Decimal(repr(number)), "f")

    def parse(text: Any) -> int | float:
        parsed = parse_decorated_number(text, thousands_separator=thousands_separator)
        if parsed.percent:
            return parsed.value / 100
        return parsed.value if parsed.integer is None else parsed.integer

    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(name, parse),
        description=(
            "Plain decimal number, full precision; whole numbers parse back as int"
        ),
    )


def comma_format(
    *,
    name: str = FormatNames.COMMA,
    decimals: int = Defaults.DECIMAL_PLACES,
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR,
) -> FormatDefinition:
    def render(value: Any) -> str:
        number = _require_number(value, name)
        sign = "-" if number < 0 else ""
        return sign + group_digits(number, decimals, thousands_separator)

    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(
            name, lambda text: parse_number(text, thousands_separator=thousands_separator)
        ),
        lossy=True,
        description=f"Grouped thousands, rounded to {decimals} decimal places",
    )


def currency_format(
    *,
    name: str = FormatNames.CURRENCY,
    symbol: str = Defaults.CURRENCY_SYMBOL,
    decimals: int = Defaults.DECIMAL_PLACES,
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR,
    accounting: bool = False,
) -> FormatDefinition:
    """Money amounts; ``accounting=True`` shows negatives in parentheses.

    Parsing accepts any single known currency symbol, not only ``symbol``.
    """

    def render(value: Any) -> str:
        number = _require_number(value, name)
        body = f"{symbol}{group_digits(number, decimals, thousands_separator)}"
        if number >= 0:
            return body
        return f"({body})" if accounting else f"-{body}"

    def parse(text: Any) -> float:
        parsed = parse_decorated_number(text, thousands_separator=thousands_separator)
        if parsed.percent:
            raise UnparsableValueError(text, "percent sign in a currency amount")
        return parsed.value

    negatives = "parentheses" if accounting else "a leading minus"
    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(name, parse),
        lossy=True,
        description=f"{symbol} amounts rounded to {decimals} decimal places, "
        + f"negatives with {negatives}",
    )


def percent_format(
    *,
    name: str = FormatNames.PERCENT,
    decimals: int = Defaults.PERCENT_DECIMALS,
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR,
    accounting: bool = False,
) -> FormatDefinition:
    """Fractions shown as percentages (0.825 -> ``82.5%``).

    Parsing always reads percentage points, with or without the ``%`` sign,
    and divides by 100.
    """

    def render(value: Any) -> str:
        number = _require_number(value, name) * 100
        body = f"{group_digits(number, decimals, thousands_separator)}%"
        if number >= 0:
            return body
        return f"({body})" if accounting else f"-{body}"

    def parse(text: Any) -> float:
        parsed = parse_decorated_number(text, thousands_separator=thousands_separator)
        if parsed.currency_symbol:
            raise UnparsableValueError(text, "currency symbol in a percentage")
        return parsed.value / 100

    negatives = "parentheses" if accounting else "a leading minus"
    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(name, parse),
        lossy=True,
        description=f"Percentages rounded to {decimals} decimal places, "
        + f"negatives with {negatives}",
    )


def date9_format(*, name: str = FormatNames.DATE9) -> FormatDefinition:
    def render(value: Any) -> str:
        day = _require_date(value, name)
        return f"{day.day:02d}{Months.ABBREVIATIONS[day.month - 1]}{day.year:04d}"

    def parse(text: Any) -> date:
        if not isinstance(text, str):
            raise UnparsableValueError(text, f"expected text, got {type(text).__name__}")
        match = _DATE9.fullmatch(text.strip())
        if match is None:
            raise UnparsableValueError(text, "expected DDMONYYYY")
        day, month_text, year = match.groups()
        month = month_text.upper()
        if month not in Months.ABBREVIATIONS:
            raise UnparsableValueError(text, f"unknown month {month_text!r}")
        try:
            return date(int(year), Months.ABBREVIATIONS.index(month) + 1, int(day))
        except ValueError as exc:
            raise UnparsableValueError(text, str(exc)) from exc

    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(name, parse),
        description="SAS DATE9 dates such as 01JAN2020; datetimes lose their time",
    )


def iso_date_format(*, name: str = FormatNames.ISO_DATE) -> FormatDefinition:
    def render(value: Any) -> str:
        return _require_date(value, name).isoformat()

    def parse(text: Any) -> date:
        if not isinstance(text, str):
            raise UnparsableValueError(text, f"expected text, got {type(text).__name__}")
        stripped = text.strip()
        if not _ISO_DATE.fullmatch(stripped):
            raise UnparsableValueError(text, "expected YYYY-MM-DD")
        try:
            return date.fromisoformat(stripped)
        except ValueError as exc:
            raise UnparsableValueError(text, str(exc)) from exc

    return FormatDefinition(
        name=name,
        renderer=render,
        parser=_named(name, parse),
        description="ISO 8601 calendar dates; datetimes lose their time",
    )


def builtin_definitions(
    *,
    currency_symbol: str = Defaults.CURRENCY_SYMBOL,
    decimal_places: int = Defaults.DECIMAL_PLACES,
    percent_decimals: int = Defaults.PERCENT_DECIMALS,
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR,
) -> list[FormatDefinition]:
    sep = thousands_separator
    return [
        number_format(thousands_separator=sep),
        comma_format(decimals=decimal_places, thousands_separator=sep),
        currency_format(
            symbol=currency_symbol, decimals=decimal_places, thousands_separator=sep
        ),
        currency_format(
            name=FormatNames.ACCOUNTING,
            symbol=currency_symbol,
            decimals=decimal_places,
            thousands_separator=sep,
            accounting=True,
        ),
        percent_format(decimals=percent_decimals, thousands_separator=sep),
        percent_format(
            name=FormatNames.ACCOUNTING_PERCENT,
            decimals=percent_decimals,
            thousands_separator=sep,
            accounting=True,
        ),
        date9_format(),
        iso_date_format(),
    ]
