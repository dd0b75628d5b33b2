"""Reading numbers back out of formatted text.

The parser accepts the decorations that display formats add and refuses to
guess when the decoration is ambiguous:

* enclosing parentheses mean a negative value (``(1,250.00)``);
* one leading ``-``/``+`` or one trailing ``-`` (``123.45-``) sets the sign;
* thousands separators must group digits in threes;
* one currency symbol and one ``%`` are allowed, a second one is an error;
* any other leading or trailing text (``USD``, ``units``, ``*``) is dropped;
* exactly one number must remain.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import re

from ...constants import CurrencySymbols, Defaults
from ..exceptions import UnparsableValueError

_SPACE_TRANSLATION = str.maketrans({"\u00a0": " ", "\u2009": " ", "\u202f": " "})


@dataclass(frozen=True, slots=True)
class ParsedNumber:
    """``integer`` is the exact value when the token has no fractional part."""

    value: float
    currency_symbol: str | None = None
    percent: bool = False
    integer: int | None = None


@lru_cache(maxsize=16)
def _token_pattern(separator: str) -> re.Pattern[str]:
    plain = "\\d+(?:\\.\\d+)?|\\.\\d+"
    if not separator:
        return re.compile(plain)
    sep = re.escape(separator)
    return re.compile(f"\\d{{1,3}}(?:{sep}\\d{{3}})+(?:\\.\\d+)?|{plain}")


def parse_decorated_number(
    text: object, *, thousands_separator: str = Defaults.THOUSANDS_SEPARATOR
) -> ParsedNumber:
    """Split ``text`` into its number and decorations.

    The returned value is signed but not scaled: callers decide what a ``%``
    means for them.

    Raises:
        UnparsableValueError: if the text is empty, holds no number, holds
            more than one number, or carries conflicting decorations.
    """
    if not isinstance(text, str):
        raise UnparsableValueError(text, f"expected text, got {type(text).__name__}")
    cleaned = text.translate(_SPACE_TRANSLATION).strip()
    if not cleaned:
        raise UnparsableValueError(text, "empty text")

    tokens = list(_token_pattern(thousands_separator).finditer(cleaned))
    if not tokens:
        raise UnparsableValueError(text, "no numeric value found")
    if len(tokens) > 1:
        found = ", ".join(repr(t.group()) for t in tokens)
        raise UnparsableValueError(text, f"ambiguous, found several numbers ({found})")
    token = tokens[0]
    prefix = cleaned[: token.start()]
    suffix = cleaned[token.end() :]
    decoration = prefix + suffix

    negative = _has_enclosing_parentheses(text, prefix, suffix)
    minus = decoration.count("-")
    plus = decoration.count("+")
    if minus + plus > 1:
        raise UnparsableValueError(text, "more than one sign")
    if minus and negative:
        raise UnparsableValueError(text, "both parentheses and a minus sign")
    if minus:
        negative = True

    symbols = [c for c in decoration if c in CurrencySymbols.SYMBOLS]
    if len(symbols) > 1:
        raise UnparsableValueError(text, "more than one currency symbol")
    percent_count = decoration.count("%")
    if percent_count > 1:
        raise UnparsableValueError(text, "more than one percent sign")

    digits = token.group()
    if thousands_separator:
        digits = digits.replace(thousands_separator, "")
    sign = -1 if negative else 1
    return ParsedNumber(
        value=sign * float(digits),
        currency_symbol=symbols[0] if symbols else None,
        percent=percent_count == 1,
        integer=None if "." in digits else sign * int(digits),
    )


def _has_enclosing_parentheses(text: str, prefix: str, suffix: str) -> bool:
    opens = prefix.count("(") + suffix.count("(")
    closes = prefix.count(")") + suffix.count(")")
    if not opens and not closes:
        return False
    if prefix.count("(") == 1 and suffix.count(")") == 1 and opens == closes == 1:
        return True
    raise UnparsableValueError(text, "unbalanced parentheses")


def parse_number(
    text: object, *, thousands_separator: str = Defaults.THOUSANDS_SEPARATOR
) -> float:
    """Parse decorated text as a number; a ``%`` suffix divides by 100."""
    parsed = parse_decorated_number(text, thousands_separator=thousands_separator)
    return parsed.value / 100 if parsed.percent else parsed.value


def group_digits(value: float, decimals: int, separator: str) -> str:
    """Format ``abs(value)`` with fixed decimals and grouped thousands."""
    grouped = f"{abs(value):,.{decimals}f}"
    return grouped.replace(",", separator) if separator != "," else grouped
