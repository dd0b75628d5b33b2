"""Errors raised by the format mapping layer.

Every error is a caller-input problem: operations are pure and deterministic,
so nothing here is retried or downgraded to a default.
"""

from __future__ import annotations

from collections.abc import Iterable


class FormatMapperError(Exception):
    pass


class MissingDefaultError(FormatMapperError, KeyError):
    def __init__(self, key: object, table_name: str = "") -> None:
        super().__init__(key)
        self.key = key
        self.table_name = table_name

    def __str__(self) -> str:
        where = f" in lookup table {self.table_name!r}" if self.table_name else ""
        return f"Key {self.key!r} not found{where} and no default is configured"


class DuplicateKeyError(FormatMapperError, ValueError):
    def __init__(self, key: object, existing: object, new: object) -> None:
        super().__init__(
            f"Duplicate key {key!r}: already mapped to {existing!r}, got {new!r}"
        )
        self.key = key


class OutOfRangeError(FormatMapperError, ValueError):
    def __init__(self, value: object, lower: object, upper: object) -> None:
        super().__init__(f"Value {value!r} is outside the binned range [{lower}, {upper}]")
        self.value = value


class LabelCountMismatchError(FormatMapperError, ValueError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Expected {expected} labels for {expected} intervals, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class InvalidBoundariesError(FormatMapperError, ValueError):
    pass


class UnparsableValueError(FormatMapperError, ValueError):
    def __init__(
        self, text: object, reason: str, *, format_name: str | None = None
    ) -> None:
        self.text = text
        self.reason = reason
        self.format_name = format_name
        super().__init__(self._message())

    def _message(self) -> str:
        fmt = f" with format {self.format_name!r}" if self.format_name else ""
        return f"Cannot parse {self.text!r}{fmt}: {self.reason}"

    def for_format(self, format_name: str) -> UnparsableValueError:
        return UnparsableValueError(self.text, self.reason, format_name=format_name)


class UnknownFormatError(FormatMapperError, KeyError):
    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        super().__init__(name)
        self.name = name
        self.available = sorted(available)

    def __str__(self) -> str:
        msg = f"Unknown format {self.name!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg


class DuplicateFormatError(FormatMapperError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Format {name!r} is already registered; pass replace=True to overwrite it"
        )
        self.name = name
