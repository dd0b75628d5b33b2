"""Key to display-value lookup with an explicit default for unmapped keys.

This is the equivalent of a SAS ``VALUE`` format with an ``OTHER=`` range:

    >>> regions = LookupTable({"E": "Europe", "SA": "South America"}, default="Unknown")
    >>> regions.get("SA")
    'South America'
    >>> regions.get("AS")
    'Unknown'

Tables are immutable once built. ``with_entry`` returns a new table in which
the key is overwritten.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeAlias

import pandas as pd

from ...pandas_utils import ensure_series, is_missing_scalar
from ..exceptions import DuplicateKeyError, MissingDefaultError

LookupKey: TypeAlias = str | int

_NO_DEFAULT: Any = object()


def _check_key(key: object) -> LookupKey:
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise TypeError(f"Lookup keys must be str or int, got {type(key).__name__}")
    return key


class LookupTable:
    """Ordered, immutable mapping from keys to display values.

    Args:
        entries: A mapping, or an iterable of ``(key, value)`` pairs. A key
            supplied twice with different values raises ``DuplicateKeyError``;
            an identical repeated pair is accepted.
        default: Value returned for keys that are not in the table. When
            omitted, ``get`` raises ``MissingDefaultError`` for absent keys.
        case_insensitive: Compare keys as ``str(key).strip().upper()``, so
            ``"m"``, ``" M "`` and ``"M"`` are the same key, as are ``1`` and
            ``"1"``.
        name: Optional table name used in error messages.
    """

    __slots__ = ("_case_insensitive", "_default", "_entries", "_keys", "name")

    def __init__(
        self,
        entries: Mapping[LookupKey, Any] | Iterable[tuple[LookupKey, Any]] = (),
        *,
        default: Any = _NO_DEFAULT,
        case_insensitive: bool = False,
        name: str = "",
    ) -> None:
        self._case_insensitive = case_insensitive
        self._default = default
        self.name = name
        self._entries: dict[object, Any] = {}
        self._keys: dict[object, LookupKey] = {}
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            normalized = self._normalize(_check_key(key))
            if normalized in self._entries:
                existing = self._entries[normalized]
                if existing != value:
                    raise DuplicateKeyError(key, existing, value)
                continue
            self._entries[normalized] = value
            self._keys[normalized] = key

    @classmethod
    def from_pairs(
        cls,
        keys: Iterable[LookupKey],
        values: Iterable[Any],
        *,
        default: Any = _NO_DEFAULT,
        case_insensitive: bool = False,
        name: str = "",
    ) -> LookupTable:
        return cls(
            zip(keys, values, strict=True),
            default=default,
            case_insensitive=case_insensitive,
            name=name,
        )

    @property
    def has_default(self) -> bool:
        return self._default is not _NO_DEFAULT

    @property
    def default(self) -> Any:
        if not self.has_default:
            raise MissingDefaultError("<default>", self.name)
        return self._default

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def get(self, key: object, *, required: bool = True) -> Any:
        """Return the value for ``key``, falling back to the default.

        When the key is absent and no default is configured, raise
        ``MissingDefaultError`` if ``required`` is true, otherwise return None.
        """
        if self._has_key(key):
            return self._entries[self._normalize(key)]
        if self.has_default:
            return self._default
        if required:
            raise MissingDefaultError(key, self.name)
        return None

    def __getitem__(self, key: object) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return self._has_key(key)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LookupKey]:
        return iter(self._keys.values())

    def keys(self) -> list[LookupKey]:
        return list(self._keys.values())

    def items(self) -> list[tuple[LookupKey, Any]]:
        return [(self._keys[k], v) for k, v in self._entries.items()]

    def with_entry(self, key: LookupKey, value: Any) -> LookupTable:
        """Return a copy of this table with ``key`` mapped to ``value``."""
        normalized = self._normalize(_check_key(key))
        pairs = [(k, v) for k, v in self.items() if self._normalize(k) != normalized]
        pairs.append((key, value))
        return LookupTable(
            pairs,
            default=self._default,
            case_insensitive=self._case_insensitive,
            name=self.name,
        )

    def with_default(self, default: Any) -> LookupTable:
        return LookupTable(
            self.items(),
            default=default,
            case_insensitive=self._case_insensitive,
            name=self.name,
        )

    def map_series(self, series: object) -> pd.Series[Any]:
        """Apply the table to every value of a column; missing values stay missing."""
        values = ensure_series(series)

        def transform(value: Any) -> Any:
            if is_missing_scalar(value):
                return value
            return self.get(value)

        return ensure_series(values.map(transform), index=values.index)

    def _has_key(self, key: object) -> bool:
        # True == 1 and hash(True) == hash(1), but bools are never keys
        return not isinstance(key, bool) and self._normalize(key) in self._entries

    def _normalize(self, key: object) -> object:
        if self._case_insensitive:
            return str(key).strip().upper()
        return key

    def __repr__(self) -> str:
        default = f", default={self._default!r}" if self.has_default else ""
        name = f"{self.name!r}, " if self.name else ""
        return f"LookupTable({name}{len(self)} entries{default})"
