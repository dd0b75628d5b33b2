"""Format definition registry and the process-wide default instance.

Readers take the current snapshot without locking; the snapshot is an
immutable mapping that is replaced wholesale on every registration, so a
lookup in flight never sees a half-applied change. Writers serialize on a
single lock.

Duplicate names are rejected with ``DuplicateFormatError``. Overwriting an
existing definition has to be asked for with ``replace=True``. Names are
matched case-insensitively, as SAS format names are.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import threading
from types import MappingProxyType

from .config import FormatMapperConfig
from .domain.entities.format_definition import FormatDefinition
from .domain.exceptions import DuplicateFormatError, UnknownFormatError
from .domain.services.builtin_formats import builtin_definitions


def _key(name: str) -> str:
    return name.strip().lower()


class FormatRegistry:
    def __init__(self, definitions: Iterable[FormatDefinition] = ()) -> None:
        self._lock = threading.Lock()
        initial: dict[str, FormatDefinition] = {}
        for definition in definitions:
            key = _key(definition.name)
            if key in initial:
                raise DuplicateFormatError(definition.name)
            initial[key] = definition
        self._snapshot: Mapping[str, FormatDefinition] = MappingProxyType(initial)

    def get(self, name: str) -> FormatDefinition:
        snapshot = self._snapshot
        definition = snapshot.get(_key(name))
        if definition is None:
            raise UnknownFormatError(name, (d.name for d in snapshot.values()))
        return definition

    def register(
        self, definition: FormatDefinition, *, replace: bool = False
    ) -> FormatDefinition:
        key = _key(definition.name)
        with self._lock:
            if key in self._snapshot and not replace:
                raise DuplicateFormatError(definition.name)
            updated = dict(self._snapshot)
            updated[key] = definition
            self._snapshot = MappingProxyType(updated)
        return definition

    def unregister(self, name: str) -> FormatDefinition:
        key = _key(name)
        with self._lock:
            if key not in self._snapshot:
                raise UnknownFormatError(name, (d.name for d in self._snapshot.values()))
            updated = dict(self._snapshot)
            removed = updated.pop(key)
            self._snapshot = MappingProxyType(updated)
        return removed

    def snapshot(self) -> Mapping[str, FormatDefinition]:
        return self._snapshot

    def names(self) -> list[str]:
        return sorted(d.name for d in self._snapshot.values())

    def definitions(self) -> list[FormatDefinition]:
        return sorted(self._snapshot.values(), key=lambda d: _key(d.name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)


def build_default_registry(config: FormatMapperConfig | None = None) -> FormatRegistry:
    if config is None:
        config = FormatMapperConfig.from_env()
    return FormatRegistry(
        builtin_definitions(
            currency_symbol=config.currency_symbol,
            decimal_places=config.decimal_places,
            percent_decimals=config.percent_decimals,
            thousands_separator=config.thousands_separator,
        )
    )


# Global registry (lazily initialized)
_DEFAULT_REGISTRY: FormatRegistry | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_registry() -> FormatRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = build_default_registry()
    return _DEFAULT_REGISTRY


def set_default_registry(registry: FormatRegistry | None) -> None:
    """Replace the default registry; ``None`` rebuilds it on next use."""
    global _DEFAULT_REGISTRY
    with _DEFAULT_LOCK:
        _DEFAULT_REGISTRY = registry
