from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, TypeAlias

ServiceKey: TypeAlias = str
"""A non-empty string naming one registry slot."""


@dataclass(frozen=True, slots=True)
class Unresolved:
    """A slot holding its definition as stored by ``set``.

    The definition is either a plain parameter value or a callable that was
    never resolved through the once-only path. Factory and protected
    callables stay in this state forever.
    """

    definition: Any


@dataclass(frozen=True, slots=True)
class Resolved:
    """A slot whose callable ran once; the key is frozen from now on."""

    value: Any
    """The memoized result returned by every later ``get``."""
    callback: Callable[..., Any]
    """The original callable, still available through ``raw``."""


Slot: TypeAlias = Unresolved | Resolved


@dataclass(slots=True)
class DefinitionStore:
    """Ordered key to slot mapping.

    Keys keep their first insertion position when redefined, mirroring
    ``dict`` semantics.
    """

    _slots: dict[ServiceKey, Slot] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __iter__(self) -> Iterator[ServiceKey]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def lookup(self, key: ServiceKey) -> Slot | None:
        return self._slots.get(key)

    def store(self, key: ServiceKey, definition: Any) -> None:
        self._slots[key] = Unresolved(definition)

    def freeze(self, key: ServiceKey, value: Any, callback: Callable[..., Any]) -> None:
        self._slots[key] = Resolved(value=value, callback=callback)

    def remove(self, key: ServiceKey) -> Slot | None:
        return self._slots.pop(key, None)

    def is_frozen(self, key: ServiceKey) -> bool:
        return isinstance(self._slots.get(key), Resolved)

    def keys(self) -> list[ServiceKey]:
        """Return a snapshot of the defined keys in insertion order."""
        return list(self._slots)
