from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeAlias

CallableTag: TypeAlias = str
"""An opaque identifier issued once per callable instance, e.g. ``"#1"``."""


@dataclass(slots=True)
class CallableFlags:
    """Evaluation flags attached to a tagged callable."""

    tag: CallableTag
    is_factory: bool = False
    is_protected: bool = False


@dataclass(slots=True)
class _TaggedCallable:
    # Holds a strong reference so ``id()`` cannot be reused while tagged.
    target: Callable[..., Any]
    flags: CallableFlags


@dataclass(slots=True)
class CallableIdentityRegistry:
    """Issue stable tags for callables and track their factory/protect flags.

    Tags live in a side table owned by one container instead of on the
    callable itself, so caller-owned objects are never mutated and two
    containers never observe each other's flags. Lookups are by identity:
    two keys holding the same callable instance share one tag, while an
    equal but distinct callable gets its own.
    """

    _entries: dict[int, _TaggedCallable] = field(default_factory=dict)
    _counter: int = 0

    def tag_object(self, target: Callable[..., Any]) -> CallableTag:
        """Return the tag of ``target``, issuing the next one if untagged."""
        entry = self._entries.get(id(target))
        if entry is not None:
            return entry.flags.tag

        self._counter += 1
        tag = f"#{self._counter}"
        self._entries[id(target)] = _TaggedCallable(target=target, flags=CallableFlags(tag=tag))
        return tag

    def get_tag(self, target: object) -> CallableTag | None:
        """Return the tag of ``target`` or ``None`` when it was never tagged."""
        entry = self._entries.get(id(target))
        if entry is None:
            return None
        return entry.flags.tag

    def mark_factory(self, target: Callable[..., Any]) -> CallableTag:
        tag = self.tag_object(target)
        self._entries[id(target)].flags.is_factory = True
        return tag

    def mark_protected(self, target: Callable[..., Any]) -> CallableTag:
        tag = self.tag_object(target)
        self._entries[id(target)].flags.is_protected = True
        return tag

    def is_factory(self, target: object) -> bool:
        entry = self._entries.get(id(target))
        return entry is not None and entry.flags.is_factory

    def is_protected(self, target: object) -> bool:
        entry = self._entries.get(id(target))
        return entry is not None and entry.flags.is_protected

    def clear_factory(self, target: object) -> None:
        """Drop factory status of ``target``; forget it once no flag is left."""
        entry = self._entries.get(id(target))
        if entry is not None:
            entry.flags.is_factory = False
            self._release_if_unflagged(target)

    def clear_flags(self, target: object) -> None:
        """Drop both flags of ``target``, affecting every key that holds it."""
        entry = self._entries.get(id(target))
        if entry is not None:
            entry.flags.is_factory = False
            entry.flags.is_protected = False
            self._release_if_unflagged(target)

    def _release_if_unflagged(self, target: object) -> None:
        # The counter is left alone, so a released callable tagged again
        # gets a fresh tag.
        entry = self._entries[id(target)]
        if not entry.flags.is_factory and not entry.flags.is_protected:
            del self._entries[id(target)]

    def __len__(self) -> int:
        return len(self._entries)
