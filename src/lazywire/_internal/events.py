from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

Listener = Callable[..., Any]


@dataclass(slots=True)
class EventBus:
    """Synchronous publish/subscribe primitive.

    Listeners run on the caller's thread in registration order. A listener
    that raises aborts the emission; the remaining listeners are skipped
    and the error propagates to the emitter.
    """

    _listeners: dict[Hashable, list[Listener]] = field(default_factory=dict)

    def register(self, event: Hashable, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def emit(self, event: Hashable, *args: Any) -> None:
        # Snapshot so listeners registered during emission wait for the next one.
        for listener in tuple(self._listeners.get(event, ())):
            listener(*args)

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, ()))
