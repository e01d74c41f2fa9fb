from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

from lazywire._internal.events import EventBus

if TYPE_CHECKING:
    from lazywire._internal.container import Container

logger = logging.getLogger(__name__)

CompileListener: TypeAlias = "Callable[[Container], Any]"


class CompileEvent(str, Enum):
    """Name the two events fired by ``Compiler.emit_compile``."""

    PRE = "compile.pre"
    """Fired first, while ``instantiate`` keeps the value set by the composer."""

    POST = "compile.post"
    """Fired second, after ``instantiate`` has been forced to true."""


class Compiler:
    """Coordinate late wiring between independent registration sites.

    Pre listeners get a last chance to change definitions registered by
    other modules, usually while instantiation is still disabled. Post
    listeners run with instantiation enabled and can wire real instances
    together.

    Examples:
        .. code-block:: python

            def configure(lifecycle: LifecycleConfig) -> None:
                lifecycle.instantiate = False
                lifecycle.compiler.on_compile_pre(add_plugins)
                lifecycle.compiler.on_compile_post(warm_up_caches)

            container = Container(configure=configure)
            register_modules(container)
            container.get_compiler().emit_compile()

    """

    def __init__(
        self,
        container: Container,
        lifecycle: LifecycleConfig,
        events: EventBus | None = None,
    ) -> None:
        """Bind the compiler to the container and configuration it drives.

        Args:
            container: Instance passed to every listener.
            lifecycle: Configuration whose ``instantiate`` flag is switched on
                between the two phases.
            events: Publish/subscribe primitive to register listeners on.
                A private bus is created when omitted.

        """
        self._container = container
        self._lifecycle = lifecycle
        self._events = events if events is not None else EventBus()

    def on_compile_pre(self, listener: CompileListener) -> CompileListener:
        """Register a listener for the pre-compile phase.

        Returns the listener unchanged so the method works as a decorator.

        Args:
            listener: Callable invoked with the container instance.

        """
        self._events.register(CompileEvent.PRE, listener)
        return listener

    def on_compile_post(self, listener: CompileListener) -> CompileListener:
        """Register a listener for the post-compile phase.

        Returns the listener unchanged so the method works as a decorator.

        Args:
            listener: Callable invoked with the container instance.

        """
        self._events.register(CompileEvent.POST, listener)
        return listener

    def emit_compile(self) -> None:
        """Run pre listeners, enable instantiation, then run post listeners.

        Listeners run synchronously in registration order. An exception from
        any listener aborts the sequence and propagates; if it comes from a
        pre listener, ``instantiate`` is left untouched.
        """
        logger.info(
            "Emitting compile: pre_listeners=%d post_listeners=%d instantiate=%s",
            self._events.listener_count(CompileEvent.PRE),
            self._events.listener_count(CompileEvent.POST),
            self._lifecycle.instantiate,
        )
        self._events.emit(CompileEvent.PRE, self._container)
        self._lifecycle.instantiate = True
        self._events.emit(CompileEvent.POST, self._container)
        logger.info("Compile finished")


@dataclass(eq=False)
class LifecycleConfig:
    """Mutable lifecycle switches shared between a container and its composer.

    ``instantiate=False`` makes ``get``/``raw`` refuse callable services that
    are neither resolved nor protected; parameters stay readable.
    ``locked=True`` makes ``set``/``unset``/``extend`` refuse every change.

    Examples:
        .. code-block:: python

            container = Container()
            container.lifecycle.locked = True

    """

    instantiate: bool = True
    """Whether callable services may be invoked by ``get``."""
    locked: bool = False
    """Whether definitions are read-only."""
    compiler: Compiler = field(init=False, repr=False)
    """Handle for registering and emitting compile listeners."""
