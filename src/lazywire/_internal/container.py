from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from lazywire._internal.definitions import DefinitionStore, Resolved, ServiceKey, Unresolved
from lazywire._internal.identity import CallableIdentityRegistry
from lazywire._internal.invocation import call_with_optional_trailing
from lazywire._internal.lifecycle import Compiler, LifecycleConfig
from lazywire._internal.tags import TagAssociation, TagRegistry
from lazywire.exceptions import (
    LazyWireCircularDependencyError,
    LazyWireFrozenServiceError,
    LazyWireInvalidKeyError,
    LazyWireLockedContainerError,
    LazyWireMissingDependencyError,
    LazyWireNotCallableError,
    LazyWireNotInstantiableError,
    LazyWireServiceNotDefinedError,
)

if TYPE_CHECKING:
    from typing_extensions import Self

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Container:
    """Store parameters and lazily evaluated services under string keys.

    A definition is either a plain value (a parameter) or a callable (a
    service). Callables requiring a positional argument receive the
    container when invoked; others, including ones whose parameters all
    have defaults, are called bare.

    By default a service runs once on first ``get``; its result replaces the
    callable and the key becomes frozen. Tag the callable with ``factory`` to
    run it on every lookup, or with ``protect`` to store it as a value that
    is never invoked. Tags follow the callable object, not the key.

    Lifecycle flags live on ``lifecycle`` and can be set at construction
    through ``configure``. ``Compiler.emit_compile`` runs a two-phase
    listener sequence for late wiring across modules.

    Examples:
        .. code-block:: python

            container = Container({"name": "world"})
            container.set("greeting", lambda c: f"hello {c.get('name')}")
            container.set("request_id", container.factory(lambda: uuid4()))

            assert container.get("greeting") == "hello world"

    """

    def __init__(
        self,
        definitions: Mapping[ServiceKey, Any] | None = None,
        configure: Callable[[LifecycleConfig], Any] | None = None,
    ) -> None:
        """Create a container, optionally pre-populated and pre-configured.

        Args:
            definitions: Initial key to definition mapping, stored through
                ``set`` in mapping order.
            configure: Callback receiving the mutable ``LifecycleConfig``
                once the initial definitions are stored. Use it to disable
                instantiation or subscribe compile listeners before the
                container is handed to other modules.

        Examples:
            .. code-block:: python

                def configure(lifecycle: LifecycleConfig) -> None:
                    lifecycle.instantiate = False
                    lifecycle.compiler.on_compile_post(start_workers)

                container = Container({"workers": 4}, configure=configure)

        """
        self._store = DefinitionStore()
        self._identities = CallableIdentityRegistry()
        self._tags = TagRegistry()
        self._resolution_stack: list[ServiceKey] = []

        self._lifecycle = LifecycleConfig()
        self._lifecycle.compiler = Compiler(self, self._lifecycle)

        for key, definition in (definitions or {}).items():
            self.set(key, definition)

        if configure is not None:
            configure(self._lifecycle)

    @property
    def lifecycle(self) -> LifecycleConfig:
        """Return the mutable lifecycle configuration shared with composers."""
        return self._lifecycle

    def get_compiler(self) -> Compiler:
        """Return the compiler handle used to register and emit compile listeners."""
        return self._lifecycle.compiler

    # region Definition Store
    def set(self, key: ServiceKey, definition: Any) -> Self:
        """Store a parameter or service definition under ``key``.

        Redefining a key keeps its position in ``keys()``. Tags attached to
        the previous callable do not carry over to a different callable.

        Args:
            key: Non-empty service key.
            definition: Plain value, or a zero/one-argument callable
                producing the value.

        Returns:
            The container, for chaining.

        Raises:
            LazyWireInvalidKeyError: If ``key`` is not a non-empty string.
            LazyWireLockedContainerError: If the container is locked.
            LazyWireFrozenServiceError: If ``key`` was already resolved.

        """
        if not isinstance(key, str) or not key:
            msg = f"Service key must be a non-empty string, got {key!r}."
            raise LazyWireInvalidKeyError(msg)
        self._ensure_unlocked(key=key, operation="set")
        self._ensure_not_frozen(key=key, operation="overwrite")

        self._store.store(key, definition)
        return self

    def exists(self, key: ServiceKey) -> bool:
        """Return whether ``key`` has a stored definition, resolved or not."""
        return key in self._store

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def unset(self, key: ServiceKey) -> Self:
        """Remove the definition stored under ``key``.

        Unsetting an absent key is a no-op. When the stored definition is a
        tagged callable, its factory and protect flags are cleared; this
        also affects other keys holding the very same callable.

        Returns:
            The container, for chaining.

        Raises:
            LazyWireLockedContainerError: If the container is locked.
            LazyWireFrozenServiceError: If ``key`` was already resolved.

        """
        slot = self._store.lookup(key)
        if slot is None:
            return self
        self._ensure_unlocked(key=key, operation="unset")
        self._ensure_not_frozen(key=key, operation="unset")

        if isinstance(slot, Unresolved):
            self._identities.clear_flags(slot.definition)
        self._store.remove(key)
        logger.debug("Unset service %r", key)
        return self

    def keys(self) -> list[ServiceKey]:
        """Return a snapshot of the defined keys in insertion order."""
        return self._store.keys()

    def raw(self, key: ServiceKey) -> Any:
        """Return the definition of ``key`` without invoking it.

        For resolved services this is the original callable, not the cached
        value. Protected and factory callables are returned as stored.

        Raises:
            LazyWireServiceNotDefinedError: If ``key`` is not defined.
            LazyWireNotInstantiableError: If instantiation is disabled and
                ``key`` holds an unresolved, unprotected callable.

        """
        slot = self._lookup_defined(key)
        if isinstance(slot, Resolved):
            return slot.callback

        definition = slot.definition
        if callable(definition) and not self._identities.is_protected(definition):
            self._ensure_instantiable(key)
        return definition

    # endregion Definition Store

    # region Resolution
    def get(self, key: ServiceKey) -> Any:
        """Resolve ``key`` to its value.

        Resolution order:

        1. Resolved services return their cached value.
        2. Parameters (non-callables) are returned as stored.
        3. Protected callables are returned uninvoked.
        4. Other callables require instantiation to be enabled.
        5. Factory callables run on every call; nothing is cached.
        6. Plain callables run once; the result replaces the callable and
           the key becomes frozen.

        Raises:
            LazyWireServiceNotDefinedError: If ``key`` is not defined.
            LazyWireNotInstantiableError: If the service must be invoked
                while instantiation is disabled.
            LazyWireCircularDependencyError: If resolving ``key`` requests
                ``key`` again before it finished.

        """
        slot = self._lookup_defined(key)
        if isinstance(slot, Resolved):
            return slot.value

        definition = slot.definition
        if not callable(definition):
            return definition
        if self._identities.is_protected(definition):
            return definition
        self._ensure_instantiable(key)

        if self._identities.is_factory(definition):
            return self._invoke(key, definition)

        value = self._invoke(key, definition)
        self._store.freeze(key, value, definition)
        logger.debug("Resolved service %r once, key is now frozen", key)
        return value

    def _invoke(self, key: ServiceKey, definition: Callable[..., Any]) -> Any:
        if key in self._resolution_stack:
            chain = " -> ".join([*self._resolution_stack, key])
            msg = f"Circular dependency detected while resolving {key!r}: {chain}."
            raise LazyWireCircularDependencyError(msg)

        self._resolution_stack.append(key)
        try:
            return call_with_optional_trailing(definition, trailing=self)
        finally:
            self._resolution_stack.pop()

    # endregion Resolution

    # region Callable Tagging
    def factory(self, fn: F) -> F:
        """Mark ``fn`` to be invoked on every ``get`` instead of once.

        Returns ``fn`` unchanged, so it works inline and as a decorator.

        Raises:
            LazyWireNotCallableError: If ``fn`` is not callable.

        Examples:
            .. code-block:: python

                container.set("now", container.factory(datetime.now))

        """
        self._ensure_callable(fn, role="Factory")
        self._identities.mark_factory(fn)
        return fn

    def protect(self, fn: F) -> F:
        """Mark ``fn`` to be stored as a value and never invoked by ``get``.

        Returns ``fn`` unchanged, so it works inline and as a decorator.

        Raises:
            LazyWireNotCallableError: If ``fn`` is not callable.

        Examples:
            .. code-block:: python

                container.set("slugify", container.protect(slugify))
                assert container.get("slugify") is slugify

        """
        self._ensure_callable(fn, role="Protected definition")
        self._identities.mark_protected(fn)
        return fn

    # endregion Callable Tagging

    # region Composition
    def extend(
        self,
        key: ServiceKey,
        fn: Callable[..., Any],
    ) -> Self:
        """Wrap the service under ``key`` with ``fn``.

        The new definition calls ``fn(inner, container)``, or ``fn(inner)``
        when ``fn`` requires a single argument. ``inner`` is the previous
        callable itself, not its result; invoke it to get the inner value.
        A factory service stays a factory after extension.

        Returns:
            The container, for chaining.

        Raises:
            LazyWireServiceNotDefinedError: If ``key`` is not defined.
            LazyWireLockedContainerError: If the container is locked.
            LazyWireNotCallableError: If the stored definition or ``fn`` is
                not callable.
            LazyWireFrozenServiceError: If ``key`` was already resolved.

        Examples:
            .. code-block:: python

                container.set("mailer", lambda c: SmtpMailer(c.get("smtp.host")))
                container.extend(
                    "mailer",
                    lambda inner, c: LoggingMailer(inner(c), c.get("logger")),
                )

        """
        slot = self._lookup_defined(key)
        self._ensure_unlocked(key=key, operation="extend")

        inner = slot.value if isinstance(slot, Resolved) else slot.definition
        if not callable(inner):
            msg = f"Service {key!r} is not callable; only callable services can be extended."
            raise LazyWireNotCallableError(msg)
        self._ensure_callable(fn, role="Extension")

        def extended(container: Container) -> Any:
            return call_with_optional_trailing(fn, inner, trailing=container)

        is_factory = self._identities.is_factory(inner)
        if is_factory:
            self._identities.clear_factory(inner)
            self.factory(extended)

        self.set(key, extended)
        logger.debug("Extended service %r (factory=%s)", key, is_factory)
        return self

    @overload
    def inject(
        self,
        key: ServiceKey,
        definition: None = None,
        injects: Sequence[ServiceKey] = (),
    ) -> Callable[[F], F]: ...

    @overload
    def inject(
        self,
        key: ServiceKey,
        definition: F,
        injects: Sequence[ServiceKey] = (),
    ) -> Self: ...

    def inject(
        self,
        key: ServiceKey,
        definition: Callable[..., Any] | None = None,
        injects: Sequence[ServiceKey] = (),
    ) -> Self | Callable[[F], F]:
        """Define ``key`` as ``definition`` called with resolved dependencies.

        On resolution every name in ``injects`` must exist; each is then
        resolved with ``get`` in order and passed positionally. The
        dependency list is always explicit; parameter names are never
        inspected. Called without ``definition``, returns a decorator that
        registers the decorated callable and returns it unchanged.

        Args:
            key: Service key to define.
            definition: Function or class to call.
            injects: Ordered dependency keys, possibly empty.

        Returns:
            The container, or a decorator when ``definition`` is omitted.

        Raises:
            LazyWireNotCallableError: If ``definition`` is not callable.
            LazyWireMissingDependencyError: At resolution time, if a
                dependency is not defined.

        Examples:
            .. code-block:: python

                container.inject("repo", UserRepository, ["db.session", "clock"])

                @container.inject("handler", injects=["repo"])
                def make_handler(repo: UserRepository) -> Handler:
                    return Handler(repo)

        """
        if definition is None:

            def decorator(target: F) -> F:
                self.inject(key, target, injects)
                return target

            return decorator

        self._ensure_callable(definition, role="Injected definition")
        dependencies = tuple(injects)

        def injected(container: Container) -> Any:
            for dependency in dependencies:
                if not container.exists(dependency):
                    msg = f"Service {key!r} depends on {dependency!r}, which is not defined."
                    raise LazyWireMissingDependencyError(msg)
            arguments = [container.get(dependency) for dependency in dependencies]
            return definition(*arguments)

        return self.set(key, injected)

    # endregion Composition

    # region Tags
    def tag(
        self,
        key: ServiceKey,
        tag_name: str,
        config: Mapping[str, Any] | None = None,
    ) -> Self:
        """Associate ``key`` with ``tag_name`` for later discovery.

        The key does not need to be defined. Tagging the same key twice
        records two associations.

        Args:
            key: Service key to tag.
            tag_name: Tag to file the key under.
            config: Free-form metadata, empty when omitted.

        Returns:
            The container, for chaining.

        """
        self._tags.add(key, tag_name, config)
        return self

    def tagged(self, tag_name: str) -> list[TagAssociation]:
        """Return the associations recorded for ``tag_name`` in tagging order.

        Unknown tags yield an empty list.
        """
        return self._tags.associations(tag_name)

    # endregion Tags

    # region Guards
    def _lookup_defined(self, key: ServiceKey) -> Unresolved | Resolved:
        slot = self._store.lookup(key)
        if slot is None:
            msg = f"Service is not defined: {key!r}."
            raise LazyWireServiceNotDefinedError(msg)
        return slot

    def _ensure_unlocked(self, *, key: ServiceKey, operation: str) -> None:
        if self._lifecycle.locked:
            msg = f"Cannot {operation} service {key!r}: the container is locked."
            raise LazyWireLockedContainerError(msg)

    def _ensure_not_frozen(self, *, key: ServiceKey, operation: str) -> None:
        if self._store.is_frozen(key):
            msg = f"Cannot {operation} frozen service {key!r}: it was already resolved."
            raise LazyWireFrozenServiceError(msg)

    def _ensure_instantiable(self, key: ServiceKey) -> None:
        if not self._lifecycle.instantiate:
            msg = (
                f"Cannot instantiate service {key!r}: instantiation is disabled until "
                "the container is compiled."
            )
            raise LazyWireNotInstantiableError(msg)

    def _ensure_callable(self, candidate: object, *, role: str) -> None:
        if not callable(candidate):
            msg = f"{role} must be callable, got {candidate!r}."
            raise LazyWireNotCallableError(msg)

    # endregion Guards

    def __repr__(self) -> str:
        return f"Container(keys={self._store.keys()!r})"
