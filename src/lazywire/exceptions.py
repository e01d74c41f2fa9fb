class LazyWireError(Exception):
    """Represent a base class for all LazyWire-specific failures.

    Catch this type when you want to handle any LazyWire error path without
    matching each concrete exception class individually.
    """


class LazyWireServiceNotDefinedError(LazyWireError):
    """Signal that a key has no stored definition.

    Raised by ``Container.get``, ``Container.raw`` and ``Container.extend``
    when the requested key was never set or has been unset.

    Typical fixes include calling ``Container.set`` before resolution, or
    checking ``Container.exists`` first for optional services.
    """


class LazyWireInvalidKeyError(LazyWireError):
    """Signal that a service key is not a non-empty string.

    Raised by ``Container.set`` (and therefore by every API that stores a
    definition, such as ``inject`` and ``extend``).
    """


class LazyWireFrozenServiceError(LazyWireError):
    """Signal an attempt to redefine or remove a frozen service.

    A service becomes frozen the first time it is resolved through the
    once-only path of ``Container.get``. Raised by ``Container.set``,
    ``Container.unset`` and ``Container.extend`` afterwards.

    Typical fixes include moving redefinitions into a compile-pre listener,
    or tagging the callable with ``Container.factory`` when a fresh value per
    lookup is intended.
    """


class LazyWireLockedContainerError(LazyWireError):
    """Signal a mutation of a locked container.

    Raised by ``Container.set``, ``Container.unset`` and ``Container.extend``
    while ``LifecycleConfig.locked`` is true. Resolution is unaffected.
    """


class LazyWireNotCallableError(LazyWireError):
    """Signal that an argument expected to be callable is not.

    Raised by ``Container.factory``, ``Container.protect``,
    ``Container.extend`` and ``Container.inject``.
    """


class LazyWireMissingDependencyError(LazyWireError):
    """Signal that an injected dependency is not defined at resolution time.

    Raised when a service registered through ``Container.inject`` is resolved
    and one of its named dependencies does not exist in the container.

    Typical fix is defining the dependency before the injected service is
    first resolved. Definition order at registration time does not matter.
    """


class LazyWireNotInstantiableError(LazyWireError):
    """Signal resolution of a service while instantiation is disabled.

    Raised by ``Container.get`` and ``Container.raw`` for callable services
    that are neither resolved nor protected while
    ``LifecycleConfig.instantiate`` is false. Parameters remain readable.

    Typical fix is deferring service access until after
    ``Compiler.emit_compile`` re-enables instantiation.
    """


class LazyWireCircularDependencyError(LazyWireError):
    """Signal that resolving a service re-entered itself.

    Raised by ``Container.get`` when a service definition, directly or
    through other services, requests the key currently being resolved.
    The message lists the full resolution chain.
    """


class LazyWireInvalidSettingsError(LazyWireError):
    """Signal an invalid object passed to the settings integration.

    Raised by ``register_settings`` when the given object is not an instance
    of a ``pydantic_settings.BaseSettings`` subclass.
    """
