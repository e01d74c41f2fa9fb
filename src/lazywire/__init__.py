from lazywire._internal.container import Container
from lazywire._internal.lifecycle import CompileEvent, Compiler, LifecycleConfig
from lazywire._internal.tags import TagAssociation
from lazywire.exceptions import (
    LazyWireCircularDependencyError,
    LazyWireError,
    LazyWireFrozenServiceError,
    LazyWireInvalidKeyError,
    LazyWireInvalidSettingsError,
    LazyWireLockedContainerError,
    LazyWireMissingDependencyError,
    LazyWireNotCallableError,
    LazyWireNotInstantiableError,
    LazyWireServiceNotDefinedError,
)

__all__ = [
    "CompileEvent",
    "Compiler",
    "Container",
    "LazyWireCircularDependencyError",
    "LazyWireError",
    "LazyWireFrozenServiceError",
    "LazyWireInvalidKeyError",
    "LazyWireInvalidSettingsError",
    "LazyWireLockedContainerError",
    "LazyWireMissingDependencyError",
    "LazyWireNotCallableError",
    "LazyWireNotInstantiableError",
    "LazyWireServiceNotDefinedError",
    "LifecycleConfig",
    "TagAssociation",
]
