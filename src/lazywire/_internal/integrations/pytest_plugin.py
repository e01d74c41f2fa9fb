from __future__ import annotations

import pytest

from lazywire._internal.container import Container
from lazywire._internal.lifecycle import LifecycleConfig


@pytest.fixture()
def lazywire_container() -> Container:
    """Create a per-test container.

    The fixture is function-scoped, so definitions and frozen keys never
    leak between tests. Override it in a ``conftest.py`` to start every
    test from a pre-populated container.

    Returns:
        A new ``Container`` instance.

    """
    return Container()


@pytest.fixture()
def lazywire_lifecycle(lazywire_container: Container) -> LifecycleConfig:
    """Return the lifecycle configuration of ``lazywire_container``.

    Mutating it (for example ``instantiate = False``) affects the container
    the same test receives.

    """
    return lazywire_container.lifecycle


__all__ = ["lazywire_container", "lazywire_lifecycle"]
