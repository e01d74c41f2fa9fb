"""Shared pytest fixtures for lazywire tests."""

import pytest

from lazywire import Container, LifecycleConfig

pytest_plugins = ["lazywire.integrations.pytest_plugin"]


@pytest.fixture()
def container() -> Container:
    """Fresh container with default lifecycle flags."""
    return Container()


@pytest.fixture()
def lifecycle(container: Container) -> LifecycleConfig:
    """Lifecycle configuration of the ``container`` fixture."""
    return container.lifecycle


@pytest.fixture()
def locked_container() -> Container:
    """Container holding one parameter and one service, then locked."""

    def configure(config: LifecycleConfig) -> None:
        config.locked = True

    return Container({"param": 1337, "service": lambda: 42}, configure=configure)
