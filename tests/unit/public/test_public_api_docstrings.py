from __future__ import annotations

import inspect
from typing import Any

import pytest

import lazywire
import lazywire.exceptions as lazywire_exceptions
from lazywire.integrations import pydantic_settings

CONTAINER_METHODS = [
    "exists",
    "extend",
    "factory",
    "get",
    "get_compiler",
    "inject",
    "keys",
    "protect",
    "raw",
    "set",
    "tag",
    "tagged",
    "unset",
]

COMPILER_METHODS = ["emit_compile", "on_compile_post", "on_compile_pre"]


@pytest.mark.parametrize("name", lazywire.__all__)
def test_exported_object_is_documented(name: str) -> None:
    assert inspect.getdoc(getattr(lazywire, name))


@pytest.mark.parametrize("method", CONTAINER_METHODS)
def test_container_method_is_documented(method: str) -> None:
    assert inspect.getdoc(getattr(lazywire.Container, method))


def test_container_lifecycle_property_is_documented() -> None:
    lifecycle = inspect.getattr_static(lazywire.Container, "lifecycle")

    assert isinstance(lifecycle, property)
    assert inspect.getdoc(lifecycle.fget)


@pytest.mark.parametrize("method", COMPILER_METHODS)
def test_compiler_method_is_documented(method: str) -> None:
    assert inspect.getdoc(getattr(lazywire.Compiler, method))


def test_documented_methods_cover_the_public_surface() -> None:
    def public_functions(cls: type[Any]) -> set[str]:
        return {
            name
            for name, member in vars(cls).items()
            if not name.startswith("_") and inspect.isfunction(member)
        }

    assert public_functions(lazywire.Container) == set(CONTAINER_METHODS)
    assert public_functions(lazywire.Compiler) == set(COMPILER_METHODS)


def test_every_exception_explains_when_it_is_raised() -> None:
    for _, member in inspect.getmembers(lazywire_exceptions, inspect.isclass):
        if issubclass(member, lazywire_exceptions.LazyWireError):
            assert member.__doc__, member.__name__


@pytest.mark.parametrize("name", pydantic_settings.__all__)
def test_settings_integration_is_documented(name: str) -> None:
    assert inspect.getdoc(getattr(pydantic_settings, name))
