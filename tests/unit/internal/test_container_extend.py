from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any

import pytest

from lazywire import (
    Container,
    LazyWireFrozenServiceError,
    LazyWireLockedContainerError,
    LazyWireNotCallableError,
    LazyWireServiceNotDefinedError,
)


def test_extend_wraps_the_previous_definition(container: Container) -> None:
    container.set("b", 42)
    container.set("a", lambda: "x")

    container.extend("a", lambda inner, c: inner() + str(c.get("b")))

    assert container.get("a") == "x42"
    assert container.get("a") == "x42"


def test_extend_passes_the_raw_callable_not_its_value(container: Container) -> None:
    def original(c: Container) -> str:
        return "original"

    received: list[Any] = []

    def wrapper(inner: Callable[..., Any], c: Container) -> str:
        received.append(inner)
        return inner(c).upper()

    container.set("foo", original)
    container.extend("foo", wrapper)

    assert container.get("foo") == "ORIGINAL"
    assert received == [original]


def test_extend_accepts_single_argument_wrapper(container: Container) -> None:
    container.set("foo", lambda: "bar")

    container.extend("foo", lambda inner: f"<{inner()}>")

    assert container.get("foo") == "<bar>"


def test_extend_wrapper_with_optional_container_keeps_its_default(
    container: Container,
) -> None:
    container.set("foo", lambda: "bar")

    def wrap(inner: Callable[[], str], c: Container | None = None) -> tuple[str, Any]:
        return inner(), c

    container.extend("foo", wrap)

    assert container.get("foo") == ("bar", None)


def test_extend_builtin_factory(container: Container) -> None:
    container.set("items", container.factory(list))

    container.extend("items", lambda inner: [*inner(), "extra"])

    assert container.get("items") == ["extra"]
    assert container.get("items") is not container.get("items")


def test_extended_service_is_memoized(container: Container) -> None:
    container.set("foo", lambda: "bar")
    container.extend("foo", lambda inner: [inner()])

    assert container.get("foo") is container.get("foo")


def test_extend_can_be_stacked(container: Container) -> None:
    container.set("foo", lambda: "core")
    container.extend("foo", lambda inner, c: f"a({inner()})")
    container.extend("foo", lambda inner, c: f"b({inner(c)})")

    assert container.get("foo") == "b(a(core))"


def test_extend_keeps_factory_semantics(container: Container) -> None:
    counter = itertools.count(42)
    container.set("foo", container.factory(lambda: next(counter)))

    container.extend("foo", lambda inner: str(inner()))

    assert container.get("foo") == "42"
    assert container.get("foo") == "43"


def test_extend_moves_factory_flag_off_the_old_callable(container: Container) -> None:
    def build() -> object:
        return object()

    container.factory(build)
    container.set("foo", build)
    container.set("other", build)

    container.extend("foo", lambda inner: inner())

    # The original callable is no longer a factory wherever it is stored.
    assert container.get("other") is container.get("other")
    assert container.get("foo") is not container.get("foo")


def test_extend_releases_the_replaced_factory(container: Container) -> None:
    def build() -> list[str]:
        return []

    container.set("items", container.factory(build))

    container.extend("items", lambda inner: [*inner(), "extra"])

    # Only the wrapper stays registered; the replaced callable is forgotten.
    assert container._identities.get_tag(build) is None
    assert len(container._identities) == 1
    assert container.get("items") == ["extra"]


def test_extend_undefined_service_fails(container: Container) -> None:
    with pytest.raises(LazyWireServiceNotDefinedError):
        container.extend("missing", lambda inner: inner())


def test_extend_parameter_fails(container: Container) -> None:
    container.set("param", 42)

    with pytest.raises(LazyWireNotCallableError, match="only callable services"):
        container.extend("param", lambda inner: inner)


def test_extend_with_non_callable_fails(container: Container) -> None:
    container.set("foo", lambda: 1)

    with pytest.raises(LazyWireNotCallableError, match="Extension must be callable"):
        container.extend("foo", "not callable")  # type: ignore[arg-type]


def test_extend_frozen_service_fails(container: Container) -> None:
    container.set("foo", lambda: lambda: "resolved")
    container.get("foo")

    with pytest.raises(LazyWireFrozenServiceError):
        container.extend("foo", lambda inner: inner())


def test_extend_locked_container_fails(locked_container: Container) -> None:
    with pytest.raises(LazyWireLockedContainerError, match="Cannot extend service 'service'"):
        locked_container.extend("service", lambda inner: inner())


def test_extend_locked_container_checks_lock_before_callability(
    locked_container: Container,
) -> None:
    with pytest.raises(LazyWireLockedContainerError):
        locked_container.extend("param", lambda inner: inner())


def test_extend_is_logged(container: Container, caplog: pytest.LogCaptureFixture) -> None:
    container.set("foo", container.factory(lambda: 1))

    with caplog.at_level(logging.DEBUG, logger="lazywire._internal.container"):
        container.extend("foo", lambda inner: inner())

    assert "Extended service 'foo' (factory=True)" in caplog.messages
