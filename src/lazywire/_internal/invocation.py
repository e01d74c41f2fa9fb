from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def required_positional_count(target: Callable[..., Any]) -> int:
    """Return how many positional arguments ``target`` requires.

    Parameters with defaults and ``*args`` do not count. Callables whose
    signature cannot be inspected (some builtins and C types) count as
    requiring none.
    """
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return 0

    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL_KINDS and parameter.default is inspect.Parameter.empty
    )


def call_with_optional_trailing(
    target: Callable[..., Any],
    *args: Any,
    trailing: Any,
) -> Any:
    """Call ``target(*args, trailing)`` if it requires it, else ``target(*args)``.

    Definitions are zero or one argument callables; the container is passed
    only to those that declare a required parameter for it. Optional
    parameters keep their defaults, so ``datetime.now`` or ``dict`` are
    called bare.

    Examples:
        .. code-block:: python

            call_with_optional_trailing(lambda: 1, trailing=container)
            call_with_optional_trailing(lambda c: c.get("a"), trailing=container)
            call_with_optional_trailing(wrapper, inner, trailing=container)

    """
    if required_positional_count(target) > len(args):
        return target(*args, trailing)
    return target(*args)


__all__ = ["call_with_optional_trailing", "required_positional_count"]
