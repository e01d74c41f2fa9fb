from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lazywire._internal.definitions import ServiceKey


@dataclass(frozen=True, slots=True)
class TagAssociation:
    """One ``tag(key, tag_name, config)`` entry returned by ``Container.tagged``.

    The key is not checked against the container, so a tagged key may be
    defined later or never.

    Examples:
        .. code-block:: python

            container.tag("users.static", "user_provider", {"priority": 10})

            for association in container.tagged("user_provider"):
                provider = container.get(association.key)
                priority = association.config.get("priority", 0)

    """

    key: ServiceKey
    """The tagged service key."""
    config: Mapping[str, Any] = field(default_factory=dict)
    """Free-form metadata given at tagging time, empty by default."""


@dataclass(slots=True)
class TagRegistry:
    """Ordered tag name to associations mapping; duplicates are kept."""

    _associations: dict[str, list[TagAssociation]] = field(default_factory=dict)

    def add(self, key: ServiceKey, tag_name: str, config: Mapping[str, Any] | None) -> None:
        association = TagAssociation(key=key, config={} if config is None else config)
        self._associations.setdefault(tag_name, []).append(association)

    def associations(self, tag_name: str) -> list[TagAssociation]:
        return list(self._associations.get(tag_name, ()))
