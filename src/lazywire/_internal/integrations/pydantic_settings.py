from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

from lazywire.exceptions import LazyWireInvalidSettingsError

if TYPE_CHECKING:
    from lazywire._internal.container import Container

logger = logging.getLogger(__name__)


def _load_base_settings(module_name: str) -> type[Any] | None:
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    base_settings = getattr(module, "BaseSettings", None)
    if isinstance(base_settings, type):
        return base_settings
    return None


SETTINGS_BASE: type[Any] | None = _load_base_settings("pydantic_settings")


def is_pydantic_settings_instance(candidate: object) -> bool:
    """Return whether ``candidate`` is an instance of a settings model.

    Always ``False`` when ``pydantic-settings`` is not installed.

    Args:
        candidate: Object to test.

    """
    if SETTINGS_BASE is None:
        return False
    return isinstance(candidate, SETTINGS_BASE)


def register_settings(
    container: Container,
    settings: Any,
    *,
    key: str,
) -> Container:
    """Expose a ``pydantic_settings.BaseSettings`` instance as parameters.

    The settings object is stored under ``key`` and every declared field
    under ``"{key}.{field}"``. Values are read once, at registration time,
    and stored through ``Container.set``, so locking and freezing rules
    apply as for any other definition.

    Args:
        container: Container receiving the parameters.
        settings: Settings model instance.
        key: Prefix and key for the settings object itself.

    Returns:
        The container, for chaining.

    Raises:
        LazyWireInvalidSettingsError: If ``settings`` is not a settings
            model instance.

    Examples:
        .. code-block:: python

            class DatabaseSettings(BaseSettings):
                url: str = "sqlite://"
                pool_size: int = 5

            register_settings(container, DatabaseSettings(), key="db")
            container.get("db.pool_size")

    """
    if not is_pydantic_settings_instance(settings):
        msg = (
            f"Settings for {key!r} must be a pydantic_settings.BaseSettings instance, "
            f"got {type(settings).__qualname__}."
        )
        raise LazyWireInvalidSettingsError(msg)

    container.set(key, settings)
    field_names = list(type(settings).model_fields)
    for field_name in field_names:
        container.set(f"{key}.{field_name}", getattr(settings, field_name))

    logger.debug("Registered settings %r with %d fields", key, len(field_names))
    return container


__all__ = [
    "SETTINGS_BASE",
    "is_pydantic_settings_instance",
    "register_settings",
]
