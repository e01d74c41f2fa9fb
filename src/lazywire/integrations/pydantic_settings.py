from lazywire._internal.integrations.pydantic_settings import (
    is_pydantic_settings_instance,
    register_settings,
)

__all__ = ["is_pydantic_settings_instance", "register_settings"]
