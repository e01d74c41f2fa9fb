"""Pytest fixtures for LazyWire containers.

Enable them from a top-level ``conftest.py``:

.. code-block:: python

    pytest_plugins = ["lazywire.integrations.pytest_plugin"]

"""

from lazywire._internal.integrations.pytest_plugin import (
    lazywire_container,
    lazywire_lifecycle,
)

__all__ = ["lazywire_container", "lazywire_lifecycle"]
