"""Dependency Injection Container Module.

Usage:
------
    # Initialize at startup (call once from main.py)
    from cradle.core.container import initialize_container
    from cradle.core.config import settings
    initialize_container(settings)

    # In tests (construct directly with fakes, don't use global)
    from cradle.core.container import Container
    test_container = Container(
        usage_limit_checker=FakeUsageLimitChecker(),
        usage_ledger=FakeUsageLedger(),
        usage_report=...,
    )

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from typing import TYPE_CHECKING

from cradle.core.container.container import Container
from cradle.core.container.factory import create_container

if TYPE_CHECKING:
    from cradle.core.config import Settings

__all__ = [
    "Container",
    "create_container",
    "container",
    "initialize_container",
    "reset_container",
]


# ---------------------------------------------------------------------------
# Global container instance
# ---------------------------------------------------------------------------

container: Container | None = None
"""Global container instance.

Initialized via `initialize_container()` at application startup.

Do NOT import this in domain code. Domains receive dependencies
via constructor parameters, never by importing the container directly.
"""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once at startup.

    Args:
        settings: Application settings from core/config

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings)


def reset_container() -> None:
    """Reset the global container to None. For testing only."""
    global container
    container = None
