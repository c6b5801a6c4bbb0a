"""Dependency Injection Container Module.

Usage:
------
    # Initialize at startup (call once from the plugin's activation hook)
    from ide_analytics.core.container import initialize_container
    from ide_analytics.core.config import settings
    initialize_container(settings)

    # Read the global container after initialization
    from ide_analytics.core import container as di
    di.container.usage_tracker.track_event("appengine.deployment").ping()

    # In tests (construct directly with fakes, don't use global)
    from ide_analytics.core.container import Container
    test_container = Container(settings=settings, usage_tracker=FakeUsageTracker())

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_usage_tracker(), create_container() (builds)
"""

from typing import TYPE_CHECKING

from ide_analytics.core.container.container import Container
from ide_analytics.core.container.factory import create_container, create_usage_tracker
from ide_analytics.core.logging import configure_logging

if TYPE_CHECKING:
    from ide_analytics.core.config import UsageTrackerSettings

__all__ = [
    "Container",
    "container",
    "create_container",
    "create_usage_tracker",
    "initialize_container",
    "reset_container",
]


container: Container | None = None
"""Global container instance, set by `initialize_container()` at startup."""


def initialize_container(settings: "UsageTrackerSettings") -> None:
    """Initialize the global container. Call once at startup.

    Also applies LOG_LEVEL to the package logger.

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    configure_logging(settings.LOG_LEVEL)
    container = create_container(settings)


def reset_container() -> None:
    """Close and drop the global container. For testing only.

    WARNING: Do not use in production code.
    """
    global container
    if container is not None:
        container.close()
    container = None
