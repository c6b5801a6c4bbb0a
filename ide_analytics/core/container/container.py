"""Dependency Injection Container.

Immutable dataclass holding the process-wide tracker. It has no construction
logic; that belongs in the factory.
"""

from dataclasses import dataclass, replace
from typing import Any

from ide_analytics.core.config import UsageTrackerSettings
from ide_analytics.core.protocols import UsageTracker


@dataclass(frozen=True)
class Container:
    """Immutable container holding the usage tracker.

    Usage:
        # Production: use the global container built by the factory
        from ide_analytics.core import container as di
        di.container.usage_tracker.track_event("appengine.deployment").ping()

        # Testing: construct directly with fakes
        test_container = Container(settings=settings, usage_tracker=FakeUsageTracker())
    """

    settings: UsageTrackerSettings
    usage_tracker: UsageTracker

    def replace(self, **changes: Any) -> "Container":
        """Create a new container with some dependencies replaced.

            modified = container.replace(usage_tracker=FakeUsageTracker())
        """
        return replace(self, **changes)

    def close(self) -> None:
        """Release the tracker's transport."""
        self.usage_tracker.close()
