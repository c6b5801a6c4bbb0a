"""Fluent usage-analytics events for IDE plugins.

Usage:
    from ide_analytics import create_usage_tracker, settings

    tracker = create_usage_tracker(settings)
    tracker.track_event("appengine.deployment").add_metadata("result", "success").ping()
"""

from ide_analytics.core.config import UsageTrackerSettings, settings
from ide_analytics.core.container.factory import create_usage_tracker
from ide_analytics.core.exceptions import (
    EventAlreadySentError,
    IdeAnalyticsException,
    InvalidArgumentError,
)
from ide_analytics.core.protocols import (
    FluentTrackingEventWithMetadata,
    PingsAnalytics,
    UsageTracker,
    UsageTrackerManager,
)
from ide_analytics.version import __version__

__all__ = [
    "EventAlreadySentError",
    "FluentTrackingEventWithMetadata",
    "IdeAnalyticsException",
    "InvalidArgumentError",
    "PingsAnalytics",
    "UsageTracker",
    "UsageTrackerManager",
    "UsageTrackerSettings",
    "create_usage_tracker",
    "settings",
    "__version__",
]
