"""Core protocols for dependency injection."""

from ide_analytics.core.protocols.tracking_manager import UsageTrackerManager
from ide_analytics.core.protocols.transport import AnalyticsTransport
from ide_analytics.core.protocols.usage_tracker import (
    FluentTrackingEventWithMetadata,
    PingsAnalytics,
    UsageTracker,
)

__all__ = [
    "AnalyticsTransport",
    "FluentTrackingEventWithMetadata",
    "PingsAnalytics",
    "UsageTracker",
    "UsageTrackerManager",
]
