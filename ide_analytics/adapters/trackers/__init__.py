"""Usage tracker adapters."""

from ide_analytics.adapters.trackers.builder import TrackingEventBuilder
from ide_analytics.adapters.trackers.fake import FakeUsageTracker
from ide_analytics.adapters.trackers.google import GoogleUsageTracker
from ide_analytics.adapters.trackers.noop import NOOP_USAGE_TRACKER, NoOpUsageTracker

__all__ = [
    "FakeUsageTracker",
    "GoogleUsageTracker",
    "NOOP_USAGE_TRACKER",
    "NoOpUsageTracker",
    "TrackingEventBuilder",
]
