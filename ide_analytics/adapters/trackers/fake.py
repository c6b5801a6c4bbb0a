"""Fake usage tracker for testing call sites.

Hands out real builders (same metadata and single-use rules as the network
tracker) and records every pinged event in memory.
"""

from ide_analytics.adapters.trackers.builder import TrackingEventBuilder
from ide_analytics.core.events import TrackingEvent


class FakeUsageTracker:
    """In-memory test double for UsageTracker.

    Usage:
        tracker = FakeUsageTracker()
        deploy(tracker=tracker)
        assert tracker.get("appengine.deployment").metadata == {"result": "success"}
    """

    def __init__(self) -> None:
        """Initialize with empty event list."""
        self.events: list[TrackingEvent] = []
        self.closed = False

    def track_event(self, action: str) -> TrackingEventBuilder:
        """Return a builder that records into ``events`` on ping()."""
        return TrackingEventBuilder(action, self.events.append)

    def close(self) -> None:
        self.closed = True

    # Test helpers

    def has(self, action: str) -> bool:
        """Return True if an event with the given action was pinged."""
        return any(e.action == action for e in self.events)

    def get(self, action: str) -> TrackingEvent:
        """Return the first pinged event for ``action``, or raise AssertionError."""
        for e in self.events:
            if e.action == action:
                return e
        raise AssertionError(
            f"No tracking event '{action}' pinged. Pinged: {[e.action for e in self.events]}"
        )

    def clear(self) -> None:
        """Reset recorded events."""
        self.events.clear()
