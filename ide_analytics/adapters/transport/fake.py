"""Fake analytics transport for testing."""

from typing import Optional

from ide_analytics.core.events import TrackingEvent


class FakeAnalyticsTransport:
    """In-memory test double for AnalyticsTransport.

    Records all sent events for assertions. ``should_raise`` makes every
    send() raise, to check that failures never reach the caller.

    Usage:
        transport = FakeAnalyticsTransport()
        tracker = create_usage_tracker(settings, transport=transport)
        tracker.track_event("appengine.deployment").ping()
        assert transport.has("appengine.deployment")
    """

    def __init__(self, should_raise: Optional[Exception] = None) -> None:
        """Initialize with empty event list and optional error injection."""
        self.events: list[TrackingEvent] = []
        self.close_calls = 0
        self._should_raise = should_raise

    def send(self, event: TrackingEvent) -> None:
        """Record the event (then raise, if configured to)."""
        self.events.append(event)
        if self._should_raise:
            raise self._should_raise

    def close(self) -> None:
        self.close_calls += 1

    # Test helpers

    def has(self, action: str) -> bool:
        """Return True if an event with the given action was sent."""
        return any(e.action == action for e in self.events)

    def get(self, action: str) -> TrackingEvent:
        """Return the first sent event matching action, or raise AssertionError."""
        for e in self.events:
            if e.action == action:
                return e
        raise AssertionError(
            f"No tracking event '{action}' sent. Sent: {[e.action for e in self.events]}"
        )

    def get_all(self, action: str) -> list[TrackingEvent]:
        """Return all sent events matching action."""
        return [e for e in self.events if e.action == action]

    def clear(self) -> None:
        """Reset sent events."""
        self.events.clear()
