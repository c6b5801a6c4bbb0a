"""No-op usage tracker for when the user has not opted in.

Satisfies UsageTracker so that call sites never need to check whether
tracking is enabled. Every operation succeeds and does nothing.
"""


class _NoOpTrackingEvent:
    """Stateless builder: accepts any metadata, pings nothing.

    Reuse after ping() is ignored; there is nothing to consume.
    """

    def add_metadata(self, key: str, value: str) -> "_NoOpTrackingEvent":
        return self

    def ping(self) -> None:
        return None


class NoOpUsageTracker:
    """UsageTracker used when tracking is disabled."""

    _EVENT = _NoOpTrackingEvent()

    def track_event(self, action: str) -> _NoOpTrackingEvent:
        """Return the shared no-op builder."""
        return self._EVENT

    def close(self) -> None:
        """No-op: nothing to release."""
        return None


NOOP_USAGE_TRACKER = NoOpUsageTracker()
