"""Fixed consent answer, used when the host provides no consent source."""


class StaticTrackingManager:
    """UsageTrackerManager that always returns the value it was built with."""

    def __init__(self, enabled: bool) -> None:
        """Store the consent flag."""
        self._enabled = enabled

    def is_tracking_enabled(self) -> bool:
        """Return the configured flag."""
        return self._enabled

    def __repr__(self) -> str:
        return f"StaticTrackingManager(enabled={self._enabled})"
