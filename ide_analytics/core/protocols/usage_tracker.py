"""UsageTracker protocol and the fluent tracking-event roles.

Usage:
    tracker.track_event("appengine.deployment").add_metadata("result", "success").ping()

``action`` is typically a specific operation the user performed in the
plugin, often prefixed with a domain such as ``appengine.`` or
``clouddebugger.``.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PingsAnalytics(Protocol):
    """Step of the fluent API where the event has enough data to be sent."""

    def ping(self) -> None:
        """Send the analytics ping.

        Fire-and-forget: returns nothing and never raises for transport
        failures.
        """
        ...


@runtime_checkable
class FluentTrackingEventWithMetadata(PingsAnalytics, Protocol):
    """Step of the fluent API that accepts key/value metadata."""

    def add_metadata(self, key: str, value: str) -> "FluentTrackingEventWithMetadata":
        """Set a key/value pair on this event.

        A key that is already set is overwritten (last write wins).

        Args:
            key: Metadata key.
            value: Metadata value.

        Returns:
            This builder, for further chaining.
        """
        ...


@runtime_checkable
class UsageTracker(Protocol):
    """Protocol for sending usage analytics pings.

    Implementations are selected once at start-up by the tracker factory.
    Callers never branch on whether tracking is enabled: a disabled tracker
    accepts the same calls and does nothing.
    """

    def track_event(self, action: str) -> FluentTrackingEventWithMetadata:
        """Start a new tracking event.

        No side effects happen until ``ping()`` is called on the returned
        builder.

        Args:
            action: Dot-namespaced action name (e.g., 'appengine.deployment').

        Returns:
            A fresh fluent builder scoped to this event.
        """
        ...

    def close(self) -> None:
        """Release transport resources. Safe to call more than once."""
        ...
