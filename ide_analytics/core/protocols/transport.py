"""AnalyticsTransport protocol: how a finalized event leaves the process.

Adapter boundary between the tracker and the analytics provider
(Google Analytics Measurement Protocol, PostHog, ...).
"""

from typing import Protocol, runtime_checkable

from ide_analytics.core.events import TrackingEvent


@runtime_checkable
class AnalyticsTransport(Protocol):
    """Fire-and-forget delivery of one event per call."""

    def send(self, event: TrackingEvent) -> None:
        """Attempt to deliver a single event.

        Implementations must be safe to call in fire-and-forget style:
        errors are logged, never raised.
        """
        ...

    def close(self) -> None:
        """Release held resources (HTTP client, SDK buffers)."""
        ...
