"""Network-sending usage tracker."""

from ide_analytics.adapters.trackers.builder import TrackingEventBuilder
from ide_analytics.core.config import UsageTrackerSettings
from ide_analytics.core.events import TrackingEvent
from ide_analytics.core.logging import logger
from ide_analytics.core.protocols.transport import AnalyticsTransport


class GoogleUsageTracker:
    """UsageTracker that hands every pinged event to an AnalyticsTransport.

    The transport owns the wire format. This class only guarantees that each
    completed ``ping()`` produces exactly one ``send()`` carrying the action
    and the final metadata, and that nothing the transport raises reaches the
    caller.
    """

    def __init__(self, settings: UsageTrackerSettings, transport: AnalyticsTransport) -> None:
        """Bind the tracker to its settings and outbound transport."""
        self._transport = transport
        self._closed = False
        self._logger = logger.with_prefix("[GoogleUsageTracker] ").with_context(
            plugin=settings.PLUGIN_NAME
        )
        self._logger.info("Usage tracking enabled (transport=%s)", type(transport).__name__)

    def track_event(self, action: str) -> TrackingEventBuilder:
        """Start a new event for ``action``."""
        return TrackingEventBuilder(action, self._dispatch)

    def _dispatch(self, event: TrackingEvent) -> None:
        if self._closed:
            self._logger.debug("Tracker closed, dropping event '%s'", event.action)
            return
        try:
            self._transport.send(event)
        except Exception as e:
            self._logger.error("Failed to send tracking event '%s': %s", event.action, e)

    def close(self) -> None:
        """Close the transport. Later pings are dropped."""
        if self._closed:
            return
        self._closed = True
        try:
            self._transport.close()
        except Exception as e:
            self._logger.warning("Failed to close transport: %s", e)
