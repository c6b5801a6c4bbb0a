"""PostHog transport adapter."""

from typing import Any, Dict, Optional

import posthog

from ide_analytics.core.config import UsageTrackerSettings
from ide_analytics.core.events import TrackingEvent
from ide_analytics.core.exceptions import InvalidArgumentError
from ide_analytics.core.logging import logger


class PostHogTransport:
    """Wraps the PostHog SDK behind AnalyticsTransport.

    Enriches every event with plugin and platform identity so dashboards can
    segment by IDE and plugin version without callers adding it themselves.
    The SDK batches and flushes on its own consumer thread.
    """

    def __init__(
        self,
        settings: UsageTrackerSettings,
        client: Optional[posthog.Posthog] = None,
    ) -> None:
        """Configure the PostHog client from settings.

        Raises:
            InvalidArgumentError: If POSTHOG_API_KEY is not configured.
        """
        if not settings.POSTHOG_API_KEY:
            raise InvalidArgumentError("POSTHOG_API_KEY is required for the PostHog transport")

        self._distinct_id = settings.CLIENT_ID
        self._base = {
            "plugin_name": settings.PLUGIN_NAME,
            "plugin_version": settings.PLUGIN_VERSION,
            "platform_name": settings.PLATFORM_NAME,
            "platform_version": settings.PLATFORM_VERSION,
            "event_category": settings.event_category,
        }
        self._client = client or posthog.Posthog(
            settings.POSTHOG_API_KEY, host=settings.POSTHOG_HOST
        )
        logger.info("PostHog transport initialized (host=%s)", settings.POSTHOG_HOST)

    def _properties(self, event: TrackingEvent) -> Dict[str, Any]:
        return {**self._base, **event.metadata}

    def send(self, event: TrackingEvent) -> None:
        """Capture the event in PostHog."""
        try:
            self._client.capture(
                distinct_id=self._distinct_id,
                event=event.action,
                properties=self._properties(event),
                timestamp=event.timestamp,
            )
        except Exception as e:
            logger.error("Failed to track analytics event '%s': %s", event.action, e)

    def close(self) -> None:
        """Flush and stop the SDK consumer."""
        try:
            self._client.shutdown()
        except Exception as e:
            logger.warning("PostHog shutdown failed: %s", e)
