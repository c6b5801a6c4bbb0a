"""Tracker Factory.

All construction logic lives here. The factory reads settings once and
returns the tracker variant that matches the user's consent.

Design principles:
- One decision point: call sites never check whether tracking is enabled
- Fail fast: an enabled tracker with a broken backend config crashes at startup
- Testable: inject a fake transport instead of patching the network
"""

from typing import Optional

from ide_analytics.adapters.trackers import NOOP_USAGE_TRACKER, GoogleUsageTracker
from ide_analytics.adapters.transport import MeasurementProtocolTransport, PostHogTransport
from ide_analytics.core.config import TransportType, UsageTrackerSettings
from ide_analytics.core.container.container import Container
from ide_analytics.core.exceptions import InvalidArgumentError
from ide_analytics.core.logging import logger
from ide_analytics.core.protocols import AnalyticsTransport, UsageTracker


def create_usage_tracker(
    settings: Optional[UsageTrackerSettings],
    transport: Optional[AnalyticsTransport] = None,
) -> UsageTracker:
    """Create the usage tracker for this process.

    If tracking is enabled, returns a new GoogleUsageTracker, otherwise the
    shared NoOpUsageTracker. Consent is read exactly once; a tracker never
    changes variant after construction.

    Args:
        settings: Tracking settings. Must not be None.
        transport: Outbound transport for an enabled tracker. Defaults to the
            one selected by ``settings.TRANSPORT``.

    Returns:
        A UsageTracker ready for ``track_event()`` calls.

    Raises:
        InvalidArgumentError: If settings is None, or tracking is enabled but
            the selected transport is missing required configuration.
    """
    if settings is None:
        raise InvalidArgumentError("settings must not be None")

    if not settings.manager.is_tracking_enabled():
        logger.info("Usage tracking disabled, using no-op tracker")
        return NOOP_USAGE_TRACKER

    if transport is None:
        transport = _create_transport(settings)
    return GoogleUsageTracker(settings, transport)


def _create_transport(settings: UsageTrackerSettings) -> AnalyticsTransport:
    """Pick the transport named by TRANSPORT."""
    if settings.TRANSPORT == TransportType.POSTHOG:
        return PostHogTransport(settings)
    return MeasurementProtocolTransport(settings)


def create_container(settings: UsageTrackerSettings) -> Container:
    """Build the container with the tracker for these settings.

    Example:
        from ide_analytics.core.config import settings
        from ide_analytics.core.container import create_container

        container = create_container(settings)
    """
    return Container(settings=settings, usage_tracker=create_usage_tracker(settings))
