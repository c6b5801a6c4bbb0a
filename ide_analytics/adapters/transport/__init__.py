"""Analytics transport adapters."""

from ide_analytics.adapters.transport.fake import FakeAnalyticsTransport
from ide_analytics.adapters.transport.measurement_protocol import MeasurementProtocolTransport
from ide_analytics.adapters.transport.posthog import PostHogTransport

__all__ = ["FakeAnalyticsTransport", "MeasurementProtocolTransport", "PostHogTransport"]
