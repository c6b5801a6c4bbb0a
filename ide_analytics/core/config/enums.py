"""Configuration enums for type-safe settings.

These enums inherit from str so they load directly from environment variables.
"""

from enum import Enum


class TransportType(str, Enum):
    """Outbound transports for enabled trackers.

    Determines how a pinged event reaches the analytics backend.
    """

    MEASUREMENT_PROTOCOL = "measurement_protocol"
    POSTHOG = "posthog"
