"""Configuration module for ide-analytics.

Usage:
    from ide_analytics.core.config import settings, TransportType

    if settings.TRANSPORT == TransportType.POSTHOG:
        ...
"""

from ide_analytics.core.config.enums import TransportType
from ide_analytics.core.config.settings import UsageTrackerSettings

__all__ = [
    "UsageTrackerSettings",
    "TransportType",
    "settings",
]

# Singleton settings instance
settings = UsageTrackerSettings()
