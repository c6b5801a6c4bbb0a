"""Tracking settings.

Everything an enabled tracker needs to know about the backend and about the
plugin it runs in. Uses Pydantic Settings for automatic env var loading:

    IDE_ANALYTICS_TRACKING_ENABLED=true
    IDE_ANALYTICS_ANALYTICS_ID=UA-12345678-1
"""

from typing import Literal, Optional
from uuid import uuid4

from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ide_analytics.core.config.enums import TransportType
from ide_analytics.core.consent import StaticTrackingManager
from ide_analytics.core.protocols.tracking_manager import UsageTrackerManager
from ide_analytics.version import __version__

DEFAULT_ANALYTICS_URL = "https://ssl.google-analytics.com/collect"
DEFAULT_POSTHOG_HOST = "https://us.i.posthog.com"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UsageTrackerSettings(BaseSettings):
    """Settings consumed by the tracker factory and the transports.

    The consent decision is not read from a field directly: it goes through
    ``manager``, so a host IDE can plug in its own consent source with
    ``with_manager()``. Without one, ``TRACKING_ENABLED`` is the answer.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDE_ANALYTICS_",
        env_file=".env",
        extra="ignore",
    )

    # Consent
    TRACKING_ENABLED: bool = Field(False, description="Send usage events at all")

    # Backend identity
    ANALYTICS_ID: Optional[str] = Field(None, description="Analytics property / tracking ID")
    CLIENT_ID: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Anonymous installation identifier",
    )

    # Plugin and platform identity
    PLATFORM_NAME: str = "unknown"
    PLATFORM_VERSION: str = "unknown"
    PLUGIN_NAME: str = "ide-analytics"
    PLUGIN_VERSION: str = __version__
    EVENT_CATEGORY: Optional[str] = Field(
        None, description="Category for virtual page paths; defaults to PLUGIN_NAME"
    )
    PAGE_HOST: str = "virtual.ide"
    USER_AGENT: Optional[str] = None

    # Transport
    TRANSPORT: TransportType = TransportType.MEASUREMENT_PROTOCOL
    ANALYTICS_URL: str = DEFAULT_ANALYTICS_URL
    REQUEST_TIMEOUT_SECONDS: float = Field(5.0, gt=0)
    POSTHOG_API_KEY: Optional[str] = None
    POSTHOG_HOST: str = DEFAULT_POSTHOG_HOST

    LOG_LEVEL: LogLevel = "INFO"

    _manager: Optional[UsageTrackerManager] = PrivateAttr(default=None)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case (e.g. "debug")."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def manager(self) -> UsageTrackerManager:
        """Consent source for the tracker factory."""
        if self._manager is not None:
            return self._manager
        return StaticTrackingManager(self.TRACKING_ENABLED)

    def with_manager(self, manager: UsageTrackerManager) -> "UsageTrackerSettings":
        """Return a copy of these settings that asks ``manager`` for consent."""
        copied = self.model_copy()
        copied._manager = manager
        return copied

    @property
    def event_category(self) -> str:
        """Category used in virtual page paths and custom dimensions."""
        return self.EVENT_CATEGORY or self.PLUGIN_NAME

    @property
    def user_agent(self) -> str:
        """User-Agent header sent with every hit."""
        if self.USER_AGENT:
            return self.USER_AGENT
        return (
            f"{self.PLUGIN_NAME}/{self.PLUGIN_VERSION} "
            f"({self.PLATFORM_NAME}/{self.PLATFORM_VERSION})"
        )
