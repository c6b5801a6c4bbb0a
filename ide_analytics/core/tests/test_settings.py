"""Tests for UsageTrackerSettings defaults, env loading and consent wiring."""

import logging

import pytest
from pydantic import ValidationError

from ide_analytics.core.config import TransportType, UsageTrackerSettings
from ide_analytics.core.config.settings import DEFAULT_ANALYTICS_URL
from ide_analytics.core.consent import StaticTrackingManager
from ide_analytics.core.container import initialize_container
from ide_analytics.core.logging import LOGGER_NAME
from ide_analytics.version import __version__


def test_defaults(monkeypatch):
    monkeypatch.delenv("IDE_ANALYTICS_TRACKING_ENABLED", raising=False)
    settings = UsageTrackerSettings(_env_file=None)

    assert settings.TRACKING_ENABLED is False
    assert settings.ANALYTICS_ID is None
    assert settings.TRANSPORT == TransportType.MEASUREMENT_PROTOCOL
    assert settings.ANALYTICS_URL == DEFAULT_ANALYTICS_URL
    assert settings.PLUGIN_VERSION == __version__
    assert settings.REQUEST_TIMEOUT_SECONDS == 5.0
    assert settings.CLIENT_ID


def test_client_id_is_random_per_instance():
    a = UsageTrackerSettings(_env_file=None)
    b = UsageTrackerSettings(_env_file=None)
    assert a.CLIENT_ID != b.CLIENT_ID


def test_loads_from_env(monkeypatch):
    monkeypatch.setenv("IDE_ANALYTICS_TRACKING_ENABLED", "true")
    monkeypatch.setenv("IDE_ANALYTICS_ANALYTICS_ID", "UA-1-1")
    monkeypatch.setenv("IDE_ANALYTICS_TRANSPORT", "posthog")
    monkeypatch.setenv("IDE_ANALYTICS_REQUEST_TIMEOUT_SECONDS", "2.5")

    settings = UsageTrackerSettings(_env_file=None)

    assert settings.TRACKING_ENABLED is True
    assert settings.ANALYTICS_ID == "UA-1-1"
    assert settings.TRANSPORT == TransportType.POSTHOG
    assert settings.REQUEST_TIMEOUT_SECONDS == 2.5


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        UsageTrackerSettings(REQUEST_TIMEOUT_SECONDS=0, _env_file=None)


def test_unknown_transport_rejected():
    with pytest.raises(ValidationError):
        UsageTrackerSettings(TRANSPORT="carrier-pigeon", _env_file=None)


class TestLogLevel:
    @pytest.mark.parametrize(
        "raw, expected", [("debug", "DEBUG"), (" Warning ", "WARNING"), ("ERROR", "ERROR")]
    )
    def test_level_names_normalized(self, raw, expected):
        assert UsageTrackerSettings(LOG_LEVEL=raw, _env_file=None).LOG_LEVEL == expected

    def test_unknown_level_rejected_at_load(self, monkeypatch):
        monkeypatch.setenv("IDE_ANALYTICS_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            UsageTrackerSettings(_env_file=None)

    def test_env_level_reaches_container_startup(self, monkeypatch):
        monkeypatch.setenv("IDE_ANALYTICS_LOG_LEVEL", "warning")

        base = logging.getLogger(LOGGER_NAME)
        previous = base.level
        try:
            initialize_container(UsageTrackerSettings(_env_file=None))
            assert base.level == logging.WARNING
        finally:
            base.setLevel(previous)


class TestDerivedValues:
    def test_user_agent_from_identity(self, enabled_settings):
        assert enabled_settings.user_agent == "gcloud-intellij/1.2.3 (IntelliJ/2024.1)"

    def test_user_agent_override(self, enabled_settings):
        settings = enabled_settings.model_copy(update={"USER_AGENT": "custom/1.0"})
        assert settings.user_agent == "custom/1.0"

    def test_event_category_defaults_to_plugin_name(self, enabled_settings):
        assert enabled_settings.event_category == "gcloud-intellij"

    def test_event_category_override(self, enabled_settings):
        settings = enabled_settings.model_copy(update={"EVENT_CATEGORY": "cloud-tools"})
        assert settings.event_category == "cloud-tools"


class TestManager:
    def test_default_manager_reflects_flag(self, enabled_settings, disabled_settings):
        assert isinstance(enabled_settings.manager, StaticTrackingManager)
        assert enabled_settings.manager.is_tracking_enabled() is True
        assert disabled_settings.manager.is_tracking_enabled() is False

    def test_with_manager_returns_copy(self, disabled_settings):
        manager = StaticTrackingManager(True)

        settings = disabled_settings.with_manager(manager)

        assert settings.manager is manager
        assert settings is not disabled_settings
        assert disabled_settings.manager.is_tracking_enabled() is False
        assert settings.CLIENT_ID == disabled_settings.CLIENT_ID
