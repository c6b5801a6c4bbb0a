"""Root conftest for pytest configuration and shared fixtures.

Loaded before the colocated tests under ide_analytics/, so its fixtures are
available everywhere.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables — must be set before any ide_analytics module import
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("IDE_ANALYTICS_TRACKING_ENABLED", "false")
os.environ.setdefault("IDE_ANALYTICS_LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def disabled_settings():
    """Settings with tracking disabled."""
    from ide_analytics.core.config import UsageTrackerSettings

    return UsageTrackerSettings(TRACKING_ENABLED=False, _env_file=None)


@pytest.fixture
def enabled_settings():
    """Settings with tracking enabled and a Measurement Protocol backend."""
    from ide_analytics.core.config import UsageTrackerSettings

    return UsageTrackerSettings(
        TRACKING_ENABLED=True,
        ANALYTICS_ID="UA-12345678-1",
        CLIENT_ID="client-123",
        PLATFORM_NAME="IntelliJ",
        PLATFORM_VERSION="2024.1",
        PLUGIN_NAME="gcloud-intellij",
        PLUGIN_VERSION="1.2.3",
        _env_file=None,
    )


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """Fake AnalyticsTransport that records sent events."""
    from ide_analytics.adapters.transport.fake import FakeAnalyticsTransport

    return FakeAnalyticsTransport()


@pytest.fixture
def fake_usage_tracker():
    """Fake UsageTracker that records pinged events."""
    from ide_analytics.adapters.trackers.fake import FakeUsageTracker

    return FakeUsageTracker()


@pytest.fixture(autouse=True)
def _reset_global_container():
    """Make sure no test leaks a global container into the next."""
    yield
    from ide_analytics.core.container import reset_container

    reset_container()
