"""Tests for NoOpUsageTracker — every call succeeds and nothing happens."""

from ide_analytics.adapters.trackers.noop import NOOP_USAGE_TRACKER, NoOpUsageTracker
from ide_analytics.core.protocols import FluentTrackingEventWithMetadata, UsageTracker


def test_satisfies_protocols():
    tracker = NoOpUsageTracker()
    assert isinstance(tracker, UsageTracker)
    assert isinstance(tracker.track_event("a.b"), FluentTrackingEventWithMetadata)


def test_full_chain_is_silent():
    builder = NOOP_USAGE_TRACKER.track_event("appengine.deployment")

    assert builder.add_metadata("result", "success") is builder
    assert builder.ping() is None


def test_reuse_after_ping_is_ignored():
    builder = NOOP_USAGE_TRACKER.track_event("appengine.deployment")
    builder.ping()

    builder.add_metadata("k", "v").ping()


def test_empty_action_and_many_calls():
    builder = NOOP_USAGE_TRACKER.track_event("")
    for i in range(100):
        builder = builder.add_metadata(str(i), str(i))
    builder.ping()


def test_close_is_noop():
    NOOP_USAGE_TRACKER.close()
    NOOP_USAGE_TRACKER.close()
    NOOP_USAGE_TRACKER.track_event("still.works").ping()
