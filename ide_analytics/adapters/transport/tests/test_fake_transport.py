"""Tests for FakeAnalyticsTransport helpers."""

import pytest

from ide_analytics.adapters.transport.fake import FakeAnalyticsTransport
from ide_analytics.core.events import TrackingEvent
from ide_analytics.core.protocols import AnalyticsTransport


def test_records_and_queries(fake_transport):
    fake_transport.send(TrackingEvent(action="a.b", metadata={"k": "1"}))
    fake_transport.send(TrackingEvent(action="a.b", metadata={"k": "2"}))
    fake_transport.send(TrackingEvent(action="c.d"))

    assert isinstance(fake_transport, AnalyticsTransport)
    assert fake_transport.has("c.d")
    assert fake_transport.get("a.b").metadata == {"k": "1"}
    assert [e.metadata["k"] for e in fake_transport.get_all("a.b")] == ["1", "2"]

    fake_transport.clear()
    assert fake_transport.events == []


def test_get_missing_raises_assertion(fake_transport):
    with pytest.raises(AssertionError, match="No tracking event"):
        fake_transport.get("missing")


def test_should_raise_records_then_raises():
    transport = FakeAnalyticsTransport(should_raise=ValueError("boom"))

    with pytest.raises(ValueError):
        transport.send(TrackingEvent(action="a.b"))

    assert transport.has("a.b")
