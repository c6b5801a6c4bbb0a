"""Tests for TrackingEvent immutability and metadata rendering."""

import dataclasses

import pytest

from ide_analytics.core.events import TrackingEvent


def test_metadata_is_snapshot_of_source():
    source = {"a": "1"}
    event = TrackingEvent(action="a.b", metadata=source)

    source["a"] = "changed"
    source["b"] = "2"

    assert event.metadata == {"a": "1"}


def test_metadata_is_read_only():
    event = TrackingEvent(action="a.b", metadata={"a": "1"})

    with pytest.raises(TypeError):
        event.metadata["a"] = "2"  # type: ignore[index]


def test_fields_are_frozen():
    event = TrackingEvent(action="a.b")

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.action = "c.d"  # type: ignore[misc]


def test_timestamp_is_utc():
    event = TrackingEvent(action="a.b")
    assert event.timestamp.tzinfo is not None


@pytest.mark.parametrize(
    "metadata, expected",
    [
        ({}, ""),
        ({"result": "success"}, "result=success"),
        ({"b": "2", "a": "1"}, "a=1,b=2"),
    ],
)
def test_metadata_string(metadata, expected):
    assert TrackingEvent(action="a.b", metadata=metadata).metadata_string() == expected
