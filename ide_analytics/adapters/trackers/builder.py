"""Fluent builder shared by the trackers that actually record events."""

from typing import Callable

from ide_analytics.core.events import TrackingEvent
from ide_analytics.core.exceptions import EventAlreadySentError
from ide_analytics.core.logging import logger

_logger = logger.with_prefix("[TrackingEventBuilder] ")


class TrackingEventBuilder:
    """Accumulates metadata for one action until ``ping()`` commits it.

    Single use: ``ping()`` consumes the builder, and any further call raises
    EventAlreadySentError. Metadata keys are unique; a repeated key keeps the
    last value.

    Not thread-safe. A builder belongs to the caller that created it.
    """

    def __init__(self, action: str, dispatch: Callable[[TrackingEvent], None]) -> None:
        """Start an event for ``action`` that ``dispatch`` receives at ping()."""
        self._action = action
        self._metadata: dict[str, str] = {}
        self._dispatch = dispatch
        self._sent = False

    @property
    def action(self) -> str:
        return self._action

    @property
    def metadata(self) -> dict[str, str]:
        """Copy of the metadata accumulated so far."""
        return dict(self._metadata)

    def add_metadata(self, key: str, value: str) -> "TrackingEventBuilder":
        """Set ``key`` to ``value`` and return this builder."""
        if self._sent:
            raise EventAlreadySentError(self._action)
        self._metadata[key] = value
        return self

    def ping(self) -> None:
        """Finalize the event and hand it to the dispatcher exactly once."""
        if self._sent:
            raise EventAlreadySentError(self._action)
        self._sent = True

        if not self._action or not self._action.strip():
            _logger.warning("Dropping tracking event with an empty action")
            return

        self._dispatch(TrackingEvent(action=self._action, metadata=self._metadata))
