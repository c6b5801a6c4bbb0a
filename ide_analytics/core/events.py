"""TrackingEvent: the immutable record handed to a transport at ping()."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TrackingEvent:
    """One finalized usage event.

    ``metadata`` is a read-only snapshot; later changes to the builder that
    produced it cannot leak into an event already handed to a transport.
    """

    action: str
    metadata: Mapping[str, str] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def metadata_string(self) -> str:
        """Render metadata as ``key=value`` pairs, sorted by key, joined by commas."""
        return ",".join(f"{key}={value}" for key, value in sorted(self.metadata.items()))
