"""UsageTrackerManager protocol: the consent source.

The host IDE owns the user's opt-in decision (preferences page, first-run
dialog, policy file). The tracker factory only asks one question.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UsageTrackerManager(Protocol):
    """Answers whether the user has opted in to usage tracking."""

    def is_tracking_enabled(self) -> bool:
        """Return True if events may be sent."""
        ...
