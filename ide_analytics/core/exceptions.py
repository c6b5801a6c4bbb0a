"""Shared exceptions module."""

from typing import Optional


class IdeAnalyticsException(Exception):
    """Base exception for ide-analytics."""

    pass


class InvalidArgumentError(IdeAnalyticsException, ValueError):
    """Exception raised when a required argument is missing or unusable."""

    def __init__(self, message: Optional[str] = "Invalid argument"):
        """Create a new InvalidArgumentError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class EventAlreadySentError(IdeAnalyticsException):
    """Exception raised when a tracking event builder is used after ping()."""

    def __init__(self, action: str, message: str = "Tracking event was already pinged"):
        """Create a new EventAlreadySentError instance.

        Args:
        ----
            action (str): The action of the consumed event.
            message (str, optional): The error message. Has default message.

        """
        self.action = action
        self.message = message
        super().__init__(f"{message}: {action}")
