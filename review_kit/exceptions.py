"""
Exception Classes - Strongly typed exception hierarchy.

Policy entry points never let these escape; they are logged and the call
degrades to doing nothing.
"""


class ReviewKitError(Exception):
    """Base exception for all review kit errors."""

    pass


class StateStoreError(ReviewKitError):
    """Raised when the persisted review state cannot be read or written."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"State store error for {key}: {message}")
