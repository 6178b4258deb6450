"""
State Store contract - typed get/set over namespaced keys.

The policy engine only needs writes to be visible to later reads in the same
process; durable stores also keep them across restarts.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from enum import Enum

from review_kit.config import DEFAULT_SUITE_NAME


class ReviewDefaultsKey(str, Enum):
    """Keys used by the review manager, grouped under one suite."""

    # Number of user interactions counted towards the review threshold
    REVIEW_COUNT_THRESHOLD = "reviewCountThreshold"

    # First-run date (not preserved across reinstalls)
    APP_INSTALL_DATE = "appInstallDate"

    # Last date a review was requested
    LAST_REVIEW_REQUEST_DATE = "lastReviewRequestDate"

    # App version at the time of the last version-flow request
    LAST_REVIEWED_VERSION = "lastReviewedVersion"


class LegacyReviewKey(str, Enum):
    """Keys used by the worthy-action manager, prefixed by the bundle identifier."""

    CURRENT_REVIEW_WORTHY_ACTION_COUNT = "currentReviewWorthyActionCount"
    LAST_REVIEW_REQUEST_APP_VERSION = "lastReviewRequestAppVersion"

    def key_for(self, bundle_identifier: str | None) -> str:
        """Return the stored key name for a bundle identifier."""
        if not bundle_identifier:
            return f"userDefaults.{self.value}"
        return f"{bundle_identifier}.userDefault.{self.value}"


def as_utc(value: datetime) -> datetime:
    """Normalize a stored timestamp to an aware UTC datetime (naive means UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ReviewStateStore(ABC):
    """Persistent key-value facility addressed by keys within a suite."""

    def __init__(self, suite_name: str = DEFAULT_SUITE_NAME) -> None:
        if not suite_name:
            raise ValueError("suite_name cannot be empty")
        self.suite_name = suite_name

    @abstractmethod
    def get_integer(self, key: str) -> int:
        """Return the integer stored under key, or 0 when unset."""

    @abstractmethod
    def set_integer(self, key: str, value: int) -> None:
        """Store an integer under key."""

    @abstractmethod
    def get_date(self, key: str) -> datetime | None:
        """Return the timestamp stored under key as aware UTC, or None."""

    @abstractmethod
    def set_date(self, key: str, value: datetime) -> None:
        """Store a timezone-aware timestamp under key."""

    @abstractmethod
    def get_string(self, key: str) -> str | None:
        """Return the string stored under key, or None."""

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        """Store a string under key."""
