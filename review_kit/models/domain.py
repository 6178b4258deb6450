"""
Domain Models - Review policy and persisted state using dataclasses.

All data structures are strongly typed immutable dataclasses.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Opaque action supplied by the host UI layer that shows the platform review prompt
ReviewTrigger = Callable[[], None]

# Returns the current moment as a timezone-aware datetime
Clock = Callable[[], datetime]

# Returns the running app's version string ("" when unknown)
VersionProvider = Callable[[], str]


class ReviewFlow(str, Enum):
    """Entry point that asked for a review."""

    INTERACTION = "interaction"
    SIGNIFICANT_EVENT = "significant_event"
    NEW_VERSION = "new_version"
    WORTHY_ACTION = "worthy_action"


class GateResult(str, Enum):
    """Outcome of the install-age and cooldown checks."""

    PASSED = "passed"
    INSTALL_AGE = "install_age"
    COOLDOWN = "cooldown"

    @property
    def passed(self) -> bool:
        return self is GateResult.PASSED


@dataclass(frozen=True)
class ReviewPolicy:
    """Thresholds fixed at construction of a review manager."""

    min_days_since_install: int = 7
    action_threshold: int = 20
    cooldown_days: int = 30

    def __post_init__(self) -> None:
        """Validate policy thresholds."""
        if self.min_days_since_install < 0:
            raise ValueError(
                f"min_days_since_install cannot be negative: {self.min_days_since_install}"
            )
        if self.action_threshold < 1:
            raise ValueError(f"action_threshold must be at least 1: {self.action_threshold}")
        if self.cooldown_days < 0:
            raise ValueError(f"cooldown_days cannot be negative: {self.cooldown_days}")


@dataclass(frozen=True)
class ReviewState:
    """Immutable snapshot of the persisted review bookkeeping."""

    install_date: datetime | None
    interaction_count: int
    last_request_date: datetime | None
    last_reviewed_version: str | None

    def __post_init__(self) -> None:
        """Validate state constraints."""
        if self.interaction_count < 0:
            raise ValueError(f"Interaction count cannot be negative: {self.interaction_count}")
