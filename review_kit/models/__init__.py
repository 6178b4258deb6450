"""
Review kit models.
"""

from review_kit.models.domain import (
    Clock,
    GateResult,
    ReviewFlow,
    ReviewPolicy,
    ReviewState,
    ReviewTrigger,
    VersionProvider,
)

__all__ = [
    "Clock",
    "GateResult",
    "ReviewFlow",
    "ReviewPolicy",
    "ReviewState",
    "ReviewTrigger",
    "VersionProvider",
]
