"""
State stores - typed key-value persistence for review bookkeeping.
"""

from review_kit.stores.base import LegacyReviewKey, ReviewDefaultsKey, ReviewStateStore
from review_kit.stores.memory import InMemoryStateStore
from review_kit.stores.sql import SQLStateStore

__all__ = [
    "InMemoryStateStore",
    "LegacyReviewKey",
    "ReviewDefaultsKey",
    "ReviewStateStore",
    "SQLStateStore",
]
