"""
Review Kit - decides when to ask users for an app-store review.
"""

__version__ = "0.1.0"

from review_kit.models.domain import ReviewPolicy, ReviewState, ReviewTrigger  # noqa: E402
from review_kit.services import (  # noqa: E402
    AppStoreReviewManager,
    ReviewManager,
    get_review_manager,
)
from review_kit.stores import (  # noqa: E402
    InMemoryStateStore,
    ReviewStateStore,
    SQLStateStore,
)

__all__ = [
    "__version__",
    "AppStoreReviewManager",
    "InMemoryStateStore",
    "ReviewManager",
    "ReviewPolicy",
    "ReviewState",
    "ReviewStateStore",
    "ReviewTrigger",
    "SQLStateStore",
    "get_review_manager",
]
