"""
Review services - policy engines and their helpers.
"""

from review_kit.services.app_store_review_manager import AppStoreReviewManager
from review_kit.services.review_manager import ReviewManager, get_review_manager

__all__ = [
    "AppStoreReviewManager",
    "ReviewManager",
    "get_review_manager",
]
