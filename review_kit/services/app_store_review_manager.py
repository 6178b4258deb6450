"""
App Store Review Manager - worthy-action counter keyed on app version.

The simpler of the two managers: prompts once the worthy-action count reaches
a minimum and the app version has changed since the last prompt. No install
age or cooldown gates.
"""

import threading

from structlog import get_logger

from review_kit.config import Settings, get_settings
from review_kit.exceptions import StateStoreError
from review_kit.models.domain import ReviewFlow, ReviewTrigger, VersionProvider
from review_kit.observability.metrics import metrics
from review_kit.services.app_version import current_app_version, settings_version_provider
from review_kit.stores.base import LegacyReviewKey, ReviewStateStore
from review_kit.stores.sql import default_sql_store

logger = get_logger(__name__)


class AppStoreReviewManager:
    """
    Requests a review after enough worthy actions on a new app version.

    Keys are prefixed with the bundle identifier so several apps can share
    one set of defaults.
    """

    def __init__(
        self,
        minimum_worthy_action_count: int = 20,
        store: ReviewStateStore | None = None,
        bundle_identifier: str | None = None,
        version_provider: VersionProvider | None = None,
    ) -> None:
        if minimum_worthy_action_count < 0:
            raise ValueError(
                f"minimum_worthy_action_count cannot be negative: {minimum_worthy_action_count}"
            )
        settings = get_settings()
        self.minimum_worthy_action_count = minimum_worthy_action_count
        self._store = store if store is not None else default_sql_store(settings.suite_name)
        identifier = bundle_identifier or settings.bundle_identifier
        self._count_key = LegacyReviewKey.CURRENT_REVIEW_WORTHY_ACTION_COUNT.key_for(identifier)
        self._version_key = LegacyReviewKey.LAST_REVIEW_REQUEST_APP_VERSION.key_for(identifier)
        self._version_provider = version_provider or settings_version_provider(settings)
        self._lock = threading.RLock()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, store: ReviewStateStore | None = None
    ) -> "AppStoreReviewManager":
        settings = settings or get_settings()
        return cls(
            minimum_worthy_action_count=settings.minimum_worthy_action_count,
            store=store if store is not None else default_sql_store(settings.suite_name),
            bundle_identifier=settings.bundle_identifier,
            version_provider=settings_version_provider(settings),
        )

    def request_review_if_appropriate(self, request_review: ReviewTrigger) -> None:
        """Request a review if conditions are met, otherwise count the action."""
        try:
            with self._lock:
                if self._should_request_review():
                    self._reset_counters()
                    logger.info("review_requested", flow=ReviewFlow.WORTHY_ACTION.value)
                    metrics.record_review_request(ReviewFlow.WORTHY_ACTION.value)
                    self._invoke(request_review)
                else:
                    self._increment_counter()
        except StateStoreError as e:
            self._log_unavailable(e)

    def should_request_review(self) -> bool:
        """
        Return True once the count is reached on a version not yet prompted for.

        Returns False when the state cannot be read.
        """
        try:
            with self._lock:
                return self._should_request_review()
        except StateStoreError as e:
            self._log_unavailable(e)
            return False

    def current_worthy_action_count(self) -> int:
        try:
            return self._store.get_integer(self._count_key)
        except StateStoreError as e:
            self._log_unavailable(e)
            return 0

    def last_review_request_app_version(self) -> str | None:
        try:
            return self._store.get_string(self._version_key)
        except StateStoreError as e:
            self._log_unavailable(e)
            return None

    def _should_request_review(self) -> bool:
        current_count = self._store.get_integer(self._count_key)
        if current_count < self.minimum_worthy_action_count:
            return False
        return self._store.get_string(self._version_key) != current_app_version(
            self._version_provider
        )

    def _increment_counter(self) -> None:
        count = self._store.get_integer(self._count_key) + 1
        self._store.set_integer(self._count_key, count)
        logger.debug("worthy_action_recorded", count=count)

    def _reset_counters(self) -> None:
        """Zero the count and remember the version that was prompted for."""
        self._store.set_integer(self._count_key, 0)
        self._store.set_string(self._version_key, current_app_version(self._version_provider))

    @staticmethod
    def _log_unavailable(error: StateStoreError) -> None:
        logger.warning(
            "review_state_unavailable",
            flow=ReviewFlow.WORTHY_ACTION.value,
            key=error.key,
            error=error.message,
        )

    @staticmethod
    def _invoke(request_review: ReviewTrigger) -> None:
        try:
            request_review()
        except Exception:
            logger.exception("review_trigger_failed", flow=ReviewFlow.WORTHY_ACTION.value)
