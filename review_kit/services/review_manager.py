"""
Review Manager - decides when to prompt users for an app-store review.

Tracks install date, user interactions and cooldown periods so a review is
never requested too soon or too often. Nothing here raises to the caller:
state store failures and trigger errors are logged and the call does nothing
further.
"""

import threading
from collections.abc import Callable
from datetime import datetime

from structlog import get_logger

from review_kit.config import Settings, get_settings
from review_kit.exceptions import StateStoreError
from review_kit.models.domain import (
    Clock,
    GateResult,
    ReviewFlow,
    ReviewPolicy,
    ReviewState,
    ReviewTrigger,
    VersionProvider,
)
from review_kit.observability.metrics import metrics
from review_kit.services.app_version import current_app_version, settings_version_provider
from review_kit.services.calendar import add_calendar_days, utc_now
from review_kit.stores.base import ReviewDefaultsKey, ReviewStateStore, as_utc
from review_kit.stores.sql import default_sql_store

logger = get_logger(__name__)

COUNT_KEY = ReviewDefaultsKey.REVIEW_COUNT_THRESHOLD.value
INSTALL_DATE_KEY = ReviewDefaultsKey.APP_INSTALL_DATE.value
LAST_REQUEST_KEY = ReviewDefaultsKey.LAST_REVIEW_REQUEST_DATE.value
LAST_VERSION_KEY = ReviewDefaultsKey.LAST_REVIEWED_VERSION.value

EMPTY_STATE = ReviewState(
    install_date=None,
    interaction_count=0,
    last_request_date=None,
    last_reviewed_version=None,
)


class ReviewManager:
    """
    Policy engine for review prompts.

    Three entry points share one gate (install age and cooldown):
    - register_interaction: counts interactions up to action_threshold
    - register_significant_event: bypasses the counter
    - register_new_version_event: once per app version

    Usage:
        manager = ReviewManager(min_days_since_install=3, store=InMemoryStateStore())
        manager.register_significant_event(show_review_prompt)

    Calls on one instance are serialized with a re-entrant lock.
    """

    def __init__(
        self,
        min_days_since_install: int = 7,
        action_threshold: int = 20,
        cooldown_days: int = 30,
        store: ReviewStateStore | None = None,
        version_provider: VersionProvider | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Create a review manager.

        Args:
            min_days_since_install: Minimum days after install before prompting
            action_threshold: Number of interactions required before prompting
            cooldown_days: Minimum days between review prompts
            store: State store (defaults to the configured SQL store)
            version_provider: Returns the running app version
            clock: Returns the current timezone-aware time
        """
        self.policy = ReviewPolicy(
            min_days_since_install=min_days_since_install,
            action_threshold=action_threshold,
            cooldown_days=cooldown_days,
        )
        settings = get_settings()
        self._store = store if store is not None else default_sql_store(settings.suite_name)
        self._version_provider = version_provider or settings_version_provider(settings)
        self._clock = clock or utc_now
        self._lock = threading.RLock()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, store: ReviewStateStore | None = None
    ) -> "ReviewManager":
        """Build a manager from configured thresholds and storage."""
        settings = settings or get_settings()
        return cls(
            min_days_since_install=settings.min_days_since_install,
            action_threshold=settings.action_threshold,
            cooldown_days=settings.cooldown_days,
            store=store if store is not None else default_sql_store(settings.suite_name),
            version_provider=settings_version_provider(settings),
        )

    @property
    def store(self) -> ReviewStateStore:
        return self._store

    # ========================================================================
    # Entry points
    # ========================================================================

    def register_interaction(self, request_review: ReviewTrigger) -> None:
        """
        Register a user interaction that may count towards a review prompt.

        Increments the interaction counter and, once the threshold is reached,
        checks install age and cooldown before requesting a review. The counter
        is not rolled back when a gate fails.
        """
        self._run(ReviewFlow.INTERACTION, self._register_interaction, request_review)

    def register_significant_event(self, request_review: ReviewTrigger) -> None:
        """
        Request a review after a significant user event, bypassing the counter.

        Use for meaningful moments (finishing a project, exporting a file).
        Install age and cooldown are still respected.
        """
        self._run(ReviewFlow.SIGNIFICANT_EVENT, self._register_significant_event, request_review)

    def register_new_version_event(self, request_review: ReviewTrigger) -> None:
        """
        Request a review if the app version differs from the last reviewed one.

        Install age and cooldown are still respected.
        """
        self._run(ReviewFlow.NEW_VERSION, self._register_new_version_event, request_review)

    def passes_gating_checks(self) -> bool:
        """
        Return True if both the install-age and cooldown checks pass.

        Returns False when the state cannot be read.
        """
        try:
            with self._lock:
                return self._evaluate_gate(self._now()).passed
        except StateStoreError as e:
            logger.warning("review_state_unavailable", key=e.key, error=e.message)
            return False
        except Exception:
            logger.exception("review_gate_check_failed")
            return False

    def current_state(self) -> ReviewState:
        """Snapshot of the persisted review bookkeeping (empty when unreadable)."""
        try:
            with self._lock:
                return ReviewState(
                    install_date=self._store.get_date(INSTALL_DATE_KEY),
                    interaction_count=self._store.get_integer(COUNT_KEY),
                    last_request_date=self._store.get_date(LAST_REQUEST_KEY),
                    last_reviewed_version=self._store.get_string(LAST_VERSION_KEY),
                )
        except StateStoreError as e:
            logger.warning("review_state_unavailable", key=e.key, error=e.message)
            return EMPTY_STATE

    # ========================================================================
    # Flows
    # ========================================================================

    def _run(
        self,
        flow: ReviewFlow,
        operation: Callable[[datetime, ReviewTrigger], None],
        request_review: ReviewTrigger,
    ) -> None:
        try:
            with self._lock:
                operation(self._now(), request_review)
        except StateStoreError as e:
            logger.warning(
                "review_state_unavailable", flow=flow.value, key=e.key, error=e.message
            )
        except Exception:
            logger.exception("review_flow_failed", flow=flow.value)

    def _now(self) -> datetime:
        # Naive clock values are taken as UTC
        return as_utc(self._clock())

    def _register_interaction(self, now: datetime, request_review: ReviewTrigger) -> None:
        self._record_install_date_if_needed(now)
        new_count = self._store.get_integer(COUNT_KEY) + 1
        self._store.set_integer(COUNT_KEY, new_count)
        metrics.record_interaction()

        if new_count < self.policy.action_threshold:
            logger.debug(
                "review_threshold_not_reached",
                count=new_count,
                threshold=self.policy.action_threshold,
            )
            return

        if not self._check_gate(ReviewFlow.INTERACTION, now):
            return

        self._store.set_integer(COUNT_KEY, 0)
        self._record_and_request(ReviewFlow.INTERACTION, now, request_review)

    def _register_significant_event(self, now: datetime, request_review: ReviewTrigger) -> None:
        self._record_install_date_if_needed(now)
        if not self._check_gate(ReviewFlow.SIGNIFICANT_EVENT, now):
            return
        self._record_and_request(ReviewFlow.SIGNIFICANT_EVENT, now, request_review)

    def _register_new_version_event(self, now: datetime, request_review: ReviewTrigger) -> None:
        self._record_install_date_if_needed(now)
        current_version = current_app_version(self._version_provider)
        last_version = self._store.get_string(LAST_VERSION_KEY)

        if current_version == last_version:
            logger.debug("review_version_already_prompted", version=current_version)
            return
        if not self._check_gate(ReviewFlow.NEW_VERSION, now):
            return

        self._store.set_string(LAST_VERSION_KEY, current_version)
        self._record_and_request(ReviewFlow.NEW_VERSION, now, request_review)

    # ========================================================================
    # Gate and bookkeeping
    # ========================================================================

    def _record_install_date_if_needed(self, now: datetime) -> None:
        if self._store.get_date(INSTALL_DATE_KEY) is None:
            self._store.set_date(INSTALL_DATE_KEY, now)
            logger.info("app_install_date_recorded", install_date=now.isoformat())

    def _evaluate_gate(self, now: datetime) -> GateResult:
        install_date = self._store.get_date(INSTALL_DATE_KEY)
        if install_date is not None:
            if now < add_calendar_days(install_date, self.policy.min_days_since_install):
                return GateResult.INSTALL_AGE

        last_request = self._store.get_date(LAST_REQUEST_KEY)
        if last_request is not None:
            if now < add_calendar_days(last_request, self.policy.cooldown_days):
                return GateResult.COOLDOWN

        return GateResult.PASSED

    def _check_gate(self, flow: ReviewFlow, now: datetime) -> bool:
        result = self._evaluate_gate(now)
        if not result.passed:
            logger.info("review_gate_failed", flow=flow.value, reason=result.value)
            metrics.record_gate_rejection(flow.value, result.value)
        return result.passed

    def _record_and_request(
        self, flow: ReviewFlow, now: datetime, request_review: ReviewTrigger
    ) -> None:
        # Recorded before the prompt so a crash while it is on screen cannot re-prompt
        self._store.set_date(LAST_REQUEST_KEY, now)
        logger.info("review_requested", flow=flow.value, requested_at=now.isoformat())
        metrics.record_review_request(flow.value)
        try:
            request_review()
        except Exception:
            logger.exception("review_trigger_failed", flow=flow.value)


# Process-wide default instance (created on first use)
_default_manager: ReviewManager | None = None
_default_manager_lock = threading.Lock()


def get_review_manager() -> ReviewManager:
    """Get the default review manager built from settings."""
    global _default_manager
    with _default_manager_lock:
        if _default_manager is None:
            _default_manager = ReviewManager.from_settings()
        return _default_manager
