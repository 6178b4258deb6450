"""
Tests for domain models.
"""

import pytest

from review_kit.models.domain import GateResult, ReviewFlow, ReviewPolicy, ReviewState


class TestReviewPolicy:
    """Tests for ReviewPolicy validation."""

    def test_defaults(self):
        policy = ReviewPolicy()
        assert policy.min_days_since_install == 7
        assert policy.action_threshold == 20
        assert policy.cooldown_days == 30

    def test_zero_days_allowed(self):
        policy = ReviewPolicy(min_days_since_install=0, cooldown_days=0)
        assert policy.min_days_since_install == 0
        assert policy.cooldown_days == 0

    def test_negative_min_days_rejected(self):
        with pytest.raises(ValueError, match="min_days_since_install cannot be negative"):
            ReviewPolicy(min_days_since_install=-1)

    def test_zero_threshold_rejected(self):
        with pytest.raises(ValueError, match="action_threshold must be at least 1"):
            ReviewPolicy(action_threshold=0)

    def test_negative_cooldown_rejected(self):
        with pytest.raises(ValueError, match="cooldown_days cannot be negative"):
            ReviewPolicy(cooldown_days=-1)

    def test_is_immutable(self):
        policy = ReviewPolicy()
        with pytest.raises(AttributeError):
            policy.cooldown_days = 1  # type: ignore[misc]


class TestReviewState:
    """Tests for ReviewState validation."""

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="Interaction count cannot be negative"):
            ReviewState(
                install_date=None,
                interaction_count=-1,
                last_request_date=None,
                last_reviewed_version=None,
            )


class TestEnums:
    """Tests for flow and gate enums."""

    def test_only_passed_passes(self):
        assert GateResult.PASSED.passed is True
        assert GateResult.INSTALL_AGE.passed is False
        assert GateResult.COOLDOWN.passed is False

    def test_flow_values(self):
        assert {flow.value for flow in ReviewFlow} == {
            "interaction",
            "significant_event",
            "new_version",
            "worthy_action",
        }
