"""
Metrics Collection with Prometheus.

Counts review prompts and the gates that blocked them.
"""

from enum import Enum

from prometheus_client import Counter

from review_kit.config import settings


class MetricLabels(str, Enum):
    """Standard metric label names."""

    FLOW = "flow"
    REASON = "reason"


class ReviewMetrics:
    """
    Centralized metrics for review prompting.

    - Interactions registered toward the action threshold
    - Review requests issued, per flow
    - Gate rejections, per flow and failing gate
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize all Prometheus metrics."""
        self.enabled = enabled

        self.interactions_total = Counter(
            "review_kit_interactions_total",
            "Total interactions registered toward the action threshold",
        )

        self.review_requests_total = Counter(
            "review_kit_review_requests_total",
            "Total review requests issued",
            [MetricLabels.FLOW.value],
        )

        self.gate_rejections_total = Counter(
            "review_kit_gate_rejections_total",
            "Total review requests blocked by a gate",
            [MetricLabels.FLOW.value, MetricLabels.REASON.value],
        )

    def record_interaction(self) -> None:
        """Record an interaction toward the action threshold."""
        if self.enabled:
            self.interactions_total.inc()

    def record_review_request(self, flow: str) -> None:
        """Record an issued review request."""
        if self.enabled:
            self.review_requests_total.labels(flow=flow).inc()

    def record_gate_rejection(self, flow: str, reason: str) -> None:
        """Record a review request blocked by a gate."""
        if self.enabled:
            self.gate_rejections_total.labels(flow=flow, reason=reason).inc()


# Global metrics instance
metrics = ReviewMetrics(enabled=settings.metrics_enabled)
