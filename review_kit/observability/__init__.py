"""
Observability module - Logging and Metrics.
"""

from review_kit.observability.logging import get_logger, log_context, setup_logging
from review_kit.observability.metrics import metrics

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "metrics",
]
