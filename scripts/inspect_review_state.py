#!/usr/bin/env python3
"""
Inspect Review State Script

Prints the persisted review bookkeeping for a suite and whether the
install-age and cooldown gates would currently pass.

Usage:
    REVIEW_KIT_DATABASE_URL=sqlite:///review_state.db python scripts/inspect_review_state.py
    python scripts/inspect_review_state.py --suite com.example.notes.reviews
"""

import argparse
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from review_kit.config import get_settings
from review_kit.observability import setup_logging
from review_kit.services.review_manager import ReviewManager
from review_kit.stores.sql import default_sql_store

logger = structlog.get_logger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Inspect persisted review state")
    parser.add_argument("--suite", default=settings.suite_name, help="Suite name to inspect")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    setup_logging()
    args = parse_args(argv)

    manager = ReviewManager.from_settings(store=default_sql_store(args.suite))
    state = manager.current_state()

    logger.info(
        "review_state",
        suite=args.suite,
        install_date=state.install_date.isoformat() if state.install_date else None,
        interaction_count=state.interaction_count,
        last_request_date=state.last_request_date.isoformat() if state.last_request_date else None,
        last_reviewed_version=state.last_reviewed_version,
        gate_passes=manager.passes_gating_checks(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
