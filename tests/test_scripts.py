"""
Tests for the inspect_review_state script.

Uses the in-memory SQLite URL configured in conftest.
"""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from review_kit.exceptions import StateStoreError
from review_kit.stores.memory import InMemoryStateStore
from review_kit.stores.sql import default_sql_store

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "inspect_review_state.py"


@pytest.fixture
def inspect_script(monkeypatch):
    """Load the script as a module with its logger replaced by a mock."""
    spec = importlib.util.spec_from_file_location("inspect_review_state", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "logger", MagicMock())
    return module


class TestInspectReviewState:
    """Tests for the inspect script entry point."""

    def test_reports_persisted_state(self, inspect_script):
        suite = "com.example.tests.inspect"
        default_sql_store(suite).set_integer("reviewCountThreshold", 3)

        assert inspect_script.main(["--suite", suite]) == 0

        inspect_script.logger.info.assert_called_once()
        event, kwargs = inspect_script.logger.info.call_args
        assert event == ("review_state",)
        assert kwargs["suite"] == suite
        assert kwargs["interaction_count"] == 3
        assert kwargs["install_date"] is None
        assert kwargs["gate_passes"] is True

    def test_suite_defaults_to_settings(self, inspect_script):
        args = inspect_script.parse_args([])
        assert args.suite == inspect_script.get_settings().suite_name

    def test_unreadable_state_still_exits_cleanly(self, inspect_script, monkeypatch):
        """A failing store is reported as empty state rather than a traceback."""
        store = MagicMock(spec=InMemoryStateStore)
        store.get_date.side_effect = StateStoreError("appInstallDate", "disk I/O error")
        store.get_integer.side_effect = StateStoreError("reviewCountThreshold", "disk I/O error")
        store.get_string.side_effect = StateStoreError("lastReviewedVersion", "disk I/O error")
        monkeypatch.setattr(inspect_script, "default_sql_store", lambda suite: store)

        assert inspect_script.main(["--suite", "com.example.tests.broken"]) == 0

        _, kwargs = inspect_script.logger.info.call_args
        assert kwargs["interaction_count"] == 0
        assert kwargs["gate_passes"] is False
