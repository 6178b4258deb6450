"""
Tests for app version resolution.
"""

from importlib.metadata import version
from unittest.mock import MagicMock

from review_kit.config import Settings
from review_kit.services.app_version import (
    current_app_version,
    resolve_app_version,
    settings_version_provider,
)


class TestResolveAppVersion:
    """Tests for resolve_app_version."""

    def test_explicit_version_wins(self):
        assert resolve_app_version("3.2.1", "pytest") == "3.2.1"

    def test_reads_installed_distribution(self):
        assert resolve_app_version(None, "pytest") == version("pytest")

    def test_unknown_distribution_is_empty(self):
        assert resolve_app_version(None, "no-such-distribution-for-review-kit") == ""

    def test_nothing_configured_is_empty(self):
        assert resolve_app_version() == ""


class TestVersionProviders:
    """Tests for settings-backed and host-supplied version providers."""

    def test_settings_version_provider_uses_given_settings(self):
        provider = settings_version_provider(Settings(app_version="2.0.0"))
        assert provider() == "2.0.0"

    def test_current_app_version_calls_provider(self):
        assert current_app_version(lambda: "4.5.6") == "4.5.6"

    def test_raising_provider_is_empty(self):
        assert current_app_version(MagicMock(side_effect=RuntimeError("no bundle"))) == ""
