"""
App version lookup.

An explicitly configured version wins; otherwise the installed distribution's
metadata is used. Unknown versions resolve to an empty string.
"""

from importlib.metadata import PackageNotFoundError, version

from structlog import get_logger

from review_kit.config import Settings
from review_kit.models.domain import VersionProvider

logger = get_logger(__name__)


def resolve_app_version(explicit: str | None = None, distribution: str | None = None) -> str:
    """
    Get the running app's version string.

    Args:
        explicit: Version configured by the host (e.g. "2.4.1")
        distribution: Installed distribution name to read the version from

    Returns:
        Version string, or "" when unavailable
    """
    if explicit:
        return explicit
    if not distribution:
        return ""
    try:
        return version(distribution)
    except PackageNotFoundError:
        logger.warning("app_version_unavailable", distribution=distribution)
        return ""


def settings_version_provider(settings: Settings) -> VersionProvider:
    """Version provider reading the version options of the given settings."""
    return lambda: resolve_app_version(settings.app_version, settings.app_distribution)


def current_app_version(version_provider: VersionProvider) -> str:
    """
    Call a host-supplied version provider.

    A provider that raises is treated as an unknown version ("").
    """
    try:
        return version_provider()
    except Exception:
        logger.exception("app_version_provider_failed")
        return ""
