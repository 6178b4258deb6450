"""
Library Configuration - Pydantic Settings for type-safe config.

All thresholds and storage options are strongly typed.
FAIL FAST - Invalid thresholds are rejected at startup.
"""

import sys

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUITE_NAME = "com.reviewkit.packages.appReviewKit"


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


class Settings(BaseSettings):
    """Library settings loaded from REVIEW_KIT_* environment variables."""

    # Review policy
    min_days_since_install: int = 7
    action_threshold: int = 20
    cooldown_days: int = 30

    # Legacy worthy-action manager
    minimum_worthy_action_count: int = 20

    # Persistence
    suite_name: str = DEFAULT_SUITE_NAME
    bundle_identifier: str | None = None  # e.g. "com.example.notes"
    database_url: str = "sqlite:///review_state.db"
    database_echo: bool = False

    # App version (explicit value wins over the installed distribution)
    app_version: str | None = None
    app_distribution: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or console
    service_name: str = "review-kit"

    # Metrics
    metrics_enabled: bool = True

    model_config = SettingsConfigDict(
        env_prefix="REVIEW_KIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> "Settings":
        """
        FAIL FAST: Validate policy thresholds and storage config at startup.
        """
        errors: list[str] = []

        if self.min_days_since_install < 0:
            errors.append(
                f"MIN_DAYS_SINCE_INSTALL must be >= 0, got: {self.min_days_since_install}"
            )
        if self.action_threshold < 1:
            errors.append(f"ACTION_THRESHOLD must be >= 1, got: {self.action_threshold}")
        if self.cooldown_days < 0:
            errors.append(f"COOLDOWN_DAYS must be >= 0, got: {self.cooldown_days}")
        if self.minimum_worthy_action_count < 0:
            errors.append(
                "MINIMUM_WORTHY_ACTION_COUNT must be >= 0, "
                f"got: {self.minimum_worthy_action_count}"
            )
        if not self.suite_name:
            errors.append("SUITE_NAME is required but empty")
        if not self.database_url:
            errors.append("DATABASE_URL is required but empty")
        if self.log_format not in ("json", "console"):
            errors.append(f"LOG_FORMAT must be 'json' or 'console', got: {self.log_format}")

        if errors:
            error_msg = "\n".join(
                [
                    "",
                    "=" * 60,
                    "REVIEW KIT CONFIGURATION ERROR",
                    "=" * 60,
                    *[f"  ✗ {e}" for e in errors],
                    "=" * 60,
                    "",
                ]
            )
            print(error_msg, file=sys.stderr)
            raise ConfigurationError(error_msg)

        return self


# Global settings instance - validates at import time
settings = Settings()


def get_settings() -> Settings:
    """Get library settings instance."""
    return settings
