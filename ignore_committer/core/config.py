"""Configuration management using Pydantic Settings."""

from typing import ClassVar

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ignore_committer.shared.exceptions import ConfigError

# Singleton instance
_settings: "Settings | None" = None


class Settings(BaseSettings):
    """Strategy settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Author policy
    ignored_authors: str = ""  # Comma-separated list
    allow_build_if_not_excluded_author: bool = False

    # Changeset adapter used by the host harness
    scm_type: str = "git"

    # Application settings
    log_level: str = "INFO"
    app_version: str = "0.1.0"
    environment: str = "development"

    # Valid values
    VALID_LOG_LEVELS: ClassVar[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    VALID_SCM_TYPES: ClassVar[set[str]] = {"git", "svn", "static"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        v_upper = v.upper()
        if v_upper not in cls.VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {v}. Must be one of {', '.join(sorted(cls.VALID_LOG_LEVELS))}"
            )
        return v_upper

    @field_validator("scm_type")
    @classmethod
    def validate_scm_type(cls, v: str) -> str:
        """Validate the changeset adapter type."""
        v_lower = v.strip().lower()
        if v_lower not in cls.VALID_SCM_TYPES:
            raise ConfigError(
                f"Invalid SCM type: {v}. Must be one of {', '.join(sorted(cls.VALID_SCM_TYPES))}"
            )
        return v_lower


def get_settings() -> Settings:
    """Get or create the global Settings instance (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
