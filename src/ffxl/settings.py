"""Centralized configuration using pydantic-settings.

Everything ffxl reads from the process environment is declared here. Fields
that accept more than one variable name list them in priority order; the
first non-empty variable wins.
"""

from enum import Enum

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_VALUES = frozenset({"development", "dev"})


class LogFormat(str, Enum):
    """Log output formats."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """ffxl settings.

    Build time (loader):
        FEATURE_FLAGS_FILE / FFXL_FILE - path to the YAML source
    Runtime (config store):
        FEATURE_FLAGS_CONFIG / FFXL_CONFIG - JSON transport string
    Both:
        FFXL_ENV / ENVIRONMENT - "development" or "dev" enables verbose logging
        FFXL_LOG_FORMAT - "console" or "json"
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    feature_flags_file: str | None = Field(
        None,
        validation_alias=AliasChoices("FEATURE_FLAGS_FILE", "FFXL_FILE"),
        description="Path to the feature flags YAML file",
    )
    feature_flags_config: str | None = Field(
        None,
        validation_alias=AliasChoices("FEATURE_FLAGS_CONFIG", "FFXL_CONFIG"),
        description="Serialized feature flags configuration",
    )
    environment: str = Field(
        "production",
        validation_alias=AliasChoices("FFXL_ENV", "ENVIRONMENT"),
        description="Deployment environment",
    )
    log_format: LogFormat = Field(
        LogFormat.CONSOLE,
        validation_alias=AliasChoices("FFXL_LOG_FORMAT"),
        description="Log renderer",
    )
    default_file_name: str = Field(
        "feature-flags.yaml",
        validation_alias=AliasChoices("FFXL_DEFAULT_FILE_NAME"),
        description="File looked up in the working directory when no path is set",
    )

    @field_validator("log_format", mode="before")
    @classmethod
    def _unknown_log_format_is_console(cls, value: Any) -> Any:
        """Unknown formats fall back to console output."""
        if not isinstance(value, str):
            return value
        value = value.strip().lower()
        if value not in {log_format.value for log_format in LogFormat}:
            return LogFormat.CONSOLE
        return value

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() in DEVELOPMENT_VALUES


def get_settings() -> Settings:
    """Read settings from the current environment.

    A new instance is built on every call so that changes to the environment
    (tests, hot reload) are picked up after the config store is cleared.
    """
    return Settings()
