"""
Centralized configuration for CalendarCore.

Uses Pydantic BaseSettings for environment variable integration
and validation. All configurable values should be defined here.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (CALENDARCORE_*)
3. .env file
4. Default values

Example:
    from calendarcore.config import get_config

    config = get_config()
    print(config.time_format)  # From CALENDARCORE_TIME_FORMAT or default

    # Override at runtime
    config = get_config(default_descending=True)
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalendarCoreConfig(BaseSettings):
    """
    Central configuration for CalendarCore.

    All settings can be overridden via environment variables
    prefixed with CALENDARCORE_.

    Example:
        export CALENDARCORE_LOG_LEVEL=debug
        export CALENDARCORE_DEFAULT_DESCENDING=true
    """

    model_config = SettingsConfigDict(
        env_prefix="CALENDARCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        description="Logging level for CalendarCore",
    )

    # Ordering
    default_descending: bool = Field(
        default=False,
        description="Sort agendas newest-first when no direction is given",
    )

    # Agenda rendering
    time_format: str = Field(
        default="%H:%M",
        description="strftime format for start/end times in agenda rows",
    )
    full_day_label: str = Field(
        default="All Day",
        description="Time label shown for full-day events",
    )
    not_shared_label: str = Field(
        default="Not shared",
        description="Title shown for events whose visibility is METADATA",
    )

    # CLI output
    output_format: Literal["yaml", "json"] = Field(
        default="yaml",
        description="Default output format for `calendarcore sort`",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept upper-case level names (DEBUG, INFO, ...)."""
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Reject formats without any strftime directive."""
        if "%" not in v:
            raise ValueError(f"time_format must contain a strftime directive: {v!r}")
        return v


# Global singleton
_config: Optional[CalendarCoreConfig] = None


def get_config(**overrides) -> CalendarCoreConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.

    Args:
        **overrides: Override any config values

    Returns:
        CalendarCoreConfig instance
    """
    global _config

    if overrides or _config is None:
        _config = CalendarCoreConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
