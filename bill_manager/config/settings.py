"""
Configuration Management for Bill Manager

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Nothing here changes how the menu behaves. Settings only
control diagnostics (logging, audit trail) and how amounts are displayed,
so the program runs the same with no configuration at all.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from BILL_MANAGER_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BILL_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Diagnostics
    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics written to stderr"
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of plain console text"
    )
    audit_enabled: bool = Field(
        default=True,
        description="Keep an in-memory audit trail of the session"
    )

    # Display
    currency_symbol: str = Field(
        default="",
        max_length=5,
        description="Prefix shown before amounts in bill listings"
    )
    app_title: str = Field(
        default="Billing Application",
        min_length=1,
        description="Title shown in the menu banner"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard logging level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return AppSettings()
