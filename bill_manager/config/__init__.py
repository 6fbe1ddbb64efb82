"""Configuration package."""

from bill_manager.config.settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
]
