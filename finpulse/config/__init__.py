"""Configuration package."""

from finpulse.config.settings import (
    AppSettings,
    AuthSettings,
    LedgerSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "AuthSettings",
    "LedgerSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
