"""
Configuration Management for FinPulse

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here, and every value has
a default. The dashboard runs with no .env file at all; the defaults are the
fixed login credentials and starting savings the app has always used.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from finpulse.models.expense import ExpenseCategory


class AuthSettings(BaseSettings):
    """Login gate configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINPULSE_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    username: str = Field(
        default="admin",
        description="The only accepted username (case-sensitive)"
    )
    password: str = Field(
        default="admin",
        description="The only accepted password (case-sensitive)"
    )
    error_message: str = Field(
        default="Invalid Username or Password!",
        min_length=1,
        description="Message shown after a failed login"
    )


class LedgerSettings(BaseSettings):
    """Expense ledger configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINPULSE_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    initial_savings: Decimal = Field(
        default=Decimal("500000"),
        ge=0,
        description="Savings balance a new ledger starts with"
    )
    currency_symbol: str = Field(
        default="₹",
        min_length=1,
        max_length=5,
        description="Glyph prefixed to every displayed amount"
    )
    default_category: ExpenseCategory = Field(
        default=ExpenseCategory.FOOD,
        description="Category preselected in the entry form"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for local logs"
    )

    # Display
    app_title: str = Field(
        default="FinPulse",
        description="Name shown in page titles"
    )
    welcome_name: str = Field(
        default="Samyak & Ayushi",
        description="Name greeted on the dashboard"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def auth(self) -> AuthSettings:
        return AuthSettings()

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    {setting_name}_error entry for each failure.
    """
    results = {}

    settings = get_settings()

    for name in ("auth", "ledger", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
