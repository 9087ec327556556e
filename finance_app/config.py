"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class FinanceAppConfig(BaseSettings):
    """Finance app configuration"""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_APP_",
        env_file=".env",
        case_sensitive=False
    )

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    # Demo account
    currency: str = "USD"
    account_number: str = "SA-1001"
    opening_balance: str = "1000.00"

    # Whether rejected transactions still land in the ledger
    ledger_policy: str = "record_all"  # record_all or accepted_only

    # Wait for Enter before exiting
    pause_on_exit: bool = False


# Global configuration instance, loaded on first use
config: Optional[FinanceAppConfig] = None


def get_config() -> FinanceAppConfig:
    """Get global configuration instance"""
    global config
    if config is None:
        config = FinanceAppConfig()
    return config


def reload_config() -> FinanceAppConfig:
    """Reload configuration from environment"""
    global config
    config = FinanceAppConfig()
    return config
