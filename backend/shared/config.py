"""
Centralized configuration for the RideChat core.

All settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


# Codes of every passenger quick reply (see modules.templates.models.QuickReply)
ALL_QUICK_REPLY_CODES = [0, 1, 2, 3, 4]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RideChat Core"
    app_version: str = "0.1.0"

    # Identity registry
    admin_handle: str = "admin"

    # Messages
    message_expiry_threshold_ms: int = 7 * 24 * 60 * 60 * 1000  # 7 days

    # Threads
    enforce_unique_ride_threads: bool = False

    # Quick replies enabled for passengers without a stored allow-list
    default_enabled_replies: list[int] = ALL_QUICK_REPLY_CODES

    # Feature Flags
    enable_event_publishing: bool = True


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
