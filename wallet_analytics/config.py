"""
Wallet Analytics Configuration
==============================
Environment-aware settings using pydantic-settings.
Loads from environment variables or .env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment: 'dev' routes all tables to dev schema, 'prod' uses defined schemas
    environment: str = "dev"

    # Wallet activity API
    activity_api_url: str = ""
    activity_api_key: str = ""

    # Supabase
    supabase_url: str = ""
    supabase_service_key: str = ""

    # Pipeline settings
    batch_size: int = 500
    page_size: int = 100
    max_retries: int = 3

    # Wallets pulled by the extract flow
    tracked_wallets: list[str] = []

    # Risk scoring
    volume_threshold: float = Field(default=1_000_000, ge=0)  # USD
    frequency_threshold: int = Field(default=100, ge=0)  # transactions per window
    rapid_fire_ms: int = Field(default=1000, ge=0)
    round_number_ratio: float = Field(default=0.8, ge=0, le=1)
    risk_window_hours: int = Field(default=1, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
