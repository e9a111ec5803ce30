"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "seatsniper"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api"

    # Alerting
    top_picks_count: int = 5
    alert_score_threshold: int = 70

    # Marketplace rate limits
    stubhub_requests_per_minute: int = 10
    ticketmaster_requests_per_day: int = 5000
    seatgeek_requests_per_minute: int = 60
    vividseats_requests_per_minute: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
