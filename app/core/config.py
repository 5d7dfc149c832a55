"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Restaurant
    restaurant_name: str = "Restaurant"

    # Seed data (falls back to the bundled YAML when unset)
    seed_file: Optional[str] = None

    # Availability confirmation
    confirm_delay_seconds: float = 0.5
    confirm_failure_rate: float = 0.1

    # Listings
    orders_page_size: int = 5
    notification_history: int = 50

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
