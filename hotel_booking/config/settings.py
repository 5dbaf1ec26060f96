"""Application settings and configuration management."""
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HotelSettings(BaseSettings):
    """Hotel used by the demo driver when no inventory file is configured."""

    id: str = "LUXURY-001"  # HOTEL_ID
    name: str = "Grand Luxury Hotel"
    location: str = "New York"
    star_rating: int = Field(default=5, ge=1, le=5)

    model_config = SettingsConfigDict(env_prefix="HOTEL_")


class DemoSettings(BaseSettings):
    """Demo scenario configuration."""

    inventory_file: Optional[str] = None  # JSON payload for InventoryLoader
    first_booking_offset_days: int = Field(default=7, ge=0)

    model_config = SettingsConfigDict(env_prefix="DEMO_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    hotel: HotelSettings = HotelSettings()
    demo: DemoSettings = DemoSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
