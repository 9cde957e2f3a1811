"""Application configuration settings."""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "RSVP Reader"
    debug: bool = False

    # Reading rate (tokens per minute)
    min_rate: int = 10
    max_rate: int = 100
    default_rate: int = 50

    # Host frame loop
    frame_interval_ms: float = 16.0

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Limits
    max_upload_bytes: int = 5_000_000

    @model_validator(mode="after")
    def check_rate_bounds(self) -> "Settings":
        if self.min_rate <= 0:
            raise ValueError(f"min_rate must be positive, got {self.min_rate}")
        if self.min_rate > self.max_rate:
            raise ValueError(
                f"min_rate ({self.min_rate}) must not exceed max_rate ({self.max_rate})"
            )
        if not self.min_rate <= self.default_rate <= self.max_rate:
            raise ValueError(
                f"default_rate {self.default_rate} outside "
                f"[{self.min_rate}, {self.max_rate}]"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
