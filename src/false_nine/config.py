"""Engine configuration via pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FALSE_NINE_",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "INFO"

    # Slow-call warnings (milliseconds)
    slow_assignment_ms: float = 50.0
    slow_analysis_ms: float = 20.0

    # Conflict resolution floors (player-slot score, 0-100); scores must exceed them
    swap_min_score: int = Field(default=50, ge=0, le=100)
    reassign_min_score: int = Field(default=40, ge=0, le=100)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.getLogger("false_nine").setLevel(level)
