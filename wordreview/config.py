"""
Configuration settings for the wordreview study service.

Uses Pydantic Settings for environment variable management with .env file support.
The pure engine functions never read these; only StudyService falls back to them.
"""
from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORDREVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Sessions
    # ========================================
    default_review_limit: int = Field(
        default=10,
        ge=0,
        description="Words returned by a review session when no count is given",
    )
    default_session_size: int = Field(
        default=20,
        ge=0,
        description="Words drawn for random and mixed sessions",
    )
    new_word_max_reviews: int = Field(
        default=1,
        ge=0,
        description="Highest review_count still counted as a new word in mixed sessions",
    )
    difficult_max_rate: int = Field(
        default=2,
        ge=0,
        le=5,
        description="Mastery rate at or below which a reviewed word counts as difficult",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for session sampling (None for system entropy)",
    )

    # ========================================
    # Dashboard
    # ========================================
    daily_goal: int = Field(
        default=20,
        ge=0,
        description="Target words reviewed per day",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Reset loguru sinks according to settings."""
    settings = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level=settings.log_level,
            rotation="10 MB",
            retention=5,
        )
