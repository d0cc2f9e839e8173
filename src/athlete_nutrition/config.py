"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ATHLETE_NUTRITION_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Tunable limits loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    default_max_results: int = 20
    min_weight_kg: float = 30.0
    max_weight_kg: float = 300.0
    min_height_cm: float = 100.0
    max_height_cm: float = 250.0
    min_calories: float = 1200.0

    model_config = SettingsConfigDict(
        env_prefix="ATHLETE_NUTRITION_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> int:
    """Parse a log level name from env, defaulting to INFO."""
    if raw is None:
        return logging.INFO
    cleaned = raw.strip().upper()
    if cleaned.isdigit():
        return int(cleaned)
    level = logging.getLevelName(cleaned)
    if isinstance(level, int):
        return level
    return logging.INFO
