"""
Configuration loaded from environment variables
Every setting can be overridden with a PASSFORGE_-prefixed variable or .env entry
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the presentation adapters"""

    model_config = SettingsConfigDict(
        env_prefix="PASSFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generation defaults (clamped by the core regardless)
    DEFAULT_LENGTH: int = 16
    DEFAULT_WORD_COUNT: int = 6
    DEFAULT_SEPARATOR: str = "-"

    # Plain-text word list replacing the bundled BIP39 list
    WORDLIST_PATH: Optional[Path] = None

    LOG_LEVEL: str = "WARNING"


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Reject settings the adapters cannot work with."""
    errors = []

    for field_name in ("DEFAULT_LENGTH", "DEFAULT_WORD_COUNT"):
        if getattr(active_settings, field_name) < 1:
            errors.append(f"{field_name} must be >= 1")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid passforge configuration:\n- " + "\n- ".join(errors))


def log_level(active_settings: Settings) -> int:
    return logging.getLevelName(active_settings.LOG_LEVEL.upper())


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
