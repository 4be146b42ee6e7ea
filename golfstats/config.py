"""Settings for the export store and command line tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path("data/golf-tracker-export.json")


class Settings(BaseSettings):
    data_file: Path = Field(default=DEFAULT_DATA_FILE)
    trend_window: int = Field(default=5, ge=1)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GOLFSTATS_", env_file=".env", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_DATA_FILE", "Settings", "get_settings", "reset_settings_cache"]
