"""
Runtime configuration.

Values come from ``FOODIE_*`` environment variables (or a ``.env`` file)
and fall back to the defaults below. Command line options override them
through :meth:`Settings.model_copy`.

Usage:
    from foodie.core.config import get_settings

    settings = get_settings()
    index = HashIndex(settings.hash_bucket_count)
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the catalog, hash index and console shell.

    Attributes:
        hash_bucket_count: Number of buckets in the item hash index
        auto_resize: Grow the hash index when the load factor is exceeded
        max_load_factor: Load factor that triggers a resize
        currency: Label printed in front of prices
        log_level: Root log level used by the shell
        log_file: Optional file that receives log records
        clear_screen: Clear the terminal between shell commands
    """

    model_config = SettingsConfigDict(
        env_prefix="FOODIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hash_bucket_count: int = Field(default=47, ge=1)
    auto_resize: bool = False
    max_load_factor: float = Field(default=0.75, gt=0)
    currency: str = "RM"
    log_level: str = "ERROR"
    log_file: Optional[str] = None
    clear_screen: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
