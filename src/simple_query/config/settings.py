"""
Configuration management for SimpleQuery.

This module provides environment-based configuration using Pydantic BaseSettings,
so the dialect selection, primary key convention and logging behaviour can be
tuned per deployment without code changes.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SIMPLE_QUERY_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SIMPLE_QUERY_ prefix.
    For example, SIMPLE_QUERY_OFFSET_FETCH_DRIVER=mssql selects the
    OFFSET/FETCH pagination dialect for that driver identifier.

    Fields:
    - LOG_LEVEL: Logging level (uppercase)
    - LOG_TO_FILE: Enable daily rotating file logging
    - LOG_FILE_DIR: Directory for log files
    - offset_fetch_driver: Driver identifier that selects OFFSET/FETCH pagination
    - default_primary_key: Primary key attribute used when a record declares none
    - timestamp_format: strftime format used to stamp updated_at
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level (uppercase)")
    LOG_TO_FILE: bool = Field(default=False, description="Enable file logging")
    LOG_FILE_DIR: str = Field(default="logs", description="Directory for log files")

    offset_fetch_driver: str = Field(
        default="mssql",
        description="Driver identifier selecting the OFFSET/FETCH pagination dialect",
    )
    default_primary_key: str = Field(
        default="id", description="Default primary key attribute name"
    )
    timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Format used when stamping updated_at on update",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Valid levels are: "
                + ", ".join(VALID_LOG_LEVELS)
            )
        return level

    @field_validator("offset_fetch_driver")
    @classmethod
    def normalize_driver(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def log_level_value(self) -> int:
        """Numeric stdlib logging level for LOG_LEVEL."""
        return getattr(logging, self.LOG_LEVEL, logging.INFO)

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_QUERY_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle. Tests that change the environment should call
    ``get_settings.cache_clear()`` afterwards.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
