"""Configuration loading for the weddingbook address book.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Address book store configuration
    store_backend: Literal["json", "sqlite"] = Field(
        default="json",
        description="Address book store backend type",
    )
    address_book_file_path: str = Field(
        default="./data/addressbook.json",
        description="JSON data file path",
    )
    store_sqlite_path: str = Field(
        default="./data/addressbook.db",
        description="SQLite database file path",
    )
    load_sample_data: bool = Field(
        default=True,
        description="Populate a fresh address book with sample contacts",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("address_book_file_path", "store_sqlite_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure storage paths are not blank."""
        if not v or not v.strip():
            raise ValueError("storage paths must be non-empty")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
