"""Tracker client configuration.

Settings come from the environment (and an optional .env file):

    TRACKER_API_URL=http://localhost:5000
    TRACKER_REQUEST_TIMEOUT=10
    TRACKER_NORMALIZE_EMPTY_PROJECTS=false
    LOG_FORMAT=console
    LOG_LEVEL=WARNING
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tracker client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_url: str = Field(
        default="http://localhost:5000",
        alias="TRACKER_API_URL",
        description="Tracker backend base URL (without the /api prefix)",
        examples=["http://localhost:5000"],
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        alias="TRACKER_REQUEST_TIMEOUT",
        description="Per-request timeout in seconds",
    )
    normalize_empty_projects: bool = Field(
        default=False,
        alias="TRACKER_NORMALIZE_EMPTY_PROJECTS",
        description="Push progress 0 / status draft for projects without tasks",
    )

    # Logging configuration
    service_name: str = Field(
        default="tracker-client",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Strip trailing slashes; request paths already carry /api."""
        cleaned = v.strip().rstrip("/")
        if not cleaned:
            raise ValueError("TRACKER_API_URL must not be empty")
        if cleaned.endswith("/api"):
            raise ValueError("TRACKER_API_URL must not include /api")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises ValidationError on the first call if the environment is invalid.
    """
    return Settings()
