"""
Application Configuration

This module provides centralized configuration management using Pydantic Settings.
Configuration can be loaded from environment variables or .env files.
"""

from typing import Optional, List
from pathlib import Path
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


class RadioSettings(BaseSettings):
    """Radio executable configuration"""
    backend: str = Field(default="executable", description="Radio backend: executable, mock")
    executable: str = Field(
        default="/usr/local/bin/piradio",
        description="Path to the radio command-line program"
    )
    tune_timeout: float = Field(default=10.0, gt=0, description="Tune call timeout (seconds)")
    status_timeout: float = Field(default=5.0, gt=0, description="Status call timeout (seconds)")
    strict: bool = Field(
        default=False,
        description="Answer 502 when the status call cannot run instead of an empty body"
    )

    model_config = SettingsConfigDict(env_prefix="RADIO_")

    @field_validator('backend')
    @classmethod
    def normalize_backend(cls, v):
        return v.strip().lower()


class APISettings(BaseSettings):
    """API server configuration"""
    host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=8000, description="API port")
    reload: bool = Field(default=False, description="Auto-reload on changes")
    workers: int = Field(default=1, description="Number of workers")
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(env_prefix="API_")

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        description="Log format"
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    rotation: str = Field(default="10 MB", description="Log file rotation threshold")
    retention: str = Field(default="7 days", description="How long rotated logs are kept")

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator('level')
    @classmethod
    def normalize_level(cls, v):
        return v.strip().upper()


class Settings(BaseSettings):
    """Main application settings"""

    # Application info
    app_name: str = Field(default="Radio Tuner", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Sub-settings
    radio: RadioSettings = Field(default_factory=RadioSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings instance (cached)
    """
    return Settings()


# Convenience access to settings
settings = get_settings()
