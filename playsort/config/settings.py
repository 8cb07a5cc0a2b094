"""Configuration management using Pydantic Settings.

This module provides type-safe configuration with automatic environment
variable loading and validation.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- PlaylistConfig: Where saved playlists go and how they are named
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("playsort.log")
    real_time_debug: bool = True


class PlaylistConfig(BaseModel):
    """Playlist saving and sorting defaults."""

    playlist_dir: Path = Path("playlists")
    file_prefix: str = "playlist"
    default_sort_mode: str = "name-asc"


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, LOG_FILE, PLAYLIST_DIR, DEFAULT_SORT_MODE
    - Nested: LOGGING__CONSOLE_LEVEL, PLAYLIST__PLAYLIST_DIR

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    playlist: PlaylistConfig = PlaylistConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Handles flat env vars (PLAYLIST_DIR) and maps them to the nested
        structure expected by the models (playlist.playlist_dir).
        """
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        # The env source only collects declared fields, so flat names are
        # read from os.environ here; explicit keyword arguments win.
        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key not in data and env_key.upper() in os.environ:
                data[env_key] = os.environ[env_key.upper()]
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        playlist_mapping = {
            "playlist_dir": "playlist_dir",
            "playlist_file_prefix": "file_prefix",
            "default_sort_mode": "default_sort_mode",
        }
        for env_key, field_key in playlist_mapping.items():
            if env_key not in data and env_key.upper() in os.environ:
                data[env_key] = os.environ[env_key.upper()]
            if env_key in data:
                transformed.setdefault("playlist", {})[field_key] = data.pop(env_key)

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                data[section] = {**existing, **values}
            else:
                data[section] = values

        return data


# Singleton instance for application use
settings = Settings()
