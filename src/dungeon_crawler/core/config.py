"""Configuration management for the dungeon crawler engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from dungeon_crawler.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.levels.levels_dir)
    levels

Environment Variables:
    DUNGEON_CRAWLER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DUNGEON_CRAWLER_JSON_LOGS: Emit JSON log lines instead of console output
    DUNGEON_CRAWLER_LEVEL_LEVELS_DIR: Directory searched for bare level names
    DUNGEON_CRAWLER_LEVEL_ENCODING: Text encoding of level files
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dungeon_crawler.core.exceptions import ConfigurationError


class LevelSettings(BaseSettings):
    """Configuration for locating and reading level files.

    Attributes:
        levels_dir: Directory that bare level names are resolved against.
        encoding: Text encoding used to read level files.
        file_suffix: Suffix appended to bare level names without one.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CRAWLER_LEVEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    levels_dir: Path = Field(
        default=Path("levels"),
        description="Directory searched for level files",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding of level files",
    )
    file_suffix: str = Field(
        default=".txt",
        description="Suffix appended to bare level names",
    )

    @field_validator("file_suffix", mode="after")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        """Ensure a non-empty suffix starts with a dot.

        Args:
            value: The configured suffix.

        Returns:
            The validated suffix.

        Raises:
            ConfigurationError: If the suffix does not start with '.'.
        """
        if value and not value.startswith("."):
            raise ConfigurationError(
                f"file_suffix must start with '.', got {value!r}",
                config_key="file_suffix",
            )
        return value

    def resolve(self, name: str | Path) -> Path:
        """Resolve a level name to a path.

        Existing paths and absolute paths are returned unchanged. Anything
        else is looked up under ``levels_dir``, with ``file_suffix`` added
        when the name has no suffix of its own.

        Args:
            name: A level path or a bare level name.

        Returns:
            The path the loader should open.
        """
        path = Path(name)
        if path.is_absolute() or path.exists():
            return path
        if not path.suffix and self.file_suffix:
            path = path.with_suffix(self.file_suffix)
        return self.levels_dir / path


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines.
        levels: Level file settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Dungeon Crawler",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output",
    )

    levels: LevelSettings = Field(default_factory=LevelSettings)

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG in debug mode.

        Returns:
            Logging level name.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    This is primarily useful for testing or when environment variables
    have changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "LevelSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
