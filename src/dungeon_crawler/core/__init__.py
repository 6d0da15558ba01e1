"""Core module providing configuration, logging, constants, and exceptions.

Exports:
    Exceptions:
        DungeonCrawlerError: Base exception for all application errors.
        LevelLoadError: Malformed level input.
        GridError: Tile buffer errors (allocation, resize, bounds).

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dungeon_crawler.core.config import (
    LevelSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dungeon_crawler.core.exceptions import (
    ConfigurationError,
    DungeonCrawlerError,
    GameEngineError,
    GridAllocationError,
    GridBoundsError,
    GridError,
    GridResizeError,
    InvalidGameStateError,
    LevelLoadError,
    ValidationError,
)
from dungeon_crawler.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "DungeonCrawlerError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "GridError",
    "GridAllocationError",
    "GridResizeError",
    "GridBoundsError",
    "LevelLoadError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "LevelSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
