"""Dungeon Crawler - turn-based dungeon grid engine.

The engine owns a rectangular tile map, validates level files into it,
moves the player with item and exit rules, grows the map on request, and
advances monsters that have line of sight to the player.

Input handling and rendering are left to the caller, which drives the
engine through the functions exported here.

Example:
    >>> from dungeon_crawler import DungeonSession, Direction
    >>>
    >>> with DungeonSession.open("levels/level1.txt") as session:
    ...     result = session.take_turn(Direction.DOWN)
    ...     print(result.outcome, result.status)

Modules:
    core: Configuration, logging, constants, and exceptions.
    models: Tiles, directions, outcomes, the Grid and the Player.
    engine: Level loading, movement, monster attacks, and sessions.
"""

from __future__ import annotations

# Core
from dungeon_crawler.core.config import Settings, get_settings
from dungeon_crawler.core.exceptions import (
    DungeonCrawlerError,
    GridResizeError,
    LevelLoadError,
)
from dungeon_crawler.core.logging import configure_logging, get_logger

# Engine
from dungeon_crawler.engine import (
    DungeonSession,
    LoadedLevel,
    TurnResult,
    load_level,
    move_player,
    resolve_monster_attacks,
)

# Models
from dungeon_crawler.models import (
    Direction,
    GameStatus,
    Grid,
    MoveOutcome,
    Player,
    Tile,
    resize_grid,
)


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "DungeonCrawlerError",
    "LevelLoadError",
    "GridResizeError",
    # Models
    "Tile",
    "Direction",
    "MoveOutcome",
    "GameStatus",
    "Grid",
    "Player",
    "resize_grid",
    # Engine
    "LoadedLevel",
    "load_level",
    "move_player",
    "resolve_monster_attacks",
    "DungeonSession",
    "TurnResult",
]
