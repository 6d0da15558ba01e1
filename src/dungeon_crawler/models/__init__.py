"""Data models for the dungeon crawler engine.

Modules:
    enums: Tile vocabulary, directions, move outcomes, game status.
    grid: The bounds-checked tile buffer and its resize operation.
    player: Player position and treasure.
"""

from __future__ import annotations

from dungeon_crawler.models.enums import (
    RAY_ORDER,
    Direction,
    GameStatus,
    MoveOutcome,
    Tile,
)
from dungeon_crawler.models.grid import Grid, Position, resize_grid
from dungeon_crawler.models.player import Player


__all__ = [
    # Enums
    "Tile",
    "Direction",
    "RAY_ORDER",
    "MoveOutcome",
    "GameStatus",
    # Grid
    "Grid",
    "Position",
    "resize_grid",
    # Player
    "Player",
]
