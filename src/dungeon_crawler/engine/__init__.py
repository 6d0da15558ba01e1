"""Game engine module for the dungeon crawler.

Submodules:
    loader: Level file parsing and validation
    movement: Player movement resolution
    monsters: Monster line-of-sight attacks
    session: Per-level turn orchestration

Example:
    >>> from dungeon_crawler.engine import load_level, move_player, resolve_monster_attacks
    >>>
    >>> level = load_level("levels/level1.txt")
    >>> outcome = move_player(level.grid, level.player, "d")
    >>> caught = resolve_monster_attacks(level.grid, level.player)
"""

from __future__ import annotations

# =============================================================================
# Level Loading
# =============================================================================
from dungeon_crawler.engine.loader import (
    LevelSource,
    LoadedLevel,
    load_level,
    parse_level,
)

# =============================================================================
# Turn Resolution
# =============================================================================
from dungeon_crawler.engine.monsters import (
    AttackReport,
    MonsterStep,
    RayScan,
    advance_monsters,
    resolve_monster_attacks,
    scan_ray,
)
from dungeon_crawler.engine.movement import move_player, next_position

# =============================================================================
# Session
# =============================================================================
from dungeon_crawler.engine.session import DungeonSession, TurnResult


__all__ = [
    # Loading
    "LevelSource",
    "LoadedLevel",
    "load_level",
    "parse_level",
    # Movement
    "move_player",
    "next_position",
    # Monsters
    "RayScan",
    "MonsterStep",
    "AttackReport",
    "scan_ray",
    "advance_monsters",
    "resolve_monster_attacks",
    # Session
    "DungeonSession",
    "TurnResult",
]
