"""Player movement resolution.

A move is a single step along one axis. The target cell decides the
outcome; blocked or gated moves return ``MoveOutcome.STAY`` and change
nothing. Successful moves rewrite exactly two cells (old cell to OPEN,
new cell to PLAYER) together with the player's tracked position.
"""

from __future__ import annotations

from dungeon_crawler.core.constants import EXIT_TREASURE_REQUIRED
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import Direction, MoveOutcome, Tile
from dungeon_crawler.models.grid import Grid, Position
from dungeon_crawler.models.player import Player


logger = get_logger(__name__)

_ENTRY_OUTCOMES: dict[Tile, MoveOutcome] = {
    Tile.OPEN: MoveOutcome.MOVED,
    Tile.TREASURE: MoveOutcome.TREASURE,
    Tile.AMULET: MoveOutcome.AMULET,
    Tile.DOOR: MoveOutcome.DOOR,
    Tile.EXIT: MoveOutcome.EXIT,
}


def next_position(player: Player, direction: Direction | str | None) -> Position | None:
    """Get the cell one step from the player in the given direction.

    Args:
        player: The player.
        direction: A Direction, direction name, or key code.

    Returns:
        The (row, col) target, or None if the direction is not recognized.
        The target may lie outside the grid.
    """
    parsed = Direction.parse(direction)
    if parsed is None:
        return None
    d_row, d_col = parsed.delta
    return (player.row + d_row, player.col + d_col)


def move_player(
    grid: Grid,
    player: Player,
    direction: Direction | str | None,
) -> MoveOutcome:
    """Try to move the player one step.

    Resolution of the target cell:

    - outside the grid, PILLAR or MONSTER: STAY;
    - OPEN: MOVED;
    - TREASURE: TREASURE, and the player's treasure goes up by one;
    - AMULET: AMULET;
    - DOOR: DOOR;
    - EXIT: EXIT when the player carries treasure, otherwise STAY.

    Unrecognized directions are a no-op and return STAY.

    Args:
        grid: The level grid, mutated in place.
        player: The player, mutated in place.
        direction: A Direction, direction name, or key code.

    Returns:
        The outcome of the attempt.
    """
    target = next_position(player, direction)
    if target is None:
        logger.debug("Ignoring unrecognized direction", direction=direction)
        return MoveOutcome.STAY

    row, col = target
    if not grid.in_bounds(row, col):
        return MoveOutcome.STAY

    tile = grid[row, col]
    if tile.blocks_player:
        return MoveOutcome.STAY

    outcome = _ENTRY_OUTCOMES.get(tile, MoveOutcome.STAY)
    if outcome is MoveOutcome.EXIT and player.treasure < EXIT_TREASURE_REQUIRED:
        logger.debug("Exit is locked", treasure=player.treasure)
        return MoveOutcome.STAY
    if outcome is MoveOutcome.STAY:
        return outcome

    if outcome is MoveOutcome.TREASURE:
        player.collect_treasure()
    _relocate(grid, player, row, col)

    logger.debug("Player moved", row=row, col=col, outcome=outcome.name)
    return outcome


def _relocate(grid: Grid, player: Player, row: int, col: int) -> None:
    grid[player.row, player.col] = Tile.OPEN
    grid[row, col] = Tile.PLAYER
    player.place(row, col)


__all__ = [
    "move_player",
    "next_position",
]
