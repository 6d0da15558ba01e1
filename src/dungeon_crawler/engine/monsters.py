"""Monster line-of-sight attacks.

Each turn the four cardinal rays leaving the player's cell are scanned in
the order down, up, right, left. Only a PILLAR or the grid edge ends line
of sight; open floor, items, doors and exits are all seen across. The first
MONSTER seen steps one cell toward the player and the ray is done; monsters
further out wait for a later turn. A monster stepping onto an item, door or
exit overwrites it, and the cell it left becomes OPEN.

A monster whose step lands on the player's cell has caught the player.
"""

from __future__ import annotations

from dataclasses import dataclass

from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import RAY_ORDER, Direction, Tile
from dungeon_crawler.models.grid import Grid, Position
from dungeon_crawler.models.player import Player


logger = get_logger(__name__)


@dataclass(frozen=True)
class RayScan:
    """What the player can see along one ray.

    Attributes:
        direction: Direction of the ray from the player.
        monster: Position of the nearest visible monster, if any.
        blocked_by: Position of the pillar that ended line of sight, or None
            when the ray ran to the grid edge or stopped at a monster.
    """

    direction: Direction
    monster: Position | None = None
    blocked_by: Position | None = None


@dataclass(frozen=True)
class MonsterStep:
    """A single monster advance.

    Attributes:
        direction: Ray the monster was seen on.
        origin: Cell the monster left.
        destination: Cell the monster entered.
        contact: Whether the destination was the player's cell.
    """

    direction: Direction
    origin: Position
    destination: Position
    contact: bool


@dataclass(frozen=True)
class AttackReport:
    """Every monster advance made during one turn."""

    steps: tuple[MonsterStep, ...] = ()

    @property
    def caught(self) -> bool:
        """Whether any monster reached the player."""
        return any(step.contact for step in self.steps)

    @property
    def monsters_moved(self) -> int:
        """Number of monsters that advanced."""
        return len(self.steps)


def scan_ray(grid: Grid, player: Player, direction: Direction) -> RayScan:
    """Look outward from the player along one ray without changing anything.

    Args:
        grid: The level grid.
        player: The player whose cell the ray starts from.
        direction: Direction to look.

    Returns:
        The nearest visible monster or the pillar that blocks sight.
    """
    d_row, d_col = direction.delta
    row, col = player.row + d_row, player.col + d_col
    while grid.in_bounds(row, col):
        tile = grid[row, col]
        if tile is Tile.MONSTER:
            return RayScan(direction=direction, monster=(row, col))
        if tile is Tile.PILLAR:
            return RayScan(direction=direction, blocked_by=(row, col))
        row, col = row + d_row, col + d_col
    return RayScan(direction=direction)


def advance_monsters(grid: Grid, player: Player) -> AttackReport:
    """Move the nearest visible monster on each ray one step toward the player.

    Args:
        grid: The level grid, mutated in place.
        player: The player being hunted.

    Returns:
        A report of every monster that moved.
    """
    steps: list[MonsterStep] = []
    for direction in RAY_ORDER:
        scan = scan_ray(grid, player, direction)
        if scan.monster is None:
            continue

        d_row, d_col = direction.delta
        origin = scan.monster
        destination = (origin[0] - d_row, origin[1] - d_col)
        grid[origin] = Tile.OPEN
        grid[destination] = Tile.MONSTER
        steps.append(
            MonsterStep(
                direction=direction,
                origin=origin,
                destination=destination,
                contact=destination == player.position,
            )
        )

    report = AttackReport(steps=tuple(steps))
    if report.caught:
        logger.info("Player caught", row=player.row, col=player.col)
    elif steps:
        logger.debug("Monsters advanced", count=report.monsters_moved)
    return report


def resolve_monster_attacks(grid: Grid, player: Player) -> bool:
    """Advance monsters for one turn and report whether the player was reached.

    Args:
        grid: The level grid, mutated in place.
        player: The player being hunted.

    Returns:
        True if at least one monster stepped onto the player's cell.
    """
    return advance_monsters(grid, player).caught


__all__ = [
    "RayScan",
    "MonsterStep",
    "AttackReport",
    "scan_ray",
    "advance_monsters",
    "resolve_monster_attacks",
]
