"""Turn orchestration for a single dungeon level.

DungeonSession owns the grid and player of one level and runs the
per-turn sequence a driver needs: move the player, then let the monsters
act unless the move left the level.

Example:
    >>> with DungeonSession.open("level1.txt") as session:
    ...     result = session.take_turn(Direction.RIGHT)
    ...     if result.status.is_terminal:
    ...         print(result.status)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dungeon_crawler.core.exceptions import InvalidGameStateError
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.engine.loader import LevelSource, load_level
from dungeon_crawler.engine.monsters import AttackReport, advance_monsters
from dungeon_crawler.engine.movement import move_player
from dungeon_crawler.models.enums import Direction, GameStatus, MoveOutcome
from dungeon_crawler.models.grid import Grid, resize_grid
from dungeon_crawler.models.player import Player


if TYPE_CHECKING:
    from types import TracebackType

    from dungeon_crawler.core.config import LevelSettings

logger = get_logger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Result of one turn.

    Attributes:
        turn: Turn number, starting at 1.
        outcome: Outcome of the player's move.
        attacks: Monster advances made after the move.
        status: Session status after the turn.
    """

    turn: int
    outcome: MoveOutcome
    attacks: AttackReport
    status: GameStatus

    @property
    def caught(self) -> bool:
        """Whether a monster reached the player this turn."""
        return self.attacks.caught


class DungeonSession:
    """Owner of one level's grid and player for the length of play."""

    def __init__(self, grid: Grid, player: Player, *, source_file: str | None = None) -> None:
        """Take ownership of a loaded level.

        Args:
            grid: The level grid.
            player: The player placed on the grid.
            source_file: Where the level came from, for logs.
        """
        self._grid = grid
        self._player = player
        self._source_file = source_file
        self._turn = 0
        self._status = GameStatus.IN_PROGRESS
        self._closed = False

    @classmethod
    def open(
        cls,
        source: LevelSource,
        *,
        settings: LevelSettings | None = None,
    ) -> DungeonSession:
        """Load a level and start a session on it.

        Raises:
            LevelLoadError: If the level is invalid.
        """
        level = load_level(source, settings=settings)
        return cls(level.grid, level.player, source_file=level.source_file)

    @property
    def grid(self) -> Grid:
        """The current grid (replaced by :meth:`grow`)."""
        self._require_open()
        return self._grid

    @property
    def player(self) -> Player:
        """The player."""
        return self._player

    @property
    def turn(self) -> int:
        """Number of turns taken."""
        return self._turn

    @property
    def status(self) -> GameStatus:
        """Status after the last turn."""
        return self._status

    @property
    def is_closed(self) -> bool:
        """Whether the session has been closed."""
        return self._closed

    def take_turn(self, direction: Direction | str | None) -> TurnResult:
        """Move the player, then resolve monster attacks.

        Monsters do not act on a turn where the player escaped through the
        exit or walked through a door.

        Args:
            direction: A Direction, direction name, or key code.

        Returns:
            The result of the turn.

        Raises:
            InvalidGameStateError: If the session is closed or already over.
        """
        self._require_open()
        if self._status.is_terminal:
            raise InvalidGameStateError(
                "Level is already over",
                current_state=self._status.value,
                expected_states=[GameStatus.IN_PROGRESS.value],
            )

        self._turn += 1
        outcome = move_player(self._grid, self._player, direction)

        if outcome.level_complete:
            attacks, status = AttackReport(), GameStatus.ESCAPED
        elif outcome.level_transition:
            attacks, status = AttackReport(), GameStatus.LEFT_LEVEL
        else:
            attacks = advance_monsters(self._grid, self._player)
            status = GameStatus.CAUGHT if attacks.caught else GameStatus.IN_PROGRESS

        self._status = status
        if status.is_terminal:
            logger.info(
                "Level over",
                status=status.value,
                turn=self._turn,
                treasure=self._player.treasure,
                source_file=self._source_file,
            )
        return TurnResult(turn=self._turn, outcome=outcome, attacks=attacks, status=status)

    def grow(self) -> Grid:
        """Double the grid, keeping the player where they are.

        Returns:
            The new grid.

        Raises:
            GridResizeError: If the grid cannot grow; the session is unchanged.
            InvalidGameStateError: If the session is closed.
        """
        self._require_open()
        self._grid = resize_grid(self._grid)
        return self._grid

    def close(self) -> None:
        """Release the grid. Safe to call more than once."""
        if self._closed:
            return
        self._grid.release()
        self._closed = True
        logger.debug("Session closed", turn=self._turn, source_file=self._source_file)

    def __enter__(self) -> DungeonSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> None:
        if self._closed:
            raise InvalidGameStateError(
                "Session has been closed",
                current_state="closed",
                expected_states=["open"],
            )


__all__ = [
    "TurnResult",
    "DungeonSession",
]
