"""Enumeration types for the dungeon crawler engine.

This module defines the closed tile vocabulary and its one-character wire
codes, the four movement directions, and the tagged results of moves and
turns.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Tile(StrEnum):
    """Dungeon tiles and their level-file codes.

    The member value is the single character used in level files, so
    ``Tile("+")`` decodes a code and ``str(tile)`` encodes one.

    =========  ====  ============================================
    Tile       Code  Meaning
    =========  ====  ============================================
    OPEN       ``-`` Walkable floor, transparent to line of sight
    PILLAR     ``+`` Impassable, blocks line of sight
    MONSTER    ``M`` Hostile, impassable for the player
    TREASURE   ``$`` Picked up on entry
    EXIT       ``!`` Requires treasure to enter
    DOOR       ``?`` Leads to another level
    AMULET     ``@`` Picked up on entry
    PLAYER     ``o`` Player marker, never valid in a level file
    =========  ====  ============================================
    """

    OPEN = "-"
    PILLAR = "+"
    MONSTER = "M"
    TREASURE = "$"
    EXIT = "!"
    DOOR = "?"
    AMULET = "@"
    PLAYER = "o"

    @classmethod
    def decode(cls, code: str) -> Tile:
        """Decode a level-file character into a tile.

        Args:
            code: A single character read from a level file.

        Returns:
            The matching tile.

        Raises:
            ValueError: If the code is not part of the level vocabulary.
                The player marker is rejected because it is never stored
                in files.
        """
        try:
            tile = cls(code)
        except ValueError:
            msg = f"Unknown tile code {code!r}"
            raise ValueError(msg) from None
        if tile is cls.PLAYER:
            msg = "The player marker cannot appear in a level file"
            raise ValueError(msg)
        return tile

    @property
    def code(self) -> str:
        """The level-file character for this tile."""
        return self.value

    @property
    def blocks_player(self) -> bool:
        """Whether the player can never step onto this tile."""
        return self in (Tile.PILLAR, Tile.MONSTER)

    @property
    def is_level_tile(self) -> bool:
        """Whether this tile may appear in a level file."""
        return self is not Tile.PLAYER


class Direction(StrEnum):
    """Cardinal movement directions.

    Each direction moves along exactly one axis. ``key`` is the keyboard
    code a driver conventionally maps to the direction.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get the (row, col) unit step for this direction.

        Returns:
            Tuple of row and column deltas.
        """
        return _DELTAS[self]

    @property
    def key(self) -> str:
        """Get the keyboard code for this direction.

        Returns:
            One of 'w', 's', 'a', 'd'.
        """
        return _KEYS[self]

    @property
    def opposite(self) -> Direction:
        """Get the direction pointing the other way."""
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Interpret a direction from a member, a name, or a key code.

        Args:
            value: A Direction, a name such as 'up', or a key such as 'w'.

        Returns:
            The matching Direction, or None when the value is not a
            recognized direction.
        """
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for direction in cls:
            if normalized in (direction.value, direction.key):
                return direction
        return None


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_KEYS: dict[Direction, str] = {
    Direction.UP: "w",
    Direction.DOWN: "s",
    Direction.LEFT: "a",
    Direction.RIGHT: "d",
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

RAY_ORDER: tuple[Direction, ...] = (
    Direction.DOWN,
    Direction.UP,
    Direction.RIGHT,
    Direction.LEFT,
)
"""Order in which monster rays are resolved each turn."""


class MoveOutcome(IntEnum):
    """Result of a single movement attempt.

    Values keep the classic status numbering so drivers can log them
    compactly.
    """

    STAY = 0
    MOVED = 1
    TREASURE = 2
    AMULET = 3
    DOOR = 4
    EXIT = 5

    @property
    def moved(self) -> bool:
        """Whether the player changed cells."""
        return self is not MoveOutcome.STAY

    @property
    def picked_up_item(self) -> bool:
        """Whether the player collected treasure or an amulet."""
        return self in (MoveOutcome.TREASURE, MoveOutcome.AMULET)

    @property
    def level_complete(self) -> bool:
        """Whether the player escaped through the exit."""
        return self is MoveOutcome.EXIT

    @property
    def level_transition(self) -> bool:
        """Whether the player walked through a door."""
        return self is MoveOutcome.DOOR


class GameStatus(StrEnum):
    """Status of a dungeon session after a turn."""

    IN_PROGRESS = "in_progress"
    ESCAPED = "escaped"
    LEFT_LEVEL = "left_level"
    CAUGHT = "caught"

    @property
    def is_terminal(self) -> bool:
        """Whether no further turns can be taken on this level."""
        return self is not GameStatus.IN_PROGRESS


__all__ = [
    "Tile",
    "Direction",
    "RAY_ORDER",
    "MoveOutcome",
    "GameStatus",
]
