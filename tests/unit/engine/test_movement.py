"""Tests for player movement resolution."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from dungeon_crawler.engine.movement import move_player, next_position
from dungeon_crawler.models import Direction, Grid, MoveOutcome, Player, Tile


Board = Callable[[list[str]], tuple[Grid, Player]]


def _player_cell_agrees(grid: Grid, player: Player) -> bool:
    return list(grid.positions(Tile.PLAYER)) == [player.position]


class TestNextPosition:
    """Tests for next_position."""

    @pytest.mark.parametrize(
        ("direction", "expected"),
        [("w", (1, 2)), ("s", (3, 2)), ("a", (2, 1)), ("d", (2, 3))],
    )
    def test_keys(self, direction: str, expected: tuple[int, int]) -> None:
        """Test key codes map to single-axis steps."""
        assert next_position(Player(row=2, col=2), direction) == expected

    def test_unrecognized(self) -> None:
        """Test unknown directions have no target."""
        assert next_position(Player(row=2, col=2), "x") is None


class TestBlockedMoves:
    """Tests for moves that leave everything unchanged."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_grid_edge(self, board: Board, direction: Direction) -> None:
        """Test moving off a 1x1 grid stays put."""
        grid, player = board(["o"])

        assert move_player(grid, player, direction) is MoveOutcome.STAY
        assert player.position == (0, 0)
        assert grid.to_lines() == ["o"]

    @pytest.mark.parametrize("code", ["+", "M"])
    def test_blocking_tiles(self, board: Board, code: str) -> None:
        """Test pillars and monsters block the player."""
        grid, player = board([f"o{code}"])

        assert move_player(grid, player, Direction.RIGHT) is MoveOutcome.STAY
        assert grid.to_lines() == [f"o{code}"]
        assert player.position == (0, 0)

    @pytest.mark.parametrize("direction", ["", "q", "north", None, 7])
    def test_unrecognized_direction(self, board: Board, direction: object) -> None:
        """Test unknown directions are a no-op."""
        grid, player = board(["-o-"])

        assert move_player(grid, player, direction) is MoveOutcome.STAY  # type: ignore[arg-type]
        assert grid.to_lines() == ["-o-"]

    def test_exit_without_treasure(self, board: Board) -> None:
        """Test the exit is locked until treasure is collected."""
        grid, player = board(["o!"])
        before = grid.snapshot()

        assert move_player(grid, player, "right") is MoveOutcome.STAY
        assert grid.snapshot() == before
        assert player.position == (0, 0)
        assert player.treasure == 0


class TestSuccessfulMoves:
    """Tests for moves onto enterable tiles."""

    @pytest.mark.parametrize(
        ("code", "outcome"),
        [
            ("-", MoveOutcome.MOVED),
            ("$", MoveOutcome.TREASURE),
            ("@", MoveOutcome.AMULET),
            ("?", MoveOutcome.DOOR),
        ],
    )
    def test_enter_tile(self, board: Board, code: str, outcome: MoveOutcome) -> None:
        """Test each enterable tile yields its outcome and moves the marker."""
        grid, player = board(["-", "o", code])

        assert move_player(grid, player, Direction.DOWN) is outcome
        assert grid.to_lines() == ["-", "-", "o"]
        assert player.position == (2, 0)

    def test_treasure_counted(self, board: Board) -> None:
        """Test picking up treasure increments the count."""
        grid, player = board(["o$$"])

        move_player(grid, player, "d")
        move_player(grid, player, "d")

        assert player.treasure == 2

    def test_amulet_is_not_treasure(self, board: Board) -> None:
        """Test amulets do not count as treasure."""
        grid, player = board(["o@"])

        move_player(grid, player, "d")

        assert player.treasure == 0

    def test_exit_with_treasure(self, board: Board) -> None:
        """Test the exit opens once treasure is carried."""
        grid, player = board(["$o!"])

        assert move_player(grid, player, "a") is MoveOutcome.TREASURE
        assert move_player(grid, player, "d") is MoveOutcome.MOVED
        assert move_player(grid, player, "d") is MoveOutcome.EXIT
        assert grid.to_lines() == ["--o"]

    def test_exactly_two_cells_change(self, board: Board) -> None:
        """Test a move rewrites only the old and new cells."""
        grid, player = board(["M-+", "$o-", "?--"])
        before = grid.snapshot()

        move_player(grid, player, "w")

        after = grid.snapshot()
        changed = [
            (r, c)
            for r in range(grid.rows)
            for c in range(grid.cols)
            if before[r][c] is not after[r][c]
        ]
        assert changed == [(0, 1), (1, 1)]

    def test_position_tracks_marker(self, board: Board) -> None:
        """Test the tracked position always matches the marker cell."""
        grid, player = board(["-$--", "-o+-", "M--@", "--!?"])

        for key in "wasdddssaawwdsadws":
            move_player(grid, player, key)
            assert _player_cell_agrees(grid, player)
