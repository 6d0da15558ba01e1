"""Pytest configuration and shared fixtures.

This module provides common fixtures for the dungeon crawler test suite:
settings isolation, level file writers and small hand-built grids.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from dungeon_crawler.models import Grid, Player


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dungeon_crawler.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DUNGEON_CRAWLER_DEBUG": "true",
        "DUNGEON_CRAWLER_LOG_LEVEL": "WARNING",
        "DUNGEON_CRAWLER_JSON_LOGS": "true",
        "DUNGEON_CRAWLER_LEVEL_LEVELS_DIR": str(tmp_path / "levels"),
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Level Fixtures
# =============================================================================


def build_level_text(
    rows: list[str],
    player: tuple[int, int],
    *,
    separator: str = " ",
) -> str:
    """Render a level file from rows of tile codes.

    Args:
        rows: Equal-length strings of tile codes.
        player: Player start as (row, col).
        separator: Text placed between codes on a line.

    Returns:
        Level file contents.
    """
    header = f"{len(rows)} {len(rows[0])}\n{player[0]} {player[1]}\n"
    body = "\n".join(separator.join(row) for row in rows)
    return header + body + "\n"


@pytest.fixture
def write_level(tmp_path: Path) -> Callable[..., Path]:
    """Provide a helper that writes level text to a temporary file.

    Returns:
        Function taking the file text (and optional name) and returning its path.
    """

    def _write(text: str, name: str = "level.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def exit_room_rows() -> list[str]:
    """A 3x3 room with a pillar border, an exit on the right wall."""
    return [
        "+++",
        "+-!",
        "+++",
    ]


@pytest.fixture
def sample_level_rows() -> list[str]:
    """A 5x6 level with every tile kind.

    Layout::

        - - - + M -
        - $ - - - -
        M - - - @ +
        - + - - - ?
        - - ! - $ -
    """
    return [
        "---+M-",
        "-$----",
        "M---@+",
        "-+---?",
        "--!-$-",
    ]


@pytest.fixture
def sample_level_text(sample_level_rows: list[str]) -> str:
    """Level file text for the sample level with the player at (2, 2)."""
    return build_level_text(sample_level_rows, (2, 2))


def make_board(rows: list[str]) -> tuple[Grid, Player]:
    """Build a grid and player from rows that contain exactly one 'o'.

    Args:
        rows: Equal-length strings of tile codes including the player marker.

    Returns:
        The grid and a player standing on the marker.
    """
    from dungeon_crawler.models import Grid, Player, Tile

    grid = Grid.from_rows(rows)
    ((row, col),) = list(grid.positions(Tile.PLAYER))
    return grid, Player(row=row, col=col)


@pytest.fixture
def board() -> Callable[[list[str]], tuple[Grid, Player]]:
    """Provide the make_board helper as a fixture."""
    return make_board


@pytest.fixture
def level_text() -> Callable[..., str]:
    """Provide the build_level_text helper as a fixture."""
    return build_level_text
