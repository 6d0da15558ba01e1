"""Level file loading.

A level file is a whitespace-separated header followed by tile codes::

    3 3
    1 1
    + + +
    + - !
    + + +

The header holds the row count, column count, player row and player
column. Exactly ``rows * cols`` tile codes follow in row-major order. Codes
may be separated by whitespace or written together (``+-!``); each
non-whitespace character is one tile. See :class:`~dungeon_crawler.models.Tile`
for the codes.

Every structural or semantic problem raises :class:`LevelLoadError` with a
distinct ``reason``; a grid allocated before the failure is released first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain
from os import PathLike
from pathlib import Path
from typing import Any, TextIO

from dungeon_crawler.core.config import LevelSettings, get_settings
from dungeon_crawler.core.constants import HEADER_FIELDS, MAX_DIMENSION, cell_count_overflows
from dungeon_crawler.core.exceptions import GridAllocationError, LevelLoadError
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import Tile
from dungeon_crawler.models.grid import Grid
from dungeon_crawler.models.player import Player


logger = get_logger(__name__)

LevelSource = str | PathLike[str] | TextIO


@dataclass(frozen=True)
class LoadedLevel:
    """A validated level ready for play.

    Attributes:
        grid: The tile buffer, with the player marker at the start cell.
        player: The player at the start cell with no treasure.
        source_file: Where the level was read from, if known.
    """

    grid: Grid
    player: Player
    source_file: str | None = None

    @property
    def rows(self) -> int:
        """Number of grid rows."""
        return self.grid.rows

    @property
    def cols(self) -> int:
        """Number of grid columns."""
        return self.grid.cols


def load_level(
    source: LevelSource,
    *,
    settings: LevelSettings | None = None,
) -> LoadedLevel:
    """Load and validate a level.

    Args:
        source: A path, a bare level name resolved through
            ``settings.levels_dir``, or an open text stream.
        settings: Level settings; defaults to the application settings.

    Returns:
        The loaded level.

    Raises:
        LevelLoadError: If the source cannot be read or is not a valid level.
    """
    if hasattr(source, "read"):
        source_file = getattr(source, "name", None)
        try:
            text = source.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise _failure(
                "Level source could not be read",
                "unreadable",
                source_file,
                error=str(exc),
            ) from exc
        return parse_level(text, source_file=source_file)

    level_settings = settings or get_settings().levels
    path = level_settings.resolve(Path(source))
    try:
        text = path.read_text(encoding=level_settings.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise _failure(
            "Level file could not be read",
            "unreadable",
            str(path),
            error=str(exc),
        ) from exc
    return parse_level(text, source_file=str(path))


def parse_level(text: str, *, source_file: str | None = None) -> LoadedLevel:
    """Build a level from the text of a level file.

    Args:
        text: Full contents of a level file.
        source_file: Name used in errors and logs.

    Returns:
        The loaded level.

    Raises:
        LevelLoadError: If the text is not a valid level.
    """
    tokens = text.split()
    rows, cols, player_row, player_col = _parse_header(tokens, source_file)

    if rows > MAX_DIMENSION or cols > MAX_DIMENSION or rows <= 0 or cols <= 0:
        raise _failure(
            f"Level dimensions must be between 1 and {MAX_DIMENSION}",
            "bad_dimensions",
            source_file,
            rows=rows,
            cols=cols,
        )
    if not (0 <= player_row < rows and 0 <= player_col < cols):
        raise _failure(
            "Player start lies outside the level",
            "player_out_of_bounds",
            source_file,
            player_row=player_row,
            player_col=player_col,
        )
    if cell_count_overflows(rows, cols):
        raise _failure(
            "Level has too many cells",
            "too_many_cells",
            source_file,
            rows=rows,
            cols=cols,
        )

    tile_tokens = tokens[len(HEADER_FIELDS):]
    available = sum(len(token) for token in tile_tokens)
    if available < rows * cols:
        raise _failure(
            "Level ends before every tile was read",
            "missing_tile",
            source_file,
            row=available // cols,
            col=available % cols,
        )

    try:
        grid = Grid.allocate(rows, cols)
    except GridAllocationError as exc:
        raise _failure(
            "Level grid could not be allocated",
            "allocation_failed",
            source_file,
            rows=rows,
            cols=cols,
        ) from exc

    codes = iter(chain.from_iterable(tile_tokens))
    try:
        _read_tiles(grid, codes, source_file)

        if Tile.DOOR not in grid and Tile.EXIT not in grid:
            raise _failure("Level has no door or exit", "no_exit", source_file)

        if grid[player_row, player_col] is not Tile.OPEN:
            raise _failure(
                "Player must start on an open tile",
                "bad_start_tile",
                source_file,
                tile=grid[player_row, player_col].code,
            )
        grid[player_row, player_col] = Tile.PLAYER

        extra = next(codes, None)
        if extra is not None:
            raise _failure(
                "Unexpected content after the last tile",
                "trailing_data",
                source_file,
                extra=extra,
            )
    except LevelLoadError:
        grid.release()
        raise

    logger.info(
        "Level loaded",
        source_file=source_file,
        rows=rows,
        cols=cols,
        player_row=player_row,
        player_col=player_col,
    )
    return LoadedLevel(
        grid=grid,
        player=Player(row=player_row, col=player_col),
        source_file=source_file,
    )


def _parse_header(tokens: list[str], source_file: str | None) -> tuple[int, int, int, int]:
    header = tokens[: len(HEADER_FIELDS)]
    if len(header) < len(HEADER_FIELDS):
        raise _failure(
            "Level header is incomplete",
            "bad_header",
            source_file,
            expected=list(HEADER_FIELDS),
            found=len(header),
        )
    try:
        rows, cols, player_row, player_col = (int(token) for token in header)
    except ValueError as exc:
        raise _failure(
            "Level header must hold integers",
            "bad_header",
            source_file,
            header=header,
        ) from exc
    return rows, cols, player_row, player_col


def _read_tiles(grid: Grid, codes: Iterator[str], source_file: str | None) -> None:
    for row in range(grid.rows):
        for col in range(grid.cols):
            code = next(codes)
            try:
                grid[row, col] = Tile.decode(code)
            except ValueError as exc:
                raise _failure(
                    str(exc),
                    "unknown_tile",
                    source_file,
                    row=row,
                    col=col,
                ) from exc


def _failure(
    message: str,
    reason: str,
    source_file: str | None,
    **details: Any,
) -> LevelLoadError:
    logger.warning("Level rejected", reason=reason, source_file=source_file, **details)
    return LevelLoadError(
        message,
        source_file=source_file,
        reason=reason,
        details=details or None,
    )


__all__ = [
    "LevelSource",
    "LoadedLevel",
    "load_level",
    "parse_level",
]
