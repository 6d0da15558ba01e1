"""Tile buffer for a dungeon level.

The Grid owns a rectangular buffer of :class:`Tile` values. It is the only
place tiles are stored, so every invariant about the buffer lives here:

- both dimensions are positive and their product fits in a signed 32-bit
  integer, checked before any memory is requested;
- every row has the same length and every cell holds a ``Tile``;
- reads and writes outside the grid raise ``GridBoundsError``;
- a released grid holds no buffer, reports ``0 x 0`` and can be released
  again safely.

Example:
    >>> with Grid.allocate(3, 4) as grid:
    ...     grid[1, 2] = Tile.PILLAR
    ...     bigger = resize_grid(grid)
    >>> bigger.shape
    (6, 8)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from dungeon_crawler.core.constants import MAX_DIMENSION, RESIZE_FACTOR, cell_count_overflows
from dungeon_crawler.core.exceptions import (
    GridAllocationError,
    GridBoundsError,
    GridResizeError,
    InvalidGameStateError,
    ValidationError,
)
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import Tile


if TYPE_CHECKING:
    from types import TracebackType

logger = get_logger(__name__)

Position = tuple[int, int]


class Grid:
    """A rectangular, bounds-checked buffer of dungeon tiles.

    Cells are addressed as ``grid[row, col]``. Use :meth:`allocate` or
    :meth:`from_rows` to build one; the constructor expects an already
    validated buffer.
    """

    __slots__ = ("_cells", "_rows", "_cols")

    def __init__(self, cells: list[list[Tile]]) -> None:
        """Wrap a validated tile buffer.

        Args:
            cells: Non-empty rectangular nested list of tiles. Ownership
                passes to the grid.
        """
        self._cells = cells
        self._rows = len(cells)
        self._cols = len(cells[0]) if cells else 0

    # -------------------------------------------------------------------------
    # Construction and lifetime
    # -------------------------------------------------------------------------

    @classmethod
    def allocate(cls, rows: int, cols: int) -> Grid:
        """Allocate a grid with every cell set to OPEN.

        Args:
            rows: Number of rows (> 0).
            cols: Number of columns (> 0).

        Returns:
            A new grid of the requested size.

        Raises:
            GridAllocationError: If a dimension is not positive, the cell
                count overflows the 32-bit signed range, or memory runs out.
        """
        if rows <= 0 or cols <= 0:
            raise GridAllocationError(
                "Grid dimensions must be positive", rows=rows, cols=cols
            )
        if cell_count_overflows(rows, cols):
            raise GridAllocationError(
                "Grid cell count exceeds the 32-bit signed range", rows=rows, cols=cols
            )
        try:
            cells = [[Tile.OPEN] * cols for _ in range(rows)]
        except MemoryError as exc:
            raise GridAllocationError(
                "Not enough memory for grid", rows=rows, cols=cols
            ) from exc

        logger.debug("Grid allocated", rows=rows, cols=cols)
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Tile | str]]) -> Grid:
        """Build a grid from rows of tiles or tile codes.

        Args:
            rows: Row-major tiles; strings such as ``"-+-"`` are read one
                character per cell.

        Returns:
            A new grid holding the given tiles.

        Raises:
            GridAllocationError: If there are no rows or no columns.
            ValidationError: If rows differ in length or hold unknown codes.
        """
        materialized = [list(row) for row in rows]
        if not materialized or not materialized[0]:
            raise GridAllocationError("Grid needs at least one row and one column")

        width = len(materialized[0])
        for index, row in enumerate(materialized):
            if len(row) != width:
                raise ValidationError(
                    "Grid rows must all have the same length",
                    field_name=f"row[{index}]",
                    invalid_value=len(row),
                )

        grid = cls.allocate(len(materialized), width)
        for r, row in enumerate(materialized):
            for c, value in enumerate(row):
                grid[r, c] = value
        return grid

    def release(self) -> None:
        """Drop the tile buffer.

        Afterwards the grid reports ``0 x 0`` and any cell access raises
        ``InvalidGameStateError``. Calling release again is a no-op.
        """
        if self.is_released:
            return
        logger.debug("Grid released", rows=self._rows, cols=self._cols)
        self._cells = []
        self._rows = 0
        self._cols = 0

    def __enter__(self) -> Grid:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        self._require_live()
        return Grid([list(row) for row in self._cells])

    def resized(self) -> Grid:
        """Double this grid. See :func:`resize_grid`."""
        return resize_grid(self)

    # -------------------------------------------------------------------------
    # Dimensions
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows (0 once released)."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns (0 once released)."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Tuple of (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def is_released(self) -> bool:
        """Whether the buffer has been released."""
        return not self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) addresses a cell of this grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def __getitem__(self, position: Position) -> Tile:
        row, col = self._check_position(position)
        return self._cells[row][col]

    def __setitem__(self, position: Position, value: Tile | str) -> None:
        row, col = self._check_position(position)
        try:
            tile = Tile(value)
        except ValueError:
            raise ValidationError(
                "Unknown tile",
                field_name="tile",
                invalid_value=value,
            ) from None
        self._cells[row][col] = tile

    def _check_position(self, position: Position) -> Position:
        self._require_live()
        row, col = position
        if not self.in_bounds(row, col):
            raise GridBoundsError(
                f"Cell ({row}, {col}) is outside the grid",
                rows=self._rows,
                cols=self._cols,
            )
        return row, col

    def _require_live(self) -> None:
        if self.is_released:
            raise InvalidGameStateError(
                "Grid has been released",
                current_state="released",
                expected_states=["allocated"],
            )

    def count(self, tile: Tile) -> int:
        """Count the cells holding ``tile``."""
        return sum(row.count(tile) for row in self._cells)

    def positions(self, tile: Tile) -> Iterator[Position]:
        """Yield the (row, col) of every cell holding ``tile``, row-major."""
        for r, row in enumerate(self._cells):
            for c, value in enumerate(row):
                if value is tile:
                    yield (r, c)

    def __contains__(self, tile: object) -> bool:
        return any(tile in row for row in self._cells)

    def iter_rows(self) -> Iterator[tuple[Tile, ...]]:
        """Yield each row as an immutable tuple."""
        for row in self._cells:
            yield tuple(row)

    def snapshot(self) -> tuple[tuple[Tile, ...], ...]:
        """Get an immutable copy of every cell."""
        return tuple(self.iter_rows())

    def to_lines(self) -> list[str]:
        """Encode each row as a string of tile codes."""
        return ["".join(tile.code for tile in row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "released" if self.is_released else "allocated"
        return f"Grid(rows={self._rows}, cols={self._cols}, {state})"


def resize_grid(grid: Grid) -> Grid:
    """Double both dimensions of a grid.

    The new grid is tiled from four copies of the original. The top-left
    quadrant is an exact copy; the other three have the player marker
    replaced by OPEN so the player is never duplicated. Once the new grid
    is fully populated the original is released.

    Args:
        grid: The grid to grow. Released on success, untouched on failure.

    Returns:
        The doubled grid.

    Raises:
        GridResizeError: If the grid is released, a doubled dimension
            exceeds the ceiling, or the doubled cell count overflows.
    """
    if grid.is_released:
        raise GridResizeError("Cannot resize a released grid")

    rows, cols = grid.shape
    new_rows, new_cols = rows * RESIZE_FACTOR, cols * RESIZE_FACTOR

    if new_rows > MAX_DIMENSION or new_cols > MAX_DIMENSION:
        raise GridResizeError(
            f"Resized grid would exceed {MAX_DIMENSION} in a dimension",
            rows=rows,
            cols=cols,
        )
    if cell_count_overflows(new_rows, new_cols):
        raise GridResizeError(
            "Resized grid cell count would exceed the 32-bit signed range",
            rows=rows,
            cols=cols,
        )

    try:
        resized = Grid.allocate(new_rows, new_cols)
    except GridAllocationError as exc:
        raise GridResizeError(exc.message, rows=rows, cols=cols) from exc

    for r, original_row in enumerate(grid._cells):
        scrubbed = [Tile.OPEN if tile is Tile.PLAYER else tile for tile in original_row]
        top = resized._cells[r]
        bottom = resized._cells[r + rows]
        top[:cols] = original_row
        top[cols:] = scrubbed
        bottom[:cols] = scrubbed
        bottom[cols:] = scrubbed

    grid.release()
    logger.info("Grid resized", rows=new_rows, cols=new_cols)
    return resized


__all__ = [
    "Grid",
    "Position",
    "resize_grid",
]
