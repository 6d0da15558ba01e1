"""Player state for a dungeon level."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """The player's position and carried treasure.

    Position is kept inside the current grid by the movement resolver;
    the model itself only rejects negative values.

    Attributes:
        row: Current row.
        col: Current column.
        treasure: Treasure collected so far.
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
    )

    row: Annotated[int, Field(ge=0)] = Field(description="Current row")
    col: Annotated[int, Field(ge=0)] = Field(description="Current column")
    treasure: Annotated[int, Field(ge=0)] = Field(
        default=0,
        description="Treasure collected so far",
    )

    @property
    def position(self) -> tuple[int, int]:
        """Tuple of (row, col)."""
        return (self.row, self.col)

    def place(self, row: int, col: int) -> None:
        """Move the player marker's tracked position to (row, col).

        Both coordinates are validated before either is assigned, so a
        rejected position leaves the player where it was.

        Raises:
            pydantic.ValidationError: If either coordinate is invalid.
        """
        checked = type(self).model_validate({**self.model_dump(), "row": row, "col": col})
        self.row = checked.row
        self.col = checked.col

    def collect_treasure(self, amount: int = 1) -> None:
        """Add collected treasure.

        Args:
            amount: Treasure to add; must not be negative.

        Raises:
            ValueError: If amount is negative.
        """
        if amount < 0:
            msg = f"Treasure amount cannot be negative, got {amount}"
            raise ValueError(msg)
        self.treasure += amount

    def reset_treasure(self) -> None:
        """Drop all carried treasure."""
        self.treasure = 0


__all__ = ["Player"]
