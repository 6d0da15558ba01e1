"""Engine-wide constants for the dungeon crawler.

This module defines the dimension limits and rule constants shared by the
grid store, the level loader and the movement resolver.
"""

from __future__ import annotations

# =============================================================================
# Grid Limits
# =============================================================================

MAX_DIMENSION = 999_999
"""Largest row or column count a level file or a resize may produce."""

INT32_MAX = 2**31 - 1
"""Upper bound on the total cell count of a grid (32-bit signed range)."""

RESIZE_FACTOR = 2
"""Factor applied to both dimensions when a grid is grown."""

# =============================================================================
# Rules
# =============================================================================

EXIT_TREASURE_REQUIRED = 1
"""Treasure the player must carry before stepping onto the exit."""

# =============================================================================
# Level File Format
# =============================================================================

HEADER_FIELDS = ("rows", "cols", "player_row", "player_col")
"""Integer fields that precede the tile codes, in file order."""


def cell_count_overflows(rows: int, cols: int) -> bool:
    """Check whether ``rows * cols`` would exceed the 32-bit signed range.

    Both arguments must be positive.

    Args:
        rows: Row count (> 0).
        cols: Column count (> 0).

    Returns:
        True if the product does not fit in a signed 32-bit integer.
    """
    return rows > INT32_MAX // cols


__all__ = [
    "MAX_DIMENSION",
    "INT32_MAX",
    "RESIZE_FACTOR",
    "EXIT_TREASURE_REQUIRED",
    "HEADER_FIELDS",
    "cell_count_overflows",
]
