"""Custom exception hierarchy for the dungeon crawler engine.

All exceptions inherit from DungeonCrawlerError, so a driver can catch a
single type at its boundary while still getting the domain-specific context
stored in ``details``.

Invalid moves are not errors: the movement resolver reports them as
``MoveOutcome.STAY``. Exceptions are reserved for malformed input and for
grid operations that must leave prior state untouched.

Example:
    >>> from dungeon_crawler.core.exceptions import LevelLoadError
    >>> raise LevelLoadError("No door or exit", source_file="level1.txt", reason="no_exit")
"""

from __future__ import annotations

from typing import Any


class DungeonCrawlerError(Exception):
    """Base exception for all dungeon crawler errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(DungeonCrawlerError):
    """Base exception for all game engine errors.

    Raised when there are issues with grid storage, level loading, or
    turn resolution.
    """


class InvalidGameStateError(GameEngineError):
    """Raised when an operation is attempted on a state that cannot serve it.

    This typically occurs when a released grid or a closed session is
    used again.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current invalid state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class GridError(GameEngineError):
    """Base exception for tile buffer errors."""

    def __init__(
        self,
        message: str,
        *,
        rows: int | None = None,
        cols: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize grid error with dimension context.

        Args:
            message: Human-readable error description.
            rows: Row count involved in the failed operation.
            cols: Column count involved in the failed operation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if rows is not None:
            combined_details["rows"] = rows
        if cols is not None:
            combined_details["cols"] = cols
        super().__init__(message, details=combined_details)


class GridAllocationError(GridError):
    """Raised when a tile buffer cannot be allocated.

    Non-positive dimensions and cell counts beyond the 32-bit signed
    range are rejected before any memory is requested.
    """


class GridResizeError(GridError):
    """Raised when a grid cannot be doubled.

    The original grid and its dimensions are left untouched.
    """


class GridBoundsError(GridError, IndexError):
    """Raised when a cell outside the grid is read or written."""


class LevelLoadError(GameEngineError):
    """Raised when a level description cannot be turned into a grid.

    Every malformed-input case surfaces as this single error type; the
    ``reason`` detail tells the cases apart.
    """

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize level load error with source context.

        Args:
            message: Human-readable error description.
            source_file: Path of the level file that failed to load.
            reason: Short machine-readable failure code.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source_file:
            combined_details["source_file"] = source_file
        if reason:
            combined_details["reason"] = reason
        self.reason = reason
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(DungeonCrawlerError):
    """Raised when application configuration is invalid.

    This includes missing required settings, invalid values, or
    incompatible configuration combinations.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(DungeonCrawlerError):
    """Raised when data validation fails.

    This includes constraint violations or type mismatches in values
    handed to the engine from outside.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "DungeonCrawlerError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "GridError",
    "GridAllocationError",
    "GridResizeError",
    "GridBoundsError",
    "LevelLoadError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
]
