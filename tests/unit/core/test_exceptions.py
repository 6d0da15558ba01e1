"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from dungeon_crawler.core.exceptions import (
    ConfigurationError,
    DungeonCrawlerError,
    GameEngineError,
    GridAllocationError,
    GridBoundsError,
    GridError,
    GridResizeError,
    InvalidGameStateError,
    LevelLoadError,
    ValidationError,
)


class TestDungeonCrawlerError:
    """Tests for the base DungeonCrawlerError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = DungeonCrawlerError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = DungeonCrawlerError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(DungeonCrawlerError("Test", details={"x": 1}))
        assert "DungeonCrawlerError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestLevelLoadError:
    """Tests for LevelLoadError."""

    def test_source_and_reason(self) -> None:
        """Test source file and reason are recorded."""
        exc = LevelLoadError("Bad level", source_file="level1.txt", reason="no_exit")
        assert exc.reason == "no_exit"
        assert exc.details["source_file"] == "level1.txt"
        assert exc.details["reason"] == "no_exit"

    def test_extra_details_are_kept(self) -> None:
        """Test caller details are merged with source context."""
        exc = LevelLoadError("Bad tile", reason="unknown_tile", details={"row": 2})
        assert exc.details == {"row": 2, "reason": "unknown_tile"}

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        exc = LevelLoadError("Error")
        assert isinstance(exc, GameEngineError)
        assert isinstance(exc, DungeonCrawlerError)
        assert exc.reason is None


class TestGridErrors:
    """Tests for grid exceptions."""

    def test_dimensions_in_details(self) -> None:
        """Test rows and cols are recorded."""
        exc = GridResizeError("Too big", rows=600_000, cols=3)
        assert exc.details == {"rows": 600_000, "cols": 3}

    def test_zero_dimensions_are_recorded(self) -> None:
        """Test zero is not mistaken for a missing value."""
        exc = GridAllocationError("Empty", rows=0, cols=0)
        assert exc.details == {"rows": 0, "cols": 0}

    def test_bounds_error_is_index_error(self) -> None:
        """Test GridBoundsError can be caught as IndexError."""
        with pytest.raises(IndexError):
            raise GridBoundsError("Outside")

    @pytest.mark.parametrize("error_type", [GridAllocationError, GridResizeError, GridBoundsError])
    def test_grid_inheritance(self, error_type: type[GridError]) -> None:
        """Test every grid error is a GridError and a GameEngineError."""
        exc = error_type("Error")
        assert isinstance(exc, GridError)
        assert isinstance(exc, GameEngineError)


class TestOtherExceptions:
    """Tests for state, configuration and validation exceptions."""

    def test_invalid_game_state(self) -> None:
        """Test InvalidGameStateError with state context."""
        exc = InvalidGameStateError(
            "Closed",
            current_state="closed",
            expected_states=["open"],
        )
        assert exc.details["current_state"] == "closed"
        assert exc.details["expected_states"] == ["open"]

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Invalid config", config_key="file_suffix")
        assert exc.details["config_key"] == "file_suffix"

    def test_validation_error(self) -> None:
        """Test ValidationError with field context."""
        exc = ValidationError("Invalid value", field_name="tile", invalid_value="x")
        assert exc.details["field_name"] == "tile"
        assert exc.details["invalid_value"] == "x"
