"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from deckdelve.core.exceptions import (
    ConfigurationError,
    DeckDelveError,
    GameEngineError,
    InvalidGameStateError,
    ValidationError,
)


class TestDeckDelveError:
    """Tests for the base DeckDelveError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = DeckDelveError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = DeckDelveError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr includes message and details."""
        exc = DeckDelveError("Oops", details={"a": 1})
        assert repr(exc) == "DeckDelveError(message='Oops', details={'a': 1})"


class TestSubclasses:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize(
        "exc_type",
        [GameEngineError, InvalidGameStateError, ConfigurationError, ValidationError],
    )
    def test_hierarchy(self, exc_type: type[DeckDelveError]) -> None:
        """Test every error can be caught as DeckDelveError."""
        with pytest.raises(DeckDelveError):
            raise exc_type("failure")

    def test_invalid_game_state_context(self) -> None:
        """Test state context is recorded in details."""
        exc = InvalidGameStateError(
            "No level",
            current_state="Victory",
            expected_states=["Level"],
        )
        assert isinstance(exc, GameEngineError)
        assert exc.details["current_state"] == "Victory"
        assert exc.details["expected_states"] == ["Level"]

    def test_configuration_error_key(self) -> None:
        """Test the offending config key is recorded."""
        exc = ConfigurationError("Bad value", config_key="final_level")
        assert exc.details == {"config_key": "final_level"}

    def test_validation_error_fields(self) -> None:
        """Test field name and value are recorded."""
        exc = ValidationError("Seed out of range", field_name="seed", invalid_value=-1)
        assert exc.details == {"field_name": "seed", "invalid_value": -1}

    def test_validation_error_omits_missing_context(self) -> None:
        """Test absent context is not added to details."""
        exc = ValidationError("Bad")
        assert exc.details == {}
