"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DeckDelveError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Invalid caller-supplied data.
        GameEngineError / InvalidGameStateError: Engine state errors.

    Configuration:
        Settings, GameSettings: pydantic-settings classes.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, get_logger, bind_context, clear_context.
"""

from __future__ import annotations

from deckdelve.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from deckdelve.core.exceptions import (
    ConfigurationError,
    DeckDelveError,
    GameEngineError,
    InvalidGameStateError,
    ValidationError,
)
from deckdelve.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DeckDelveError",
    "GameEngineError",
    "InvalidGameStateError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
