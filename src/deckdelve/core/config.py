"""Configuration management for deckdelve.

Settings are loaded with pydantic-settings from environment variables
and an optional ``.env`` file.

Example:
    >>> from deckdelve.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.final_level
    6

Environment Variables:
    DECKDELVE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DECKDELVE_GAME_FINAL_LEVEL: Number of the level whose exit wins the run
    DECKDELVE_GAME_SPAWN_ATTEMPTS: Creature placement trials per level
    DECKDELVE_GAME_MAX_RESOLUTION_DEPTH: Nesting limit for card resolution
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deckdelve.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for the simulation core.

    Attributes:
        final_level: Level number whose exit ends the run in victory.
        spawn_attempts: Random placement trials when populating a level.
        max_resolution_depth: Maximum nesting of event resolution before
            further events are dropped.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECKDELVE_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    final_level: int = Field(
        default=6,
        ge=0,
        description="Level number whose exit ends the run",
    )
    spawn_attempts: int = Field(
        default=64,
        ge=0,
        le=10_000,
        description="Creature placement trials per level",
    )
    max_resolution_depth: int = Field(
        default=32,
        ge=1,
        description="Maximum nesting of event resolution",
    )

    @model_validator(mode="after")
    def validate_resolution_depth(self) -> "GameSettings":
        """Ensure an attack can still reach its defender.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the depth cannot hold an attack and the
                defence it triggers.
        """
        if self.max_resolution_depth < 2:
            raise ConfigurationError(
                f"max_resolution_depth ({self.max_resolution_depth}) must be at least 2",
                config_key="max_resolution_depth",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        debug: Enable debug mode.
        log_level: Application logging level.
        game: Simulation settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECKDELVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="deckdelve",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
