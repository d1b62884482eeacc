"""deckdelve - simulation core of a card-deck roguelike.

The player descends through procedurally generated levels. Every entity
carries a deck of cards, and the cards, not fixed stats, decide how
attacks, moves and damage play out: each event an entity takes part in
is offered to its active cards, which may modify, redirect or cancel it.

Example:
    >>> from deckdelve import Action, Direction, Game
    >>>
    >>> game = Game.new(seed=42)
    >>> game.step(Action.wait())
    True
    >>> print(game.level.render())

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic value types, the tile grid and the Level context.
    engine: Generation, field of view, card resolution, turns and the
        Game state machine.
"""

from __future__ import annotations

# Core
from deckdelve.core.config import GameSettings, Settings, get_settings
from deckdelve.core.exceptions import DeckDelveError
from deckdelve.core.logging import configure_logging, get_logger

# Models
from deckdelve.models import (
    Action,
    Card,
    CardKind,
    CardStatus,
    Direction,
    EntityType,
    Glyph,
    KnownCardStatus,
    Level,
    Position,
    Tile,
    Visibility,
)

# Engine
from deckdelve.engine import (
    Game,
    GameRng,
    LevelTransition,
    Victory,
    new_game,
    new_level,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DeckDelveError",
    "Settings",
    "GameSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Action",
    "Card",
    "CardKind",
    "CardStatus",
    "Direction",
    "EntityType",
    "Glyph",
    "KnownCardStatus",
    "Level",
    "Position",
    "Tile",
    "Visibility",
    # Engine
    "Game",
    "GameRng",
    "LevelTransition",
    "Victory",
    "new_game",
    "new_level",
]
