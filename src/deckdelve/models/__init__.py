"""Data model for deckdelve.

Submodules:
    enums: Tile, Visibility, EntityType, Direction, CardKind, CardStatus, ...
    geometry: Position.
    cards: Card, CardState, Modification, KnownCardStatus, CardView.
    actions: Action.
    grid: Square, Glyph.
    level: Level, MessageLog.

Example:
    >>> from deckdelve.models import Card, CardKind
    >>> str(Card(kind=CardKind.ATTACK, value=1))
    'Attack(1)'
"""

from __future__ import annotations

from deckdelve.models.actions import Action
from deckdelve.models.cards import (
    Card,
    CardState,
    CardView,
    KnownCardStatus,
    Modification,
)
from deckdelve.models.enums import (
    PARAMETERISED_CARDS,
    ActionKind,
    CardKind,
    CardStatus,
    Direction,
    EntityType,
    KnownCardStatusKind,
    Tile,
    Visibility,
)
from deckdelve.models.geometry import Position
from deckdelve.models.grid import Glyph, Square
from deckdelve.models.level import Level, MessageLog


__all__ = [
    # Enumerations
    "ActionKind",
    "CardKind",
    "CardStatus",
    "Direction",
    "EntityType",
    "KnownCardStatusKind",
    "PARAMETERISED_CARDS",
    "Tile",
    "Visibility",
    # Values
    "Action",
    "Card",
    "CardState",
    "CardView",
    "Glyph",
    "KnownCardStatus",
    "Modification",
    "Position",
    "Square",
    # State
    "Level",
    "MessageLog",
]
