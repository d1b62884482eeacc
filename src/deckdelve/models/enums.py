"""Enumeration types for deckdelve.

Tiles, visibility states, creature types, directions and card
vocabulary. Enums that appear on screen carry their render character.
"""

from __future__ import annotations

from enum import StrEnum


class Tile(StrEnum):
    """Terrain of a single grid cell."""

    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    EXIT = "exit"

    @property
    def glyph(self) -> str:
        """Character used to draw this tile."""
        return {
            Tile.FLOOR: ".",
            Tile.WALL: "#",
            Tile.DOOR: "+",
            Tile.EXIT: ">",
        }[self]


class Visibility(StrEnum):
    """What the player knows about a cell."""

    VISIBLE = "visible"
    """In the current field of view."""

    REMEMBERED = "remembered"
    """Seen before; the tile is known but occupants are not."""

    UNKNOWN = "unknown"
    """Never seen."""


class EntityType(StrEnum):
    """Kinds of creature that can occupy a cell."""

    UNKNOWN_THING = "UnknownThing"
    PLAYER = "Player"
    DEFENDER = "Defender"
    HUNTER = "Hunter"
    REAPER = "Reaper"

    @property
    def glyph(self) -> str:
        """Character used to draw this creature."""
        return {
            EntityType.UNKNOWN_THING: "?",
            EntityType.PLAYER: "@",
            EntityType.DEFENDER: "d",
            EntityType.HUNTER: "h",
            EntityType.REAPER: "r",
        }[self]

    @property
    def is_creature(self) -> bool:
        """Whether this type takes AI turns (neither player nor unresolved)."""
        return self not in (EntityType.PLAYER, EntityType.UNKNOWN_THING)


class Direction(StrEnum):
    """The four orthogonal directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step as (dx, dy); y grows downwards."""
        return {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }[self]


class CardKind(StrEnum):
    """Card vocabulary.

    Kinds listed in PARAMETERISED_CARDS carry an integer strength,
    e.g. ``Attack(2)``.
    """

    ATTACK = "Attack"
    DEFEND = "Defend"
    KILL = "Kill"
    STRIKE = "Strike"
    DODGE = "Dodge"
    BLOCK = "Block"
    PUSH = "Push"

    @property
    def takes_value(self) -> bool:
        return self in PARAMETERISED_CARDS


PARAMETERISED_CARDS = frozenset({CardKind.ATTACK, CardKind.DEFEND, CardKind.KILL})


class CardStatus(StrEnum):
    """Where a card currently is.

    ``PLAYED_ON`` cards are attached to another entity, recorded on the
    owning CardState.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCARDED = "discarded"
    PLAYED_ON = "played_on"

    @property
    def in_hand(self) -> bool:
        """Whether the card still belongs to the hand (and absorbs damage)."""
        return self in (CardStatus.ACTIVE, CardStatus.INACTIVE)


class KnownCardStatusKind(StrEnum):
    """Card status as it may be shown to the player."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCARDED = "discarded"
    PLAYED_ON_SELF = "played_on_self"
    PLAYED_ON_VISIBLE = "played_on_visible"
    PLAYED_ON_OTHER = "played_on_other"


class ActionKind(StrEnum):
    """Abstract commands accepted by the turn engine."""

    MOVE = "move"
    REST = "rest"
    WAIT = "wait"
    TOGGLE = "toggle"


__all__ = [
    "Tile",
    "Visibility",
    "EntityType",
    "Direction",
    "CardKind",
    "PARAMETERISED_CARDS",
    "CardStatus",
    "KnownCardStatusKind",
    "ActionKind",
]
