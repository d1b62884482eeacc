"""Procedural level generation.

The reference layout stamps a 5x5 room stencil on each point of a 6x4
anchor lattice, each under one of eight random symmetries, forces doors
halfway between neighbouring anchors so every room connects, and then
scatters creatures over the open floor.

All randomness comes from the level's generator; generation never
reseeds it, so the same generator state always yields the same level.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from deckdelve.core.constants import (
    INTRO_MESSAGE,
    PLAYER,
    ROOM_SIZE,
    ROOM_SPACING,
    ROOM_XS,
    ROOM_YS,
    SPAWN_X_RANGE,
    SPAWN_Y_RANGE,
)
from deckdelve.core.logging import get_logger
from deckdelve.models.cards import Card, CardState
from deckdelve.models.enums import CardKind, EntityType, Tile
from deckdelve.models.geometry import Position


if TYPE_CHECKING:
    from deckdelve.models.level import Level

logger = get_logger(__name__)


class LevelType(StrEnum):
    """Layout generators available."""

    TEST = "test"


class RoomStyle(StrEnum):
    """Room stencils. RANDOM resolves to one of RANDOM_STYLES when stamped."""

    SQUARE = "square"
    ROUNDED = "rounded"
    DIAMOND = "diamond"
    HALLWAY = "hallway"
    PLUS = "plus"
    ROUNDED_PLUS = "rounded_plus"
    CORNER = "corner"
    RANDOM = "random"
    EXIT_SQUARE = "exit_square"


RANDOM_STYLES = (
    RoomStyle.SQUARE,
    RoomStyle.ROUNDED,
    RoomStyle.DIAMOND,
    RoomStyle.HALLWAY,
    RoomStyle.PLUS,
    RoomStyle.ROUNDED_PLUS,
    RoomStyle.CORNER,
)

# '.' floor, '+' door, '>' exit, anything else wall
ROOM_STENCILS: dict[RoomStyle, tuple[str, ...]] = {
    RoomStyle.SQUARE: (
        ".....",
        ".....",
        ".....",
        ".....",
        ".....",
    ),
    RoomStyle.ROUNDED: (
        "#...#",
        ".....",
        ".....",
        ".....",
        "#...#",
    ),
    RoomStyle.DIAMOND: (
        "##.##",
        "#...#",
        ".....",
        "#...#",
        "##.##",
    ),
    RoomStyle.HALLWAY: (
        "##.##",
        "##.##",
        ".....",
        "##.##",
        "##.##",
    ),
    RoomStyle.PLUS: (
        ".....",
        "..#..",
        ".###.",
        "..#..",
        ".....",
    ),
    RoomStyle.ROUNDED_PLUS: (
        "#...#",
        "..#..",
        ".###.",
        "..#..",
        "#...#",
    ),
    RoomStyle.CORNER: (
        "##..#",
        "##..#",
        ".....",
        "....#",
        "##.##",
    ),
    RoomStyle.EXIT_SQUARE: (
        ".....",
        ".....",
        "..>..",
        ".....",
        ".....",
    ),
}

STENCIL_TILES = {".": Tile.FLOOR, "+": Tile.DOOR, ">": Tile.EXIT}

CREATURE_TYPES = (EntityType.DEFENDER, EntityType.HUNTER, EntityType.REAPER)
"""Concrete types an UnknownThing can turn into."""

STARTING_DECKS: dict[EntityType, tuple[Card, ...]] = {
    EntityType.DEFENDER: (
        Card(kind=CardKind.DEFEND, value=2),
        Card(kind=CardKind.BLOCK),
        Card(kind=CardKind.PUSH),
    ),
    EntityType.HUNTER: (
        Card(kind=CardKind.STRIKE),
        Card(kind=CardKind.DODGE),
    ),
    EntityType.REAPER: (
        Card(kind=CardKind.KILL, value=1),
        Card(kind=CardKind.ATTACK, value=1),
    ),
}


def transform(x: int, y: int, symmetry: int) -> tuple[int, int]:
    """Map stamp coordinates to stencil coordinates under one of 8 symmetries.

    Symmetries 0-3 are identity, mirror x, mirror y and point reflection;
    4-7 are the same four applied to the transpose.
    """
    last = ROOM_SIZE - 1
    if symmetry >= 4:
        x, y = y, x
    if symmetry % 2 == 1:
        x = last - x
    if symmetry % 4 >= 2:
        y = last - y
    return x, y


def generate(level: Level, level_type: LevelType = LevelType.TEST) -> None:
    """Fill ``level`` with terrain, the player and creatures."""
    if level_type == LevelType.TEST:
        _test_map(level)
    logger.info(
        "Level generated",
        level=level.number,
        level_type=level_type,
        creatures=len(level.types) - 1,
    )


def _test_map(level: Level) -> None:
    first = Position(x=ROOM_XS[0], y=ROOM_YS[0])
    last = Position(x=ROOM_XS[-1], y=ROOM_YS[-1])
    half = ROOM_SPACING // 2

    for y in ROOM_YS:
        for x in ROOM_XS:
            anchor = Position(x=x, y=y)
            if anchor == first:
                style = RoomStyle.SQUARE
            elif anchor == last:
                style = RoomStyle.EXIT_SQUARE
            else:
                style = RoomStyle.RANDOM
            place_room(level, anchor, style)
            if x > ROOM_XS[0]:
                level.set_tile(Position(x=x - half, y=y), Tile.DOOR)
            if y > ROOM_YS[0]:
                level.set_tile(Position(x=x, y=y - half), Tile.DOOR)

    level.set_tile(last, Tile.EXIT)
    level.move_entity(PLAYER, first)

    for _ in range(level.settings.spawn_attempts):
        pos = Position(
            x=level.rng.gen_range(*SPAWN_X_RANGE),
            y=level.rng.gen_range(*SPAWN_Y_RANGE),
        )
        if level.is_open(pos) and level.tile_at(pos) != Tile.DOOR:
            place_entity(level, pos, EntityType.UNKNOWN_THING)

    level.log.add(INTRO_MESSAGE)


def place_entity(level: Level, pos: Position, entity_type: EntityType) -> int | None:
    """Spawn a creature with its starting deck.

    An UNKNOWN_THING resolves to a random concrete creature type first.
    Players are never spawned this way.

    Returns:
        The new entity id, or None if nothing was placed.
    """
    if entity_type == EntityType.UNKNOWN_THING:
        entity_type = level.rng.choose(CREATURE_TYPES)
    if entity_type not in STARTING_DECKS:
        return None
    entity = level.spawn_entity(entity_type, pos)
    if entity is not None:
        level.decks[entity] = [CardState(card=card) for card in STARTING_DECKS[entity_type]]
    return entity


def place_room(level: Level, anchor: Position, style: RoomStyle) -> None:
    """Stamp a room stencil centred on ``anchor`` under a random symmetry."""
    if style == RoomStyle.RANDOM:
        style = level.rng.choose(RANDOM_STYLES)
    stencil = ROOM_STENCILS[style]
    symmetry = level.rng.gen_range(0, 8)
    offset = ROOM_SIZE // 2
    for y in range(ROOM_SIZE):
        for x in range(ROOM_SIZE):
            sx, sy = transform(x, y, symmetry)
            tile = STENCIL_TILES.get(stencil[sy][sx], Tile.WALL)
            level.set_tile(Position(x=anchor.x - offset + x, y=anchor.y - offset + y), tile)


__all__ = [
    "LevelType",
    "RoomStyle",
    "RANDOM_STYLES",
    "ROOM_STENCILS",
    "CREATURE_TYPES",
    "STARTING_DECKS",
    "transform",
    "generate",
    "place_entity",
    "place_room",
]
