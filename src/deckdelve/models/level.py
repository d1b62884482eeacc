"""Level state: the grid, entity side tables and message log.

A Level is the single owner of all mutable state for one floor. Engine
components (generator, visibility, card resolution, turn loop) receive
it as an explicit argument and mutate it through the helpers below.

Entity state is spread across per-entity side tables keyed by a
monotonically increasing integer id. Every lookup against an id that
was never issued or has since been destroyed resolves to "absent"
(``None``, an empty list, or ``EntityType.UNKNOWN_THING`` for display)
instead of raising.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from deckdelve.core.config import GameSettings, get_settings
from deckdelve.core.constants import MAP_HEIGHT, MAP_WIDTH, PLAYER
from deckdelve.core.logging import get_logger
from deckdelve.models.cards import Card, CardState, CardView, KnownCardStatus, Modification
from deckdelve.models.enums import (
    CardStatus,
    EntityType,
    KnownCardStatusKind,
    Tile,
    Visibility,
)
from deckdelve.models.geometry import Position
from deckdelve.models.grid import Glyph, Square


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from deckdelve.engine.rng import GameRng

logger = get_logger(__name__)


@dataclass
class MessageLog:
    """Append-only list of player-facing messages."""

    messages: list[str] = field(default_factory=list)

    def add(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last(self) -> str | None:
        return self.messages[-1] if self.messages else None

    def text(self) -> str:
        return "\n".join(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


class Level:
    """One playable floor.

    Attributes:
        number: Depth of this level, starting at 0.
        rng: Deterministic generator shared by every random decision.
        settings: Simulation settings in effect.
        grid: ``MAP_HEIGHT`` rows of ``MAP_WIDTH`` squares.
        types: Entity id to creature type.
        positions: Entity id to grid position.
        goals: Entity id to the last position it saw the player at.
        decks: Entity id to its ordered deck.
        modifiers: Entity id to its ordered passive modifications.
        collected: Multiset of reward cards picked up on this level.
        log: Player-facing message log.
    """

    width = MAP_WIDTH
    height = MAP_HEIGHT

    def __init__(
        self,
        rng: GameRng,
        *,
        number: int = 0,
        player_deck: Iterable[Card] = (),
        settings: GameSettings | None = None,
    ) -> None:
        """Create an empty, all-wall level holding only the player.

        The player has a type and deck but no position until the
        generator places it.

        Args:
            rng: Generator carried over from the previous level or freshly
                seeded.
            number: Depth of this level.
            player_deck: Cards the player starts with, all Active.
            settings: Simulation settings; defaults to the global settings.
        """
        self.number = number
        self.rng = rng
        self.settings = settings or get_settings().game
        self.grid: list[list[Square]] = [
            [Square() for _ in range(self.width)] for _ in range(self.height)
        ]
        self.last_id = PLAYER
        self.types: dict[int, EntityType] = {PLAYER: EntityType.PLAYER}
        self.positions: dict[int, Position] = {}
        self.goals: dict[int, Position] = {}
        self.decks: dict[int, list[CardState]] = {
            PLAYER: [CardState(card=card) for card in player_deck],
        }
        self.modifiers: dict[int, list[Modification]] = {}
        self.collected: Counter[Card] = Counter()
        self.log = MessageLog()

    # -------------------------------------------------------------------------
    # Grid access
    # -------------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def square(self, pos: Position) -> Square:
        """Get the square at ``pos``.

        Out-of-bounds positions yield a fresh unknown wall, so callers can
        never mutate the grid through it.
        """
        if not self.in_bounds(pos):
            return Square()
        return self.grid[pos.y][pos.x]

    def tile_at(self, pos: Position) -> Tile:
        return self.square(pos).tile

    def occupant(self, pos: Position) -> int | None:
        return self.square(pos).entity

    def is_open(self, pos: Position) -> bool:
        return self.square(pos).is_open

    def set_tile(self, pos: Position, tile: Tile) -> None:
        if self.in_bounds(pos):
            self.grid[pos.y][pos.x].tile = tile

    def mark_visible(self, pos: Position) -> None:
        if self.in_bounds(pos):
            self.grid[pos.y][pos.x].visibility = Visibility.VISIBLE

    def squares(self) -> Iterator[tuple[Position, Square]]:
        """Iterate every in-bounds cell in row-major order."""
        for y, row in enumerate(self.grid):
            for x, sq in enumerate(row):
                yield Position(x=x, y=y), sq

    # -------------------------------------------------------------------------
    # Entity tables
    # -------------------------------------------------------------------------

    def entities(self) -> list[int]:
        """Ids of all living entities in ascending order."""
        return sorted(self.types)

    def exists(self, entity: int) -> bool:
        return entity in self.types

    def type_of(self, entity: int) -> EntityType:
        return self.types.get(entity, EntityType.UNKNOWN_THING)

    def position_of(self, entity: int) -> Position | None:
        return self.positions.get(entity)

    @property
    def player_position(self) -> Position | None:
        return self.positions.get(PLAYER)

    def make_entity(self, entity_type: EntityType) -> int:
        """Register a new entity id with ``entity_type`` and no position."""
        self.last_id += 1
        self.types[self.last_id] = entity_type
        return self.last_id

    def spawn_entity(self, entity_type: EntityType, pos: Position) -> int | None:
        """Create an entity at ``pos``, or return None if the cell is not open."""
        if not self.is_open(pos):
            return None
        entity = self.make_entity(entity_type)
        self.move_entity(entity, pos)
        return entity

    def move_entity(self, entity: int, pos: Position) -> bool:
        """Relocate ``entity`` to ``pos`` if that cell is open."""
        if entity not in self.types or not self.in_bounds(pos) or not self.is_open(pos):
            return False
        self.remove_entity(entity)
        self.grid[pos.y][pos.x].entity = entity
        self.positions[entity] = pos
        return True

    def remove_entity(self, entity: int) -> Position | None:
        """Take ``entity`` off the grid, keeping its other tables."""
        old_pos = self.positions.pop(entity, None)
        if old_pos is not None and self.grid[old_pos.y][old_pos.x].entity == entity:
            self.grid[old_pos.y][old_pos.x].entity = None
        return old_pos

    def destroy_entity(self, entity: int) -> None:
        """Remove ``entity`` from the grid and from every side table."""
        self.remove_entity(entity)
        self.types.pop(entity, None)
        self.goals.pop(entity, None)
        self.decks.pop(entity, None)
        self.modifiers.pop(entity, None)
        logger.debug("Entity destroyed", entity=entity, level=self.number)

    # -------------------------------------------------------------------------
    # Decks
    # -------------------------------------------------------------------------

    def deck_of(self, entity: int) -> list[CardState]:
        return self.decks.get(entity, [])

    def card_at(self, entity: int, index: int) -> CardState | None:
        deck = self.decks.get(entity)
        if deck is None or not 0 <= index < len(deck):
            return None
        return deck[index]

    def card_status(self, entity: int, index: int) -> CardStatus | None:
        state = self.card_at(entity, index)
        return state.status if state is not None else None

    def set_card_status(self, entity: int, index: int, status: CardStatus) -> bool:
        state = self.card_at(entity, index)
        if state is None:
            return False
        state.status = status
        state.played_on = None
        return True

    def hand_of(self, entity: int) -> list[CardState]:
        """Cards of ``entity`` that are Active or Inactive, in deck order."""
        return [cs for cs in self.deck_of(entity) if cs.in_hand]

    def modifiers_of(self, entity: int) -> list[Modification]:
        return self.modifiers.get(entity, [])

    def health(self, entity: int) -> int:
        """Remaining damage an entity can absorb before dying."""
        return len(self.hand_of(entity)) + len(self.modifiers_of(entity))

    # -------------------------------------------------------------------------
    # Views for the presentation layer
    # -------------------------------------------------------------------------

    def is_complete(self) -> bool:
        """Whether the player is standing on the exit."""
        pos = self.player_position
        return pos is not None and self.tile_at(pos) == Tile.EXIT

    def view(self, pos: Position) -> Glyph:
        """Render data for one cell, limited to what the player knows."""
        sq = self.square(pos)
        if sq.visibility == Visibility.UNKNOWN:
            return Glyph.unknown()
        if sq.visibility == Visibility.REMEMBERED:
            return Glyph.remembered(sq.tile)
        occupant = self.types.get(sq.entity) if sq.entity is not None else None
        return Glyph.visible(sq.tile, occupant)

    def render(self) -> str:
        """The whole map as text, one line per row."""
        return "\n".join(
            "".join(self.view(Position(x=x, y=y)).ch for x in range(self.width))
            for y in range(self.height)
        )

    def message_log(self) -> str:
        return self.log.text()

    def player_deck(self) -> list[CardView]:
        """The player's cards with statuses safe to show the player."""
        return [
            CardView(card=cs.card, status=self._known_status(cs))
            for cs in self.deck_of(PLAYER)
        ]

    def _known_status(self, cs: CardState) -> KnownCardStatus:
        simple = {
            CardStatus.ACTIVE: KnownCardStatusKind.ACTIVE,
            CardStatus.INACTIVE: KnownCardStatusKind.INACTIVE,
            CardStatus.DISCARDED: KnownCardStatusKind.DISCARDED,
        }
        if cs.status in simple:
            return KnownCardStatus(kind=simple[cs.status])

        target = cs.played_on
        if target == PLAYER:
            return KnownCardStatus(kind=KnownCardStatusKind.PLAYED_ON_SELF)
        if target is None or target not in self.types:
            return KnownCardStatus(kind=KnownCardStatusKind.DISCARDED)

        entity_type = self.types[target]
        pos = self.positions.get(target)
        if pos is not None and self.square(pos).visibility == Visibility.VISIBLE:
            return KnownCardStatus(
                kind=KnownCardStatusKind.PLAYED_ON_VISIBLE,
                entity_type=entity_type,
                position=pos,
            )
        return KnownCardStatus(kind=KnownCardStatusKind.PLAYED_ON_OTHER, entity_type=entity_type)


__all__ = ["MessageLog", "Level"]
