"""Pytest configuration and shared fixtures.

This module provides common fixtures for all tests in the deckdelve
test suite: settings isolation and hand-built levels whose layout does
not depend on the random generator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest

from deckdelve.core.config import GameSettings
from deckdelve.core.constants import PLAYER
from deckdelve.engine.rng import GameRng
from deckdelve.models.cards import Card, CardState
from deckdelve.models.enums import CardKind, CardStatus, EntityType, Tile
from deckdelve.models.geometry import Position
from deckdelve.models.level import Level


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from deckdelve.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def game_settings() -> GameSettings:
    """Provide settings that keep generated levels free of creatures.

    Returns:
        GameSettings with no spawn attempts.
    """
    return GameSettings(spawn_attempts=0)


# =============================================================================
# Level Fixtures
# =============================================================================


@pytest.fixture
def make_level(game_settings: GameSettings) -> Callable[..., Level]:
    """Factory for an open room: walls on the border, floor everywhere else.

    Returns:
        Function building a Level with the player placed and the full
        field of view left unknown.
    """

    def _make(
        *,
        seed: int = 1234,
        player_at: tuple[int, int] | None = (5, 5),
        player_deck: Iterable[Card] = (),
    ) -> Level:
        level = Level(GameRng(seed), player_deck=player_deck, settings=game_settings)
        for y in range(1, level.height - 1):
            for x in range(1, level.width - 1):
                level.set_tile(Position(x=x, y=y), Tile.FLOOR)
        if player_at is not None:
            assert level.move_entity(PLAYER, Position(x=player_at[0], y=player_at[1]))
        return level

    return _make


@pytest.fixture
def open_level(make_level: Callable[..., Level]) -> Level:
    """An open room with an empty-handed player at (5, 5)."""
    return make_level()


@pytest.fixture
def spawn() -> Callable[..., int]:
    """Factory placing a creature with an explicit deck.

    Returns:
        Function ``spawn(level, entity_type, x, y, cards=(), status=ACTIVE)``
        returning the new entity id.
    """

    def _spawn(
        level: Level,
        entity_type: EntityType,
        x: int,
        y: int,
        cards: Iterable[Card] = (),
        status: CardStatus = CardStatus.ACTIVE,
    ) -> int:
        entity = level.spawn_entity(entity_type, Position(x=x, y=y))
        assert entity is not None
        level.decks[entity] = [CardState(card=card, status=status) for card in cards]
        return entity

    return _spawn


@pytest.fixture
def filler_cards() -> Callable[[int], list[Card]]:
    """Factory for cards that never react to anything when inactive.

    Returns:
        Function returning ``n`` Block cards.
    """

    def _cards(n: int) -> list[Card]:
        return [Card(kind=CardKind.BLOCK) for _ in range(n)]

    return _cards
