"""Simulation engine for deckdelve.

This module provides the rules of the game: seeded randomness, level
generation, the field of view, card resolution, creature behaviour and
the turn loop, tied together by the Game state machine.

Submodules:
    rng: Seeded, serializable random generator.
    generator: Room-stencil level generation and entity spawning.
    visibility: Octant flood-fill field of view.
    events: Events that flow through card resolution.
    cards: Registry of card effects keyed by (card kind, event type).
    resolution: Reactive event resolution and execution.
    actions: Translation of player/AI actions into events.
    ai: Creature goal tracking and movement choice.
    loop: One full game turn.
    game: Level / transition / victory state machine.

Example:
    >>> from deckdelve.engine import Game
    >>> from deckdelve.models import Action
    >>>
    >>> game = Game.new(seed=1234)
    >>> game.step(Action.wait())
    True
    >>> game.update()
    False
"""

from __future__ import annotations

# =============================================================================
# Randomness
# =============================================================================
from deckdelve.engine.rng import SEED_LIMIT, GameRng

# =============================================================================
# Events and Cards
# =============================================================================
from deckdelve.engine.events import (
    AttackEvent,
    DefendEvent,
    DisableEvent,
    EnableEvent,
    Event,
    MoveEvent,
    NoEvent,
    RecoverEvent,
    WaitEvent,
)
from deckdelve.engine.cards import (
    CardEffect,
    CardOutcome,
    card_effect,
    get_card_effect,
    get_card_effects,
    trigger_card,
    unregister_card_effect,
)
from deckdelve.engine.resolution import ResolutionFrame, Resolver

# =============================================================================
# World
# =============================================================================
from deckdelve.engine.generator import (
    STARTING_DECKS,
    LevelType,
    RoomStyle,
    generate,
    place_entity,
    place_room,
    transform,
)
from deckdelve.engine.visibility import refresh_visibility

# =============================================================================
# Turns
# =============================================================================
from deckdelve.engine.actions import action_to_event, do_action
from deckdelve.engine.ai import choose_action, take_turn
from deckdelve.engine.loop import step

# =============================================================================
# Game
# =============================================================================
from deckdelve.engine.game import (
    STARTING_DECK,
    TRANSITION_MUTATIONS,
    Game,
    LevelTransition,
    Victory,
    new_game,
    new_level,
    next_level,
)


__all__ = [
    # Randomness
    "GameRng",
    "SEED_LIMIT",
    # Events
    "Event",
    "MoveEvent",
    "RecoverEvent",
    "WaitEvent",
    "DisableEvent",
    "EnableEvent",
    "AttackEvent",
    "DefendEvent",
    "NoEvent",
    # Cards
    "CardOutcome",
    "CardEffect",
    "card_effect",
    "get_card_effect",
    "get_card_effects",
    "unregister_card_effect",
    "trigger_card",
    "ResolutionFrame",
    "Resolver",
    # World
    "LevelType",
    "RoomStyle",
    "STARTING_DECKS",
    "transform",
    "generate",
    "place_entity",
    "place_room",
    "refresh_visibility",
    # Turns
    "action_to_event",
    "do_action",
    "choose_action",
    "take_turn",
    "step",
    # Game
    "STARTING_DECK",
    "TRANSITION_MUTATIONS",
    "Game",
    "LevelTransition",
    "Victory",
    "new_game",
    "new_level",
    "next_level",
]
