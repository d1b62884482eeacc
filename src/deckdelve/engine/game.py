"""Run-level state machine.

A Game is always in exactly one of three states: playing a Level,
waiting on a LevelTransition between levels, or Victory. ``update``
moves between them at level boundaries; ``step`` plays a turn on the
active level.

The random generator is created once from the run's seed. On each
transition its state is serialized into the LevelTransition and
restored for the next level, so a seed and an action sequence replay
identically across levels.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from deckdelve.core.config import GameSettings, get_settings
from deckdelve.core.constants import PLAYER
from deckdelve.core.exceptions import InvalidGameStateError
from deckdelve.core.logging import get_logger
from deckdelve.engine.generator import LevelType, generate
from deckdelve.engine.loop import step as step_level
from deckdelve.engine.rng import GameRng
from deckdelve.engine.visibility import refresh_visibility
from deckdelve.models.actions import Action
from deckdelve.models.cards import Card
from deckdelve.models.enums import CardKind
from deckdelve.models.level import Level


logger = get_logger(__name__)

STARTING_DECK: tuple[Card, ...] = (
    Card(kind=CardKind.ATTACK, value=1),
    Card(kind=CardKind.KILL, value=1),
    Card(kind=CardKind.STRIKE),
    Card(kind=CardKind.PUSH),
    Card(kind=CardKind.DODGE),
    Card(kind=CardKind.DEFEND, value=2),
    Card(kind=CardKind.BLOCK),
)
"""The player's deck at the start of a run."""

TRANSITION_MUTATIONS: tuple[Card, Card, Card] = (
    Card(kind=CardKind.ATTACK, value=1),
    Card(kind=CardKind.ATTACK, value=2),
    Card(kind=CardKind.ATTACK, value=3),
)
"""Cards offered between levels."""


@dataclass
class LevelTransition:
    """Everything carried from a finished level into the next one.

    Attributes:
        next_level: Number of the level to build.
        deck: The player's cards, all of which return Active.
        collected: Reward cards collected so far.
        mutations: Cards offered to the player between levels.
        rng_state: Serialized generator state (see GameRng.getstate).
    """

    next_level: int
    deck: list[Card]
    rng_state: tuple[int, tuple[Any, ...]]
    collected: Counter[Card] = field(default_factory=Counter)
    mutations: tuple[Card, Card, Card] = TRANSITION_MUTATIONS


@dataclass(frozen=True)
class Victory:
    """The run has been won."""


def next_level(
    number: int,
    player_deck: Iterable[Card],
    rng: GameRng,
    *,
    settings: GameSettings | None = None,
    level_type: LevelType = LevelType.TEST,
) -> Level:
    """Build, populate and light a level.

    Args:
        number: Depth of the new level.
        player_deck: Cards the player carries in.
        rng: Generator to continue drawing from.
        settings: Simulation settings; defaults to the global settings.
        level_type: Layout generator to use.

    Returns:
        A ready-to-play Level with visibility computed.
    """
    level = Level(rng, number=number, player_deck=player_deck, settings=settings)
    generate(level, level_type)
    refresh_visibility(level, clear_previous=True)
    return level


def new_level(seed: int, *, settings: GameSettings | None = None) -> Level:
    """Build the first level of a run from ``seed``.

    Raises:
        ValidationError: If ``seed`` is not an unsigned 32-bit integer.
    """
    return next_level(0, STARTING_DECK, GameRng(seed), settings=settings)


class Game:
    """A whole run, from the first level to victory.

    Attributes:
        state: The active Level, a pending LevelTransition, or Victory.
        settings: Simulation settings used for every level of the run.
    """

    def __init__(
        self,
        state: Level | LevelTransition | Victory,
        *,
        settings: GameSettings | None = None,
    ) -> None:
        self.state = state
        self.settings = settings or get_settings().game

    @classmethod
    def new(cls, seed: int, *, settings: GameSettings | None = None) -> Game:
        """Start a fresh run.

        Raises:
            ValidationError: If ``seed`` is not an unsigned 32-bit integer.
        """
        settings = settings or get_settings().game
        logger.info("New game", seed=seed)
        return cls(new_level(seed, settings=settings), settings=settings)

    @property
    def level(self) -> Level:
        """The active level.

        Raises:
            InvalidGameStateError: If the game is not on a level.
        """
        if not isinstance(self.state, Level):
            raise InvalidGameStateError(
                "No level is being played",
                current_state=type(self.state).__name__,
                expected_states=["Level"],
            )
        return self.state

    @property
    def is_playing(self) -> bool:
        return isinstance(self.state, Level)

    @property
    def is_transition(self) -> bool:
        return isinstance(self.state, LevelTransition)

    @property
    def is_victory(self) -> bool:
        return isinstance(self.state, Victory)

    def step(self, action: Action) -> bool:
        """Play one turn on the active level; False when there is none."""
        if not isinstance(self.state, Level):
            return False
        return step_level(self.state, action)

    def update(self) -> bool:
        """Advance across a level boundary if one has been reached.

        A completed level becomes a transition, or Victory if it was the
        final level; a transition becomes the next level.

        Returns:
            True if the state changed.
        """
        state = self.state
        if isinstance(state, Level):
            if not state.is_complete():
                return False
            if state.number >= self.settings.final_level:
                logger.info("Run won", level=state.number)
                self.state = Victory()
            else:
                self.state = LevelTransition(
                    next_level=state.number + 1,
                    deck=[cs.card for cs in state.deck_of(PLAYER)],
                    collected=Counter(state.collected),
                    rng_state=state.rng.getstate(),
                )
            return True
        if isinstance(state, LevelTransition):
            level = next_level(
                state.next_level,
                state.deck,
                GameRng.from_state(state.rng_state),
                settings=self.settings,
            )
            level.collected.update(state.collected)
            logger.info("Entering level", level=state.next_level)
            self.state = level
            return True
        return False


def new_game(seed: int, *, settings: GameSettings | None = None) -> Game:
    """Start a fresh run from ``seed``."""
    return Game.new(seed, settings=settings)


__all__ = [
    "STARTING_DECK",
    "TRANSITION_MUTATIONS",
    "LevelTransition",
    "Victory",
    "Game",
    "next_level",
    "new_level",
    "new_game",
]
