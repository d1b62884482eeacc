"""Deterministic random number generation.

Every random decision in a run (map layout, creature placement, card
shuffles, damage absorption, AI movement) draws from a single GameRng
owned by the current level. The generator is seeded once per run and its
state is carried across level transitions, so a seed plus an action
sequence always reproduces the same game.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

from deckdelve.core.exceptions import ValidationError
from deckdelve.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")

SEED_LIMIT = 2**32
"""Seeds are unsigned 32-bit integers."""


class GameRng:
    """Seeded generator with the draw shapes the engine needs.

    Example:
        >>> rng = GameRng(1234)
        >>> rng.gen_range(0, 8) in range(8)
        True
    """

    def __init__(self, seed: int) -> None:
        """Initialize the generator.

        Args:
            seed: Unsigned 32-bit seed.

        Raises:
            ValidationError: If the seed is outside ``[0, 2**32)``.
        """
        if not 0 <= seed < SEED_LIMIT:
            raise ValidationError(
                "Seed must be an unsigned 32-bit integer",
                field_name="seed",
                invalid_value=seed,
            )
        self._seed = seed
        self._random = random.Random(seed)
        logger.debug("GameRng initialized", seed=seed)

    @property
    def seed(self) -> int:
        return self._seed

    def gen_range(self, low: int, high: int) -> int:
        """Uniform integer in the half-open range ``[low, high)``."""
        return self._random.randrange(low, high)

    def choose(self, items: Sequence[T]) -> T | None:
        """Uniformly pick one item, or None (without drawing) if empty."""
        if not items:
            return None
        return items[self._random.randrange(len(items))]

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place."""
        self._random.shuffle(items)

    def getstate(self) -> tuple[int, tuple[Any, ...]]:
        """Serializable snapshot: the original seed and the generator state."""
        return self._seed, self._random.getstate()

    @classmethod
    def from_state(cls, state: tuple[int, tuple[Any, ...]]) -> GameRng:
        """Rebuild a generator from :meth:`getstate` output."""
        seed, inner = state
        rng = cls(seed)
        rng._random.setstate(inner)
        return rng

    def clone(self) -> GameRng:
        """Independent copy that will produce the same future draws."""
        return GameRng.from_state(self.getstate())


__all__ = ["GameRng", "SEED_LIMIT"]
