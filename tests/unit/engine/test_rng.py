"""Tests for the deterministic random generator."""

from __future__ import annotations

import pytest

from deckdelve.core.exceptions import ValidationError
from deckdelve.engine.rng import SEED_LIMIT, GameRng


class TestGameRng:
    """Tests for GameRng."""

    def test_same_seed_same_draws(self) -> None:
        """Test that equal seeds produce equal sequences."""
        a = GameRng(99)
        b = GameRng(99)
        assert [a.gen_range(0, 1000) for _ in range(20)] == [
            b.gen_range(0, 1000) for _ in range(20)
        ]

    @pytest.mark.parametrize("seed", [-1, SEED_LIMIT])
    def test_seed_out_of_range(self, seed: int) -> None:
        """Test seeds must be unsigned 32-bit integers."""
        with pytest.raises(ValidationError) as exc_info:
            GameRng(seed)
        assert exc_info.value.details["field_name"] == "seed"

    def test_seed_bounds_accepted(self) -> None:
        """Test the extreme valid seeds."""
        assert GameRng(0).seed == 0
        assert GameRng(SEED_LIMIT - 1).seed == SEED_LIMIT - 1

    def test_gen_range_half_open(self) -> None:
        """Test the upper bound is exclusive."""
        rng = GameRng(5)
        draws = {rng.gen_range(2, 4) for _ in range(200)}
        assert draws == {2, 3}

    def test_choose_empty_does_not_draw(self) -> None:
        """Test choosing from nothing leaves the sequence untouched."""
        rng = GameRng(7)
        twin = rng.clone()
        assert rng.choose([]) is None
        assert rng.gen_range(0, 10**6) == twin.gen_range(0, 10**6)

    def test_choose_picks_member(self) -> None:
        """Test choose returns one of the items."""
        rng = GameRng(7)
        assert rng.choose(("a", "b", "c")) in {"a", "b", "c"}

    def test_shuffle_is_permutation(self) -> None:
        """Test shuffling keeps every element."""
        items = list(range(10))
        GameRng(3).shuffle(items)
        assert sorted(items) == list(range(10))

    def test_state_round_trip_continues_sequence(self) -> None:
        """Test a restored generator continues where the original was."""
        rng = GameRng(1234)
        for _ in range(5):
            rng.gen_range(0, 100)
        restored = GameRng.from_state(rng.getstate())

        assert restored.seed == 1234
        assert [restored.gen_range(0, 100) for _ in range(10)] == [
            rng.gen_range(0, 100) for _ in range(10)
        ]

    def test_clone_is_independent(self) -> None:
        """Test drawing from a clone does not advance the original."""
        rng = GameRng(11)
        clone = rng.clone()
        clone.gen_range(0, 100)
        fresh = GameRng(11)
        assert rng.gen_range(0, 100) == fresh.gen_range(0, 100)
