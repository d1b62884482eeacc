"""Tests for event resolution and execution."""

from __future__ import annotations

from collections.abc import Callable

from deckdelve.core.constants import PLAYER
from deckdelve.engine.events import (
    AttackEvent,
    DefendEvent,
    DisableEvent,
    EnableEvent,
    MoveEvent,
    NoEvent,
    RecoverEvent,
    WaitEvent,
)
from deckdelve.engine.resolution import Resolver
from deckdelve.models.cards import Card, Modification
from deckdelve.models.enums import CardKind, CardStatus, EntityType
from deckdelve.models.geometry import Position
from deckdelve.models.level import Level


BLOCK = Card(kind=CardKind.BLOCK)
STRIKE = Card(kind=CardKind.STRIKE)


class TestResolver:
    """Tests for Resolver bookkeeping."""

    def test_default_depth_from_settings(self, open_level: Level) -> None:
        """Test the nesting limit comes from the level settings."""
        assert Resolver(open_level).max_depth == open_level.settings.max_resolution_depth

    def test_explicit_zero_depth_kept(self, open_level: Level) -> None:
        """Test a zero nesting limit is honoured and drops every event."""
        resolver = Resolver(open_level, max_depth=0)

        result = resolver.process(PLAYER, MoveEvent(destination=Position(x=6, y=5)))

        assert resolver.max_depth == 0
        assert isinstance(result, NoEvent)
        assert open_level.player_position == Position(x=5, y=5)

    def test_stack_unwinds(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test the resolution stack is empty after processing."""
        target = spawn(open_level, EntityType.HUNTER, 6, 5, [BLOCK])
        resolver = Resolver(open_level)

        resolver.process(PLAYER, AttackEvent(target=target, damage=1))

        assert resolver.depth == 0
        assert resolver.stack == ()

    def test_depth_limit_drops_nested_event(
        self,
        open_level: Level,
        spawn: Callable[..., int],
    ) -> None:
        """Test an event past the nesting limit is dropped, not executed."""
        target = spawn(open_level, EntityType.HUNTER, 6, 5)
        resolver = Resolver(open_level, max_depth=1)

        result = resolver.process(PLAYER, AttackEvent(target=target, damage=1))

        assert isinstance(result, AttackEvent)
        assert open_level.exists(target)
        assert "Player attacks the Hunter for 1 damage!" in open_level.log
        assert not any("hits the" in line for line in open_level.log)
        assert resolver.depth == 0

    def test_inactive_cards_do_not_trigger(
        self,
        make_level: Callable[..., Level],
        spawn: Callable[..., int],
    ) -> None:
        """Test only Active cards are offered the event."""
        level = make_level()
        target = spawn(level, EntityType.DEFENDER, 6, 5, [BLOCK], CardStatus.INACTIVE)

        Resolver(level).process(PLAYER, AttackEvent(target=target, damage=1))

        assert level.card_status(target, 0) == CardStatus.DISCARDED
        assert "(Defender's Block card was discarded by damage)" in level.log


class TestExecute:
    """Tests for Resolver.execute."""

    def test_move(self, open_level: Level) -> None:
        """Test a move relocates the entity."""
        Resolver(open_level).execute(PLAYER, MoveEvent(destination=Position(x=5, y=6)))
        assert open_level.player_position == Position(x=5, y=6)

    def test_blocked_move_is_noop(self, open_level: Level) -> None:
        """Test moving into a wall leaves the entity in place."""
        Resolver(open_level).execute(PLAYER, MoveEvent(destination=Position(x=5, y=0)))
        assert open_level.player_position == Position(x=5, y=5)

    def test_wait_and_no_event(self, open_level: Level) -> None:
        """Test no-op events change nothing."""
        resolver = Resolver(open_level)
        resolver.execute(PLAYER, WaitEvent())
        resolver.execute(PLAYER, NoEvent())
        assert len(open_level.log) == 0
        assert open_level.player_position == Position(x=5, y=5)

    def test_toggle(self, make_level: Callable[..., Level]) -> None:
        """Test disabling and enabling a card."""
        level = make_level(player_deck=[STRIKE])
        resolver = Resolver(level)

        resolver.execute(PLAYER, DisableEvent(index=0))
        assert level.card_status(PLAYER, 0) == CardStatus.INACTIVE

        resolver.execute(PLAYER, EnableEvent(index=0))
        assert level.card_status(PLAYER, 0) == CardStatus.ACTIVE

    def test_absent_entity_skipped(self, open_level: Level) -> None:
        """Test events for destroyed entities are ignored."""
        Resolver(open_level).execute(42, MoveEvent(destination=Position(x=6, y=6)))
        assert open_level.occupant(Position(x=6, y=6)) is None
        assert open_level.entities() == [PLAYER]

    def test_attack_on_absent_target_skipped(self, open_level: Level) -> None:
        """Test attacking a destroyed entity does nothing."""
        Resolver(open_level).execute(PLAYER, AttackEvent(target=42, damage=3))
        assert len(open_level.log) == 0

    def test_lethal_hit_messages(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test the attack, hit and kill lines are logged in order."""
        target = spawn(open_level, EntityType.REAPER, 6, 5)

        Resolver(open_level).execute(PLAYER, AttackEvent(target=target, damage=1))

        assert list(open_level.log) == [
            "Player attacks the Reaper for 1 damage!",
            "Player hits the Reaper for 1 damage!",
            "Player kills the Reaper!",
        ]
        assert not open_level.exists(target)
        assert open_level.occupant(Position(x=6, y=5)) is None

    def test_defend_from_destroyed_source(
        self,
        open_level: Level,
        spawn: Callable[..., int],
    ) -> None:
        """Test a hit from a vanished source still names it as absent."""
        target = spawn(open_level, EntityType.HUNTER, 6, 5, [BLOCK])

        Resolver(open_level).execute(target, DefendEvent(source=42, damage=1))

        assert open_level.log.messages[0] == "UnknownThing hits the Hunter for 1 damage!"


class TestRecover:
    """Tests for recovering spent cards."""

    def test_recover_returns_spent_card(self, make_level: Callable[..., Level]) -> None:
        """Test a discarded card comes back Active."""
        level = make_level(player_deck=[BLOCK, STRIKE])
        level.set_card_status(PLAYER, 0, CardStatus.DISCARDED)

        Resolver(level).execute(PLAYER, RecoverEvent())

        assert level.card_status(PLAYER, 0) == CardStatus.ACTIVE

    def test_recover_played_card(self, make_level: Callable[..., Level]) -> None:
        """Test a card played on another entity is also recoverable."""
        level = make_level(player_deck=[BLOCK])
        level.deck_of(PLAYER)[0].play_on(3)

        Resolver(level).execute(PLAYER, RecoverEvent())

        state = level.deck_of(PLAYER)[0]
        assert state.status == CardStatus.ACTIVE
        assert state.played_on is None

    def test_recover_with_full_hand(self, make_level: Callable[..., Level]) -> None:
        """Test recovering with nothing spent leaves the deck alone."""
        level = make_level(player_deck=[BLOCK, STRIKE])
        level.set_card_status(PLAYER, 1, CardStatus.INACTIVE)

        Resolver(level).execute(PLAYER, RecoverEvent())

        assert [cs.status for cs in level.deck_of(PLAYER)] == [
            CardStatus.ACTIVE,
            CardStatus.INACTIVE,
        ]


class TestTakeDamage:
    """Tests for damage absorption."""

    def test_modifiers_absorb(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test modifiers soak damage when the hand is empty."""
        entity = spawn(open_level, EntityType.DEFENDER, 6, 5)
        open_level.modifiers[entity] = [
            Modification(source=PLAYER, source_index=0),
            Modification(source=PLAYER, source_index=1),
        ]

        assert Resolver(open_level).take_damage(entity, 2) is False
        assert open_level.modifiers_of(entity) == []

    def test_overflow_is_lethal(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test a point with nothing left to absorb it kills."""
        entity = spawn(open_level, EntityType.DEFENDER, 6, 5)
        open_level.modifiers[entity] = [Modification(source=PLAYER, source_index=0)]

        assert Resolver(open_level).take_damage(entity, 2) is True

    def test_mixed_pool(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test cards and modifiers share one absorption pool."""
        entity = spawn(open_level, EntityType.DEFENDER, 6, 5, [BLOCK])
        open_level.modifiers[entity] = [Modification(source=PLAYER, source_index=0)]

        assert Resolver(open_level).take_damage(entity, 2) is False
        assert open_level.health(entity) == 0
        assert open_level.card_status(entity, 0) == CardStatus.DISCARDED

    def test_zero_damage(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test a zero-damage hit changes nothing, even with an empty pool."""
        entity = spawn(open_level, EntityType.HUNTER, 6, 5)
        assert Resolver(open_level).take_damage(entity, 0) is False

    def test_direction_is_optional(self, open_level: Level, spawn: Callable[..., int]) -> None:
        """Test attacks without a direction resolve normally."""
        target = spawn(open_level, EntityType.HUNTER, 6, 5, [BLOCK], CardStatus.INACTIVE)
        Resolver(open_level).execute(
            PLAYER,
            AttackEvent(target=target, damage=1, direction=None),
        )
        assert open_level.health(target) == 0
