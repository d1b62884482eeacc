"""Card resolution and event execution.

``process`` offers an event to the acting entity's cards in a random
order until one claims it, then ``execute`` applies whatever event is
left. Executing an attack processes the derived defence for the target,
and card effects may execute further events, so resolution is re-entrant.
The Resolver tracks the nesting on an explicit stack and refuses to go
deeper than the configured limit.

Damage has no separate counter: each point discards a random in-hand
card or removes a modifier, and an entity with nothing left to lose dies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from deckdelve.core.logging import get_logger
from deckdelve.engine.cards import trigger_card
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
from deckdelve.models.enums import CardStatus


if TYPE_CHECKING:
    from deckdelve.models.level import Level

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolutionFrame:
    """One ``process`` call in progress.

    Attributes:
        entity: Entity whose cards are being consulted.
        event_type: Name of the event class being resolved.
    """

    entity: int
    event_type: str


class Resolver:
    """Resolves events against one level.

    Attributes:
        level: The level being mutated.
        max_depth: Maximum number of nested ``process`` calls.
    """

    def __init__(self, level: Level, *, max_depth: int | None = None) -> None:
        """Initialize the resolver.

        Args:
            level: The level to resolve events on.
            max_depth: Nesting limit; defaults to the level's settings.
        """
        self.level = level
        self.max_depth = (
            max_depth if max_depth is not None else level.settings.max_resolution_depth
        )
        self._stack: list[ResolutionFrame] = []

    @property
    def stack(self) -> tuple[ResolutionFrame, ...]:
        """Frames currently being resolved, outermost first."""
        return tuple(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def process(self, entity: int, event: Event) -> Event:
        """Run ``event`` through ``entity``'s cards, then execute it.

        Cards are tried in a fresh random permutation of the whole deck
        index range; inactive and spent cards are skipped. The first card
        whose effect claims the event stops the scan.

        Args:
            entity: The acting entity.
            event: The pending event; cards may mutate it.

        Returns:
            The event that was executed (NoEvent if cancelled or dropped).
        """
        if len(self._stack) >= self.max_depth:
            logger.warning(
                "Resolution depth exceeded, dropping event",
                entity=entity,
                event_type=type(event).__name__,
                depth=len(self._stack),
            )
            return NoEvent()

        self._stack.append(ResolutionFrame(entity=entity, event_type=type(event).__name__))
        try:
            order = list(range(len(self.level.deck_of(entity))))
            self.level.rng.shuffle(order)
            for index in order:
                state = self.level.card_at(entity, index)
                if state is None or state.status != CardStatus.ACTIVE:
                    continue
                outcome = trigger_card(self, entity, state.card, event)
                if not outcome.claims:
                    continue
                if outcome.discards:
                    self.level.set_card_status(entity, index, CardStatus.DISCARDED)
                if outcome.cancels:
                    event = NoEvent()
                break
            self.execute(entity, event)
        finally:
            self._stack.pop()
        return event

    def execute(self, entity: int, event: Event) -> None:
        """Apply ``event`` for ``entity`` without consulting its cards.

        Events for entities that no longer exist are ignored.
        """
        level = self.level
        if not level.exists(entity):
            logger.debug(
                "Skipping event for absent entity",
                entity=entity,
                event_type=type(event).__name__,
            )
            return

        actor = level.type_of(entity)
        if isinstance(event, MoveEvent):
            level.move_entity(entity, event.destination)
        elif isinstance(event, RecoverEvent):
            self.recover(entity)
        elif isinstance(event, DisableEvent):
            level.set_card_status(entity, event.index, CardStatus.INACTIVE)
        elif isinstance(event, EnableEvent):
            level.set_card_status(entity, event.index, CardStatus.ACTIVE)
        elif isinstance(event, AttackEvent):
            if not level.exists(event.target):
                return
            level.log.add(
                f"{actor} attacks the {level.type_of(event.target)} for {event.damage} damage!"
            )
            self.process(
                event.target,
                DefendEvent(source=entity, damage=event.damage, direction=event.direction),
            )
        elif isinstance(event, DefendEvent):
            source = level.type_of(event.source)
            level.log.add(f"{source} hits the {actor} for {event.damage} damage!")
            if self.take_damage(entity, event.damage):
                level.destroy_entity(entity)
                level.log.add(f"{source} kills the {actor}!")
        elif isinstance(event, (WaitEvent, NoEvent)):
            pass

    def take_damage(self, entity: int, damage: int) -> bool:
        """Absorb ``damage`` points by discarding cards and removing modifiers.

        Each point picks uniformly among the in-hand cards and active
        modifiers of ``entity`` and removes the pick.

        Returns:
            True if a point remained with nothing left to absorb it.
        """
        level = self.level
        owner = level.type_of(entity)
        hand = level.hand_of(entity)
        mods = level.modifiers.get(entity, [])
        for _ in range(damage):
            options = len(hand) + len(mods)
            if options == 0:
                return True
            selection = level.rng.gen_range(0, options)
            if selection < len(hand):
                state = hand.pop(selection)
                level.log.add(f"({owner}'s {state.card} card was discarded by damage)")
                state.status = CardStatus.DISCARDED
                state.played_on = None
            else:
                mods.pop(selection - len(hand))
        return False

    def recover(self, entity: int) -> None:
        """Return one random spent card of ``entity`` to the hand as Active."""
        spent = [state for state in self.level.deck_of(entity) if not state.in_hand]
        chosen = self.level.rng.choose(spent)
        if chosen is not None:
            chosen.status = CardStatus.ACTIVE
            chosen.played_on = None


__all__ = ["ResolutionFrame", "Resolver"]
