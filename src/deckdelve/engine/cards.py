"""Card effects and their registry.

Each card kind reacts to specific event types. Effects are registered
in a dispatch table keyed by ``(card kind, event type)`` with the
:func:`card_effect` decorator, so a new card only needs a new handler;
the resolution loop in :mod:`deckdelve.engine.resolution` never changes.

A handler receives the resolver (for level access and for executing
side events), the id of the card's owner, the card and the pending
event. It may mutate the event in place and returns a CardOutcome
telling the resolver whether the card claimed the event.

Effects:
    Attack(n) on Attack: add ``n`` damage
    Defend(n) on Defend: absorb ``n`` damage when the hit is at least ``n``
    Kill(n) on Attack: finish off a target that cannot survive ``damage + n``
    Strike on Move: step in and hit whoever stands beyond the destination
    Dodge on Defend: sidestep along the attack direction
    Block on Defend: absorb the whole hit
    Push on Attack: shove the target back one cell
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, TypeVar

from deckdelve.core.constants import BASE_ATTACK_DAMAGE
from deckdelve.core.logging import get_logger
from deckdelve.engine.events import AttackEvent, DefendEvent, Event, MoveEvent
from deckdelve.models.cards import Card
from deckdelve.models.enums import CardKind, Tile


if TYPE_CHECKING:
    from deckdelve.engine.resolution import Resolver

logger = get_logger(__name__)


class CardOutcome(StrEnum):
    """Result of offering an event to one card."""

    CONTINUE = "continue"
    """The card does not apply; keep scanning."""

    DONE = "done"
    """The card claimed the event; the (possibly modified) event executes."""

    DISCARD = "discard"
    """As DONE, and the card is discarded."""

    CANCEL = "cancel"
    """The card claimed the event and replaced it with a no-op."""

    DISCARD_AND_CANCEL = "discard_and_cancel"
    """As CANCEL, and the card is discarded."""

    @property
    def claims(self) -> bool:
        return self != CardOutcome.CONTINUE

    @property
    def discards(self) -> bool:
        return self in (CardOutcome.DISCARD, CardOutcome.DISCARD_AND_CANCEL)

    @property
    def cancels(self) -> bool:
        return self in (CardOutcome.CANCEL, CardOutcome.DISCARD_AND_CANCEL)


CardHandler = Callable[["Resolver", int, Card, Event], CardOutcome]
H = TypeVar("H", bound=CardHandler)


# =============================================================================
# Card Registry
# =============================================================================


@dataclass(frozen=True)
class CardEffect:
    """A registered reaction of one card kind to one event type.

    Attributes:
        kind: Card kind the effect belongs to.
        event_type: Event class the effect reacts to.
        handler: Function applying the effect.
        description: Human-readable rule text.
    """

    kind: CardKind
    event_type: type[Event]
    handler: CardHandler
    description: str = ""


_card_registry: dict[tuple[CardKind, type[Event]], CardEffect] = {}


def card_effect(
    kind: CardKind,
    event_type: type[Event],
    *,
    description: str = "",
) -> Callable[[H], H]:
    """Decorator registering a handler for ``kind`` cards on ``event_type`` events.

    Registering the same pair twice replaces the earlier handler.

    Args:
        kind: Card kind.
        event_type: Event class the handler accepts.
        description: Rule text shown to players.

    Returns:
        Decorator returning the handler unchanged.
    """
    def decorator(func: H) -> H:
        _card_registry[(kind, event_type)] = CardEffect(
            kind=kind,
            event_type=event_type,
            handler=func,
            description=description,
        )
        return func

    return decorator


def get_card_effect(kind: CardKind, event_type: type[Event]) -> CardEffect | None:
    """Get the effect registered for a card kind and event type."""
    return _card_registry.get((kind, event_type))


def get_card_effects(kind: CardKind) -> list[CardEffect]:
    """Get every effect registered for a card kind."""
    return [effect for (k, _), effect in _card_registry.items() if k == kind]


def unregister_card_effect(kind: CardKind, event_type: type[Event]) -> None:
    """Remove a registered effect, if present."""
    _card_registry.pop((kind, event_type), None)


def trigger_card(resolver: Resolver, entity: int, card: Card, event: Event) -> CardOutcome:
    """Offer ``event`` to ``card`` owned by ``entity``.

    Returns:
        The handler's outcome, or CONTINUE when the card has no effect
        for this event type.
    """
    effect = get_card_effect(card.kind, type(event))
    if effect is None:
        return CardOutcome.CONTINUE
    return effect.handler(resolver, entity, card, event)


def _announce(resolver: Resolver, entity: int, card: Card, *, discarded: bool = False) -> None:
    owner = resolver.level.type_of(entity)
    suffix = " and was discarded" if discarded else ""
    resolver.level.log.add(f"({owner}'s {card} card activated{suffix})")


# =============================================================================
# Reference Card Effects
# =============================================================================


@card_effect(CardKind.ATTACK, AttackEvent, description="Adds its value to an attack's damage.")
def attack_card(resolver: Resolver, entity: int, card: Card, event: AttackEvent) -> CardOutcome:
    _announce(resolver, entity, card)
    event.damage += card.value or 0
    return CardOutcome.DONE


@card_effect(
    CardKind.DEFEND,
    DefendEvent,
    description="Absorbs its value from a hit at least that strong, then is discarded.",
)
def defend_card(resolver: Resolver, entity: int, card: Card, event: DefendEvent) -> CardOutcome:
    value = card.value or 0
    if event.damage < value:
        return CardOutcome.CONTINUE
    _announce(resolver, entity, card, discarded=True)
    event.damage -= value
    return CardOutcome.DISCARD


@card_effect(
    CardKind.KILL,
    AttackEvent,
    description="If the boosted hit would exceed the target's health, it lands immediately.",
)
def kill_card(resolver: Resolver, entity: int, card: Card, event: AttackEvent) -> CardOutcome:
    damage = event.damage + (card.value or 0)
    if damage <= resolver.level.health(event.target):
        return CardOutcome.CONTINUE
    _announce(resolver, entity, card)
    resolver.execute(
        event.target,
        DefendEvent(source=entity, damage=damage, direction=event.direction),
    )
    return CardOutcome.CANCEL


@card_effect(
    CardKind.STRIKE,
    MoveEvent,
    description="Moving next to a creature also attacks it.",
)
def strike_card(resolver: Resolver, entity: int, card: Card, event: MoveEvent) -> CardOutcome:
    if event.direction is None:
        return CardOutcome.CONTINUE
    target = resolver.level.occupant(event.destination.step(event.direction))
    if target is None:
        return CardOutcome.CONTINUE
    _announce(resolver, entity, card)
    resolver.execute(entity, MoveEvent(destination=event.destination, direction=event.direction))
    resolver.execute(
        entity,
        AttackEvent(target=target, damage=BASE_ATTACK_DAMAGE, direction=event.direction),
    )
    return CardOutcome.CANCEL


@card_effect(
    CardKind.DODGE,
    DefendEvent,
    description="Step away from a hit, attacking whoever is in the way.",
)
def dodge_card(resolver: Resolver, entity: int, card: Card, event: DefendEvent) -> CardOutcome:
    if event.direction is None:
        return CardOutcome.CONTINUE
    pos = resolver.level.position_of(entity)
    if pos is None:
        return CardOutcome.CONTINUE
    new_pos = pos.step(event.direction)
    if resolver.level.tile_at(new_pos) == Tile.WALL:
        return CardOutcome.CONTINUE
    _announce(resolver, entity, card)
    blocker = resolver.level.occupant(new_pos)
    if blocker is not None:
        resolver.execute(
            entity,
            AttackEvent(target=blocker, damage=BASE_ATTACK_DAMAGE, direction=event.direction),
        )
        return CardOutcome.DISCARD
    resolver.execute(entity, MoveEvent(destination=new_pos, direction=event.direction))
    return CardOutcome.DISCARD_AND_CANCEL


@card_effect(CardKind.BLOCK, DefendEvent, description="Absorbs a whole hit, then is discarded.")
def block_card(resolver: Resolver, entity: int, card: Card, event: DefendEvent) -> CardOutcome:
    _announce(resolver, entity, card, discarded=True)
    return CardOutcome.DISCARD_AND_CANCEL


@card_effect(
    CardKind.PUSH,
    AttackEvent,
    description="Shoves the target back and follows it, or slams it into whoever is behind.",
)
def push_card(resolver: Resolver, entity: int, card: Card, event: AttackEvent) -> CardOutcome:
    if event.direction is None:
        return CardOutcome.CONTINUE
    target_pos = resolver.level.position_of(event.target)
    if target_pos is None:
        return CardOutcome.CONTINUE
    new_pos = target_pos.step(event.direction)
    if resolver.level.tile_at(new_pos) == Tile.WALL:
        return CardOutcome.CONTINUE
    _announce(resolver, entity, card)
    behind = resolver.level.occupant(new_pos)
    if behind is not None:
        resolver.execute(
            event.target,
            AttackEvent(target=behind, damage=BASE_ATTACK_DAMAGE, direction=event.direction),
        )
    else:
        resolver.execute(event.target, MoveEvent(destination=new_pos, direction=event.direction))
        resolver.execute(entity, MoveEvent(destination=target_pos, direction=event.direction))
    return CardOutcome.DONE


__all__ = [
    "CardOutcome",
    "CardHandler",
    "CardEffect",
    "card_effect",
    "get_card_effect",
    "get_card_effects",
    "unregister_card_effect",
    "trigger_card",
]
