"""Translation of abstract actions into events.

The player and the AI share this path: an Action becomes an Event for
the acting entity, and the event is resolved through that entity's
cards. Actions that make no sense in the current situation are rejected
before anything changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckdelve.core.constants import BASE_ATTACK_DAMAGE, PLAYER, TURN_SEPARATOR
from deckdelve.core.logging import get_logger
from deckdelve.engine.events import (
    AttackEvent,
    DisableEvent,
    EnableEvent,
    Event,
    MoveEvent,
    RecoverEvent,
    WaitEvent,
)
from deckdelve.engine.resolution import Resolver
from deckdelve.models.enums import ActionKind, CardStatus


if TYPE_CHECKING:
    from deckdelve.models.actions import Action
    from deckdelve.models.level import Level

logger = get_logger(__name__)


def action_to_event(level: Level, entity: int, action: Action) -> Event | None:
    """Build the event ``action`` stands for, or None if it is illegal.

    Moving into an occupied cell attacks its occupant; moving into a wall
    is illegal. Toggling flips an in-hand card between Active and
    Inactive; any other status makes the toggle illegal.
    """
    pos = level.position_of(entity)
    if not level.exists(entity) or pos is None:
        return None

    if action.kind == ActionKind.MOVE and action.direction is not None:
        destination = pos.step(action.direction)
        target = level.occupant(destination)
        if target is not None:
            return AttackEvent(target=target, damage=BASE_ATTACK_DAMAGE, direction=action.direction)
        if level.is_open(destination):
            return MoveEvent(destination=destination, direction=action.direction)
        return None
    if action.kind == ActionKind.WAIT:
        return WaitEvent()
    if action.kind == ActionKind.REST:
        return RecoverEvent()
    if action.kind == ActionKind.TOGGLE and action.index is not None:
        status = level.card_status(entity, action.index)
        if status == CardStatus.ACTIVE:
            return DisableEvent(index=action.index)
        if status == CardStatus.INACTIVE:
            return EnableEvent(index=action.index)
    return None


def do_action(level: Level, entity: int, action: Action, *, resolver: Resolver | None = None) -> bool:
    """Perform ``action`` for ``entity``.

    Returns:
        False if the action was rejected (nothing changed), True once the
        resulting event has been resolved.
    """
    event = action_to_event(level, entity, action)
    if event is None:
        logger.debug("Action rejected", entity=entity, action=action.kind)
        return False
    if entity == PLAYER and level.log.last != TURN_SEPARATOR:
        level.log.add(TURN_SEPARATOR)
    (resolver or Resolver(level)).process(entity, event)
    return True


__all__ = ["action_to_event", "do_action"]
