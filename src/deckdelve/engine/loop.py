"""The turn loop.

One call to :func:`step` is one full game turn: the player's action is
resolved, the field of view is refreshed, every creature acts in id
order, and the field of view is refreshed again so the player sees the
outcome of the creatures' moves. An illegal player action is rejected
before anything changes and the creatures do not move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckdelve.core.constants import EXIT_MESSAGES, PLAYER
from deckdelve.core.logging import get_logger
from deckdelve.engine.actions import do_action
from deckdelve.engine.ai import take_turn
from deckdelve.engine.resolution import Resolver
from deckdelve.engine.visibility import refresh_visibility


if TYPE_CHECKING:
    from deckdelve.models.actions import Action
    from deckdelve.models.level import Level

logger = get_logger(__name__)


def step(level: Level, action: Action) -> bool:
    """Advance ``level`` by one turn driven by the player's ``action``.

    Args:
        level: The active level.
        action: What the player wants to do.

    Returns:
        False if the level is already complete or the action is illegal;
        True once the whole turn has been played.
    """
    if level.is_complete():
        return False
    resolver = Resolver(level)
    if not do_action(level, PLAYER, action, resolver=resolver):
        return False

    refresh_visibility(level, clear_previous=True)
    for entity in level.entities():
        if entity != PLAYER:
            take_turn(level, entity, resolver=resolver)
    refresh_visibility(level, clear_previous=False)

    if level.is_complete():
        for message in EXIT_MESSAGES:
            level.log.add(message)
        logger.info("Level complete", level=level.number)
    return True


__all__ = ["step"]
