"""Creature behaviour.

Creatures chase the last place they saw the player. A creature sees the
player exactly when its own cell is currently visible to the player.
Once it loses sight it keeps walking toward that remembered spot with no
further search.

Each turn the creature weighs the horizontal and vertical distance to
its goal, ignoring an axis whose next step is blocked (unless that step
is the goal itself), and picks an axis with probability proportional to
its weight. With no usable axis it rests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckdelve.core.constants import PLAYER
from deckdelve.engine.actions import do_action
from deckdelve.models.actions import Action
from deckdelve.models.enums import Direction, Visibility


if TYPE_CHECKING:
    from deckdelve.engine.resolution import Resolver
    from deckdelve.models.geometry import Position
    from deckdelve.models.level import Level


def _axis_weight(
    level: Level,
    pos: Position,
    goal: Position,
    offset: int,
    negative: Direction,
    positive: Direction,
) -> tuple[Direction, int]:
    if offset > 0:
        direction, weight = negative, offset
    elif offset < 0:
        direction, weight = positive, -offset
    else:
        return negative, 0
    step = pos.step(direction)
    if step != goal and not level.is_open(step):
        weight = 0
    return direction, weight


def choose_action(level: Level, entity: int) -> Action | None:
    """Decide what ``entity`` does this turn, updating its goal.

    Returns:
        A Move toward the goal, Rest if every route is blocked, or None
        when the entity does not act at all.
    """
    if entity == PLAYER or not level.type_of(entity).is_creature:
        return None
    pos = level.position_of(entity)
    player_pos = level.player_position
    if pos is None or player_pos is None:
        return None

    if level.square(pos).visibility == Visibility.VISIBLE:
        level.goals[entity] = player_pos
    goal = level.goals.get(entity)
    if goal is None:
        return None

    hdir, hweight = _axis_weight(level, pos, goal, pos.x - goal.x, Direction.LEFT, Direction.RIGHT)
    vdir, vweight = _axis_weight(level, pos, goal, pos.y - goal.y, Direction.UP, Direction.DOWN)

    if hweight + vweight == 0:
        return Action.rest()
    if level.rng.gen_range(0, hweight + vweight) >= hweight:
        return Action.move(vdir)
    return Action.move(hdir)


def take_turn(level: Level, entity: int, *, resolver: Resolver | None = None) -> bool:
    """Let a creature act once.

    Returns:
        True if the creature performed an action.
    """
    action = choose_action(level, entity)
    if action is None:
        return False
    return do_action(level, entity, action, resolver=resolver)


__all__ = ["choose_action", "take_turn"]
