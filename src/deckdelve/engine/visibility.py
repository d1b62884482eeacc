"""Field of view.

Visibility is computed from the player's cell with eight independent
flood fills, one per octant. Each fill spreads one step along its
primary axis and, from there, one step along its secondary axis,
producing a stair-stepped cone. Walls stop the spread, as do doors
unless someone is standing in the doorway.

Cells that drop out of view become Remembered and keep their last
known tile; they never return to Unknown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deckdelve.models.enums import Direction, Tile, Visibility


if TYPE_CHECKING:
    from deckdelve.models.geometry import Position
    from deckdelve.models.level import Level

OCTANTS: tuple[tuple[Direction, Direction], ...] = (
    (Direction.UP, Direction.LEFT),
    (Direction.UP, Direction.RIGHT),
    (Direction.DOWN, Direction.LEFT),
    (Direction.DOWN, Direction.RIGHT),
    (Direction.LEFT, Direction.UP),
    (Direction.LEFT, Direction.DOWN),
    (Direction.RIGHT, Direction.UP),
    (Direction.RIGHT, Direction.DOWN),
)
"""(primary, secondary) direction pairs, one per octant."""


def blocks_sight(level: Level, pos: Position) -> bool:
    """Whether sight stops at ``pos`` (after the cell itself is seen)."""
    sq = level.square(pos)
    return sq.tile == Tile.WALL or (sq.tile == Tile.DOOR and sq.entity is None)


def forget_visible(level: Level) -> None:
    """Downgrade every Visible cell to Remembered."""
    for row in level.grid:
        for sq in row:
            if sq.visibility == Visibility.VISIBLE:
                sq.visibility = Visibility.REMEMBERED


def scan_octant(level: Level, origin: Position, primary: Direction, secondary: Direction) -> set[Position]:
    """Mark the cells seen from ``origin`` in one octant.

    Returns:
        The positions marked Visible by this scan.
    """
    seen: set[Position] = set()
    visited: set[Position] = set()
    pending = [origin]
    while pending:
        pos = pending.pop()
        level.mark_visible(pos)
        if level.in_bounds(pos):
            seen.add(pos)
        if blocks_sight(level, pos):
            continue
        forward = pos.step(primary)
        if forward not in visited:
            visited.add(forward)
            pending.append(forward)
        diagonal = forward.step(secondary)
        if diagonal not in visited:
            visited.add(diagonal)
            pending.append(diagonal)
    return seen


def refresh_visibility(level: Level, clear_previous: bool) -> set[Position]:
    """Recompute what the player can see.

    Args:
        level: The level to update.
        clear_previous: Downgrade currently Visible cells to Remembered
            first.

    Returns:
        Every position marked Visible by this refresh (empty if the player
        has no position).
    """
    if clear_previous:
        forget_visible(level)
    origin = level.player_position
    if origin is None:
        return set()
    seen: set[Position] = set()
    for primary, secondary in OCTANTS:
        seen |= scan_octant(level, origin, primary, secondary)
    return seen


__all__ = [
    "OCTANTS",
    "blocks_sight",
    "forget_visible",
    "scan_octant",
    "refresh_visibility",
]
