"""In-flight game events.

An action becomes an Event, which is offered to the acting entity's
cards and then executed. Events are plain mutable dataclasses because
cards may adjust them in place (for example raising an attack's damage)
while they are being resolved. They never outlive one turn.
"""

from __future__ import annotations

from dataclasses import dataclass

from deckdelve.models.enums import Direction
from deckdelve.models.geometry import Position


@dataclass
class Event:
    """Base class for all events."""


@dataclass
class MoveEvent(Event):
    """Step to ``destination``."""

    destination: Position
    direction: Direction | None = None


@dataclass
class RecoverEvent(Event):
    """Rest: return one spent card to the hand."""


@dataclass
class WaitEvent(Event):
    """Do nothing for a turn."""


@dataclass
class DisableEvent(Event):
    """Switch the card at ``index`` to Inactive."""

    index: int


@dataclass
class EnableEvent(Event):
    """Switch the card at ``index`` back to Active."""

    index: int


@dataclass
class AttackEvent(Event):
    """Hit ``target`` for ``damage``."""

    target: int
    damage: int
    direction: Direction | None = None


@dataclass
class DefendEvent(Event):
    """Absorb ``damage`` dealt by ``source``."""

    source: int
    damage: int
    direction: Direction | None = None


@dataclass
class NoEvent(Event):
    """A cancelled event; executes as a no-op."""


__all__ = [
    "Event",
    "MoveEvent",
    "RecoverEvent",
    "WaitEvent",
    "DisableEvent",
    "EnableEvent",
    "AttackEvent",
    "DefendEvent",
    "NoEvent",
]
