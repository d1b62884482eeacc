"""Grid coordinates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from deckdelve.models.enums import Direction


class Position(BaseModel):
    """A cell coordinate; ``y`` grows downwards.

    Positions are immutable and hashable so they can key side tables
    and visited sets.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring position one step in ``direction``."""
        dx, dy = direction.delta
        return Position(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


__all__ = ["Position"]
