"""Abstract player commands.

The presentation layer translates raw input into one of these values
and hands it to the turn engine.

Example:
    >>> Action.move(Direction.RIGHT)
    Action(kind=<ActionKind.MOVE: 'move'>, direction=<Direction.RIGHT: 'right'>, index=None)
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from deckdelve.models.enums import ActionKind, Direction


class Action(BaseModel):
    """A request for one turn of activity.

    Attributes:
        kind: Move, Rest, Wait or Toggle.
        direction: Direction of a Move.
        index: Deck index of a Toggle.
    """

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    direction: Direction | None = None
    index: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_arguments(self) -> Self:
        """Moves need a direction and toggles need an index."""
        if self.kind == ActionKind.MOVE and self.direction is None:
            raise ValueError("move actions need a direction")
        if self.kind == ActionKind.TOGGLE and self.index is None:
            raise ValueError("toggle actions need a card index")
        return self

    @classmethod
    def move(cls, direction: Direction) -> Action:
        return cls(kind=ActionKind.MOVE, direction=direction)

    @classmethod
    def rest(cls) -> Action:
        return cls(kind=ActionKind.REST)

    @classmethod
    def wait(cls) -> Action:
        return cls(kind=ActionKind.WAIT)

    @classmethod
    def toggle(cls, index: int) -> Action:
        return cls(kind=ActionKind.TOGGLE, index=index)


__all__ = ["Action"]
