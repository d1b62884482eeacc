"""Card models.

A Card is an immutable rule from the card vocabulary. Each entity owns
an ordered deck of CardState entries pairing a card with its status.
Deck order never changes during a level: discarded cards are marked in
place so that index-based references stay valid.

Models:
    Card: An immutable card value such as ``Attack(1)`` or ``Block``.
    CardState: A card plus its status within one deck.
    Modification: A passive effect attached to an entity.
    KnownCardStatus: A status resolved for display to the player.
    CardView: A card and its display status.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from deckdelve.models.enums import CardKind, CardStatus, EntityType, KnownCardStatusKind
from deckdelve.models.geometry import Position


class Card(BaseModel):
    """An immutable card value.

    Attributes:
        kind: Which rule the card applies.
        value: Strength for parameterised kinds (Attack, Defend, Kill).
    """

    model_config = ConfigDict(frozen=True)

    kind: CardKind = Field(description="Card rule")
    value: int | None = Field(default=None, ge=0, description="Strength of parameterised cards")

    @model_validator(mode="after")
    def validate_value(self) -> Self:
        """Parameterised kinds require a value; the others forbid one."""
        if self.kind.takes_value and self.value is None:
            raise ValueError(f"{self.kind} cards need a value")
        if not self.kind.takes_value and self.value is not None:
            raise ValueError(f"{self.kind} cards take no value")
        return self

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value})"


class CardState(BaseModel):
    """A card within a deck together with its status.

    Attributes:
        card: The card itself.
        status: Active, inactive, discarded or played on another entity.
        played_on: Target entity id when status is PLAYED_ON.
    """

    model_config = ConfigDict(validate_assignment=True)

    card: Card
    status: CardStatus = CardStatus.ACTIVE
    played_on: int | None = None

    @property
    def in_hand(self) -> bool:
        return self.status.in_hand

    def play_on(self, entity: int) -> None:
        """Attach this card to ``entity``."""
        self.status = CardStatus.PLAYED_ON
        self.played_on = entity


class Modification(BaseModel):
    """A passive effect on an entity, originating from a card.

    Modifications currently only count toward the damage absorption pool.

    Attributes:
        source: Entity whose card created the modification.
        source_index: Index of that card in the source's deck.
        name: Short label for display.
    """

    model_config = ConfigDict(frozen=True)

    source: int
    source_index: int = Field(ge=0)
    name: str = ""


class KnownCardStatus(BaseModel):
    """Display-safe card status.

    Cards played on a visible entity reveal its type and position; cards
    played on an entity out of sight reveal only its type.
    """

    model_config = ConfigDict(frozen=True)

    kind: KnownCardStatusKind
    entity_type: EntityType | None = None
    position: Position | None = None

    def __str__(self) -> str:
        if self.kind == KnownCardStatusKind.PLAYED_ON_VISIBLE:
            return f"played on {self.entity_type} at {self.position}"
        if self.kind == KnownCardStatusKind.PLAYED_ON_OTHER:
            return f"played on {self.entity_type}"
        return self.kind.value.replace("_", " ")


class CardView(BaseModel):
    """A card from the player's deck as the UI should show it."""

    model_config = ConfigDict(frozen=True)

    card: Card
    status: KnownCardStatus

    def __str__(self) -> str:
        return f"{self.card} ({self.status})"


__all__ = [
    "Card",
    "CardState",
    "Modification",
    "KnownCardStatus",
    "CardView",
]
