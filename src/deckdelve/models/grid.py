"""Grid cells and their rendered form.

Models:
    Square: One cell of the level grid.
    Glyph: What the player may know about a cell.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from deckdelve.models.enums import EntityType, Tile, Visibility


class Square(BaseModel):
    """One grid cell.

    Attributes:
        tile: Terrain type.
        entity: Id of the occupant, if any.
        visibility: What the player knows about this cell.
    """

    tile: Tile = Tile.WALL
    entity: int | None = None
    visibility: Visibility = Visibility.UNKNOWN

    @property
    def is_open(self) -> bool:
        """Whether a creature may step here (unoccupied and not a wall)."""
        return self.entity is None and self.tile != Tile.WALL


class Glyph(BaseModel):
    """Render data for one cell.

    ``Unknown`` carries no tile, ``Remembered`` carries the last known
    tile, and ``Visible`` carries the tile plus the occupant's type.
    """

    model_config = ConfigDict(frozen=True)

    visibility: Visibility
    tile: Tile | None = None
    occupant: EntityType | None = None

    @classmethod
    def unknown(cls) -> Glyph:
        return cls(visibility=Visibility.UNKNOWN)

    @classmethod
    def remembered(cls, tile: Tile) -> Glyph:
        return cls(visibility=Visibility.REMEMBERED, tile=tile)

    @classmethod
    def visible(cls, tile: Tile, occupant: EntityType | None = None) -> Glyph:
        return cls(visibility=Visibility.VISIBLE, tile=tile, occupant=occupant)

    @property
    def ch(self) -> str:
        """Single character for terminal rendering."""
        if self.visibility == Visibility.UNKNOWN or self.tile is None:
            return " "
        if self.occupant is not None:
            return self.occupant.glyph
        return self.tile.glyph

    @property
    def is_visible(self) -> bool:
        return self.visibility == Visibility.VISIBLE


__all__ = ["Square", "Glyph"]
