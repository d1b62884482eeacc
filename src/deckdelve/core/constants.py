"""Game-wide constants for deckdelve.

Dimensions and layout of the reference level type, plus the fixed
player-facing message strings.
"""

from __future__ import annotations

# =============================================================================
# Grid Layout
# =============================================================================

MAP_WIDTH = 37
"""Number of columns in a level grid."""

MAP_HEIGHT = 25
"""Number of rows in a level grid."""

ROOM_XS = (3, 9, 15, 21, 27, 33)
"""Column of each room anchor in the lattice."""

ROOM_YS = (3, 9, 15, 21)
"""Row of each room anchor in the lattice."""

ROOM_SIZE = 5
"""Width and height of a room stencil."""

ROOM_SPACING = 6
"""Distance between neighbouring anchors; doors sit halfway between them."""

SPAWN_X_RANGE = (1, 35)
"""Half-open column range for creature placement trials."""

SPAWN_Y_RANGE = (1, 23)
"""Half-open row range for creature placement trials."""

# =============================================================================
# Entities
# =============================================================================

PLAYER = 0
"""Entity id reserved for the player."""

BASE_ATTACK_DAMAGE = 1
"""Damage of a plain bump attack."""

# =============================================================================
# Message Log
# =============================================================================

TURN_SEPARATOR = "---"
"""Log line separating the player's turns."""

INTRO_MESSAGE = "You are in some sort of server. It seems pretty quiet here."

EXIT_MESSAGES = ("Exiting level!", "Press [Space] to continue...")
"""Lines appended once the player stands on the exit."""
