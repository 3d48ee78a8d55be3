"""
Cell status module for Minesweeper game.

Defines the closed set of display statuses a square of the visible
field can hold: three covered statuses, the adjacency counts 0-8 for
uncovered safe squares, and the statuses revealed at the end of a game.
"""
from enum import IntEnum


# ============================================================================
# Constants
# ============================================================================

MAX_ADJACENT = 8


class CellStatus(IntEnum):
    """Non-numeric statuses of a visible square."""

    # Covered statuses (all negative)
    COVERED = -1
    FLAGGED = -2
    QUESTIONED = -3

    # Uncovered statuses shown at the end of a game
    MINE = 9
    WRONGLY_FLAGGED = 10
    EXPLODED_MINE = 11


COVERED_STATES = frozenset(
    (CellStatus.COVERED, CellStatus.FLAGGED, CellStatus.QUESTIONED)
)


# ============================================================================
# Status Predicates
# ============================================================================

def is_covered(status: int) -> bool:
    """Check if a status is one of the three covered statuses."""
    return status in COVERED_STATES
