"""
Board configuration for Minesweeper game.

Holds the user-facing board settings, difficulty presets, and the
overall game state enumeration.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place once the field is populated.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.num_mines * 3 >= self.num_cells:
            raise ValueError(
                f"Too many mines: {self.num_mines} is not under a third "
                f"of the {self.num_cells} squares"
            )

    @property
    def num_cells(self) -> int:
        """Total number of squares on the board."""
        return self.width * self.height

    @property
    def num_safe_cells(self) -> int:
        """Number of squares without a mine."""
        return self.num_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
