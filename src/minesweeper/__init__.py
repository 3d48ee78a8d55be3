"""
Minesweeper game module.

Provides the game-state model: the mine field, the player-visible
overlay with its uncover and guess logic, and a Gymnasium wrapper.
"""
from .cell import CellStatus, COVERED_STATES, MAX_ADJACENT, is_covered
from .board import BoardConfig, GameState, BEGINNER, INTERMEDIATE, EXPERT
from .mine_field import MineField
from .visible_field import VisibleField
from .environment import MinesweeperEnv

__all__ = [
    "CellStatus",
    "COVERED_STATES",
    "MAX_ADJACENT",
    "is_covered",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MineField",
    "VisibleField",
    "MinesweeperEnv",
]
