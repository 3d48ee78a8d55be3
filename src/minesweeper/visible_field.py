"""
Visible field module for Minesweeper game.

Tracks what the player can see of a mine field: which squares are
covered, flagged, or question-marked, and the adjacency counts of the
uncovered ones. Implements the uncover flood fill and win/loss
detection.
"""
import logging
from typing import List, Tuple

import numpy as np

from .board import GameState
from .cell import COVERED_STATES, CellStatus, is_covered
from .mine_field import MineField


logger = logging.getLogger(__name__)


# ============================================================================
# Visible Field Class
# ============================================================================

class VisibleField:
    """
    Player-visible overlay of a MineField.

    Every square holds one of the ``CellStatus`` values or an adjacency
    count in [0, 8]. The overlay always has the shape of its mine field,
    and the mine field it covers is fixed for its lifetime. The mine
    field is only read, never modified.
    """

    def __init__(self, mine_field: MineField) -> None:
        """
        Create a fully covered overlay for ``mine_field``.

        Args:
            mine_field: The field this overlay covers.
        """
        self._mine_field = mine_field
        self._grid = None
        self.reset_game_display()

    def reset_game_display(self) -> None:
        """Cover every square again, keeping the same mine field."""
        self._grid = np.full(
            (self._mine_field.num_rows, self._mine_field.num_cols),
            CellStatus.COVERED,
            dtype=np.int8,
        )

    # ========================================================================
    # Player Actions
    # ========================================================================

    def cycle_guess(self, row: int, col: int) -> None:
        """
        Advance a covered square to its next guess.

        COVERED becomes FLAGGED, FLAGGED becomes QUESTIONED, QUESTIONED
        becomes COVERED. Uncovered squares are left alone.
        """
        assert self._mine_field.in_range(row, col)
        status = self._grid[row, col]
        if status == CellStatus.COVERED:
            self._grid[row, col] = CellStatus.FLAGGED
        elif status == CellStatus.FLAGGED:
            self._grid[row, col] = CellStatus.QUESTIONED
        elif status == CellStatus.QUESTIONED:
            self._grid[row, col] = CellStatus.COVERED

    def uncover(self, row: int, col: int) -> bool:
        """
        Uncover a square and return False iff it holds a mine.

        A square with no adjacent mines also uncovers its neighbors,
        spreading over the whole connected region of such squares; the
        region is bounded by squares next to a mine, which are uncovered
        too, and by the edge of the field. Flagged squares are neither
        uncovered nor spread through. Question-marked squares are.

        Out-of-range, already uncovered, and flagged targets are ignored
        and count as success.

        Args:
            row: Row of the square.
            col: Column of the square.

        Returns:
            False if a mine was uncovered (game lost), True otherwise.
        """
        if not self._can_uncover(row, col):
            return True

        if self._mine_field.has_mine(row, col):
            self._show_lost_game()
            self._grid[row, col] = CellStatus.EXPLODED_MINE
            logger.debug("Mine exploded at (%d, %d)", row, col)
            return False

        self._flood_uncover(row, col)

        if self.num_uncovered() == self._num_safe_cells():
            self._show_won_game()
            logger.debug("All safe squares uncovered")
        return True

    def _can_uncover(self, row: int, col: int) -> bool:
        """Check if a square is a valid uncover target."""
        if not self._mine_field.in_range(row, col):
            return False
        status = self._grid[row, col]
        return status == CellStatus.COVERED or status == CellStatus.QUESTIONED

    def _flood_uncover(self, row: int, col: int) -> None:
        """Uncover a safe square, spreading from squares with count 0."""
        pending: List[Tuple[int, int]] = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            if not self._can_uncover(current_row, current_col):
                continue
            count = self._mine_field.num_adjacent_mines(current_row, current_col)
            self._grid[current_row, current_col] = count
            if count == 0:
                pending.extend(
                    self._mine_field.neighbors(current_row, current_col)
                )

    def _show_won_game(self) -> None:
        """Flag every mine that is still covered."""
        for row in range(self._mine_field.num_rows):
            for col in range(self._mine_field.num_cols):
                if (self._mine_field.has_mine(row, col)
                        and not self.is_uncovered(row, col)):
                    self._grid[row, col] = CellStatus.FLAGGED

    def _show_lost_game(self) -> None:
        """Reveal the mines and mark the flags that were wrong."""
        for row in range(self._mine_field.num_rows):
            for col in range(self._mine_field.num_cols):
                flagged = self._grid[row, col] == CellStatus.FLAGGED
                has_mine = self._mine_field.has_mine(row, col)
                if flagged and not has_mine:
                    self._grid[row, col] = CellStatus.WRONGLY_FLAGGED
                elif has_mine and not flagged:
                    self._grid[row, col] = CellStatus.MINE

    # ========================================================================
    # Queries
    # ========================================================================

    def get_status(self, row: int, col: int) -> int:
        """
        Get the visible status of a square.

        Returns:
            A ``CellStatus`` value, or the adjacency count 0-8 of an
            uncovered safe square.
        """
        assert self._mine_field.in_range(row, col)
        return int(self._grid[row, col])

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if a square is in any uncovered status."""
        assert self._mine_field.in_range(row, col)
        return not is_covered(int(self._grid[row, col]))

    def num_mines_left(self) -> int:
        """
        Number of mines left to guess.

        Counts flags only, regardless of whether they are correct, so
        the value is negative when more squares are flagged than the
        field has mines.
        """
        flags = int(np.count_nonzero(self._grid == CellStatus.FLAGGED))
        return self._mine_field.num_mines - flags

    def num_uncovered(self) -> int:
        """Number of squares in an uncovered status."""
        covered = np.isin(self._grid, [int(s) for s in COVERED_STATES])
        return int(self._grid.size - np.count_nonzero(covered))

    def is_game_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self.game_state != GameState.PLAYING

    @property
    def game_state(self) -> GameState:
        """Get current game state, recomputed from the display."""
        if np.any(self._grid == CellStatus.EXPLODED_MINE):
            return GameState.LOST
        if self.num_uncovered() == self._num_safe_cells():
            return GameState.WON
        return GameState.PLAYING

    def _num_safe_cells(self) -> int:
        """Number of squares without a mine."""
        return self._grid.size - self._mine_field.num_mines

    @property
    def mine_field(self) -> MineField:
        """The mine field this overlay covers."""
        return self._mine_field

    def get_observation(self) -> np.ndarray:
        """
        Get the visible statuses as a numpy array.

        Returns:
            Copy of the 2D int8 status grid.
        """
        return self._grid.copy()
