"""
Mine field module for Minesweeper game.

Holds the ground-truth layout of mines for one game, answers adjacency
queries, and repopulates itself at random while keeping a chosen
square clear.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np


logger = logging.getLogger(__name__)


# ============================================================================
# Mine Field Class
# ============================================================================

class MineField:
    """
    Locations of the mines for a game.

    A field built from an explicit layout reports as many mines as the
    layout holds. A field built from dimensions starts empty and only
    holds ``num_mines`` mines after ``populate`` is called; until then
    ``num_mines`` is the target, not the actual count.

    Mutators: ``populate``, ``reset_empty``.
    """

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        num_mines: int,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Create an empty field that may later hold ``num_mines`` mines.

        Args:
            num_rows: Number of rows, must be positive.
            num_cols: Number of columns, must be positive.
            num_mines: Mines to place on ``populate``. Must be under a
                third of the squares.
            rng: Random generator used by ``populate``.
        """
        assert num_rows > 0 and num_cols > 0
        assert 0 <= num_mines and num_mines * 3 < num_rows * num_cols
        self._grid = np.zeros((num_rows, num_cols), dtype=bool)
        self._num_mines = num_mines
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_layout(
        cls,
        mine_data: Sequence[Sequence[bool]],
        rng: Optional[np.random.Generator] = None,
    ) -> "MineField":
        """
        Create a field holding exactly the mines of ``mine_data``.

        Args:
            mine_data: Rectangular grid where True marks a mine. Must
                have at least one row and one column.
            rng: Random generator used if the field is repopulated.

        Returns:
            Field where ``has_mine(row, col) == mine_data[row][col]``.
        """
        assert len(mine_data) > 0 and len(mine_data[0]) > 0
        assert all(len(row) == len(mine_data[0]) for row in mine_data)
        field = cls(len(mine_data), len(mine_data[0]), 0, rng=rng)
        field._grid[:, :] = np.array(mine_data, dtype=bool)
        field._num_mines = field.mine_count()
        return field

    # ========================================================================
    # Mutators
    # ========================================================================

    def populate(self, row: int, col: int) -> None:
        """
        Replace the current mines with ``num_mines`` random ones.

        No mine is placed at (row, col).

        Args:
            row: Row of the square to keep clear.
            col: Column of the square to keep clear.
        """
        assert self.in_range(row, col)
        assert self._num_mines * 3 < self.num_rows * self.num_cols
        self.reset_empty()
        to_place = self._num_mines
        while to_place > 0:
            mine_row = int(self._rng.integers(self.num_rows))
            mine_col = int(self._rng.integers(self.num_cols))
            if (mine_row, mine_col) == (row, col):
                continue
            if self._grid[mine_row, mine_col]:
                continue
            self._grid[mine_row, mine_col] = True
            to_place -= 1
        logger.debug(
            "Placed %d mines on %dx%d field avoiding (%d, %d)",
            self._num_mines, self.num_rows, self.num_cols, row, col,
        )

    def reset_empty(self) -> None:
        """
        Remove every mine.

        ``num_mines`` is unchanged, so it no longer matches the field
        until ``populate`` runs again.
        """
        self._grid[:, :] = False

    # ========================================================================
    # Queries
    # ========================================================================

    def in_range(self, row: int, col: int) -> bool:
        """Check if (row, col) is a square of this field."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def has_mine(self, row: int, col: int) -> bool:
        """Check if there is a mine at (row, col)."""
        assert self.in_range(row, col)
        return bool(self._grid[row, col])

    def num_adjacent_mines(self, row: int, col: int) -> int:
        """
        Count mines in the up to eight squares around (row, col).

        A mine at (row, col) itself is not counted.

        Returns:
            Count in the range [0, 8].
        """
        assert self.in_range(row, col)
        window = self._grid[max(row - 1, 0):row + 2, max(col - 1, 0):col + 2]
        return int(np.count_nonzero(window)) - int(self._grid[row, col])

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring square positions.

        Args:
            row: Row index of center square.
            col: Column index of center square.

        Returns:
            List of (row, col) tuples for in-range neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_range(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def mine_count(self) -> int:
        """Number of mines actually on the field right now."""
        return int(np.count_nonzero(self._grid))

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def num_rows(self) -> int:
        """Number of rows in the field."""
        return self._grid.shape[0]

    @property
    def num_cols(self) -> int:
        """Number of columns in the field."""
        return self._grid.shape[1]

    @property
    def num_mines(self) -> int:
        """Number of mines this field holds once populated."""
        return self._num_mines

    def __repr__(self) -> str:
        return (
            f"MineField(num_rows={self.num_rows}, num_cols={self.num_cols}, "
            f"num_mines={self._num_mines})"
        )
