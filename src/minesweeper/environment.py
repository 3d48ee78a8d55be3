"""
Gymnasium environment wrapper for Minesweeper.

Drives a MineField / VisibleField pair through a standard RL interface.
"""
import logging
from typing import Any, Dict, Optional, Sequence, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, GameState
from .cell import CellStatus
from .mine_field import MineField
from .visible_field import VisibleField


logger = logging.getLogger(__name__)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array of visible statuses:
        - -1 = covered, -2 = flagged, -3 = question mark
        - 0-8 = uncovered square with adjacent mine count
        - 9 = mine, 10 = wrong flag, 11 = exploded mine (game lost)

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height uncovers square (i // width, i % width).
        Action i >= width * height cycles the guess on square
        i - width * height.

    Rewards:
        - +1 for uncovering a safe square
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already uncovered, flagged target, or
          any action after the game is over)
        - 0 for cycling a guess
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.mine_field: Optional[MineField] = None
        self.visible_field: Optional[VisibleField] = None
        self._new_fields()

        # Define observation space
        self.observation_space = spaces.Box(
            low=int(CellStatus.QUESTIONED),
            high=int(CellStatus.EXPLODED_MINE),
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # Uncover actions followed by cycle-guess actions
        self.action_space = spaces.Discrete(2 * self.config.num_cells)

        # Track steps for info
        self._steps = 0

    def _new_fields(
        self, layout: Optional[Sequence[Sequence[bool]]] = None
    ) -> None:
        """
        Create a mine field and a covered display for it.

        Without a layout the field starts empty and is populated on the
        first uncover. A layout fixes the mines for the whole episode.
        """
        if layout is None:
            self.mine_field = MineField(
                self.config.height,
                self.config.width,
                self.config.num_mines,
                rng=self.np_random,
            )
        else:
            self.mine_field = MineField.from_layout(layout, rng=self.np_random)
            assert (self.mine_field.num_rows, self.mine_field.num_cols) == (
                self.config.height, self.config.width
            )
        self.visible_field = VisibleField(self.mine_field)
        self._populated = layout is not None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Optional "layout" entry, a height x width grid of
                booleans giving fixed mine positions for the episode.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout = (options or {}).get("layout")
        self._new_fields(layout)
        self._steps = 0
        logger.debug("Environment reset (seed=%s, config=%s)", seed, self.config)

        return self.visible_field.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Uncover or cycle-guess action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        cycle, row, col = self._decode_action(int(action))
        self._steps += 1

        if self.visible_field.is_game_over():
            # Episode already ended; nothing changes
            reward = -0.1
        elif cycle:
            reward = self._cycle_reward(row, col)
        else:
            reward = self._uncover_reward(row, col)

        observation = self.visible_field.get_observation()
        terminated = self.visible_field.is_game_over()
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert a flat action index to (is_cycle, row, col)."""
        cycle, index = divmod(action, self.config.num_cells)
        row, col = divmod(index, self.config.width)
        return bool(cycle), row, col

    def _uncover_reward(self, row: int, col: int) -> float:
        """
        Uncover a square and score the result.

        The first uncover of an episode populates the mine field,
        keeping the chosen square clear.
        """
        status = self.visible_field.get_status(row, col)
        if status == CellStatus.FLAGGED or self.visible_field.is_uncovered(row, col):
            return -0.1

        if not self._populated:
            self.mine_field.populate(row, col)
            self._populated = True

        if not self.visible_field.uncover(row, col):
            return -10.0
        if self.visible_field.game_state == GameState.WON:
            return 10.0
        return 1.0

    def _cycle_reward(self, row: int, col: int) -> float:
        """Cycle the guess on a covered square."""
        if self.visible_field.is_uncovered(row, col):
            return -0.1
        self.visible_field.cycle_guess(row, col)
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "uncovered": self.visible_field.num_uncovered(),
            "total_safe": (
                self.mine_field.num_rows * self.mine_field.num_cols
                - self.mine_field.num_mines
            ),
            "mines_left": self.visible_field.num_mines_left(),
            "game_state": self.visible_field.game_state.name,
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that change the display.

        Returns:
            Boolean array where True = valid action. All False once the
            game is over.
        """
        if self.visible_field.is_game_over():
            return np.zeros(self.action_space.n, dtype=bool)
        observation = self.visible_field.get_observation().ravel()
        covered = observation < 0
        uncoverable = covered & (observation != CellStatus.FLAGGED)
        return np.concatenate([uncoverable, covered])
