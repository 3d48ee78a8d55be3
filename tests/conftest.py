"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import BoardConfig, MineField, VisibleField


# ============================================================================
# Mine Field Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Create a seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def center_mine_field() -> MineField:
    """Create a 3x3 field with a single mine in the middle."""
    return MineField.from_layout([
        [False, False, False],
        [False, True, False],
        [False, False, False],
    ])


@pytest.fixture
def corner_mine_field() -> MineField:
    """
    Create a 5x5 field with mines in two corners.

    Layout (* = mine):
        * . . . .
        . . . . .
        . . . . .
        . . . . .
        . . . . *
    """
    layout = [[False] * 5 for _ in range(5)]
    layout[0][0] = True
    layout[4][4] = True
    return MineField.from_layout(layout)


@pytest.fixture
def walled_mine_field() -> MineField:
    """
    Create a 5x5 field split by a column of mines.

    Layout (* = mine):
        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return MineField.from_layout(
        [[col == 2 for col in range(5)] for _ in range(5)]
    )


@pytest.fixture
def empty_mine_field() -> MineField:
    """Create a 4x6 field with no mines for flood testing."""
    return MineField.from_layout([[False] * 6 for _ in range(4)])


@pytest.fixture
def unpopulated_mine_field(rng: np.random.Generator) -> MineField:
    """Create a 9x9 field with a target of 10 mines, not yet populated."""
    return MineField(9, 9, 10, rng=rng)


# ============================================================================
# Visible Field Fixtures
# ============================================================================

@pytest.fixture
def center_visible(center_mine_field: MineField) -> VisibleField:
    """Create a covered display for the center-mine field."""
    return VisibleField(center_mine_field)


@pytest.fixture
def corner_visible(corner_mine_field: MineField) -> VisibleField:
    """Create a covered display for the corner-mine field."""
    return VisibleField(corner_mine_field)


@pytest.fixture
def walled_visible(walled_mine_field: MineField) -> VisibleField:
    """Create a covered display for the walled field."""
    return VisibleField(walled_mine_field)


@pytest.fixture
def empty_visible(empty_mine_field: MineField) -> VisibleField:
    """Create a covered display for the mine-free field."""
    return VisibleField(empty_mine_field)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small 4x4 configuration with 2 mines."""
    return BoardConfig(4, 4, 2)
