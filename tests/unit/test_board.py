"""
Unit tests for board configuration.

Tests configuration validation and difficulty presets.
"""
import pytest
from minesweeper import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.width == 9
        assert valid_config.height == 9
        assert valid_config.num_mines == 10

    def test_zero_width_raises_error(self) -> None:
        """Width of 0 should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_zero_height_raises_error(self) -> None:
        """Height of 0 should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_third_of_board_is_too_many(self) -> None:
        """Exactly a third of the squares should be rejected."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 3, 3)

    def test_too_many_mines_message_names_bound(self) -> None:
        """Error should say the count must stay under a third."""
        with pytest.raises(ValueError, match="not under a third of the 36 squares"):
            BoardConfig(6, 6, 12)

    def test_just_under_a_third_is_valid(self) -> None:
        """Largest count under a third should be accepted."""
        config = BoardConfig(3, 3, 2)
        assert config.num_mines == 2

    def test_single_square_without_mines_is_valid(self) -> None:
        """A 1x1 board with no mines is allowed."""
        config = BoardConfig(1, 1, 0)
        assert config.num_safe_cells == 1

    def test_cell_counts(self, valid_config: BoardConfig) -> None:
        """Derived cell counts should match dimensions."""
        assert valid_config.num_cells == 81
        assert valid_config.num_safe_cells == 71


# ============================================================================
# Preset Tests
# ============================================================================

class TestPresets:
    """Test difficulty presets."""

    @pytest.mark.parametrize(
        "config, width, height, mines",
        [
            (BEGINNER, 9, 9, 10),
            (INTERMEDIATE, 16, 16, 40),
            (EXPERT, 30, 16, 99),
        ],
    )
    def test_preset_values(
        self, config: BoardConfig, width: int, height: int, mines: int
    ) -> None:
        """Presets should have the classic dimensions."""
        assert (config.width, config.height, config.num_mines) == (
            width, height, mines
        )
