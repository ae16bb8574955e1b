"""
Unit tests for Cell class.

Tests visibility changes, the mark cycle, and observation conversion.
"""
import pytest
from minefield import Cell, Visibility


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.visibility == Visibility.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_marked is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed and change its state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.visibility == Visibility.REVEALED
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.cycle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_reveal_questioned_cell_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Cannot reveal a questioned cell."""
        hidden_cell.cycle_mark()
        hidden_cell.cycle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_questioned is True


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test the hidden -> flagged -> questioned -> hidden cycle."""

    def test_cycle_order(self, hidden_cell: Cell) -> None:
        """Marks advance in a fixed order and wrap around."""
        seen = []
        for _ in range(3):
            assert hidden_cell.cycle_mark() is True
            seen.append(hidden_cell.visibility)
        assert seen == [
            Visibility.FLAGGED,
            Visibility.QUESTIONED,
            Visibility.HIDDEN,
        ]

    def test_marked_cells_report_marked(self, hidden_cell: Cell) -> None:
        """Flagged and questioned cells are both marked."""
        hidden_cell.cycle_mark()
        assert hidden_cell.is_marked is True
        hidden_cell.cycle_mark()
        assert hidden_cell.is_marked is True

    def test_mark_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot mark a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.cycle_mark() is False
        assert hidden_cell.is_revealed is True

    def test_clear_restores_pristine_cell(self, mine_cell: Cell) -> None:
        """Clearing drops mine, count and visibility."""
        mine_cell.adjacent_mines = 3
        mine_cell.reveal()
        mine_cell.clear()
        assert mine_cell == Cell()


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test integer observation values."""

    def test_hidden_cell_observation(self, hidden_cell: Cell) -> None:
        """Hidden cell should return -1."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation(self, hidden_cell: Cell) -> None:
        """Flagged cell should return -2."""
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -2

    def test_questioned_cell_observation(self, hidden_cell: Cell) -> None:
        """Questioned cell should return -3."""
        hidden_cell.cycle_mark()
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -3

    def test_hidden_mine_looks_hidden(self, mine_cell: Cell) -> None:
        """A hidden mine must not leak through its observation."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
