"""
Cell module for the minefield.

Represents individual cells on the grid with their visibility
(hidden/revealed/flagged/questioned) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Visibility(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()
    QUESTIONED = auto()


# Marking cycles through these; REVEALED is never part of it.
MARK_CYCLE = {
    Visibility.HIDDEN: Visibility.FLAGGED,
    Visibility.FLAGGED: Visibility.QUESTIONED,
    Visibility.QUESTIONED: Visibility.HIDDEN,
}

# Observation values for cells whose count is not visible. Only HIDDEN_VALUE
# cells can be opened by a reveal.
HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
QUESTIONED_VALUE = -3
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Only meaningful once the cell is revealed.
        visibility: Current visual state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    visibility: Visibility = Visibility.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it was not hidden
            (already revealed, flagged or questioned).
        """
        if self.visibility != Visibility.HIDDEN:
            return False
        self.visibility = Visibility.REVEALED
        return True

    def cycle_mark(self) -> bool:
        """
        Advance the mark: hidden -> flagged -> questioned -> hidden.

        Returns:
            True if the mark changed, False if cell is revealed.
        """
        if self.visibility == Visibility.REVEALED:
            return False
        self.visibility = MARK_CYCLE[self.visibility]
        return True

    def clear(self) -> None:
        """Return the cell to its pristine, mine-free hidden state."""
        self.is_mine = False
        self.adjacent_mines = 0
        self.visibility = Visibility.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unmarked."""
        return self.visibility == Visibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.visibility == Visibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == Visibility.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell carries a question mark."""
        return self.visibility == Visibility.QUESTIONED

    @property
    def is_marked(self) -> bool:
        return self.visibility in (Visibility.FLAGGED, Visibility.QUESTIONED)

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.visibility == Visibility.HIDDEN:
            return HIDDEN_VALUE
        if self.visibility == Visibility.FLAGGED:
            return FLAGGED_VALUE
        if self.visibility == Visibility.QUESTIONED:
            return QUESTIONED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
