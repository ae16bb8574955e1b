"""
Minefield module.

Implements the game grid with deferred mine placement, flood-fill
revealing, the flag/question mark cycle and win/lose detection.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .cell import Cell, Visibility
from .config import FieldConfig
from .errors import OutOfRange
from .placement import SeedLike, make_rng, neighbors, place_mines

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Overall status of a game."""

    RUNNING = auto()
    WON = auto()
    LOST = auto()


class OutcomeKind(Enum):
    """What a reveal call did."""

    IGNORED = auto()
    REVEALED = auto()
    LOST_ON_MINE = auto()


# ============================================================================
# Results
# ============================================================================

class RevealedCell(NamedTuple):
    """A cell opened by a reveal, with its neighboring mine count."""

    row: int
    column: int
    adjacent_mines: int


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal call.

    Attributes:
        kind: Whether the call was ignored, opened cells, or hit a mine.
        cells: Newly revealed cells in the order they were opened.
        mine: Coordinate of the detonated mine for LOST_ON_MINE.
        won: True when this reveal opened the last safe cell.
    """

    kind: OutcomeKind
    cells: Tuple[RevealedCell, ...] = ()
    mine: Optional[Tuple[int, int]] = None
    won: bool = False

    @classmethod
    def ignored(cls) -> "RevealOutcome":
        return cls(OutcomeKind.IGNORED)

    @classmethod
    def revealed(
        cls, cells: Sequence[RevealedCell], won: bool = False
    ) -> "RevealOutcome":
        return cls(OutcomeKind.REVEALED, tuple(cells), won=won)

    @classmethod
    def lost_on(cls, row: int, column: int) -> "RevealOutcome":
        return cls(OutcomeKind.LOST_ON_MINE, mine=(row, column))

    @property
    def is_ignored(self) -> bool:
        return self.kind == OutcomeKind.IGNORED

    @property
    def is_revealed(self) -> bool:
        return self.kind == OutcomeKind.REVEALED

    @property
    def is_lost(self) -> bool:
        return self.kind == OutcomeKind.LOST_ON_MINE


@dataclass(frozen=True)
class FieldStatus:
    """Read-only snapshot of a minefield."""

    phase: Phase
    remaining_mines: int
    revealed: int
    placed: bool


# ============================================================================
# Minefield Class
# ============================================================================

class Minefield:
    """
    Rectangular minefield.

    Mines are placed on the first reveal, away from the revealed cell and
    its neighbors, so the opening move is always safe. Calls that cannot
    change anything (a marked or revealed cell, a finished game) are
    no-ops; only out-of-range coordinates raise.

    Not safe for concurrent use: callers must serialize calls.
    """

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        rng: SeedLike = None,
    ) -> None:
        """
        Initialize the minefield.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement. An int seed or a
                numpy Generator makes layouts reproducible.
        """
        self.config = config or FieldConfig()
        self.rng = make_rng(rng)
        self._grid: List[List[Cell]] = []
        self._phase = Phase.RUNNING
        self._placed = False
        self._revealed = 0
        self._flags = 0
        self._init_grid()

    @classmethod
    def new(
        cls, rows: int, columns: int, mine_count: int, rng: SeedLike = None
    ) -> "Minefield":
        """Build a minefield from its three parameters."""
        return cls(FieldConfig(rows, columns, mine_count), rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self, row: int, column: int) -> None:
        """Lay mines for a first reveal at (row, column)."""
        mines = place_mines(
            self.config.rows,
            self.config.columns,
            self.config.mine_count,
            (row, column),
            self.rng,
        )
        for index in mines:
            mine_row, mine_col = self.position(index)
            self._grid[mine_row][mine_col].is_mine = True
        self._placed = True

    def _count_adjacent_mines(self, row: int, column: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, column):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def _is_valid_position(self, row: int, column: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.config.rows and 0 <= column < self.config.columns

    def _check_position(self, row: int, column: int) -> None:
        if not self._is_valid_position(row, column):
            raise OutOfRange(row, column, self.config.rows, self.config.columns)

    def neighbors(self, row: int, column: int) -> List[Tuple[int, int]]:
        """
        Get in-range neighboring cell positions.

        Args:
            row: Row index of center cell.
            column: Column index of center cell.

        Returns:
            List of (row, column) tuples; corners have 3, edges 5.
        """
        return list(neighbors(row, column, self.config.rows, self.config.columns))

    def index(self, row: int, column: int) -> int:
        """Convert (row, column) to a linear index."""
        return row * self.config.columns + column

    def position(self, index: int) -> Tuple[int, int]:
        """Convert a linear index to (row, column)."""
        return divmod(index, self.config.columns)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, column: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines outside the safety zone.
        If the cell has no adjacent mines, opens its neighborhood.
        If the cell is a mine, the game is lost.

        Args:
            row: Row index to reveal.
            column: Column index to reveal.

        Returns:
            The outcome; IGNORED when the cell is not hidden or the game
            is over.

        Raises:
            OutOfRange: If the coordinate is outside the grid.
        """
        self._check_position(row, column)
        if not self._can_reveal(row, column):
            return RevealOutcome.ignored()

        if not self._placed:
            self._place_mines(row, column)

        cell = self._grid[row][column]
        if cell.is_mine:
            cell.reveal()
            self._revealed += 1
            self._set_phase(Phase.LOST)
            return RevealOutcome.lost_on(row, column)

        opened = self._flood_fill(row, column)
        won = self._check_win_condition()
        return RevealOutcome.revealed(opened, won=won)

    def _can_reveal(self, row: int, column: int) -> bool:
        """Check if a cell can be revealed."""
        if self._phase != Phase.RUNNING:
            return False
        return self._grid[row][column].is_hidden

    def _flood_fill(self, row: int, column: int) -> List[RevealedCell]:
        """Open a safe cell and, through zero counts, everything reachable."""
        opened: List[RevealedCell] = []
        stack = [(row, column)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            cell.adjacent_mines = self._count_adjacent_mines(
                current_row, current_col
            )
            self._revealed += 1
            opened.append(
                RevealedCell(current_row, current_col, cell.adjacent_mines)
            )
            if cell.adjacent_mines > 0:
                continue
            for neighbor_row, neighbor_col in self.neighbors(
                current_row, current_col
            ):
                if self._grid[neighbor_row][neighbor_col].is_hidden:
                    stack.append((neighbor_row, neighbor_col))
        return opened

    def _check_win_condition(self) -> bool:
        """Win once the only unrevealed cells left are the mines."""
        unrevealed = self.config.total_cells - self._revealed
        if unrevealed == self.config.mine_count:
            self._set_phase(Phase.WON)
            return True
        return False

    def cycle_mark(self, row: int, column: int) -> bool:
        """
        Advance the mark on a cell: hidden -> flagged -> questioned -> hidden.

        Args:
            row: Row index.
            column: Column index.

        Returns:
            True if the mark changed, False otherwise.

        Raises:
            OutOfRange: If the coordinate is outside the grid.
        """
        self._check_position(row, column)
        if self._phase != Phase.RUNNING:
            return False
        cell = self._grid[row][column]
        was_flagged = cell.is_flagged
        if not cell.cycle_mark():
            return False
        if cell.is_flagged:
            self._flags += 1
        elif was_flagged:
            self._flags -= 1
        return True

    def expire(self) -> bool:
        """
        End a running game as lost without revealing anything.

        Used by callers that run a countdown on top of the field.

        Returns:
            True if the game was running and is now lost.
        """
        if self._phase != Phase.RUNNING:
            return False
        self._set_phase(Phase.LOST)
        return True

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase

    def reset(self) -> None:
        """Reset the field for a new game with the same configuration."""
        for row in self._grid:
            for cell in row:
                cell.clear()
        self._phase = Phase.RUNNING
        self._placed = False
        self._revealed = 0
        self._flags = 0
        logger.debug(
            "Reset %dx%d field with %d mines",
            self.config.rows, self.config.columns, self.config.mine_count,
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def phase(self) -> Phase:
        """Get current game phase."""
        return self._phase

    @property
    def placed(self) -> bool:
        """Whether mines have been laid yet."""
        return self._placed

    @property
    def is_running(self) -> bool:
        return self._phase == Phase.RUNNING

    @property
    def is_won(self) -> bool:
        return self._phase == Phase.WON

    @property
    def is_lost(self) -> bool:
        return self._phase == Phase.LOST

    @property
    def remaining_mines(self) -> int:
        """Mine count minus flags; question marks do not count."""
        return self.config.mine_count - self._flags

    def status(self) -> FieldStatus:
        """Snapshot of the game status."""
        return FieldStatus(
            phase=self._phase,
            remaining_mines=self.remaining_mines,
            revealed=self._revealed,
            placed=self._placed,
        )

    def cell(self, row: int, column: int) -> Cell:
        """
        Get a copy of the cell at a position.

        The copy is detached from the grid; changing it never affects
        the game. Use reveal and cycle_mark to change cells.

        Raises:
            OutOfRange: If the coordinate is outside the grid.
        """
        self._check_position(row, column)
        return replace(self._grid[row][column])

    def hidden_cells(self) -> List[Tuple[int, int]]:
        """Positions that a reveal would currently open."""
        return [
            (row, column)
            for row in range(self.config.rows)
            for column in range(self.config.columns)
            if self._grid[row][column].visibility == Visibility.HIDDEN
        ]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of all mines; empty until the first reveal."""
        return [
            (row, column)
            for row in range(self.config.rows)
            for column in range(self.config.columns)
            if self._grid[row][column].is_mine
        ]
