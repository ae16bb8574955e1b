"""
Logic-based agent for the minefield.

Makes the deductions a careful human makes from one number at a time,
and falls back to the least risky guess when none apply.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

import numpy as np

from minefield.cell import FLAGGED_VALUE, HIDDEN_VALUE, QUESTIONED_VALUE

from .base_agent import BaseAgent

Position = Tuple[int, int]


# ============================================================================
# Constraint Types
# ============================================================================

@dataclass
class CellInfo:
    """A revealed number together with its unresolved surroundings."""

    row: int
    column: int
    adjacent_mines: int
    unknown_neighbors: Set[Position]
    mine_neighbors: Set[Position]

    @property
    def remaining_mines(self) -> int:
        """Mines still to be found among unknown neighbors."""
        return self.adjacent_mines - len(self.mine_neighbors)


# ============================================================================
# Logic Agent
# ============================================================================

class LogicAgent(BaseAgent):
    """
    Agent that plays from single-number deductions.

    Strategy:
        1. Open the center first; the safety zone makes it a free cascade.
        2. A number whose known mines already match it makes every other
           unknown neighbor safe.
        3. A number whose remaining mines equal its unknown neighbors
           makes all of them mines.
        4. Repeat 2-3 until nothing changes, then reveal a safe cell.
        5. Otherwise guess the hidden cell with the lowest local risk.

    Flagged cells are trusted as mines; question marks count as unknown.
    """

    def __init__(
        self,
        rows: int = 9,
        columns: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the logic agent.

        Args:
            rows: Number of rows in the field.
            columns: Number of columns in the field.
            seed: Random seed used to break ties between guesses.
        """
        super().__init__(rows, columns)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the best action from the current observation.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index of a certainly safe cell if one is known,
            otherwise of the least risky hidden cell.
        """
        valid_indices = set(self.revealable_actions(observation, valid_actions))
        if not valid_indices:
            return 0

        if not np.any((observation >= 0) & (observation <= 8)):
            center = self.position_to_action(self.rows // 2, self.columns // 2)
            if center in valid_indices:
                return center

        safe_cells, mine_cells = self.deduce(observation)
        for row, column in sorted(safe_cells):
            action = self.position_to_action(row, column)
            if action in valid_indices:
                return action

        return self._select_by_risk(observation, valid_indices, mine_cells)

    # ========================================================================
    # Deduction
    # ========================================================================

    def _neighbors(self, row: int, column: int) -> Iterator[Position]:
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row, new_col = row + delta_row, column + delta_col
                if 0 <= new_row < self.rows and 0 <= new_col < self.columns:
                    yield new_row, new_col

    def _cell_info(
        self,
        observation: np.ndarray,
        row: int,
        column: int,
        safe_cells: Set[Position],
        mine_cells: Set[Position],
    ) -> CellInfo:
        unknown: Set[Position] = set()
        mines: Set[Position] = set()
        for position in self._neighbors(row, column):
            value = observation[position]
            if value == FLAGGED_VALUE or position in mine_cells:
                mines.add(position)
            elif value in (HIDDEN_VALUE, QUESTIONED_VALUE) and position not in safe_cells:
                unknown.add(position)
        return CellInfo(row, column, int(observation[row, column]), unknown, mines)

    def deduce(
        self, observation: np.ndarray
    ) -> Tuple[Set[Position], Set[Position]]:
        """
        Propagate single-number rules to a fixed point.

        Returns:
            Tuple of (safe_cells, mine_cells) sets.
        """
        safe_cells: Set[Position] = set()
        mine_cells: Set[Position] = set()
        numbers = [
            (int(row), int(column))
            for row, column in zip(*np.nonzero((observation >= 1) & (observation <= 8)))
        ]

        changed = True
        while changed:
            changed = False
            for row, column in numbers:
                info = self._cell_info(observation, row, column, safe_cells, mine_cells)
                if not info.unknown_neighbors:
                    continue
                if info.remaining_mines == 0:
                    safe_cells |= info.unknown_neighbors
                    changed = True
                elif info.remaining_mines == len(info.unknown_neighbors):
                    mine_cells |= info.unknown_neighbors
                    changed = True

        return safe_cells, mine_cells

    # ========================================================================
    # Guessing
    # ========================================================================

    def _select_by_risk(
        self,
        observation: np.ndarray,
        valid_indices: Set[int],
        mine_cells: Set[Position],
    ) -> int:
        """Pick the valid cell whose worst neighboring number is least risky."""
        risk: Dict[int, float] = {}
        for action in valid_indices:
            position = self.action_to_position(action)
            if position in mine_cells:
                continue
            worst = 0.0
            for row, column in self._neighbors(*position):
                if not 1 <= observation[row, column] <= 8:
                    continue
                info = self._cell_info(observation, row, column, set(), mine_cells)
                if info.unknown_neighbors:
                    worst = max(
                        worst, info.remaining_mines / len(info.unknown_neighbors)
                    )
            risk[action] = worst

        if not risk:
            # Only deduced mines left to click; take one anyway.
            candidates: List[int] = sorted(valid_indices)
        else:
            lowest = min(risk.values())
            candidates = sorted(a for a, r in risk.items() if r == lowest)
        return int(self.rng.choice(candidates))
