"""
Base agent interface for minefield players.

Agents see only observations, never the field itself, so everything
here works from the integer encoding produced by ``Cell.to_observation``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import numpy as np

from minefield.cell import HIDDEN_VALUE


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for minefield agents.

    Subclasses pick one cell to reveal per call. A reveal is only ever
    honoured on a hidden, unmarked cell; anything else is ignored by the
    field, so agents restrict themselves to those cells.
    """

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns
        self.total_cells = rows * columns

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Choose the next cell to reveal.

        Args:
            observation: (rows, columns) array from ``observe``.
            valid_actions: Optional boolean mask, e.g. the environment's
                ``get_action_mask()``. Derived from the observation
                when omitted.

        Returns:
            Action index (row * columns + column).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        return divmod(int(action), self.columns)

    def position_to_action(self, row: int, column: int) -> int:
        return row * self.columns + column

    def revealable_mask(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Flat boolean mask of cells a reveal would open.

        Flagged and questioned cells are excluded: the field ignores
        reveals on them until they are cycled back to hidden.
        """
        if valid_actions is not None:
            return np.asarray(valid_actions, dtype=bool).ravel()
        return observation.ravel() == HIDDEN_VALUE

    def revealable_actions(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> List[int]:
        """Action indices of the revealable cells, in row-major order."""
        mask = self.revealable_mask(observation, valid_actions)
        return [int(action) for action in np.flatnonzero(mask)]

    def reset(self) -> None:
        """Forget per-game state; stateless agents need not override."""
