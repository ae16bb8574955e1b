"""
Random agent for the minefield.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    This provides a baseline for comparing the logic agent.
    """

    def __init__(
        self,
        rows: int = 9,
        columns: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the field.
            columns: Number of columns in the field.
            seed: Random seed for reproducibility.
        """
        super().__init__(rows, columns)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Reveal a revealable cell chosen uniformly at random."""
        candidates = self.revealable_actions(observation, valid_actions)
        if not candidates:
            # Nothing to reveal; the field will ignore this.
            return 0
        return candidates[int(self.rng.integers(len(candidates)))]
