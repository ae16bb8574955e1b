"""
Gymnasium environment wrapper for the minefield.

Exposes the grid as an integer observation and reveals as discrete
actions, so agents can play without a graphical front end.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE, QUESTIONED_VALUE
from .config import FieldConfig
from .field import Minefield


# Observation value -> ANSI glyph
GLYPHS = {
    HIDDEN_VALUE: ".",
    FLAGGED_VALUE: "F",
    QUESTIONED_VALUE: "?",
    MINE_VALUE: "*",
    0: " ",
}


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = questioned cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = detonated mine

    Actions:
        Discrete action space of size rows * columns.
        Action i reveals the cell at (i // columns, i % columns).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an ignored reveal (already revealed or marked)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig()
        self.field = Minefield(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed; the same seed reproduces the mine layout
                for the same opening move.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.field.rng = self.np_random
        self.field.reset()
        self._steps = 0

        return self.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * columns + column).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, column = self.field.position(int(action))
        self._steps += 1

        outcome = self.field.reveal(row, column)
        if outcome.is_ignored:
            reward = -0.1
        elif outcome.is_lost:
            reward = -10.0
        elif outcome.won:
            reward = 10.0
        else:
            reward = 1.0

        terminated = not self.field.is_running
        return self.get_observation(), reward, terminated, False, self._get_info()

    def get_observation(self) -> np.ndarray:
        """Board state as an int8 array, see class docstring for values."""
        return observe(self.field)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        status = self.field.status()
        return {
            "steps": self._steps,
            "revealed": status.revealed,
            "total_safe": self.config.safe_cells,
            "remaining_mines": status.remaining_mines,
            "phase": status.phase.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII text, one line per row."""
        return render_text(self.get_observation())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = the reveal would not be ignored.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.field.is_running:
            return mask
        for row, column in self.field.hidden_cells():
            mask[self.field.index(row, column)] = True
        return mask


def render_text(observation: np.ndarray) -> str:
    """Render an observation array as text."""
    lines = []
    for values in observation:
        lines.append(
            " ".join(GLYPHS.get(int(value), str(int(value))) for value in values)
        )
    return "\n".join(lines)


def observe(field: Minefield) -> np.ndarray:
    """Encode every cell of a field with ``Cell.to_observation``."""
    obs = np.zeros((field.rows, field.columns), dtype=np.int8)
    for row in range(field.rows):
        for column in range(field.columns):
            obs[row, column] = field.cell(row, column).to_observation()
    return obs
