"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Cell, FieldConfig, Minefield


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRng:
    """Random source that returns offsets from a script, then always low."""

    def __init__(self, offsets: List[int]) -> None:
        self.offsets = list(offsets)
        self.calls = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        offset = self.offsets.pop(0) if self.offsets else 0
        assert low + offset < high
        return low + offset


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRng


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Minefield:
    """Create a default 9x9 field with 10 mines."""
    return Minefield(rng=1234)


@pytest.fixture
def small_field() -> Minefield:
    """
    3x3 field with 1 mine that lands at (2, 2) when (0, 0) is revealed first.

    Candidates outside the safety zone of (0, 0) are [2, 5, 6, 7, 8];
    offset 4 swaps index 8 into the first slot.
    """
    return Minefield.new(3, 3, 1, rng=ScriptedRng([4]))


@pytest.fixture
def corridor_field() -> Minefield:
    """
    1x5 field with 1 mine at (0, 4) when (0, 0) is revealed first.

    Candidates outside the safety zone are [2, 3, 4].
    """
    return Minefield.new(1, 5, 1, rng=ScriptedRng([2]))


@pytest.fixture
def mined_corridor() -> Minefield:
    """
    1x5 field with mines at (0, 2) and (0, 4) when (0, 0) is revealed first.

    Revealing (0, 0) opens (0, 0) and (0, 1); (0, 3) is the last safe cell.
    """
    return Minefield.new(1, 5, 2, rng=ScriptedRng([0, 1]))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)
