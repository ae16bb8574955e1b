"""
Deferred mine placement.

Mines are laid only when the first cell is revealed. The revealed cell and
its neighbors form a safety zone that is kept mine-free, and the mines are
drawn from the remaining cells with a partial Fisher-Yates shuffle.
"""
import logging
from typing import Iterator, List, Optional, Protocol, Sequence, Set, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


# ============================================================================
# Random Source
# ============================================================================

class RandomSource(Protocol):
    """Anything that can draw an integer from the half-open range [low, high)."""

    def integers(self, low: int, high: int) -> int:
        ...


SeedLike = Union[None, int, np.random.Generator, RandomSource]


def make_rng(source: SeedLike = None) -> RandomSource:
    """
    Turn a seed or generator into a random source.

    Args:
        source: None for fresh entropy, an int seed, a numpy Generator,
            or any object with an ``integers(low, high)`` method.

    Returns:
        An object usable as a random source for placement.
    """
    if source is None or isinstance(source, (int, np.integer)):
        return np.random.default_rng(source)
    if not callable(getattr(source, "integers", None)):
        raise TypeError(f"Unsupported random source: {source!r}")
    return source


# ============================================================================
# Geometry
# ============================================================================

def neighbors(
    row: int, column: int, rows: int, columns: int
) -> Iterator[Tuple[int, int]]:
    """Yield the in-range neighbors of a cell (up to 8)."""
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = column + delta_col
            if 0 <= new_row < rows and 0 <= new_col < columns:
                yield new_row, new_col


def safety_zone(row: int, column: int, rows: int, columns: int) -> Set[int]:
    """
    Linear indices of a cell and its in-range neighbors.

    Returns:
        Set of between 1 and 9 indices.
    """
    zone = {row * columns + column}
    for new_row, new_col in neighbors(row, column, rows, columns):
        zone.add(new_row * columns + new_col)
    return zone


# ============================================================================
# Placement
# ============================================================================

def _draw(candidates: Sequence[int], count: int, rng: RandomSource) -> List[int]:
    """Pick ``count`` distinct candidates with a partial Fisher-Yates shuffle."""
    pool = list(candidates)
    for i in range(count):
        j = int(rng.integers(i, len(pool)))
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:count]


def place_mines(
    rows: int,
    columns: int,
    mine_count: int,
    first: Tuple[int, int],
    rng: Optional[RandomSource] = None,
) -> List[int]:
    """
    Choose mine positions around a first reveal.

    Args:
        rows: Number of rows in the grid.
        columns: Number of columns in the grid.
        mine_count: Mines to place; must be below rows * columns.
        first: (row, column) of the first revealed cell.
        rng: Random source, see ``make_rng``.

    Returns:
        Linear indices of the mines, in draw order.
    """
    rng = rng if rng is not None else make_rng()
    row, column = first
    target = row * columns + column
    zone = safety_zone(row, column, rows, columns)
    outside = [i for i in range(rows * columns) if i not in zone]

    if len(outside) >= mine_count:
        mines = _draw(outside, mine_count, rng)
    else:
        # Grid too crowded to keep every neighbor clear; the first cell
        # itself stays safe no matter what.
        shortfall = mine_count - len(outside)
        logger.debug(
            "Safety zone shrunk by %d cell(s) on a %dx%d field",
            shortfall, rows, columns,
        )
        spare = sorted(zone - {target})
        mines = outside + _draw(spare, shortfall, rng)

    logger.debug(
        "Placed %d mines on a %dx%d field around (%d, %d)",
        len(mines), rows, columns, row, column,
    )
    return mines
