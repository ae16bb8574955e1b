"""
Unit tests for deferred mine placement.

Tests the safety zone geometry, the partial shuffle and the fallback
for fields too crowded to keep the whole zone clear.
"""
import numpy as np
import pytest

from minefield.placement import make_rng, neighbors, place_mines, safety_zone


# ============================================================================
# Geometry Tests
# ============================================================================

class TestNeighbors:
    """Test in-range neighbor enumeration."""

    @pytest.mark.parametrize(
        "row, column, expected",
        [(0, 0, 3), (0, 4, 3), (0, 2, 5), (2, 2, 8), (4, 4, 3), (4, 2, 5)],
    )
    def test_neighbor_counts(self, row: int, column: int, expected: int) -> None:
        """Corners have 3 neighbors, edges 5, interior 8."""
        assert len(list(neighbors(row, column, 5, 5))) == expected

    def test_single_cell_has_no_neighbors(self) -> None:
        """A 1x1 grid has nothing around its only cell."""
        assert list(neighbors(0, 0, 1, 1)) == []


class TestSafetyZone:
    """Test safety zone construction."""

    def test_corner_zone(self) -> None:
        """Corner zone holds the cell and its 3 neighbors."""
        assert safety_zone(0, 0, 3, 3) == {0, 1, 3, 4}

    def test_interior_zone(self) -> None:
        """Interior zone covers the full 3x3 block."""
        assert safety_zone(1, 1, 3, 3) == set(range(9))

    def test_edge_zone(self) -> None:
        """Edge zone holds 6 cells."""
        assert safety_zone(0, 2, 4, 5) == {1, 2, 3, 6, 7, 8}

    def test_zone_on_single_row(self) -> None:
        """Out-of-range neighbors are simply absent."""
        assert safety_zone(0, 0, 1, 5) == {0, 1}


# ============================================================================
# Random Source Tests
# ============================================================================

class TestMakeRng:
    """Test random source construction."""

    def test_none_gives_generator(self) -> None:
        """None yields a fresh numpy Generator."""
        assert isinstance(make_rng(None), np.random.Generator)

    def test_seed_gives_generator(self) -> None:
        """An int seed yields a numpy Generator."""
        assert isinstance(make_rng(7), np.random.Generator)

    def test_generator_passes_through(self) -> None:
        """An existing Generator is used as-is."""
        generator = np.random.default_rng(3)
        assert make_rng(generator) is generator

    def test_custom_source_passes_through(self, scripted_rng) -> None:
        """Any object with integers() is accepted."""
        source = scripted_rng([])
        assert make_rng(source) is source

    def test_unsupported_source_raises(self) -> None:
        """Objects without integers() are rejected."""
        with pytest.raises(TypeError):
            make_rng("not a generator")


# ============================================================================
# Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test mine selection."""

    def test_scripted_draw_picks_expected_cell(self, scripted_rng) -> None:
        """Offset 4 over candidates [2, 5, 6, 7, 8] picks index 8."""
        rng = scripted_rng([4])
        assert place_mines(3, 3, 1, (0, 0), rng) == [8]
        assert rng.calls == [(0, 5)]

    def test_partial_shuffle_draws_one_slot_per_mine(self, scripted_rng) -> None:
        """Each mine draws from the slots not yet taken."""
        rng = scripted_rng([0, 1])
        assert place_mines(1, 5, 2, (0, 0), rng) == [2, 4]
        assert rng.calls == [(0, 3), (1, 3)]

    @pytest.mark.parametrize("seed", range(20))
    def test_mines_distinct_and_outside_zone(self, seed: int) -> None:
        """Mines are distinct and never inside the safety zone."""
        mines = place_mines(9, 9, 10, (4, 4), make_rng(seed))
        assert len(mines) == 10
        assert len(set(mines)) == 10
        assert not set(mines) & safety_zone(4, 4, 9, 9)

    def test_same_seed_same_layout(self) -> None:
        """Placement is reproducible from a seed."""
        first = place_mines(16, 16, 40, (3, 7), make_rng(99))
        second = place_mines(16, 16, 40, (3, 7), make_rng(99))
        assert first == second

    def test_crowded_field_keeps_first_cell_safe(self) -> None:
        """With too few candidates, neighbors take mines but the target never does."""
        mines = place_mines(3, 3, 8, (1, 1), make_rng(0))
        assert sorted(mines) == [0, 1, 2, 3, 5, 6, 7, 8]

    @pytest.mark.parametrize("seed", range(10))
    def test_crowded_field_fills_outside_first(self, seed: int) -> None:
        """Every cell outside the zone is used before any neighbor."""
        mines = set(place_mines(3, 4, 9, (0, 0), make_rng(seed)))
        outside = set(range(12)) - safety_zone(0, 0, 3, 4)
        assert outside <= mines
        assert 0 not in mines
        assert len(mines) == 9
