"""
Tests for grid geometry and free-cell selection.
"""

import numpy as np
import pytest

from gridsnake.grid import Grid


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


class TestGeometry:
    """Bounds and pixel mapping."""

    def test_cell_center_of_origin(self):
        """(0, 0) maps to the middle of the first 16px tile."""
        assert Grid(40, 30, 16).cell_center((0, 0)) == (8, 8)

    def test_cell_center_scales_with_tile(self):
        assert Grid(40, 30, 16).cell_center((2, 3)) == (40, 56)
        assert Grid(40, 30, 10).cell_center((2, 3)) == (25, 35)

    @pytest.mark.parametrize("cell", [(0, 0), (39, 0), (0, 29), (39, 29), (20, 15)])
    def test_in_bounds(self, cell):
        assert Grid(40, 30).in_bounds(cell)

    @pytest.mark.parametrize("cell", [(-1, 0), (40, 0), (0, -1), (0, 30), (40, 30)])
    def test_out_of_bounds(self, cell):
        assert not Grid(40, 30).in_bounds(cell)

    def test_capacity(self):
        assert Grid(40, 30).capacity == 1200


class TestRandomFreeCell:
    """random_free_cell never lands on an occupied cell and always terminates."""

    def test_sparse_board_avoids_occupied(self, rng):
        """Sampling path: a quarter of the board occupied."""
        grid = Grid(4, 4)
        occupied = {(0, 0), (1, 1), (2, 2), (3, 3)}
        for _ in range(200):
            cell = grid.random_free_cell(occupied, rng)
            assert grid.in_bounds(cell)
            assert cell not in occupied

    def test_returns_plain_int_tuple(self, rng):
        cell = Grid(10, 10).random_free_cell(set(), rng)
        assert isinstance(cell, tuple)
        assert all(type(v) is int for v in cell)

    def test_crowded_board_finds_last_free_cell(self, rng):
        """Enumeration path: only one cell left."""
        grid = Grid(3, 3)
        occupied = {(x, y) for x in range(3) for y in range(3)} - {(1, 2)}
        assert grid.random_free_cell(occupied, rng) == (1, 2)

    def test_full_board_returns_none(self, rng):
        grid = Grid(3, 3)
        occupied = [(x, y) for x in range(3) for y in range(3)]
        assert grid.random_free_cell(occupied, rng) is None

    def test_crowded_board_covers_all_free_cells(self, rng):
        """Every remaining free cell can be chosen."""
        grid = Grid(4, 2)
        occupied = {(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)}
        seen = {grid.random_free_cell(occupied, rng) for _ in range(300)}
        assert seen == {(1, 1), (2, 1), (3, 1)}

    def test_accepts_any_iterable(self, rng):
        grid = Grid(3, 1)
        assert grid.random_free_cell([(0, 0), (1, 0)], rng) == (2, 0)

    def test_free_cells_ignores_out_of_bounds(self):
        grid = Grid(2, 2)
        free = grid.free_cells({(-1, 0), (5, 5), (0, 0)})
        assert len(free) == 3
