#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from grids.occupancy import GridSelection, OccupancyGrid, as_grid
from planners.errors import InvalidRequestError


def test_index_roundtrip_is_row_major():
    grid = OccupancyGrid.empty(7, 3)
    assert grid.size == 21
    assert grid.to_index(0, 0) == 0
    assert grid.to_index(6, 0) == 6
    assert grid.to_index(0, 1) == 7
    for i in range(grid.size):
        assert grid.to_index(*grid.from_index(i)) == i


def test_out_of_bounds_counts_as_blocked():
    grid = OccupancyGrid.empty(4, 4)
    assert not grid.is_blocked(3, 3)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
        assert not grid.in_bounds(x, y)
        assert grid.is_blocked(x, y)


def test_cells_are_read_as_y_then_x():
    cells = np.zeros((3, 4), dtype=bool)
    cells[1, 2] = True
    grid = OccupancyGrid(cells)
    assert (grid.width, grid.height) == (4, 3)
    assert grid.is_blocked(2, 1)
    assert not grid.is_blocked(1, 2)


def test_neighbors_follow_fixed_order_and_skip_blocked():
    grid = OccupancyGrid.empty(3, 3)
    assert list(grid.neighbors4(1, 1)) == [(2, 1), (0, 1), (1, 2), (1, 0)]
    grid.set_blocked(2, 1)
    assert list(grid.neighbors4(1, 1)) == [(0, 1), (1, 2), (1, 0)]
    assert list(grid.neighbors4(0, 0)) == [(1, 0), (0, 1)]


def test_toggle_and_set_blocked():
    grid = OccupancyGrid.empty(2, 2)
    assert grid.toggle_block(1, 0) is True
    assert grid.is_blocked(1, 0)
    assert grid.toggle_block(1, 0) is False
    assert not grid.set_blocked(5, 5)
    assert not grid.toggle_block(-1, 0)


def test_invalid_shapes_rejected():
    with pytest.raises(ValueError):
        OccupancyGrid(np.zeros(5, dtype=bool))
    with pytest.raises(ValueError):
        OccupancyGrid.empty(0, 3)


def test_as_grid_accepts_arrays_and_duck_typed_grids():
    cells = np.array([[False, True], [False, False]])
    g = as_grid(cells)
    assert g.is_blocked(1, 0)
    assert as_grid(g) is g

    class Walls:
        width, height = 3, 1

        def is_blocked(self, x, y):
            return x == 1

    g2 = as_grid(Walls())
    assert g2.cells.tolist() == [[False, True, False]]
    with pytest.raises(TypeError):
        as_grid("not a grid")


def test_selection_alternates_start_and_end():
    sel = GridSelection(OccupancyGrid.empty(4, 4))
    assert sel.pick(0, 0)
    assert sel.start == (0, 0) and sel.end is None
    assert sel.pick(3, 3)
    assert sel.end == (3, 3)
    assert sel.pick(1, 1)
    assert sel.start == (1, 1) and sel.end == (3, 3)
    assert sel.request() == ((1, 1), (3, 3))


def test_selection_ignores_blocked_and_clears_blocked_endpoints():
    grid = OccupancyGrid.empty(4, 4)
    grid.set_blocked(2, 2)
    sel = GridSelection(grid)
    assert not sel.pick(2, 2)
    assert not sel.pick(9, 9)
    assert sel.start is None

    sel.pick(0, 0)
    sel.pick(3, 3)
    assert sel.toggle_block(3, 3) is True
    assert sel.end is None
    with pytest.raises(InvalidRequestError):
        sel.request()
