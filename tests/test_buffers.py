#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from grids.occupancy import OccupancyGrid
from planners import BFSPlanner, AStarPlanner, SearchBuffers
from planners.buffers import COST_INF, NO_PARENT
from planners.errors import PathReconstructionError
from planners.reconstruct import reconstruct_path


def test_ensure_capacity_allocates_once_per_size():
    b = SearchBuffers()
    assert b.ensure_capacity(16) is True
    stamps, heap = b.visited_stamp, b.heap
    assert b.ensure_capacity(16) is False
    assert b.visited_stamp is stamps and b.heap is heap
    assert b.allocations == 1

    b.next_generation()
    assert b.ensure_capacity(9) is True
    assert b.capacity == 9
    assert b.generation == 0
    assert b.allocations == 2
    for arr in (b.parent, b.frontier, b.g_score, b.f_score, b.h_score):
        assert arr.shape == (9,)


def test_ensure_capacity_rejects_empty():
    with pytest.raises(ValueError):
        SearchBuffers().ensure_capacity(0)


def test_generation_wraps_and_clears_stamps():
    b = SearchBuffers(max_generation=3)
    b.ensure_capacity(4)
    assert b.next_generation() == 1
    assert b.next_generation() == 2
    b.visited_stamp[:] = 2
    assert b.next_generation() == 1
    assert not b.visited_stamp.any()


def test_max_generation_must_leave_room():
    with pytest.raises(ValueError):
        SearchBuffers(max_generation=1)


def test_reset_scores_restores_sentinels():
    b = SearchBuffers()
    b.ensure_capacity(5)
    b.g_score[2] = 3
    b.f_score[2] = 7
    b.parent[2] = 1
    b.heap.push(2)
    b.reset_scores()
    assert (b.g_score == COST_INF).all()
    assert (b.f_score == COST_INF).all()
    assert (b.parent == NO_PARENT).all()
    assert len(b.heap) == 0 and 2 not in b.heap


@pytest.mark.parametrize("planner_cls", [BFSPlanner, AStarPlanner])
def test_repeated_runs_survive_generation_wraparound(planner_cls):
    grid = OccupancyGrid.empty(6, 6)
    grid.set_blocked(2, 0); grid.set_blocked(2, 1); grid.set_blocked(2, 2)
    planner = planner_cls(buffers=SearchBuffers(max_generation=2))
    first = planner.plan(grid, (0, 0), (5, 0))
    for _ in range(5):
        again = planner.plan(grid, (0, 0), (5, 0))
        assert again.path == first.path
        assert again.explored == first.explored
    assert planner.buffers.allocations == 1


def test_buffers_follow_grid_size_changes():
    planner = BFSPlanner()
    r1 = planner.plan(OccupancyGrid.empty(5, 5), (0, 0), (4, 4))
    r2 = planner.plan(OccupancyGrid.empty(7, 3), (0, 0), (6, 2))
    r3 = planner.plan(OccupancyGrid.empty(5, 5), (0, 0), (4, 4))
    assert r1.hops == 8 and r2.hops == 8
    assert r3.path == r1.path
    assert planner.buffers.allocations == 3


def test_reconstruct_path_walks_parents():
    # 3 wide: 0 -> 1 -> 4 -> 5
    parent = np.full(6, NO_PARENT, dtype=np.int32)
    parent[1], parent[4], parent[5] = 0, 1, 4
    assert reconstruct_path(parent, 0, 5, width=3) == [(0, 0), (1, 0), (1, 1), (2, 1)]
    assert reconstruct_path(parent, 0, 0, width=3) == [(0, 0)]


def test_reconstruct_path_detects_broken_chain():
    parent = np.full(4, NO_PARENT, dtype=np.int32)
    parent[3] = 2
    with pytest.raises(PathReconstructionError):
        reconstruct_path(parent, 0, 3, width=2)


def test_reconstruct_path_detects_cycles():
    parent = np.array([NO_PARENT, 2, 3, 1], dtype=np.int32)
    with pytest.raises(PathReconstructionError):
        reconstruct_path(parent, 0, 3, width=2)
