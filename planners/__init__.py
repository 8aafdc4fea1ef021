# -*- coding: utf-8 -*-
"""
Incremental grid planners with a unified API:
planner.plan(grid, start: (x,y), goal: (x,y)) -> PathResult(found, path, explored)
planner.start(grid, start, goal, listener) -> SearchRun (step / run / cancel / iter_events)

`grid` is an OccupancyGrid or a raw (H, W) bool array with True = blocked.
"""

from __future__ import annotations
from typing import Dict, Optional, Type

from .a_star import AStarPlanner, AStarSearch, manhattan
from .base import (GridPlanner, PathResult, RecordingListener, SearchEvent,
                   SearchListener, SearchRun, StepStatus)
from .bfs import BFSPlanner, BFSSearch
from .buffers import SearchBuffers
from .errors import InvalidRequestError, PathReconstructionError
from .indexed_heap import IndexedMinHeap

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type[GridPlanner]] = {
    "bfs": BFSPlanner,
    "a_star": AStarPlanner,
}


def get_planner(name: str, **kwargs) -> GridPlanner:
    """
    Factory: instantiate a planner by name ('bfs' or 'a_star').
    kwargs are passed to the planner constructor (e.g., buffers=...).
    """
    key = name.strip().lower()
    if key not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[key](**kwargs)


def run_breadth_first(grid, start, goal, listener: Optional[SearchListener] = None) -> PathResult:
    return BFSPlanner().plan(grid, start, goal, listener)


def run_a_star(grid, start, goal, listener: Optional[SearchListener] = None) -> PathResult:
    return AStarPlanner().plan(grid, start, goal, listener)


__all__ = [
    "AStarPlanner",
    "AStarSearch",
    "BFSPlanner",
    "BFSSearch",
    "GridPlanner",
    "IndexedMinHeap",
    "InvalidRequestError",
    "PathReconstructionError",
    "PathResult",
    "PLANNERS",
    "RecordingListener",
    "SearchBuffers",
    "SearchEvent",
    "SearchListener",
    "SearchRun",
    "StepStatus",
    "get_planner",
    "manhattan",
    "run_a_star",
    "run_breadth_first",
]
