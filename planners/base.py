#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared pieces of the incremental planners.

A planner owns a SearchBuffers instance and hands out SearchRun objects:

    run = planner.start(grid, start, goal, listener)
    while run.step() is StepStatus.CONTINUE:
        ...                      # pause, redraw, or run.cancel()
    result = run.result()

Each step() is one suspension point (BFS: one neighbour discovery,
A*: one pop/expand cycle). Exploration events go to the listener as they
happen; iter_events() offers the same stream as an iterator.

Only one run per planner is live at a time: starting a new run cancels the
previous one, since both would share the same buffers.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterator, List, Optional, Tuple

from grids.occupancy import Cell, OccupancyGrid, as_grid

from .buffers import SearchBuffers
from .errors import InvalidRequestError
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)


# ------------------------------- Result types ------------------------------- #

class StepStatus(Enum):
    CONTINUE = "continue"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self is not StepStatus.CONTINUE


@dataclass
class PathResult:
    found: bool
    path: Optional[List[Cell]]
    explored: int = 0

    @property
    def hops(self) -> int:
        return len(self.path) - 1 if self.path else 0

    def as_dict(self) -> dict:
        return {"success": self.found, "path": self.path, "explored": self.explored}


@dataclass(frozen=True)
class SearchEvent:
    kind: str                         # "explored" | "path" | "no_path"
    cell: Optional[Cell] = None
    path: Optional[Tuple[Cell, ...]] = None


class SearchListener:
    """No-op sink; override what you need."""

    def on_explored(self, cell: Cell) -> None:
        pass

    def on_path(self, path: List[Cell]) -> None:
        pass

    def on_no_path(self) -> None:
        pass


class RecordingListener(SearchListener):
    """Keeps every notification, in order."""

    def __init__(self):
        self.explored: List[Cell] = []
        self.path: Optional[List[Cell]] = None
        self.no_path = False

    def on_explored(self, cell: Cell) -> None:
        self.explored.append(cell)

    def on_path(self, path: List[Cell]) -> None:
        self.path = path

    def on_no_path(self) -> None:
        self.no_path = True


# ------------------------------- Validation --------------------------------- #

def _as_cell(cell, label: str) -> Cell:
    if cell is None:
        raise InvalidRequestError(f"{label} cell is not set")
    try:
        x, y = cell
        ix, iy = int(x), int(y)
    except (TypeError, ValueError) as e:
        raise InvalidRequestError(f"{label} cell must be an (x, y) pair, got {cell!r}") from e
    if ix != x or iy != y:
        raise InvalidRequestError(f"{label} cell must have integer coordinates, got {cell!r}")
    return ix, iy


def validate_request(grid: OccupancyGrid, start, goal) -> Tuple[Cell, Cell]:
    """Reject a request before any exploration happens."""
    if grid.width <= 0 or grid.height <= 0:
        raise InvalidRequestError("Grid has no cells")
    start = _as_cell(start, "Start")
    goal = _as_cell(goal, "Goal")
    for label, (x, y) in (("Start", start), ("Goal", goal)):
        if not grid.in_bounds(x, y):
            raise InvalidRequestError(f"{label} {(x, y)} is outside the {grid.width}x{grid.height} grid")
        if grid.is_blocked(x, y):
            raise InvalidRequestError(f"{label} {(x, y)} is blocked")
    return start, goal


# --------------------------------- Runs ------------------------------------- #

class SearchRun:
    """One search over one grid snapshot. Subclasses implement _begin/_advance."""

    def __init__(self, planner: "GridPlanner", grid: OccupancyGrid, start: Cell, goal: Cell,
                 listener: Optional[SearchListener] = None):
        self.planner = planner
        self.buffers: SearchBuffers = planner.buffers
        self.grid = grid
        self.width = grid.width
        self.start = start
        self.goal = goal
        self.start_index = grid.to_index(*start)
        self.goal_index = grid.to_index(*goal)
        self.listener = listener if listener is not None else SearchListener()
        self.status = StepStatus.CONTINUE
        self.path: Optional[List[Cell]] = None
        self.explored = 0
        self.steps = 0
        self._pending: Optional[Deque[Cell]] = None

        planner.active_run = self
        self._begin()
        if self.start_index == self.goal_index:
            self._complete(StepStatus.FOUND)

    # --- hooks ---

    def _begin(self) -> None:
        raise NotImplementedError

    def _advance(self) -> StepStatus:
        raise NotImplementedError

    # --- driver API ---

    @property
    def done(self) -> bool:
        return self.status.terminal

    def step(self) -> StepStatus:
        if self.status.terminal:
            return self.status
        if self.planner.active_run is not self:
            # superseded by a newer run on the same planner
            self.status = StepStatus.CANCELLED
            return self.status
        self.steps += 1
        outcome = self._advance()
        if outcome.terminal:
            self._complete(outcome)
        return self.status

    def run(self, max_steps: Optional[int] = None) -> StepStatus:
        """Step until terminal, or until max_steps steps were taken in this call."""
        taken = 0
        while not self.status.terminal:
            if max_steps is not None and taken >= max_steps:
                break
            self.step()
            taken += 1
        return self.status

    def cancel(self) -> None:
        if self.status.terminal:
            return
        self.status = StepStatus.CANCELLED
        if self.planner.active_run is self:
            self.planner.active_run = None

    def result(self) -> PathResult:
        if self.status is StepStatus.CONTINUE:
            raise RuntimeError("Search run is still in progress")
        if self.status is StepStatus.CANCELLED:
            raise RuntimeError("Search run was cancelled")
        return PathResult(found=self.status is StepStatus.FOUND,
                          path=list(self.path) if self.path is not None else None,
                          explored=self.explored)

    def iter_events(self) -> Iterator[SearchEvent]:
        """Drive the run, yielding explored cells and then the outcome."""
        self._pending = deque()
        try:
            while True:
                while self._pending:
                    yield SearchEvent("explored", cell=self._pending.popleft())
                if self.status.terminal:
                    break
                self.step()
        finally:
            self._pending = None
        if self.status is StepStatus.FOUND:
            yield SearchEvent("path", path=tuple(self.path))
        elif self.status is StepStatus.EXHAUSTED:
            yield SearchEvent("no_path")

    # --- helpers for subclasses ---

    def _explore(self, index: int) -> None:
        cell = (index % self.width, index // self.width)
        self.explored += 1
        if self._pending is not None:
            self._pending.append(cell)
        self.listener.on_explored(cell)

    def _complete(self, status: StepStatus) -> None:
        if status is StepStatus.FOUND:
            self.path = reconstruct_path(self.buffers.parent, self.start_index,
                                         self.goal_index, self.width)
            self.status = status
            self.listener.on_path(list(self.path))
        else:
            self.status = status
            self.listener.on_no_path()
        if self.planner.active_run is self:
            self.planner.active_run = None
        logger.debug("%s %s -> %s: %s after %d steps, %d explored",
                     self.planner.name, self.start, self.goal, status.value,
                     self.steps, self.explored)


# -------------------------------- Planners ---------------------------------- #

class GridPlanner:
    name = "planner"
    run_class = SearchRun

    def __init__(self, buffers: Optional[SearchBuffers] = None):
        self.buffers = buffers if buffers is not None else SearchBuffers()
        self.active_run: Optional[SearchRun] = None

    def start(self, grid, start, goal, listener: Optional[SearchListener] = None) -> SearchRun:
        grid = as_grid(grid)
        start, goal = validate_request(grid, start, goal)
        if self.active_run is not None:
            self.active_run.cancel()
        self.buffers.ensure_capacity(grid.size)
        return self.run_class(self, grid, start, goal, listener)

    def plan(self, grid, start, goal, listener: Optional[SearchListener] = None) -> PathResult:
        run = self.start(grid, start, goal, listener)
        run.run()
        return run.result()


__all__ = [
    "StepStatus",
    "PathResult",
    "SearchEvent",
    "SearchListener",
    "RecordingListener",
    "SearchRun",
    "GridPlanner",
    "validate_request",
]
