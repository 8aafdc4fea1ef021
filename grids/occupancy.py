#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
occupancy.py
------------
2D occupancy grid used by every planner in this repo, plus the small
start/end selection model that sits next to it.

Conventions:
- Cells are addressed as (x, y); x grows to the right, y grows downwards.
- The obstacle array is a NumPy bool array of shape (height, width):
  cells[y, x] == True means blocked, False means free.
- Dense index: index = y * width + x (see to_index / from_index).
- Anything outside the grid counts as blocked, so callers never need a
  separate bounds check before asking is_blocked().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

Cell = Tuple[int, int]

# 4-connected expansion order: +x, -x, +y, -y
DELTAS_4 = np.array([
    (1, 0), (-1, 0), (0, 1), (0, -1)
], dtype=np.int8)


# ------------------------------- Grid model -------------------------------- #

class OccupancyGrid:
    """Width x height grid with a per-cell blocked flag."""

    def __init__(self, cells: np.ndarray):
        cells = np.asarray(cells, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"Occupancy grid must be 2-D, got shape {cells.shape}")
        self.cells = cells

    @classmethod
    def empty(cls, width: int, height: int) -> "OccupancyGrid":
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=bool))

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def size(self) -> int:
        return self.width * self.height

    # --- pure queries ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return bool(self.cells[y, x])

    def to_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def from_index(self, index: int) -> Cell:
        y, x = divmod(int(index), self.width)
        return x, y

    def neighbors4(self, x: int, y: int) -> Iterator[Cell]:
        """Yield free in-bounds neighbours in the fixed +x, -x, +y, -y order."""
        for dx, dy in DELTAS_4:
            nx, ny = x + int(dx), y + int(dy)
            if not self.is_blocked(nx, ny):
                yield nx, ny

    # --- mutation (between runs only) ---

    def set_blocked(self, x: int, y: int, blocked: bool = True) -> bool:
        if not self.in_bounds(x, y):
            return False
        self.cells[y, x] = bool(blocked)
        return True

    def toggle_block(self, x: int, y: int) -> bool:
        """Flip a cell; returns the new blocked state (False if out of bounds)."""
        if not self.in_bounds(x, y):
            return False
        self.cells[y, x] = not self.cells[y, x]
        return bool(self.cells[y, x])

    def __repr__(self) -> str:
        return f"OccupancyGrid({self.width}x{self.height}, blocked={int(self.cells.sum())})"


def as_grid(grid) -> OccupancyGrid:
    """Accept an OccupancyGrid or a raw (H, W) bool array (True = blocked)."""
    if isinstance(grid, OccupancyGrid):
        return grid
    if isinstance(grid, np.ndarray):
        return OccupancyGrid(grid)
    if all(hasattr(grid, attr) for attr in ("width", "height", "is_blocked")):
        cells = np.zeros((grid.height, grid.width), dtype=bool)
        for y in range(grid.height):
            for x in range(grid.width):
                cells[y, x] = grid.is_blocked(x, y)
        return OccupancyGrid(cells)
    raise TypeError(f"Cannot interpret {type(grid).__name__} as an occupancy grid")


# ------------------------------ Selection model ----------------------------- #

@dataclass
class GridSelection:
    """
    Start/end picking state for an interactive front end.

    Picks alternate: the first pick chooses the start, the next one the end,
    then back to start. Blocked or out-of-bounds picks are ignored.
    """
    grid: OccupancyGrid
    start: Optional[Cell] = None
    end: Optional[Cell] = None
    picking_start: bool = True

    def pick(self, x: int, y: int) -> bool:
        if self.grid.is_blocked(x, y):
            return False
        if self.picking_start:
            self.start = (x, y)
        else:
            self.end = (x, y)
        self.picking_start = not self.picking_start
        return True

    def toggle_block(self, x: int, y: int) -> bool:
        """Toggle an obstacle; blocking a selected endpoint clears it."""
        if not self.grid.in_bounds(x, y):
            return False
        blocked = self.grid.toggle_block(x, y)
        if blocked:
            if self.start == (x, y):
                self.start = None
            if self.end == (x, y):
                self.end = None
        return blocked

    def request(self) -> Tuple[Cell, Cell]:
        from planners.errors import InvalidRequestError  # lazy import
        if self.start is None or self.end is None:
            raise InvalidRequestError("Start and end cells must both be selected")
        return self.start, self.end
