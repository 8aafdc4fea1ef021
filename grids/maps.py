#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
maps.py
-------
Plain-text occupancy maps.

Format (one row per line, all rows the same length):
    #   blocked
    .   free
    S   start (free)
    G   goal  (free)

Blank lines at the start/end of the text are ignored, so maps can be
written as indented triple-quoted strings.
"""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .occupancy import Cell, OccupancyGrid

BLOCKED = "#"
FREE = "."
START = "S"
GOAL = "G"
EXPLORED = "+"
PATH = "*"


def parse_map(text: str) -> Tuple[OccupancyGrid, Optional[Cell], Optional[Cell]]:
    """Parse a text map into (grid, start, goal). Start/goal are None if absent."""
    rows = [line.strip() for line in text.strip("\n").splitlines()]
    rows = [r for r in rows if r]
    if not rows:
        raise ValueError("Map is empty")
    width = len(rows[0])
    cells = np.zeros((len(rows), width), dtype=bool)
    start: Optional[Cell] = None
    goal: Optional[Cell] = None

    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
        for x, ch in enumerate(row):
            if ch == BLOCKED:
                cells[y, x] = True
            elif ch == START:
                if start is not None:
                    raise ValueError(f"Duplicate start at {(x, y)} (first at {start})")
                start = (x, y)
            elif ch == GOAL:
                if goal is not None:
                    raise ValueError(f"Duplicate goal at {(x, y)} (first at {goal})")
                goal = (x, y)
            elif ch != FREE:
                raise ValueError(f"Unknown map character {ch!r} at {(x, y)}")

    return OccupancyGrid(cells), start, goal


def load_map(path: str) -> Tuple[OccupancyGrid, Optional[Cell], Optional[Cell]]:
    if not os.path.isfile(path):
        raise ValueError(f"Map file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_map(f.read())


def format_grid(grid: OccupancyGrid,
                start: Optional[Cell] = None,
                goal: Optional[Cell] = None,
                explored: Iterable[Cell] = (),
                path: Iterable[Cell] = ()) -> str:
    """Render a grid back to text; path overrides explored, S/G override both."""
    canvas: List[List[str]] = [
        [BLOCKED if grid.cells[y, x] else FREE for x in range(grid.width)]
        for y in range(grid.height)
    ]
    for x, y in explored:
        canvas[y][x] = EXPLORED
    for x, y in path or ():
        canvas[y][x] = PATH
    if start is not None:
        canvas[start[1]][start[0]] = START
    if goal is not None:
        canvas[goal[1]][goal[0]] = GOAL
    return "\n".join("".join(row) for row in canvas)
