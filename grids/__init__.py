# -*- coding: utf-8 -*-
"""
Grid model: occupancy grid, start/end selection, and plain-text maps.
"""

from __future__ import annotations

from .occupancy import OccupancyGrid, GridSelection, Cell, DELTAS_4, as_grid
from .maps import parse_map, load_map, format_grid

__all__ = [
    "OccupancyGrid",
    "GridSelection",
    "Cell",
    "DELTAS_4",
    "as_grid",
    "parse_map",
    "load_map",
    "format_grid",
]
