# -*- coding: utf-8 -*-
"""
Turn parent links into a start -> goal path of (x, y) cells.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .errors import PathReconstructionError

logger = logging.getLogger(__name__)


def reconstruct_path(parent: np.ndarray, start_index: int, goal_index: int,
                     width: int) -> List[Tuple[int, int]]:
    limit = int(parent.shape[0])
    chain: List[int] = []
    current = int(goal_index)
    while current != start_index:
        chain.append(current)
        if len(chain) > limit:
            logger.error("Parent chain from %d exceeds %d cells", goal_index, limit)
            raise PathReconstructionError(
                f"Parent chain from {goal_index} does not reach {start_index} within {limit} steps")
        nxt = int(parent[current])
        if nxt < 0:
            logger.error("Parent chain from %d broken at %d", goal_index, current)
            raise PathReconstructionError(f"Cell {current} has no parent but is not the start")
        current = nxt
    chain.append(int(start_index))
    chain.reverse()
    return [(i % width, i // width) for i in chain]
