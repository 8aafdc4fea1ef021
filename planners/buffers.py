#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reusable per-planner search buffers.

All arrays are dense, addressed by cell index (y * width + x), and sized to the
grid. They are allocated once and reused run after run; ensure_capacity()
reallocates only when the grid size changes.

Visited tracking uses generation stamps: a cell is visited in the current run
iff visited_stamp[i] == generation. Starting a run bumps the generation instead
of clearing the array. When the counter reaches max_generation the array is
cleared and the counter restarts at 1, so old stamps can never alias a new run.
"""

from __future__ import annotations

import logging

import numpy as np

from .indexed_heap import IndexedMinHeap

logger = logging.getLogger(__name__)

NO_PARENT = -1
COST_INF = int(np.iinfo(np.int64).max)
MAX_GENERATION = int(np.iinfo(np.int32).max)


class SearchBuffers:
    def __init__(self, max_generation: int = MAX_GENERATION):
        if not 1 < max_generation <= MAX_GENERATION:
            raise ValueError(f"max_generation must be in (1, {MAX_GENERATION}], got {max_generation}")
        self.max_generation = max_generation
        self.generation = 0
        self.allocations = 0
        self._allocate(0)

    @property
    def capacity(self) -> int:
        return int(self.visited_stamp.shape[0])

    def _allocate(self, size: int) -> None:
        self.visited_stamp = np.zeros(size, dtype=np.int32)
        self.parent = np.full(size, NO_PARENT, dtype=np.int32)
        # BFS queue storage (head/tail cursors live on the run)
        self.frontier = np.zeros(size, dtype=np.int32)
        self.g_score = np.full(size, COST_INF, dtype=np.int64)
        self.f_score = np.full(size, COST_INF, dtype=np.int64)
        self.h_score = np.zeros(size, dtype=np.int64)
        self.heap = IndexedMinHeap(size, self.f_score, self.h_score)
        self.generation = 0

    def ensure_capacity(self, size: int) -> bool:
        """Resize every buffer to `size` if needed. Returns True if it reallocated."""
        if size <= 0:
            raise ValueError(f"Buffer size must be positive, got {size}")
        if size == self.capacity:
            return False
        logger.debug("Reallocating search buffers: %d -> %d cells", self.capacity, size)
        self._allocate(size)
        self.allocations += 1
        return True

    def next_generation(self) -> int:
        self.generation += 1
        if self.generation >= self.max_generation:
            logger.debug("Visit generation reached %d; clearing stamps", self.max_generation)
            self.visited_stamp.fill(0)
            self.generation = 1
        return self.generation

    def reset_scores(self) -> None:
        """Full reset of cost/parent/heap state, used at the start of every A* run."""
        self.g_score.fill(COST_INF)
        self.f_score.fill(COST_INF)
        self.h_score.fill(0)
        self.parent.fill(NO_PARENT)
        self.heap.clear()
