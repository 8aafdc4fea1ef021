#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops, 4-connected).
- FIFO frontier stored in a reusable int array with head/tail cursors.
- Visited set = generation stamps, so nothing is cleared between runs.
- Stops as soon as the goal is *discovered* (before it would be queued);
  the first discovery is already a shortest path by hop count.
- Neighbour order +x, -x, +y, -y picks among equal-length paths.

Events: every newly discovered cell except the goal is reported as explored.
One step = scan neighbours until one new cell is discovered.
"""

from __future__ import annotations

from grids.occupancy import DELTAS_4

from .base import GridPlanner, SearchRun, StepStatus
from .buffers import NO_PARENT


class BFSSearch(SearchRun):
    def _begin(self) -> None:
        b = self.buffers
        self.generation = b.next_generation()
        b.parent[self.start_index] = NO_PARENT
        b.visited_stamp[self.start_index] = self.generation
        b.frontier[0] = self.start_index
        self.head = 0
        self.tail = 1
        self.current = NO_PARENT
        self.cx = self.cy = 0
        self.direction = len(DELTAS_4)  # forces a dequeue on the first step

    def _advance(self) -> StepStatus:
        b = self.buffers
        grid = self.grid
        while True:
            if self.direction >= len(DELTAS_4):
                if self.head >= self.tail:
                    return StepStatus.EXHAUSTED
                self.current = int(b.frontier[self.head])
                self.head += 1
                self.cy, self.cx = divmod(self.current, self.width)
                self.direction = 0

            dx, dy = DELTAS_4[self.direction]
            self.direction += 1
            nx, ny = self.cx + int(dx), self.cy + int(dy)
            if grid.is_blocked(nx, ny):
                continue
            ni = ny * self.width + nx
            if b.visited_stamp[ni] == self.generation:
                continue

            b.visited_stamp[ni] = self.generation
            b.parent[ni] = self.current
            if ni == self.goal_index:
                return StepStatus.FOUND
            b.frontier[self.tail] = ni
            self.tail += 1
            self._explore(ni)
            return StepStatus.CONTINUE


class BFSPlanner(GridPlanner):
    name = "bfs"
    run_class = BFSSearch
