#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grids with unit step cost.
- Heuristic: Manhattan distance (admissible and consistent here).
- Open set: IndexedMinHeap keyed by f = g + h, ties broken by smaller h,
  which keeps the explored region narrow when estimates tie.
- Improved g for a node already in the heap -> decrease_key, never a
  duplicate entry.
- The goal is accepted only when popped as the minimum, not when discovered.

Events: each popped and finalized cell except start and goal is reported
as explored. One step = one pop/expand cycle.
"""

from __future__ import annotations

from typing import Tuple

from grids.occupancy import DELTAS_4

from .base import GridPlanner, SearchRun, StepStatus


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class AStarSearch(SearchRun):
    def _begin(self) -> None:
        b = self.buffers
        self.generation = b.next_generation()
        b.reset_scores()

        h = manhattan(self.start, self.goal)
        b.g_score[self.start_index] = 0
        b.h_score[self.start_index] = h
        b.f_score[self.start_index] = h
        b.heap.push(self.start_index)

    def _advance(self) -> StepStatus:
        b = self.buffers
        heap = b.heap
        if not heap:
            return StepStatus.EXHAUSTED

        current = heap.pop_min()
        if b.visited_stamp[current] == self.generation:
            return StepStatus.CONTINUE
        b.visited_stamp[current] = self.generation
        if current == self.goal_index:
            return StepStatus.FOUND
        cy, cx = divmod(current, self.width)
        current_g = int(b.g_score[current])
        for dx, dy in DELTAS_4:
            nx, ny = cx + int(dx), cy + int(dy)
            if self.grid.is_blocked(nx, ny):
                continue
            ni = ny * self.width + nx
            if b.visited_stamp[ni] == self.generation:
                continue

            tentative_g = current_g + 1
            if tentative_g < b.g_score[ni]:
                h = manhattan((nx, ny), self.goal)
                b.parent[ni] = current
                b.g_score[ni] = tentative_g
                b.h_score[ni] = h
                b.f_score[ni] = tentative_g + h
                if ni in heap:
                    heap.decrease_key(ni)
                else:
                    heap.push(ni)
        # the listener sees the cell only after its expansion is complete
        if current != self.start_index:
            self._explore(current)
        return StepStatus.CONTINUE


class AStarPlanner(GridPlanner):
    name = "a_star"
    run_class = AStarSearch
