#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Indexed binary min-heap over dense node indices.

- Nodes are ints in [0, capacity); the heap stores them, not (key, node) tuples.
- Ordering is read from external score arrays at comparison time:
  primary `keys[node]` ascending, then `tiebreak[node]` ascending (if given).
  Equal on both counts as equal.
- `position[node]` tracks the heap slot of every node (-1 = absent), which gives
  O(1) membership and O(log n) decrease_key.

The caller owns the score arrays. After lowering keys[node] for a node already
in the heap, call decrease_key(node); raising a key in place is not supported.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

ABSENT = -1


class IndexedMinHeap:
    def __init__(self, capacity: int, keys: np.ndarray, tiebreak: Optional[np.ndarray] = None):
        self.keys = keys
        self.tiebreak = tiebreak
        self.slots = np.full(capacity, ABSENT, dtype=np.int32)
        self.position = np.full(capacity, ABSENT, dtype=np.int32)
        self.size = 0

    @property
    def capacity(self) -> int:
        return int(self.slots.shape[0])

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    def __contains__(self, node: int) -> bool:
        return 0 <= node < self.capacity and self.position[node] != ABSENT

    def clear(self) -> None:
        self.position.fill(ABSENT)
        self.size = 0

    def peek(self) -> int:
        if self.size == 0:
            raise IndexError("peek at empty heap")
        return int(self.slots[0])

    # --- public operations ---

    def push(self, node: int) -> None:
        if not 0 <= node < self.capacity:
            raise IndexError(f"Node {node} is outside [0, {self.capacity})")
        if node in self:
            raise ValueError(f"Node {node} is already in the heap")
        if self.size >= self.capacity:
            raise IndexError("push onto full heap")
        pos = self.size
        self.slots[pos] = node
        self.position[node] = pos
        self.size += 1
        self._sift_up(pos)

    def pop_min(self) -> int:
        if self.size == 0:
            raise IndexError("pop from empty heap")
        top = int(self.slots[0])
        self.position[top] = ABSENT
        self.size -= 1
        if self.size > 0:
            last = int(self.slots[self.size])
            self.slots[0] = last
            self.position[last] = 0
            self._sift_down(0)
        return top

    def decrease_key(self, node: int) -> None:
        if node not in self:
            raise KeyError(f"Node {node} is not in the heap")
        self._sift_up(int(self.position[node]))

    def check_heap_property(self) -> bool:
        """True iff every child orders after its parent and positions are consistent."""
        for pos in range(self.size):
            node = int(self.slots[pos])
            if self.position[node] != pos:
                return False
            if pos > 0 and self._less(node, int(self.slots[(pos - 1) >> 1])):
                return False
        return True

    # --- internals ---

    def _less(self, a: int, b: int) -> bool:
        ka, kb = self.keys[a], self.keys[b]
        if ka != kb:
            return bool(ka < kb)
        if self.tiebreak is None:
            return False
        return bool(self.tiebreak[a] < self.tiebreak[b])

    def _swap(self, i: int, j: int) -> None:
        a, b = int(self.slots[i]), int(self.slots[j])
        self.slots[i], self.slots[j] = b, a
        self.position[a], self.position[b] = j, i

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) >> 1
            if not self._less(int(self.slots[pos]), int(self.slots[parent])):
                break
            self._swap(parent, pos)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        while True:
            left = (pos << 1) + 1
            if left >= self.size:
                break
            smallest = left
            right = left + 1
            if right < self.size and self._less(int(self.slots[right]), int(self.slots[left])):
                smallest = right
            if not self._less(int(self.slots[smallest]), int(self.slots[pos])):
                break
            self._swap(pos, smallest)
            pos = smallest
