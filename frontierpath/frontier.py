"""Frontier structures holding pending paths for the engine."""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from .graph import Weight
from .heap import BinaryHeap
from .path import PathArena


class FrontierProtocol(Protocol):
    """Protocol for frontiers consumed by the engine.

    Entries are :class:`~frontierpath.path.PathArena` indices. ``pop_min``
    returns the pending path with the smallest total, breaking ties by
    insertion order. Entries are never deduplicated by destination.
    """

    peak: int

    def push(self, index: int) -> None:
        """Add a pending path."""
        ...

    def pop_min(self) -> Optional[int]:
        """Remove and return the cheapest pending path, or ``None``."""
        ...

    def __len__(self) -> int:
        ...

    @property
    def is_empty(self) -> bool:
        ...


class HeapFrontier:
    """Frontier backed by :class:`~frontierpath.heap.BinaryHeap`.

    ``push`` and ``pop_min`` are ``O(log n)``.
    """

    def __init__(self, arena: PathArena) -> None:
        self._arena = arena
        self._heap: BinaryHeap[int] = BinaryHeap(comparator=self._less)
        self.peak = 0

    def _order(self, index: int) -> Tuple[Weight, int]:
        return self._arena[index].total, index

    def _less(self, a: int, b: int) -> bool:
        return self._order(a) < self._order(b)

    def push(self, index: int) -> None:
        self._heap.insert(index)
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def pop_min(self) -> Optional[int]:
        return self._heap.extract()

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def is_empty(self) -> bool:
        return not self._heap


class ListFrontier:
    """Unsorted-list frontier that scans every entry to find the minimum.

    ``pop_min`` is ``O(n)``, giving ``O(V^2)`` searches; it is the baseline
    :class:`HeapFrontier` improves on.
    """

    def __init__(self, arena: PathArena) -> None:
        self._arena = arena
        self._items: List[int] = []
        self.peak = 0

    def push(self, index: int) -> None:
        self._items.append(index)
        if len(self._items) > self.peak:
            self.peak = len(self._items)

    def pop_min(self) -> Optional[int]:
        if not self._items:
            return None
        arena = self._arena
        best = 0
        for pos in range(1, len(self._items)):
            cand, cur = self._items[pos], self._items[best]
            if (arena[cand].total, cand) < (arena[cur].total, cur):
                best = pos
        # order among the rest does not matter, so swap-remove
        self._items[best], self._items[-1] = self._items[-1], self._items[best]
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items


FRONTIERS = {"heap": HeapFrontier, "list": ListFrontier}

__all__ = ["FRONTIERS", "FrontierProtocol", "HeapFrontier", "ListFrontier"]
