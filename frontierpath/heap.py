"""Array-backed binary heap generic over a comparator."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import ConfigError

T = TypeVar("T")
Comparator = Callable[[T, T], bool]

MODES = ("min", "max")


def parent(i: int) -> int:
    """Index of the parent of ``i`` (``i > 0``)."""
    return (i - 1) // 2


def left(i: int) -> int:
    return 2 * i + 1


def right(i: int) -> int:
    return 2 * i + 2


class BinaryHeap(Generic[T]):
    """Binary heap stored as an implicit tree in a Python list.

    The element at index ``i`` has children at ``2i+1`` and ``2i+2`` and its
    parent at ``(i-1)//2``. Every element orders no later than its children.

    Args:
        comparator: ``comparator(a, b)`` is ``True`` when ``a`` is strictly
            smaller than ``b``. Defaults to ``a < b``.
        mode: ``"min"`` keeps the smallest element at the root, ``"max"``
            the largest one.

    Raises:
        ConfigError: If ``mode`` is not ``"min"`` or ``"max"``.

    Examples:
        ```python
        >>> h = BinaryHeap()
        >>> for x in (9, 8, 7, 6, 5, 2, 1):
        ...     h.insert(x)
        >>> h.peek()
        1
        ```
    """

    def __init__(self, comparator: Optional[Comparator] = None, mode: str = "min") -> None:
        if mode not in MODES:
            raise ConfigError(f"unknown heap mode '{mode}'")
        less: Comparator = comparator or operator.lt
        self.mode = mode
        if mode == "min":
            self._before: Comparator = less
        else:
            self._before = lambda a, b: less(b, a)
        self._items: List[T] = []

    # ---- internals ----------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            p = parent(i)
            if not self._before(items[i], items[p]):
                break
            self._swap(i, p)
            i = p

    def _sift_down(self, i: int) -> None:
        items = self._items
        n = len(items)
        while True:
            best = i
            lc, rc = left(i), right(i)
            if lc < n and self._before(items[lc], items[best]):
                best = lc
            if rc < n and self._before(items[rc], items[best]):
                best = rc
            if best == i:
                return
            self._swap(i, best)
            i = best

    # ---- public API ---------------------------------------------------

    def insert(self, item: T) -> None:
        """Append ``item`` and bubble it up until its parent orders first."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.insert(item)

    def peek(self) -> Optional[T]:
        """Return the root without removing it, or ``None`` when empty."""
        return self._items[0] if self._items else None

    def extract(self) -> Optional[T]:
        """Remove and return the root, or ``None`` when empty.

        The last element takes the root's place and sifts down.
        """
        items = self._items
        if not items:
            return None
        last = items.pop()
        if not items:
            return last
        root = items[0]
        items[0] = last
        self._sift_down(0)
        return root

    def is_valid(self) -> bool:
        """Check the heap property for every non-root index."""
        items = self._items
        return all(not self._before(items[i], items[parent(i)]) for i in range(1, len(items)))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in array order (not sorted order)."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BinaryHeap(mode={self.mode!r}, size={len(self._items)})"


__all__ = ["BinaryHeap", "Comparator", "MODES", "left", "parent", "right"]
