"""Path records and predecessor-chain route reconstruction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .graph import Vertex, Weight


@dataclass(frozen=True)
class Path:
    """Candidate route ending at ``destination``.

    Attributes:
        total: Cumulative weight from the source.
        destination: Vertex this path currently reaches.
        previous: Arena index of the preceding path, ``None`` at the source.
    """

    total: Weight
    destination: Vertex
    previous: Optional[int]


class PathArena:
    """Append-only store of :class:`Path` records addressed by index.

    Indices grow with every :meth:`add`, so they also serve as insertion
    sequence numbers.
    """

    def __init__(self) -> None:
        self._paths: List[Path] = []

    def add(self, total: Weight, destination: Vertex, previous: Optional[int] = None) -> int:
        """Store a new path and return its index."""
        self._paths.append(Path(total, destination, previous))
        return len(self._paths) - 1

    def __getitem__(self, index: int) -> Path:
        return self._paths[index]

    def __len__(self) -> int:
        return len(self._paths)

    def chain(self, index: int) -> Iterator[Path]:
        """Yield paths from ``index`` back to the root (destination first)."""
        cur: Optional[int] = index
        while cur is not None:
            path = self._paths[cur]
            yield path
            cur = path.previous

    def route(self, index: int) -> List[Vertex]:
        """Return the vertices visited by path ``index``, source first."""
        vertices = [p.destination for p in self.chain(index)]
        vertices.reverse()
        return vertices

    def compact(self, indices: Iterable[int]) -> Tuple["PathArena", Dict[int, int]]:
        """Copy the paths at ``indices`` into a fresh arena.

        Every predecessor must come before the paths extending it.

        Returns:
            The new arena and the old-to-new index map.
        """
        kept = PathArena()
        remap: Dict[int, int] = {}
        for old in indices:
            p = self._paths[old]
            prev = None if p.previous is None else remap[p.previous]
            remap[old] = kept.add(p.total, p.destination, prev)
        return kept, remap


@dataclass(frozen=True)
class PathRecord:
    """Finalized shortest path handed back to callers.

    ``route()`` is recomputed from the predecessor chain on each call.
    """

    total: Weight
    destination: Vertex
    index: int
    arena: PathArena = field(repr=False, compare=False)

    def route(self) -> List[Vertex]:
        return self.arena.route(self.index)

    def keys(self) -> List[Any]:
        """Return the route as vertex keys."""
        return [v.key for v in self.route()]

    @property
    def hops(self) -> int:
        """Number of edges on the route."""
        return sum(1 for _ in self.arena.chain(self.index)) - 1

    def previous(self) -> Optional["PathRecord"]:
        """Return the record of the path this one extends, if any."""
        prev = self.arena[self.index].previous
        if prev is None:
            return None
        p = self.arena[prev]
        return PathRecord(p.total, p.destination, prev, self.arena)

    @classmethod
    def from_arena(cls, arena: PathArena, index: int) -> "PathRecord":
        p = arena[index]
        return cls(p.total, p.destination, index, arena)


__all__ = ["Path", "PathArena", "PathRecord"]
