"""Adjacency-list graph with identity-bearing vertices."""

from __future__ import annotations

import math
import numbers
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, List, Optional, Tuple, Union

from .exceptions import GraphBusyError, GraphFormatError, InputError, NegativeWeightError

Weight = Union[int, float]
EdgeTriple = Tuple[Hashable, Hashable, Weight]


@dataclass(eq=False)
class Vertex:
    """A graph node carrying an opaque ``key`` and its outgoing edges.

    Vertices compare and hash by identity, so two vertices with equal keys
    remain distinct. ``index`` is the vertex position inside its graph.
    """

    key: Any
    index: int
    edges: List["Edge"] = field(default_factory=list, repr=False)

    def __repr__(self) -> str:
        return f"Vertex({self.key!r}, index={self.index})"


@dataclass(frozen=True)
class Edge:
    """Directed arc to ``neighbor``; owned by the source vertex's list."""

    neighbor: Vertex
    weight: Weight


def check_weight(weight: Any, source: Any = None, destination: Any = None) -> Weight:
    """Validate an edge weight and return it unchanged.

    Any :class:`numbers.Real` is accepted, NumPy scalars and
    :class:`fractions.Fraction` included; ``bool`` is not.

    Raises:
        GraphFormatError: If ``weight`` is not a real number or is NaN.
        NegativeWeightError: If ``weight`` is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise GraphFormatError(
            f"non-numeric weight {weight!r} on edge ({source!r}, {destination!r})"
        )
    if math.isnan(weight):
        raise GraphFormatError(f"NaN weight on edge ({source!r}, {destination!r})")
    if weight < 0:
        raise NegativeWeightError(
            f"negative weight {weight} on edge ({source!r}, {destination!r})"
        )
    return weight


class Graph:
    """Directed or undirected graph with non-negative edge weights.

    Negative weights break the greedy argument shortest-path search relies
    on, so :meth:`add_edge` rejects them with
    :class:`~frontierpath.exceptions.NegativeWeightError` citing the edge.

    The graph is read-only while a search holds it (see :meth:`reading`);
    mutating it during that window raises
    :class:`~frontierpath.exceptions.GraphBusyError`.

    Attributes:
        directed: Default directedness for :meth:`add_edge`.
        vertices: Vertices in creation order (``vertices[v.index] is v``).
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self.vertices: List[Vertex] = []
        self._lock = threading.Lock()
        self._readers = 0

    # ---- mutation -----------------------------------------------------

    def _check_writable(self) -> None:
        if self._readers:
            raise GraphBusyError("graph cannot be modified while a search is running")

    def add_vertex(self, key: Any) -> Vertex:
        """Create a vertex carrying ``key`` and return its handle.

        Examples:
            ```python
            >>> g = Graph()
            >>> g.add_vertex("A")
            Vertex('A', index=0)
            ```
        """
        with self._lock:
            self._check_writable()
            vertex = Vertex(key=key, index=len(self.vertices))
            self.vertices.append(vertex)
        return vertex

    def add_edge(
        self,
        source: Vertex,
        destination: Vertex,
        weight: Weight,
        directed: Optional[bool] = None,
    ) -> None:
        """Add an edge from ``source`` to ``destination``.

        Args:
            source: Tail vertex.
            destination: Head vertex.
            weight: Non-negative edge weight.
            directed: Override the graph's default directedness for this
                edge. When undirected, the mirror edge is added as well.

        Raises:
            InputError: If either endpoint belongs to another graph.
            GraphFormatError: If ``weight`` is not a number.
            NegativeWeightError: If ``weight`` is negative.
        """
        if not (self.owns(source) and self.owns(destination)):
            raise InputError("both endpoints must be vertices of this graph.")
        check_weight(weight, source.key, destination.key)
        if directed is None:
            directed = self.directed
        with self._lock:
            self._check_writable()
            source.edges.append(Edge(destination, weight))
            if not directed and destination is not source:
                destination.edges.append(Edge(source, weight))

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeTriple],
        directed: bool = True,
        vertices: Iterable[Hashable] = (),
    ) -> "Graph":
        """Build a graph from ``(u_key, v_key, w)`` triples.

        One vertex is created per distinct key, in first-seen order. Keys in
        ``vertices`` are created first, so edgeless vertices survive.
        """
        g = cls(directed=directed)
        by_key: dict = {}
        for key in vertices:
            if key not in by_key:
                by_key[key] = g.add_vertex(key)
        for u, v, w in edges:
            for key in (u, v):
                if key not in by_key:
                    by_key[key] = g.add_vertex(key)
            g.add_edge(by_key[u], by_key[v], w)
        return g

    # ---- lookup -------------------------------------------------------

    def owns(self, vertex: Vertex) -> bool:
        """Return ``True`` if ``vertex`` was created by this graph."""
        return (
            isinstance(vertex, Vertex)
            and 0 <= vertex.index < len(self.vertices)
            and self.vertices[vertex.index] is vertex
        )

    def vertices_with_key(self, key: Any) -> List[Vertex]:
        """Return every vertex carrying ``key``."""
        return [v for v in self.vertices if v.key == key]

    def vertex(self, key: Any) -> Vertex:
        """Return the single vertex carrying ``key``.

        Raises:
            InputError: If no vertex or more than one vertex carries ``key``.
        """
        found = self.vertices_with_key(key)
        if not found:
            raise InputError(f"no vertex with key {key!r}")
        if len(found) > 1:
            raise InputError(f"key {key!r} is carried by {len(found)} vertices")
        return found[0]

    # ---- introspection ------------------------------------------------

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    @property
    def edge_count(self) -> int:
        """Number of stored directed edges (mirrors count separately)."""
        return sum(len(v.edges) for v in self.vertices)

    def out_degree(self, vertex: Vertex) -> int:
        return len(vertex.edges)

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, Weight]]:
        """Yield every stored edge as ``(source, destination, weight)``."""
        for u in self.vertices:
            for e in u.edges:
                yield u, e.neighbor, e.weight

    # ---- search guard -------------------------------------------------

    @contextmanager
    def reading(self) -> Iterator["Graph"]:
        """Hold the graph read-only for the duration of the ``with`` block."""
        with self._lock:
            self._readers += 1
        try:
            yield self
        finally:
            with self._lock:
                self._readers -= 1

    @property
    def busy(self) -> bool:
        """``True`` while at least one search is reading the graph."""
        return self._readers > 0


__all__ = ["Edge", "EdgeTriple", "Graph", "Vertex", "Weight", "check_weight"]
