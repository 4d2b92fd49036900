"""Greedy single-source shortest-path search over a binary-heap frontier."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .exceptions import ConfigError, InputError
from .frontier import FRONTIERS, FrontierProtocol
from .graph import Graph, Vertex, Weight
from .logger import Logger, NoopLogger
from .path import PathArena, PathRecord


@dataclass(frozen=True)
class EngineConfig:
    """Configuration knobs for the engine.

    Attributes:
        frontier: ``"heap"`` (binary heap) or ``"list"`` (linear-scan
            baseline).
        stop_at_target: If ``True``, :meth:`ShortestPathEngine.shortest_path`
            stops once the destination is finalized instead of draining the
            frontier. The answer is the same either way.
    """

    frontier: str = "heap"
    stop_at_target: bool = True


@dataclass(frozen=True)
class SearchMetrics:
    """Performance metrics collected from one search."""

    n: int
    m: int
    frontier: str
    counters: Dict[str, int]
    wall_ms: float


class ShortestPaths(Mapping):
    """Finalized shortest paths from ``source``, keyed by vertex.

    Unreachable vertices are absent. The source maps to a zero-total path
    whose route is ``[source]``.

    Attributes:
        source: Search origin.
        order: Vertices in the order they were finalized.
        counters: Work counters of the run.
        wall_ms: Wall-clock duration of the run in milliseconds.
    """

    def __init__(
        self,
        source: Vertex,
        arena: PathArena,
        settled: Dict[Vertex, int],
        order: List[Vertex],
        counters: Dict[str, int],
        wall_ms: float,
    ) -> None:
        self.source = source
        self.order = order
        self.counters = counters
        self.wall_ms = wall_ms
        self._arena = arena
        self._settled = settled

    def __getitem__(self, vertex: Vertex) -> PathRecord:
        return PathRecord.from_arena(self._arena, self._settled[vertex])

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._settled)

    def __len__(self) -> int:
        return len(self._settled)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._settled

    def distances(self) -> Dict[Vertex, Weight]:
        """Return ``{vertex: total}`` for every reachable vertex."""
        return {v: self._arena[i].total for v, i in self._settled.items()}

    def route(self, vertex: Vertex) -> List[Vertex]:
        """Return the route to ``vertex``, or ``[]`` if it was not reached."""
        index = self._settled.get(vertex)
        if index is None:
            return []
        return self._arena.route(index)

    def __repr__(self) -> str:
        return f"ShortestPaths(source={self.source!r}, reached={len(self)})"


class ShortestPathEngine:
    """Single-source shortest paths for graphs with non-negative weights.

    Each search seeds its frontier from the source, then repeatedly pops the
    cheapest pending path. The first pop for a vertex is its shortest path;
    later pops for the same vertex are stale and dropped. Popped paths expand
    into one new pending path per outgoing edge.

    The engine keeps no per-search state, so one instance may serve several
    threads as long as the graph is not modified.

    Args:
        G: Graph to search.
        config: Optional engine configuration.
        logger: Optional event logger.

    Raises:
        ConfigError: If ``config.frontier`` names no known frontier.
    """

    def __init__(
        self,
        G: Graph,
        config: Optional[EngineConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.G = G
        self.cfg = config or EngineConfig()
        self.logger = logger or NoopLogger()
        if self.cfg.frontier not in FRONTIERS:
            raise ConfigError(f"unknown frontier '{self.cfg.frontier}'")

    # ---------- internals -------------------------------------------------

    def _check_vertex(self, vertex: Vertex, role: str) -> None:
        if not self.G.owns(vertex):
            raise InputError(f"{role} must be a vertex of the searched graph.")

    def _expand(
        self,
        index: int,
        arena: PathArena,
        frontier: FrontierProtocol,
        counters: Dict[str, int],
    ) -> None:
        """Push one pending path per outgoing edge of path ``index``."""
        best = arena[index]
        for edge in best.destination.edges:
            counters["edges_relaxed"] += 1
            frontier.push(arena.add(best.total + edge.weight, edge.neighbor, index))
            counters["pushes"] += 1

    def _search(self, source: Vertex, target: Optional[Vertex] = None) -> ShortestPaths:
        self._check_vertex(source, "source")
        if target is not None:
            self._check_vertex(target, "target")

        counters: Dict[str, int] = {
            "pushes": 0,
            "pops": 0,
            "stale_pops": 0,
            "edges_relaxed": 0,
            "finalized": 0,
            "max_frontier": 0,
        }
        arena = PathArena()
        frontier: FrontierProtocol = FRONTIERS[self.cfg.frontier](arena)
        settled: Dict[Vertex, int] = {}
        order: List[Vertex] = []

        self.logger.info(
            "search_start",
            source=source.key,
            n=len(self.G),
            frontier=self.cfg.frontier,
        )
        t0 = time.perf_counter()
        with self.G.reading():
            # seeding: the source is settled with a zero-total root path
            root = arena.add(0, source, None)
            settled[source] = root
            order.append(source)
            counters["finalized"] += 1
            if target is not source:
                self._expand(root, arena, frontier, counters)

            while target is None or target not in settled:
                index = frontier.pop_min()
                if index is None:
                    break
                counters["pops"] += 1
                best = arena[index]
                if best.destination in settled:
                    counters["stale_pops"] += 1
                    continue
                settled[best.destination] = index
                order.append(best.destination)
                counters["finalized"] += 1
                self.logger.debug("finalize", vertex=best.destination.key, total=best.total)
                self._expand(index, arena, frontier, counters)

        # keep only finalized chains; pending and stale paths die with the run
        arena, remap = arena.compact(settled[v] for v in order)
        settled = {v: remap[settled[v]] for v in order}

        wall_ms = (time.perf_counter() - t0) * 1000.0
        counters["max_frontier"] = frontier.peak
        self.logger.info("search_done", source=source.key, wall_ms=round(wall_ms, 3), **counters)
        return ShortestPaths(source, arena, settled, order, counters, wall_ms)

    # ---------- public API ------------------------------------------------

    def shortest_paths(self, source: Vertex) -> ShortestPaths:
        """Return the shortest path to every vertex reachable from ``source``.

        Raises:
            InputError: If ``source`` does not belong to the graph.
        """
        return self._search(source)

    def shortest_path(self, source: Vertex, destination: Vertex) -> Optional[PathRecord]:
        """Return the shortest path from ``source`` to ``destination``.

        Returns:
            The finalized path, or ``None`` if ``destination`` is unreachable.

        Raises:
            InputError: If either vertex does not belong to the graph.
        """
        self._check_vertex(destination, "destination")
        target = destination if self.cfg.stop_at_target else None
        result = self._search(source, target)
        return result.get(destination)

    def metrics(self, result: ShortestPaths) -> SearchMetrics:
        """Return performance metrics for ``result``."""
        return SearchMetrics(
            n=len(self.G),
            m=self.G.edge_count,
            frontier=self.cfg.frontier,
            counters=dict(result.counters),
            wall_ms=result.wall_ms,
        )


def shortest_paths(
    G: Graph,
    source: Vertex,
    config: Optional[EngineConfig] = None,
    logger: Logger | None = None,
) -> ShortestPaths:
    """Convenience wrapper around :meth:`ShortestPathEngine.shortest_paths`."""
    return ShortestPathEngine(G, config, logger).shortest_paths(source)


def shortest_path(
    G: Graph,
    source: Vertex,
    destination: Vertex,
    config: Optional[EngineConfig] = None,
    logger: Logger | None = None,
) -> Optional[PathRecord]:
    """Convenience wrapper around :meth:`ShortestPathEngine.shortest_path`.

    Examples:
        ```python
        >>> g = Graph()
        >>> a, b, c = (g.add_vertex(k) for k in "ABC")
        >>> g.add_edge(a, b, 1); g.add_edge(a, c, 4); g.add_edge(b, c, 1)
        >>> rec = shortest_path(g, a, c)
        >>> rec.total, rec.keys()
        (2, ['A', 'B', 'C'])
        ```
    """
    return ShortestPathEngine(G, config, logger).shortest_path(source, destination)


__all__ = [
    "EngineConfig",
    "SearchMetrics",
    "ShortestPathEngine",
    "ShortestPaths",
    "shortest_path",
    "shortest_paths",
]
