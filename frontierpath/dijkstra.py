"""Reference Dijkstra implementation used in tests and benchmarks."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from .graph import Graph, Vertex, Weight


def dijkstra_reference(
    G: Graph, source: Vertex
) -> Tuple[Dict[Vertex, Weight], Dict[Vertex, Optional[Vertex]]]:
    """Run textbook Dijkstra on top of :mod:`heapq`.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        ``(dist, pred)`` restricted to vertices reachable from ``source``.
    """
    dist: Dict[Vertex, Weight] = {source: 0}
    pred: Dict[Vertex, Optional[Vertex]] = {source: None}
    tie = count()
    pq: List[Tuple[Weight, int, Vertex]] = [(0, next(tie), source)]
    seen: Set[Vertex] = set()
    while pq:
        d, _, u = heapq.heappop(pq)
        if u in seen:
            continue
        seen.add(u)
        for e in u.edges:
            nd = d + e.weight
            if e.neighbor not in dist or nd < dist[e.neighbor]:
                dist[e.neighbor] = nd
                pred[e.neighbor] = u
                heapq.heappush(pq, (nd, next(tie), e.neighbor))
    return dist, pred
