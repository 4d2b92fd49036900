"""Seeded random graph families for tests, benchmarks and the CLI."""

from __future__ import annotations

import random
from typing import List, Literal, Optional

from .exceptions import InputError
from .graph import Graph, Vertex, Weight

WeightDist = Literal["uniform", "small_int", "float"]


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: int, w_max: int) -> Weight:
    if w_min < 0:
        raise InputError("w_min must be >= 0 for non-negative graphs.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")
    if dist == "uniform":
        return rng.randint(w_min, w_max)
    if dist == "small_int":
        # many equal weights, lots of ties
        return rng.randint(w_min, min(w_max, w_min + 3))
    if dist == "float":
        return rng.uniform(w_min, w_max)
    raise InputError(f"unknown weight distribution: {dist}")


def _vertices(g: Graph, n: int) -> List[Vertex]:
    if n <= 0:
        raise InputError("n must be > 0.")
    return [g.add_vertex(i) for i in range(n)]


def random_graph(
    n: int,
    m: int,
    seed: Optional[int] = 0,
    *,
    directed: bool = True,
    weight_dist: WeightDist = "uniform",
    w_min: int = 0,
    w_max: int = 10,
    allow_self_loops: bool = False,
) -> Graph:
    """Return an Erdős–Rényi style graph with ``m`` sampled edges.

    Keys are the integers ``0 .. n-1``. Parallel edges may occur.
    """
    if m < 0:
        raise InputError("m must be >= 0.")
    rng = random.Random(seed)
    g = Graph(directed=directed)
    vs = _vertices(g, n)
    added = 0
    while added < m:
        u, v = rng.randrange(n), rng.randrange(n)
        if u == v and not allow_self_loops:
            if n == 1:
                break
            continue
        g.add_edge(vs[u], vs[v], _sample_weight(rng, weight_dist, w_min, w_max))
        added += 1
    return g


def dag_graph(
    n: int,
    m: int,
    seed: Optional[int] = 0,
    *,
    weight_dist: WeightDist = "uniform",
    w_min: int = 0,
    w_max: int = 10,
) -> Graph:
    """Return a directed acyclic graph (edges go from lower to higher keys)."""
    if n < 2 and m > 0:
        raise InputError("a DAG with edges needs at least two vertices.")
    rng = random.Random(seed)
    g = Graph(directed=True)
    vs = _vertices(g, n)
    for _ in range(m):
        u = rng.randrange(n - 1)
        v = rng.randrange(u + 1, n)
        g.add_edge(vs[u], vs[v], _sample_weight(rng, weight_dist, w_min, w_max))
    return g


def grid_graph(
    rows: int,
    cols: int,
    seed: Optional[int] = 0,
    *,
    weight_dist: WeightDist = "small_int",
    w_min: int = 1,
    w_max: int = 10,
) -> Graph:
    """Return an undirected ``rows x cols`` grid keyed by ``(r, c)``."""
    if rows <= 0 or cols <= 0:
        raise InputError("rows and cols must be > 0.")
    rng = random.Random(seed)
    g = Graph(directed=False)
    cells = {(r, c): g.add_vertex((r, c)) for r in range(rows) for c in range(cols)}
    for (r, c), u in cells.items():
        for nb in ((r, c + 1), (r + 1, c)):
            if nb in cells:
                g.add_edge(u, cells[nb], _sample_weight(rng, weight_dist, w_min, w_max))
    return g


__all__ = ["WeightDist", "dag_graph", "grid_graph", "random_graph"]
