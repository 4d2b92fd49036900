import os

os.environ.setdefault("MPLBACKEND", "Agg")

from typing import Dict, List, Tuple

import pytest

from frontierpath.graph import Graph, Vertex


def build(edges: List[Tuple[str, str, float]], keys: str = "", directed: bool = True):
    """Return ``(graph, {key: vertex})`` with extra isolated ``keys`` added."""
    g = Graph(directed=directed)
    vs: Dict[str, Vertex] = {}
    for k in keys:
        vs[k] = g.add_vertex(k)
    for u, v, w in edges:
        for k in (u, v):
            if k not in vs:
                vs[k] = g.add_vertex(k)
        g.add_edge(vs[u], vs[v], w)
    return g, vs


@pytest.fixture()
def scenario_a():
    return build([("A", "B", 1), ("A", "C", 4), ("B", "C", 1)])


@pytest.fixture()
def scenario_b():
    return build(
        [("A", "B", 1), ("A", "D", 1), ("B", "C", 4), ("D", "E", 1), ("E", "C", 1)],
        keys="ABCDEF",
    )
