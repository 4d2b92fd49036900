import math
from fractions import Fraction

import numpy as np
import pytest

from frontierpath.engine import shortest_path
from frontierpath.exceptions import GraphBusyError, GraphFormatError, InputError, NegativeWeightError
from frontierpath.graph import Edge, Graph


def test_add_vertex_returns_distinct_handles_for_equal_keys():
    g = Graph()
    a1 = g.add_vertex("A")
    a2 = g.add_vertex("A")
    assert a1 is not a2
    assert a1 != a2
    assert len({a1, a2}) == 2
    assert g.vertices_with_key("A") == [a1, a2]
    assert len(g) == 2


def test_directed_edge_is_owned_by_source():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    g.add_edge(a, b, 2.5)
    assert a.edges == [Edge(b, 2.5)]
    assert b.edges == []
    assert g.out_degree(a) == 1
    assert g.edge_count == 1


def test_undirected_graph_mirrors_edge_at_creation():
    g = Graph(directed=False)
    a, b = g.add_vertex("A"), g.add_vertex("B")
    g.add_edge(a, b, 3)
    assert a.edges == [Edge(b, 3)]
    assert b.edges == [Edge(a, 3)]
    assert g.edge_count == 2


def test_per_edge_directedness_override():
    g = Graph(directed=True)
    a, b, c = (g.add_vertex(k) for k in "ABC")
    g.add_edge(a, b, 1, directed=False)
    g.add_edge(b, c, 1)
    assert [e.neighbor for e in b.edges] == [a, c]

    u = Graph(directed=False)
    x, y = u.add_vertex("x"), u.add_vertex("y")
    u.add_edge(x, y, 1, directed=True)
    assert y.edges == []


def test_undirected_self_loop_is_stored_once():
    g = Graph(directed=False)
    a = g.add_vertex("A")
    g.add_edge(a, a, 0)
    assert a.edges == [Edge(a, 0)]


def test_zero_and_int_weights_are_kept_unchanged():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    g.add_edge(a, b, 0)
    g.add_edge(a, b, 7)
    assert [e.weight for e in a.edges] == [0, 7]
    assert all(isinstance(e.weight, int) for e in a.edges)


def test_negative_weight_is_rejected_with_edge_in_message():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    with pytest.raises(NegativeWeightError, match="negative weight -1"):
        g.add_edge(a, b, -1)
    assert a.edges == []


@pytest.mark.parametrize("bad", ["1", None, True, math.nan])
def test_non_numeric_weight_is_rejected(bad):
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    with pytest.raises(GraphFormatError):
        g.add_edge(a, b, bad)


@pytest.mark.parametrize("weight", [np.int64(3), np.float32(0.5), Fraction(3, 4)])
def test_real_number_weights_are_accepted(weight):
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    g.add_edge(a, b, weight)
    assert a.edges[0].weight is weight
    assert shortest_path(g, a, b).total == weight


def test_negative_numpy_weight_is_rejected():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    with pytest.raises(NegativeWeightError):
        g.add_edge(a, b, np.int64(-2))


def test_foreign_vertex_is_rejected():
    g, h = Graph(), Graph()
    a = g.add_vertex("A")
    b = h.add_vertex("B")
    with pytest.raises(InputError):
        g.add_edge(a, b, 1)


def test_from_edges_creates_one_vertex_per_key():
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
    assert [v.key for v in g] == ["A", "B", "C"]
    assert g.edge_count == 3
    assert g.vertex("A").edges[1] == Edge(g.vertex("C"), 5)


def test_from_edges_keeps_declared_edgeless_vertices():
    g = Graph.from_edges([("A", "B", 1)], vertices=["F", "A", "F"])
    assert [v.key for v in g] == ["F", "A", "B"]
    assert g.out_degree(g.vertex("F")) == 0


def test_vertex_lookup_requires_unique_key():
    g = Graph()
    g.add_vertex("A")
    g.add_vertex("A")
    with pytest.raises(InputError):
        g.vertex("A")
    with pytest.raises(InputError):
        g.vertex("missing")


def test_edges_iterates_all_stored_arcs():
    g = Graph.from_edges([("A", "B", 1), ("B", "A", 2)])
    assert [(u.key, v.key, w) for u, v, w in g.edges()] == [("A", "B", 1), ("B", "A", 2)]


def test_mutation_is_refused_while_reading():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    with g.reading():
        assert g.busy
        with pytest.raises(GraphBusyError):
            g.add_vertex("C")
        with pytest.raises(GraphBusyError):
            g.add_edge(a, b, 1)
    assert not g.busy
    g.add_edge(a, b, 1)
    assert g.edge_count == 1


def test_reader_count_is_released_on_error():
    g = Graph()
    with pytest.raises(RuntimeError):
        with g.reading():
            raise RuntimeError("boom")
    assert not g.busy
