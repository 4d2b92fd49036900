import networkx as nx
import pytest

from conftest import build
from frontierpath.engine import shortest_paths
from frontierpath.generator import random_graph
from frontierpath.visualize import draw_route, to_networkx


def test_to_networkx_keeps_keys_and_parallel_edges():
    g, v = build([("A", "B", 3), ("A", "B", 1)])
    H = to_networkx(g)
    assert H.nodes[v["A"].index]["key"] == "A"
    assert H.number_of_edges(v["A"].index, v["B"].index) == 2


@pytest.mark.parametrize("seed", range(5))
def test_distances_agree_with_networkx(seed):
    g = random_graph(60, 240, seed, weight_dist="float")
    s = g.vertices[0]
    expected = nx.single_source_dijkstra_path_length(to_networkx(g), s.index)
    res = shortest_paths(g, s)
    assert {v.index for v in res} == set(expected)
    for v, rec in res.items():
        assert rec.total == pytest.approx(expected[v.index])


def test_draw_route_writes_image(tmp_path, scenario_b):
    g, v = scenario_b
    res = shortest_paths(g, v["A"])
    out = tmp_path / "route.png"
    fig = draw_route(g, res, v["C"], str(out), show_weights=True)
    assert out.exists() and out.stat().st_size > 0
    assert fig.axes


def test_draw_tree_without_destination(scenario_b):
    g, v = scenario_b
    fig = draw_route(g, shortest_paths(g, v["A"]), layout="circular")
    assert fig.axes
