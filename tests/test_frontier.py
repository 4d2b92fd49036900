import pytest

from frontierpath.frontier import HeapFrontier, ListFrontier
from frontierpath.graph import Graph
from frontierpath.path import PathArena


@pytest.fixture(params=[HeapFrontier, ListFrontier], ids=["heap", "list"])
def frontier_cls(request):
    return request.param


def _arena():
    g = Graph()
    a, b, c = (g.add_vertex(k) for k in "ABC")
    return PathArena(), (a, b, c)


def test_pop_min_returns_cheapest_total(frontier_cls):
    arena, (a, b, c) = _arena()
    f = frontier_cls(arena)
    for total, v in ((5, a), (1, b), (3, c)):
        f.push(arena.add(total, v))
    assert [arena[f.pop_min()].total for _ in range(3)] == [1, 3, 5]
    assert f.is_empty


def test_ties_break_by_insertion_order(frontier_cls):
    arena, (a, b, c) = _arena()
    f = frontier_cls(arena)
    first = arena.add(2, c)
    second = arena.add(2, a)
    third = arena.add(2, b)
    for i in (third, first, second):
        f.push(i)
    assert [f.pop_min() for _ in range(3)] == [first, second, third]


def test_duplicate_destinations_coexist(frontier_cls):
    arena, (a, _, _) = _arena()
    f = frontier_cls(arena)
    f.push(arena.add(4, a))
    f.push(arena.add(2, a))
    assert len(f) == 2
    assert arena[f.pop_min()].total == 2
    assert arena[f.pop_min()].total == 4


def test_empty_frontier_pops_none(frontier_cls):
    arena, _ = _arena()
    f = frontier_cls(arena)
    assert f.is_empty
    assert len(f) == 0
    assert f.pop_min() is None


def test_peak_tracks_largest_size(frontier_cls):
    arena, (a, b, c) = _arena()
    f = frontier_cls(arena)
    f.push(arena.add(1, a))
    f.push(arena.add(2, b))
    f.pop_min()
    f.push(arena.add(3, c))
    assert f.peak == 2
