import math

import pytest

from algocount.closure import INF, floyd
from algocount.greedy import CountingHeap, ShortestPaths, SpanningTree, dijkstra, prim

GRAPHS = [
    {(0, 1): 4, (0, 2): 1, (1, 2): 2, (1, 3): 5, (2, 3): 8, (3, 4): 3},
    {(0, 1): 2, (1, 2): 2, (2, 3): 2, (0, 3): 7, (0, 2): 3},
    {(0, 1): 1, (0, 2): 1, (0, 3): 1, (1, 2): 1, (2, 3): 1},
    {(0, 1): 6, (0, 4): 2, (1, 2): 3, (2, 3): 9, (3, 4): 4, (1, 4): 8, (2, 4): 7},
]


def _size(edges):
    return 1 + max(v for pair in edges for v in pair)


def _matrix(edges, absent=-1):
    size = _size(edges)
    matrix = [[0 if i == j else absent for j in range(size)] for i in range(size)]
    for (u, v), weight in edges.items():
        matrix[u][v] = matrix[v][u] = weight
    return matrix


def _kruskal_cost(edges):
    parent = list(range(_size(edges)))

    def find(v):
        while parent[v] != v:
            v = parent[v]
        return v

    cost = 0
    for (u, v), weight in sorted(edges.items(), key=lambda item: item[1]):
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[ru] = rv
            cost += weight
    return cost


def test_heap_pops_in_ascending_order():
    heap = CountingHeap()
    for key in [5, 3, 8, 1, 9, 2, 7]:
        heap.push((key, str(key)))
    popped = [heap.pop()[0] for _ in range(len(heap))]
    assert popped == sorted(popped)
    assert len(heap) == 0


def test_heap_counts_one_step_per_pop_at_least():
    heap = CountingHeap()
    for key in range(6):
        heap.push((key,))
    assert heap.count == 0
    for _ in range(6):
        heap.pop()
    assert heap.count >= 6


def test_heap_counts_sift_up_swaps_when_asked():
    heap = CountingHeap(count_sift_up=True)
    for key in [3, 2, 1]:
        heap.push((key,))
    assert heap.count == 2


def test_pop_from_empty_heap_raises():
    with pytest.raises(IndexError):
        CountingHeap().pop()


def test_prim_on_triangle():
    tree = prim([[0, 1, 3], [1, 0, 2], [3, 2, 0]])
    assert isinstance(tree, SpanningTree)
    assert tree.cost == 3
    assert sorted(tuple(sorted(edge)) for edge in tree.edges) == [(0, 1), (1, 2)]


@pytest.mark.parametrize("edges", GRAPHS)
def test_prim_cost_matches_kruskal(edges):
    tree = prim(_matrix(edges))
    assert tree.cost == _kruskal_cost(edges)
    assert len(tree.edges) == _size(edges) - 1
    reached = {0} | {child for _, child in tree.edges}
    assert reached == set(range(_size(edges)))


@pytest.mark.parametrize("edges", GRAPHS)
def test_prim_edges_are_graph_edges(edges):
    tree = prim(_matrix(edges))
    for parent, child in tree.edges:
        assert (parent, child) in edges or (child, parent) in edges
    assert tree.count == max(tree.heap_count, tree.graph_count)


def test_prim_accepts_none_and_infinity_as_missing_edges():
    edges = GRAPHS[0]
    with_none = prim(_matrix(edges, absent=None))
    with_inf = prim(_matrix(edges, absent=math.inf))
    assert with_none.cost == with_inf.cost == prim(_matrix(edges)).cost


def test_prim_rejects_empty_and_non_square():
    with pytest.raises(ValueError):
        prim([])
    with pytest.raises(ValueError):
        prim([[0, 1], [1]])


@pytest.mark.parametrize("edges", GRAPHS)
def test_dijkstra_matches_floyd(edges):
    expected = floyd(_matrix(edges, absent=INF)).matrix
    for source in range(_size(edges)):
        paths = dijkstra(_matrix(edges), source)
        assert isinstance(paths, ShortestPaths)
        assert paths.distances == expected[source]
        assert paths.distances[source] == 0


def test_dijkstra_unreachable_vertex_is_infinite():
    matrix = [[0, 2, -1], [2, 0, -1], [-1, -1, 0]]
    paths = dijkstra(matrix, 0)
    assert paths.distances[:2] == [0, 2]
    assert math.isinf(paths.distances[2])


def test_dijkstra_directed_edges():
    matrix = [[0, 5, -1], [-1, 0, 1], [-1, -1, 0]]
    assert dijkstra(matrix, 0).distances == [0, 5, 6]
    assert math.isinf(dijkstra(matrix, 2).distances[0])


@pytest.mark.parametrize("source", [-1, 3])
def test_dijkstra_rejects_source_outside_graph(source):
    with pytest.raises(IndexError):
        dijkstra([[0, 1, 1], [1, 0, 1], [1, 1, 0]], source)