import pytest

from algobox.spanning_tree import Edge, MSTResult, boruvka, kruskal, prim
from algobox.union_find import UnionFind

SOURCE_EDGES = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]

LARGER_EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 5, 4), (2, 8, 2),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


def _adjacency(n, edges):
    adj = [[] for _ in range(n)]
    for e in edges:
        u, v, w = (e.u, e.v, e.w) if isinstance(e, Edge) else e
        adj[u].append((w, v))
        adj[v].append((w, u))
    return adj


def _spans(n, edges):
    uf = UnionFind(n)
    for e in edges:
        uf.union_by_rank(e.u, e.v)
    return uf.components() == 1


def test_kruskal_source_example():
    result = kruskal(4, SOURCE_EDGES)
    assert result.total_weight == 19
    assert len(result.edges) == 3
    assert set(result.edges) == {Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)}


def test_prim_source_example():
    result = prim(4, _adjacency(4, SOURCE_EDGES))
    assert result.total_weight == 19
    assert _spans(4, result.edges)


def test_boruvka_source_example():
    assert boruvka(4, SOURCE_EDGES) == 19


def test_algorithms_agree_on_larger_graph():
    k = kruskal(9, LARGER_EDGES)
    p = prim(9, _adjacency(9, LARGER_EDGES))
    assert k.total_weight == p.total_weight == boruvka(9, LARGER_EDGES)
    assert len(k.edges) == len(p.edges) == 8
    assert _spans(9, k.edges)
    assert _spans(9, p.edges)


def test_kruskal_accepts_tuples_and_edges_equally():
    as_tuples = [(e.u, e.v, e.w) for e in SOURCE_EDGES]
    assert kruskal(4, as_tuples) == kruskal(4, SOURCE_EDGES)


def test_prim_edge_weights_sum_to_total():
    result = prim(9, _adjacency(9, LARGER_EDGES), 4)
    assert sum(e.w for e in result.edges) == result.total_weight
    assert _spans(9, result.edges)


def test_kruskal_on_disconnected_graph_gives_forest():
    result = kruskal(4, [(0, 1, 3), (2, 3, 5)])
    assert len(result.edges) == 2
    assert result.total_weight == 8


def test_prim_covers_only_source_component():
    adj = _adjacency(4, [(0, 1, 3), (2, 3, 5)])
    result = prim(4, adj, 2)
    assert result.edges == [Edge(2, 3, 5)]


def test_single_vertex_has_empty_tree():
    assert kruskal(1, []) == MSTResult()
    assert boruvka(1, []) == 0


def test_boruvka_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        boruvka(3, [(0, 1, 1)])