import pytest

from algobox.components import ArticulationGraph, Kosaraju, Tarjan
from algobox.traversal import Graph

SOURCE_EDGES = [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]

UNDIRECTED_EDGES = [
    (0, 1), (1, 2), (2, 0), (1, 3), (3, 4), (4, 5), (5, 3), (5, 6), (7, 8),
]


def _add(g, edges):
    for u, v in edges:
        g.add_edge(u, v)


def _as_sets(components):
    return {frozenset(c) for c in components}


def _components_without(n, edges, vertex=None, edge=None):
    g = Graph(n)
    for u, v in edges:
        if vertex in (u, v) or edge in ((u, v), (v, u)):
            continue
        g.add_edge(u, v)
    count = g.count_components()
    return count - 1 if vertex is not None else count


def test_kosaraju_source_example():
    g = Kosaraju(5)
    _add(g, SOURCE_EDGES)
    sccs = g.strongly_connected_components()
    assert sorted(sorted(c) for c in sccs) == [[0, 1, 2], [3], [4]]


def test_tarjan_matches_kosaraju():
    for n, edges in [(5, SOURCE_EDGES), (4, [(0, 1), (1, 2), (2, 0), (1, 3)])]:
        kg = Kosaraju(n)
        _add(kg, edges)
        tg = Tarjan(n)
        _add(tg, edges)
        k = kg.strongly_connected_components()
        t = tg.strongly_connected_components()
        assert _as_sets(k) == _as_sets(t)


def test_sccs_partition_vertices():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (5, 5)]
    for g in (Kosaraju(6), Tarjan(6)):
        _add(g, edges)
        found = g.strongly_connected_components()
        assert sorted(v for c in found for v in c) == list(range(6))


def test_dag_has_singleton_components():
    edges = [(0, 1), (1, 2), (0, 2)]
    for g in (Kosaraju(3), Tarjan(3)):
        _add(g, edges)
        found = g.strongly_connected_components()
        assert all(len(c) == 1 for c in found)
        assert len(found) == 3


def test_tarjan_completes_sinks_first():
    g = Tarjan(3)
    _add(g, [(0, 1), (1, 2)])
    assert g.strongly_connected_components() == [[2], [1], [0]]


def test_kosaraju_lists_sources_first():
    g = Kosaraju(3)
    _add(g, [(0, 1), (1, 2)])
    assert g.strongly_connected_components() == [[0], [1], [2]]


def test_articulation_points_source_example():
    g = ArticulationGraph(5)
    _add(g, SOURCE_EDGES)
    assert g.articulation_points() == [0, 3]


def test_bridges_source_example():
    g = ArticulationGraph(5)
    _add(g, SOURCE_EDGES)
    assert set(g.bridges()) == {(0, 3), (3, 4)}


def test_articulation_points_disconnect_graph():
    g = ArticulationGraph(9)
    _add(g, UNDIRECTED_EDGES)
    base = _components_without(9, UNDIRECTED_EDGES)
    points = g.articulation_points()
    for v in range(9):
        grows = _components_without(9, UNDIRECTED_EDGES, vertex=v) > base
        assert grows == (v in points)


def test_bridges_disconnect_graph():
    g = ArticulationGraph(9)
    _add(g, UNDIRECTED_EDGES)
    base = _components_without(9, UNDIRECTED_EDGES)
    bridges = {frozenset(e) for e in g.bridges()}
    for edge in UNDIRECTED_EDGES:
        grows = _components_without(9, UNDIRECTED_EDGES, edge=edge) > base
        assert grows == (frozenset(edge) in bridges)


def test_cycle_has_no_cut_vertices_or_bridges():
    g = ArticulationGraph(4)
    _add(g, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert g.articulation_points() == []
    assert g.bridges() == []


def test_path_graph_every_edge_is_bridge():
    edges = [(0, 1), (1, 2), (2, 3)]
    g = ArticulationGraph(4)
    _add(g, edges)
    assert {frozenset(e) for e in g.bridges()} == {frozenset(e) for e in edges}
    assert g.articulation_points() == [1, 2]


@pytest.mark.parametrize("cls", [Kosaraju, Tarjan, ArticulationGraph])
def test_negative_size_rejected(cls):
    with pytest.raises(ValueError):
        cls(-1)