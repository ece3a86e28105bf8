import pytest

from spantree.prim_kruskal import (
    Edge,
    GraphNotConnectedError,
    WeightedGraph,
    compare_mst_orders,
    main,
)

SAMPLE_EDGES = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9)]


@pytest.fixture
def sample_graph():
    graph = WeightedGraph(5)
    for u, v, w in SAMPLE_EDGES:
        graph.add_edge(u, v, w)
    return graph


def _undirected(edges):
    return {(frozenset((e.src, e.dest)), e.weight) for e in edges}


def test_prim_order_of_sample(sample_graph):
    assert sample_graph.prim_order() == [
        Edge(0, 1, 2), Edge(1, 2, 3), Edge(0, 3, 6), Edge(1, 4, 5)
    ]


def test_kruskal_order_of_sample(sample_graph):
    assert sample_graph.kruskal_order() == [
        Edge(0, 1, 2), Edge(1, 2, 3), Edge(1, 4, 5), Edge(0, 3, 6)
    ]


def test_both_algorithms_pick_same_tree(sample_graph):
    prim, kruskal = compare_mst_orders(sample_graph)
    assert _undirected(prim) == _undirected(kruskal)
    assert sum(e.weight for e in prim) == sum(e.weight for e in kruskal)


def test_kruskal_weights_non_decreasing(sample_graph):
    weights = [e.weight for e in sample_graph.kruskal_order()]
    assert weights == sorted(weights)


def test_tree_edges_come_from_graph(sample_graph):
    graph_edges = {(frozenset((u, v)), w) for u, v, w in SAMPLE_EDGES}
    for order in compare_mst_orders(sample_graph):
        assert len(order) == 4
        assert _undirected(order) <= graph_edges


def test_single_vertex_has_empty_orders():
    graph = WeightedGraph(1)
    assert compare_mst_orders(graph) == ([], [])


def test_disconnected_prim_raises():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 1)
    with pytest.raises(GraphNotConnectedError):
        graph.prim_order()


def test_disconnected_kruskal_raises():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 1)
    with pytest.raises(GraphNotConnectedError):
        graph.kruskal_order()


def test_add_edge_out_of_range():
    graph = WeightedGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)


def test_invalid_vertex_count():
    with pytest.raises(ValueError):
        WeightedGraph(0)


def test_main_prints_both_orders(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Prim's MST Order:" in out
    assert "Kruskal's MST Order:" in out
    assert "1 -- 4 (w=5)" in out