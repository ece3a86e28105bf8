import pytest

from spantree.update_mst import MinimumSpanningTree, main


@pytest.fixture
def tree():
    t = MinimumSpanningTree()
    t.add_edge(0, 1, 1)
    t.add_edge(1, 0, 1)
    t.add_edge(1, 2, 2)
    t.add_edge(2, 1, 2)
    return t


def test_initial_vertex_count(tree):
    assert tree.vertex_count == 3


def test_neighbours_newest_first(tree):
    assert tree.neighbours(1) == [(2, 2), (0, 1)]


def test_add_vertex_picks_lightest_edge(tree):
    chosen = tree.add_vertex(3, [(2, 1), (0, 4)])
    assert chosen == (2, 1)
    assert tree.neighbours(3) == [(2, 1)]
    assert (3, 1) in tree.neighbours(2)
    assert tree.vertex_count == 4


def test_add_disconnected_vertex(tree):
    assert tree.add_vertex(4, None) is None
    assert tree.neighbours(4) == []
    assert tree.vertex_count == 5


def test_edges_to_unknown_vertices_are_ignored(tree):
    chosen = tree.add_vertex(3, [(7, 1), (0, 5)])
    assert chosen == (0, 5)
    assert tree.neighbours(7) == []


def test_first_edge_wins_on_tie(tree):
    assert tree.add_vertex(3, [(0, 2), (1, 2)]) == (0, 2)


def test_format_lists_every_vertex(tree):
    tree.add_vertex(3, [(2, 1)])
    lines = tree.format().splitlines()
    assert len(lines) == tree.vertex_count
    assert lines[1] == "Vertex 1: -> (2, 2) -> (0, 1)"
    assert lines[3] == "Vertex 3: -> (2, 1)"


@pytest.mark.parametrize("vertex", [-1, 100])
def test_out_of_range_vertex_raises(tree, vertex):
    with pytest.raises(ValueError):
        tree.add_vertex(vertex, [])


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Initial MST:" in out
    assert "MST after adding vertex 4 (disconnected):" in out
    assert out.rstrip().endswith("Vertex 4:")