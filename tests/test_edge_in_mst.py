import pytest

from spantree.edge_in_mst import is_edge_in_mst, main

MST = [(2, 3), (0, 3), (0, 2)]


@pytest.mark.parametrize("edge", MST)
def test_listed_edges_are_found(edge):
    assert is_edge_in_mst(MST, *edge) is True


@pytest.mark.parametrize("edge", MST)
def test_direction_is_ignored(edge):
    source, destination = edge
    assert is_edge_in_mst(MST, destination, source) is True


def test_missing_edge():
    assert is_edge_in_mst(MST, 0, 1) is False


def test_empty_tree():
    assert is_edge_in_mst([], 0, 2) is False


def test_accepts_generator():
    assert is_edge_in_mst((pair for pair in MST), 3, 0) is True


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Edge (0, 2) is in the MST",
        "Edge (0, 1) is not in the MST",
    ]