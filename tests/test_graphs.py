import pytest

from dsakit.graphs import AdjacencyListGraph, AdjacencyMatrixGraph


def _matrix(count, edges):
    graph = AdjacencyMatrixGraph(count)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_list_graph_newest_first():
    graph = AdjacencyListGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.adjacent_nodes(0) == [2, 1]
    assert graph.adjacent_nodes(1) == []


def test_list_graph_is_directed():
    graph = AdjacencyListGraph(2)
    graph.add_edge(0, 1)
    assert 1 in graph.adjacent_nodes(0)
    assert 0 not in graph.adjacent_nodes(1)


def test_list_graph_format():
    graph = AdjacencyListGraph(2)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0, data="x")
    assert graph.format() == " (1,10) \n (0,x) "


def test_list_graph_format_has_line_per_vertex():
    graph = AdjacencyListGraph(4)
    assert len(graph.format().split("\n")) == graph.vertex_count


@pytest.mark.parametrize(
    "call",
    [
        lambda g: g.add_edge(0, 5),
        lambda g: g.adjacent_nodes(-1),
    ],
)
def test_list_graph_bad_vertex(call):
    with pytest.raises(IndexError):
        call(AdjacencyListGraph(2))


def test_list_graph_negative_count():
    with pytest.raises(ValueError):
        AdjacencyListGraph(-1)


def test_matrix_graph_symmetric():
    graph = _matrix(4, [(0, 2), (2, 3)])
    assert graph.adjacent_nodes(2) == [0, 3]
    assert graph.adjacent_nodes(0) == [2]
    assert graph.adjacent_nodes(3) == [2]
    assert graph.edge_count == 2


@pytest.mark.parametrize("vertex, expected", [(2, True), (0, False), (10, True)])
def test_matrix_graph_isolated(vertex, expected):
    assert _matrix(3, [(0, 1)]).is_isolated(vertex) is expected


def test_matrix_graph_unknown_vertex_has_no_neighbours():
    assert AdjacencyMatrixGraph(2).adjacent_nodes(7) == []


def test_matrix_format():
    assert _matrix(2, [(0, 1)]).format_matrix() == "0 1\n1 0"


def test_matrix_format_is_symmetric():
    graph = _matrix(5, [(0, 1), (1, 2), (3, 4), (0, 4)])
    rows = [row.split() for row in graph.format_matrix().split("\n")]
    assert len(rows) == graph.vertex_count
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            assert cell == rows[j][i]


def test_matrix_bad_edge():
    with pytest.raises(IndexError):
        AdjacencyMatrixGraph(2).add_edge(0, 2)