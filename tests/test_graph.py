import pytest

from dsakit.graph import Edge, format_mst, prim_mst

SAMPLE = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def test_sample_graph_edges():
    assert prim_mst(SAMPLE) == [
        Edge(0, 1, 2),
        Edge(1, 2, 3),
        Edge(1, 4, 5),
        Edge(0, 3, 6),
    ]


def test_tree_spans_every_vertex():
    edges = prim_mst(SAMPLE)
    assert len(edges) == len(SAMPLE) - 1
    touched = {0} | {edge.v for edge in edges}
    assert touched == set(range(len(SAMPLE)))


def test_edge_weights_match_matrix():
    for edge in prim_mst(SAMPLE):
        assert SAMPLE[edge.u][edge.v] == edge.weight


def test_each_edge_starts_from_already_selected_vertex():
    seen = {0}
    for edge in prim_mst(SAMPLE):
        assert edge.u in seen
        assert edge.v not in seen
        seen.add(edge.v)


def test_ties_take_first_found_edge():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert prim_mst(triangle) == [Edge(0, 1, 1), Edge(0, 2, 1)]


def test_single_vertex_and_empty_graph():
    assert prim_mst([[0]]) == []
    assert prim_mst([]) == []


def test_disconnected_graph_raises():
    with pytest.raises(ValueError, match="not connected"):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError, match="square"):
        prim_mst([[0, 1], [1, 0, 2]])


def test_format_mst():
    edges = prim_mst(SAMPLE)
    lines = format_mst(edges).splitlines()
    assert lines[0] == "Edge \tWeight"
    assert lines[1] == f"{edges[0].u} - {edges[0].v}\t{edges[0].weight}"
    assert len(lines) == len(edges) + 1


def test_format_empty():
    assert format_mst([]) == "Edge \tWeight"