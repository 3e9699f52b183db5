import math

import pytest

from algokit.dijkstra import VertexState, adjacency_matrix, dijkstra

EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2),
    (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1),
    (6, 8, 6), (7, 8, 7),
]


def test_matrix_is_symmetric_and_holds_weights():
    matrix = adjacency_matrix(9, EDGES)
    for u, v, w in EDGES:
        assert matrix[u][v] == w
        assert matrix[v][u] == w
    assert all(matrix[i][j] == matrix[j][i] for i in range(9) for j in range(9))


def test_matrix_edge_out_of_range():
    with pytest.raises(ValueError):
        adjacency_matrix(2, [(0, 2, 1)])


def test_shorter_path_through_middle():
    states = dijkstra(adjacency_matrix(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)]), 0)
    assert [s.distance for s in states] == [0, 4, 5]
    assert states[2].previous == 1


def test_source_state():
    states = dijkstra(adjacency_matrix(9, EDGES), 3)
    assert states[3] == VertexState(distance=0, previous=None, visited=True)


def test_edges_are_relaxed():
    matrix = adjacency_matrix(9, EDGES)
    states = dijkstra(matrix, 0)
    for u, v, w in EDGES:
        assert states[v].distance <= states[u].distance + w
        assert states[u].distance <= states[v].distance + w


def test_previous_chain_sums_to_distance():
    matrix = adjacency_matrix(9, EDGES)
    states = dijkstra(matrix, 0)
    for vertex, state in enumerate(states):
        total = 0
        node = vertex
        while states[node].previous is not None:
            parent = states[node].previous
            total += matrix[parent][node]
            node = parent
        assert node == 0
        assert total == state.distance


def test_unreachable_vertex():
    states = dijkstra(adjacency_matrix(3, [(0, 1, 2)]), 0)
    assert math.isinf(states[2].distance)
    assert states[2].previous is None
    assert states[2].visited is False


def test_bad_source():
    with pytest.raises(ValueError):
        dijkstra(adjacency_matrix(2, []), 2)


def test_non_square_matrix():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(adjacency_matrix(2, [(0, 1, -1)]), 0)