import pytest

from dsakit.backtracking import hamiltonian_cycle, knights_tour

GRAPH_WITH_CYCLE = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 1],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 1],
    [0, 1, 1, 1, 0],
]

GRAPH_WITHOUT_CYCLE = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 1],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 0],
    [0, 1, 1, 0, 0],
]


def _assert_valid_cycle(graph, cycle):
    assert cycle[0] == cycle[-1] == 0
    assert sorted(cycle[:-1]) == list(range(len(graph)))
    for a, b in zip(cycle, cycle[1:]):
        assert graph[a][b]


def test_hamiltonian_driver_example():
    assert hamiltonian_cycle(GRAPH_WITH_CYCLE) == [0, 1, 2, 4, 3, 0]


def test_hamiltonian_cycle_is_valid():
    _assert_valid_cycle(GRAPH_WITH_CYCLE, hamiltonian_cycle(GRAPH_WITH_CYCLE))


def test_hamiltonian_no_cycle():
    assert hamiltonian_cycle(GRAPH_WITHOUT_CYCLE) is None


def test_hamiltonian_complete_graph():
    graph = [[int(i != j) for j in range(6)] for i in range(6)]
    _assert_valid_cycle(graph, hamiltonian_cycle(graph))


def test_hamiltonian_rejects_non_square():
    with pytest.raises(ValueError):
        hamiltonian_cycle([[0, 1], [1]])


def test_hamiltonian_rejects_empty():
    with pytest.raises(ValueError):
        hamiltonian_cycle([])


def _assert_valid_tour(board):
    size = len(board)
    positions = {}
    for x, row in enumerate(board):
        assert len(row) == size
        for y, move in enumerate(row):
            positions[move] = (x, y)
    assert sorted(positions) == list(range(size * size))
    assert positions[0] == (0, 0)
    for move in range(1, size * size):
        (ax, ay), (bx, by) = positions[move - 1], positions[move]
        assert {abs(ax - bx), abs(ay - by)} == {1, 2}


def test_knights_tour_five_by_five_is_valid():
    _assert_valid_tour(knights_tour(5))


def test_knights_tour_single_cell():
    board = knights_tour(1)
    _assert_valid_tour(board)
    assert board == [[0]]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_knights_tour_impossible_boards(size):
    assert knights_tour(size) is None


def test_knights_tour_rejects_non_positive_size():
    with pytest.raises(ValueError):
        knights_tour(0)