"""Backtracking searches: Hamiltonian cycles and knight's tours."""

from collections.abc import Sequence

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def hamiltonian_cycle(graph: Sequence[Sequence[int]]) -> list[int] | None:
    """Find a Hamiltonian cycle in an adjacency matrix, starting at vertex 0.

    The cycle is returned closed, ending with vertex 0 again; None if none exists.
    """
    vertex_count = len(graph)
    if vertex_count == 0:
        raise ValueError("graph must have at least one vertex")
    if any(len(row) != vertex_count for row in graph):
        raise ValueError("adjacency matrix must be square")

    path = [0]
    used = {0}

    def extend() -> bool:
        if len(path) == vertex_count:
            return bool(graph[path[-1]][path[0]])
        for vertex in range(1, vertex_count):
            if graph[path[-1]][vertex] and vertex not in used:
                path.append(vertex)
                used.add(vertex)
                if extend():
                    return True
                path.pop()
                used.discard(vertex)
        return False

    if not extend():
        return None
    return path + [path[0]]


def knights_tour(size: int = 8) -> list[list[int]] | None:
    """Find a knight's tour from the top-left corner of a ``size`` x ``size`` board.

    Each cell holds the move number at which the knight visits it; None if no tour exists.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def solve(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if solve(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if solve(0, 0, 1) else None