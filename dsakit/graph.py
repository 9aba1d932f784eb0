"""Adjacency-list graphs and Kruskal's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class Graph:
    """An undirected graph stored as adjacency lists.

    New neighbours are placed at the front of a vertex's list, so
    :meth:`neighbours` reports the most recently added edge first.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Add an undirected edge between ``src`` and ``dest``."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, newest edge first."""
        self._check(vertex)
        return list(self._adjacency[vertex])


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; tell whether they were separate."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning tree (a forest if disconnected).

    Edges are returned in the order they were chosen, lightest first.
    """
    ordered = sorted(edges, key=lambda edge: edge.weight)
    for edge in ordered:
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
    sets = DisjointSet(vertex_count)
    result: list[Edge] = []
    for edge in ordered:
        if len(result) >= vertex_count - 1:
            break
        if sets.union(edge.src, edge.dest):
            result.append(edge)
    return result


def mst_cost(edges: Iterable[Edge]) -> int:
    """Return the total weight of ``edges``."""
    return sum(edge.weight for edge in edges)