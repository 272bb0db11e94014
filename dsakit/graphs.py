"""Graphs stored as adjacency lists or as an adjacency matrix."""

from __future__ import annotations

import operator
from typing import Any


class AdjacencyListGraph:
    """A directed graph keeping, per vertex, a list of (neighbour, data) entries.

    New entries go to the front of a vertex's list.
    """

    def __init__(self, vertex_count: int) -> None:
        vertex_count = operator.index(vertex_count)
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._lists: list[list[tuple[int, Any]]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._lists)

    def _check(self, v: int) -> int:
        v = operator.index(v)
        if not 0 <= v < len(self._lists):
            raise IndexError(f"no vertex {v}")
        return v

    def add_edge(self, u: int, v: int, data: Any = 10) -> None:
        """Add an entry for neighbour ``v`` carrying ``data`` to vertex ``u``."""
        self._lists[self._check(u)].insert(0, (self._check(v), data))

    def adjacent_nodes(self, v: int) -> list[int]:
        """Neighbours of ``v``, most recently added first."""
        return [vertex for vertex, _ in self._lists[self._check(v)]]

    def format(self) -> str:
        """One line per vertex listing its entries as ``(vertex,data)``."""
        return "\n".join(
            "".join(f" ({vertex},{data}) " for vertex, data in entries)
            for entries in self._lists
        )


class AdjacencyMatrixGraph:
    """An undirected graph stored as a 0/1 adjacency matrix."""

    def __init__(self, vertex_count: int) -> None:
        vertex_count = operator.index(vertex_count)
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._matrix)

    @property
    def edge_count(self) -> int:
        total = sum(map(sum, self._matrix))
        loops = sum(self._matrix[i][i] for i in range(len(self._matrix)))
        return (total + loops) // 2

    def _valid(self, v: int) -> bool:
        return 0 <= v < len(self._matrix)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        u, v = operator.index(u), operator.index(v)
        if not (self._valid(u) and self._valid(v)):
            raise IndexError(f"no edge possible between {u} and {v}")
        self._matrix[u][v] = 1
        self._matrix[v][u] = 1

    def adjacent_nodes(self, v: int) -> list[int]:
        """Neighbours of ``v`` in ascending order; empty for an unknown vertex."""
        if not self._valid(v):
            return []
        return [i for i, linked in enumerate(self._matrix[v]) if linked]

    def is_isolated(self, v: int) -> bool:
        """True when ``v`` has no neighbours; an unknown vertex counts as isolated."""
        return not self.adjacent_nodes(v)

    def format_matrix(self) -> str:
        """The matrix as rows of space-separated 0s and 1s."""
        return "\n".join(" ".join(str(cell) for cell in row) for row in self._matrix)