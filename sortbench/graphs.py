"""Directed weighted graphs as adjacency lists and incidence matrices."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An outgoing edge to ``dest`` with a weight."""

    dest: int
    weight: int


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


class GraphList:
    """Directed graph stored as one list of outgoing edges per vertex."""

    def __init__(self, vertex_count: int) -> None:
        _check_count("vertex_count", vertex_count)
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check_vertex(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError("Index out of range")

    def add_edge(self, source: int, dest: int, weight: int) -> None:
        """Add a directed edge from ``source`` to ``dest``."""
        self._check_vertex(source)
        self._adjacency[source].append(Edge(dest, weight))
        self._edge_count += 1

    def neighbors(self, node: int) -> tuple[Edge, ...]:
        """The outgoing edges of ``node`` in insertion order."""
        self._check_vertex(node)
        return tuple(self._adjacency[node])

    def render(self) -> str:
        """Text listing of every vertex and its outgoing edges."""
        lines = ["Adjacency List:\n"]
        for vertex, edges in enumerate(self._adjacency):
            pairs = "".join(f"({e.dest}, {e.weight}) " for e in edges)
            lines.append(f"{vertex}: {pairs}\n")
        return "".join(lines)


class GraphMatrix:
    """Directed graph stored as a vertex-by-edge incidence matrix."""

    def __init__(self, vertex_count: int, max_edges: int) -> None:
        _check_count("vertex_count", vertex_count)
        _check_count("max_edges", max_edges)
        self._vertex_count = vertex_count
        self._edge_limit = max_edges
        self._matrix = [[0] * max_edges for _ in range(vertex_count)]
        self._edges: list[tuple[int, int, int]] = []

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edge_limit(self) -> int:
        return self._edge_limit

    @property
    def edges(self) -> tuple[tuple[int, int, int], ...]:
        """Added edges as (source, dest, weight) triples."""
        return tuple(self._edges)

    @property
    def incidence(self) -> list[list[int]]:
        """Rows per vertex, columns per added edge: -1 source, 1 destination."""
        used = len(self._edges)
        return [row[:used] for row in self._matrix]

    def add_edge(self, source: int, dest: int, weight: int) -> None:
        """Add a directed edge; raises ValueError once the edge limit is reached."""
        column = len(self._edges)
        if column >= self._edge_limit:
            raise ValueError("Edge limit reached!")
        for vertex in (source, dest):
            if not 0 <= vertex < self._vertex_count:
                raise IndexError("Index out of range")
        self._matrix[source][column] = -1
        self._matrix[dest][column] = 1
        self._edges.append((source, dest, weight))

    def render(self) -> str:
        """Text form of the incidence matrix for the edges added so far."""
        lines = [f"Incidence Matrix ({self._vertex_count} x {self.edge_count}):\n"]
        for row in self.incidence:
            lines.append("".join(f"{value} " for value in row) + "\n")
        return "".join(lines)


def demo() -> None:
    """Build a small sample graph in both representations and print them."""
    graph_list = GraphList(4)
    graph_list.add_edge(0, 1, 10)
    graph_list.add_edge(1, 2, 5)
    graph_list.add_edge(2, 3, 2)
    print(graph_list.render(), end="")

    graph_matrix = GraphMatrix(4, 3)
    graph_matrix.add_edge(0, 1, 10)
    graph_matrix.add_edge(1, 2, 5)
    graph_matrix.add_edge(2, 3, 2)
    print(graph_matrix.render(), end="")