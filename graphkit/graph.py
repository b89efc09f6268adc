"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from .edges import Edge, EdgeList


class Graph:
    """An undirected weighted graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("Number of vertices must be positive")
        self._vertices = vertices
        self._adjacency = [EdgeList(i) for i in range(vertices)]

    @property
    def vertices(self) -> int:
        return self._vertices

    def _check_pair(self, u: int, v: int) -> None:
        if not (0 <= u < self._vertices and 0 <= v < self._vertices):
            raise IndexError("Vertex out of range")
        if u == v:
            raise ValueError("Self-loops are not allowed")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v``; an existing connection is left unchanged."""
        self._check_pair(u, v)
        self._adjacency[u].push(v, weight)
        self._adjacency[v].push(u, weight)

    def remove_edge(self, u: int, v: int) -> None:
        self._check_pair(u, v)
        self._adjacency[u].pop(v)
        self._adjacency[v].pop(u)

    def adjacency(self, u: int) -> EdgeList:
        """A copy of the edges leaving ``u``."""
        if not 0 <= u < self._vertices:
            raise IndexError("Vertex out of range")
        copy = EdgeList(u)
        for edge in self._adjacency[u]:
            copy.append(edge)
        return copy

    def sorted_edges(self) -> EdgeList:
        """Every edge once, as ``(lower, higher)``, sorted by ascending weight."""
        result = EdgeList()
        for i, edges in enumerate(self._adjacency):
            for edge in edges:
                if edge.v2 > i:
                    result.append(edge)
        result.sort()
        return result

    def format(self) -> str:
        """A readable listing of the vertices and edges."""
        vertices = "".join(f"({i}) " for i in range(self._vertices))
        edges = "".join(_format_edge(edge) for edge in self.sorted_edges())
        return f"Printing Graph:\nVertices: {vertices}\nEdges: \n{edges}\n\n"

    def __repr__(self) -> str:
        return f"Graph(vertices={self._vertices})"


def _format_edge(edge: Edge) -> str:
    return f"(v1: {edge.v1}, v2: {edge.v2}, weight: {edge.weight}) "