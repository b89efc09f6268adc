"""Weighted edges and per-vertex edge lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``v1`` and ``v2``."""

    v1: int
    v2: int
    weight: int = 0

    @property
    def vertices(self) -> tuple[int, int]:
        return (self.v1, self.v2)


class EdgeList:
    """An ordered list of edges, optionally owned by a single vertex.

    When the list belongs to a vertex, ``push`` builds edges from that vertex
    and refuses self-loops, negative vertices and duplicate neighbours.
    """

    def __init__(self, vertex: int = -1) -> None:
        self.vertex = vertex
        self._edges: list[Edge] = []

    def push(self, u: int, weight: int) -> None:
        """Add an edge from the owning vertex to ``u`` unless it is invalid or present."""
        if u == self.vertex or u < 0 or self.index_of(u) is not None:
            return
        self._edges.append(Edge(self.vertex, u, weight))

    def append(self, edge: Edge) -> None:
        """Add ``edge`` unconditionally."""
        self._edges.append(edge)

    def pop(self, u: int) -> Edge:
        """Remove and return the edge touching ``u``."""
        index = self.index_of(u)
        if index is None:
            raise ValueError("Vertex not found")
        return self._edges.pop(index)

    def index_of(self, u: int) -> int | None:
        """Position of the first edge touching ``u``, or None."""
        if u == self.vertex or u < 0:
            return None
        return next(
            (i for i, edge in enumerate(self._edges) if u in (edge.v1, edge.v2)),
            None,
        )

    def sort(self) -> None:
        """Sort edges by ascending weight, keeping the order of equal weights."""
        self._edges.sort(key=lambda edge: edge.weight)

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, index: int) -> Edge:
        if not 0 <= index < len(self._edges):
            raise IndexError("Index out of range")
        return self._edges[index]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"EdgeList(vertex={self.vertex}, edges={self._edges!r})"