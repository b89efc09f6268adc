"""Traversals, shortest paths and spanning trees over a :class:`Graph`."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterator

from .edges import Edge
from .graph import Graph
from .heap import BinaryHeap


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.vertices:
        raise IndexError("Start vertex out of range")


def bfs(graph: Graph, start: int) -> Graph:
    """Breadth-first search tree of the component that holds ``start``."""
    _check_start(graph, start)
    result = Graph(graph.vertices)
    seen = {start}
    pending = deque([start])
    while pending:
        u = pending.popleft()
        for edge in graph.adjacency(u):
            v = edge.v2
            if v not in seen:
                seen.add(v)
                result.add_edge(u, v, edge.weight)
                pending.append(v)
    return result


def dfs(graph: Graph, start: int) -> Graph:
    """Depth-first search forest, starting at ``start`` and then every unvisited vertex."""
    _check_start(graph, start)
    result = Graph(graph.vertices)
    seen: set[int] = set()
    for root in (start, *range(graph.vertices)):
        if root not in seen:
            _dfs_visit(graph, result, root, seen)
    return result


def _dfs_visit(graph: Graph, result: Graph, root: int, seen: set[int]) -> None:
    seen.add(root)
    stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.adjacency(root)))]
    while stack:
        u, neighbours = stack[-1]
        for edge in neighbours:
            v = edge.v2
            if v not in seen:
                seen.add(v)
                result.add_edge(u, v, edge.weight)
                stack.append((v, iter(graph.adjacency(v))))
                break
        else:
            stack.pop()


def dijkstra(graph: Graph, start: int) -> Graph:
    """Graph of every edge that relaxed a distance while searching from ``start``.

    Raises ``ValueError`` when the graph holds a negative weight.
    """
    _check_start(graph, start)
    edges = graph.sorted_edges()
    if len(edges) > 0 and edges[0].weight < 0:
        raise ValueError("Graph contains negative weight edges")

    result = Graph(graph.vertices)
    distance: list[float] = [math.inf] * graph.vertices
    distance[start] = 0

    heap = BinaryHeap()
    for vertex, key in enumerate(distance):
        heap.insert(key, vertex)

    while len(heap):
        _, u = heap.extract_min()
        if distance[u] == math.inf:
            continue
        for edge in graph.adjacency(u):
            v = edge.v2
            candidate = distance[u] + edge.weight
            if distance[v] > candidate:
                distance[v] = candidate
                heap.decrease_key(v, candidate)
                result.add_edge(u, v, edge.weight)
    return result


def prim(graph: Graph) -> Graph:
    """Minimum spanning tree grown from vertex 0.

    On a disconnected graph only the tree of vertex 0's component is built.
    """
    result = Graph(graph.vertices)
    visited = {0}
    remaining = graph.vertices - 1
    edges = graph.sorted_edges()
    while remaining:
        for edge in edges:
            u_in = edge.v1 in visited
            v_in = edge.v2 in visited
            if u_in != v_in:
                result.add_edge(edge.v1, edge.v2, edge.weight)
                visited.add(edge.v2 if u_in else edge.v1)
                remaining -= 1
                break
        else:
            break
    return result