"""Weighted undirected graphs with BFS, DFS, Dijkstra and Prim algorithms."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "edges", "graph", "heap"]