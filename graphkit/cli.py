"""Command that runs every algorithm on a small sample graph and prints the results."""

from __future__ import annotations

import argparse
import sys

from .algorithms import bfs, dfs, dijkstra, prim
from .graph import Graph

_SAMPLE_EDGES = [(0, 1, 1), (0, 2, 2), (1, 2, 3), (4, 3, 2), (4, 2, 1), (1, 3, 2), (0, 4, 2)]


def _sample_graph() -> Graph:
    graph = Graph(5)
    for u, v, weight in _SAMPLE_EDGES:
        graph.add_edge(u, v, weight)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graphkit",
        description="Run the graph algorithms on a sample graph and print each result.",
    )
    parser.parse_args(argv)

    graph = _sample_graph()
    results = [
        graph,
        dfs(graph, 0),
        bfs(graph, 0),
        dijkstra(graph, 0),
        prim(graph),
    ]
    for number, result in enumerate(results, start=1):
        sys.stdout.write(f"Graph{number}\n")
        sys.stdout.write(result.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())