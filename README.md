# graphkit

graphkit models small weighted, undirected graphs and runs classic traversal,
shortest-path and spanning-tree algorithms on them. Each algorithm returns a
new `Graph` on the same vertices. That graph holds only the edges the
algorithm picked.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Building a graph

Vertices are the integers `0` to `vertices - 1`. A graph must have at least
one vertex, or `Graph` raises `ValueError`. Each edge is stored in both
directions. Self-loops are rejected. Adding an edge that already exists does
nothing, so the first weight given is kept.

```python
from graphkit.graph import Graph

g = Graph(5)
g.add_edge(0, 1, 1)
g.add_edge(0, 2, 2)
g.add_edge(1, 2, 3)
g.add_edge(4, 3, 2)

for edge in g.sorted_edges():   # each edge once, by ascending weight
    print(edge.v1, edge.v2, edge.weight)

print(g.format())               # readable listing of vertices and edges
```

- `Graph.vertices` is the number of vertices.
- `Graph.adjacency(u)` returns a copy of the `EdgeList` of edges leaving vertex `u`.
- `Graph.sorted_edges()` returns every edge once, with the lower vertex first. Edges are sorted by weight, and edges of equal weight keep their order.
- `Graph.remove_edge(u, v)` deletes an edge.

A vertex number outside the graph raises `IndexError`. A self-loop raises
`ValueError`, and so does removing an edge that is not there.

## Algorithms

```python
from graphkit.algorithms import bfs, dfs, dijkstra, prim

tree = bfs(g, 0)        # breadth-first tree of the component holding vertex 0
forest = dfs(g, 0)      # depth-first forest: vertex 0 first, then every unvisited vertex
relaxed = dijkstra(g, 0)
mst = prim(g)           # minimum spanning tree grown from vertex 0
```

- `dijkstra` returns a graph of the edges that lowered a distance estimate while it searched from the start vertex. It does not return the distances themselves. If a vertex's estimate is lowered twice, only the first edge that reached it is kept. The function raises `ValueError` when the graph has a negative edge weight.
- On a disconnected graph, `prim` builds only the tree of vertex 0's component.
- A start vertex outside the graph raises `IndexError`.

## Lower-level pieces

- `graphkit.edges.Edge` is an immutable weighted edge with fields `v1`, `v2` and `weight`.
- `graphkit.edges.EdgeList` is an ordered list of edges, usually owned by one vertex. It supports `push(u, weight)`, `append(edge)`, `pop(u)`, `index_of(u)`, `sort()`, `len()`, indexing and iteration.
- `graphkit.heap.BinaryHeap` is the min-heap that `dijkstra` uses. It stores `(key, vertex)` pairs and provides `insert`, `extract_min`, `peek` and `decrease_key`. Calling `extract_min` or `peek` on an empty heap raises `IndexError`.

## Demo

```
graphkit-demo
```

This builds a five-vertex sample graph and prints it as `Graph1`. It then
prints the results of `dfs`, `bfs`, `dijkstra` and `prim`, each started from
vertex 0, as `Graph2` to `Graph5`. The command takes no options other than
`--help`.

## What it does not do

The only spanning-tree algorithm provided is Prim's; there is no Kruskal.
Graphs can't be read from or saved to files. The demo command always works on
its built-in sample graph.