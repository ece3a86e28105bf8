# spantree

Small spanning tree algorithms for weighted undirected graphs with integer vertices. The package has no dependencies.

- `spantree.disjoint_set.DisjointSet`: union-find over `0..size-1`. It uses path compression and union by rank. `union(x, y)` returns `False` when both elements are already in the same set.
- `spantree.update_mst.MinimumSpanningTree`: a tree kept as adjacency lists, with the newest entries first. `add_vertex(new_vertex, edges)` takes `(dest, weight)` pairs. It joins the new vertex through its lightest edge to a vertex already in the tree and returns that pair. It returns `None` when the vertex stays disconnected. `format()` renders one line per vertex.
- `spantree.prim_kruskal.WeightedGraph`: `prim_order()` and `kruskal_order()` return the `Edge(src, dest, weight)` tuples each algorithm chooses. Prim's edges are listed by child vertex, starting from vertex 0. Kruskal's edges are listed in the order they are accepted. Both raise `GraphNotConnectedError` when the graph has no spanning tree. `compare_mst_orders(graph)` returns both lists.
- `spantree.bottleneck.compute_bottleneck_spanning_tree(vertex_count, edges)`: builds a spanning tree from `(src, dest, weight)` triples. It returns a `BottleneckTree` with `edges` and `bottleneck`, the heaviest chosen weight. It raises `GraphNotConnectedError` if no spanning tree exists.
- `spantree.edge_in_mst.is_edge_in_mst(mst, source, destination)`: tells whether an undirected edge appears among the `(source, destination)` pairs of a tree.
- `spantree.int_list.IntList`: a list of integers with these operations:
  - `append` and `prepend`
  - `remove(value)`, which returns whether the value was found
  - indexing, which rejects negative indices with `IndexError`
  - `len()`, `is_empty()` and `clear()`
  - `sort_ascending()` and `sort_descending()`
  - `max()`, which raises `ValueError` on an empty list

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from spantree.prim_kruskal import WeightedGraph

graph = WeightedGraph(5)
for u, v, w in [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8),
                (1, 4, 5), (2, 4, 7), (3, 4, 9)]:
    graph.add_edge(u, v, w)

graph.prim_order()
# [Edge(src=0, dest=1, weight=2), Edge(src=1, dest=2, weight=3),
#  Edge(src=0, dest=3, weight=6), Edge(src=1, dest=4, weight=5)]
graph.kruskal_order()
# [Edge(src=0, dest=1, weight=2), Edge(src=1, dest=2, weight=3),
#  Edge(src=1, dest=4, weight=5), Edge(src=0, dest=3, weight=6)]
```

## Commands

Each command runs a demonstration on a built-in sample graph or list and prints the result. None of them takes input.

```
spantree-update-mst
spantree-edge-in-mst
spantree-int-list
spantree-prim-kruskal
spantree-bottleneck
```

## Limitations

- `MinimumSpanningTree.add_vertex` only attaches the new vertex by its single cheapest edge. It does not revisit existing tree edges, so the result is not always a minimum spanning tree of the enlarged graph.
- `MinimumSpanningTree` accepts vertices `0` to `99` only.
- Graphs cannot be read from or saved to files.