"""Bottleneck spanning tree computed with Kruskal's algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

from spantree.disjoint_set import DisjointSet
from spantree.prim_kruskal import Edge, GraphNotConnectedError


@dataclass(frozen=True)
class BottleneckTree:
    """A spanning tree and its heaviest edge weight (None for a lone vertex)."""

    edges: tuple[Edge, ...]
    bottleneck: int | None


def compute_bottleneck_spanning_tree(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> BottleneckTree:
    """Build a spanning tree minimising the heaviest edge.

    ``edges`` holds ``(src, dest, weight)`` triples. Raises
    GraphNotConnectedError if no spanning tree exists.
    """
    if vertex_count < 1:
        raise ValueError(f"vertex_count must be positive, got {vertex_count}")
    ordered = sorted((Edge(*edge) for edge in edges), key=lambda e: e.weight)
    sets = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in ordered:
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    if len(chosen) != vertex_count - 1:
        raise GraphNotConnectedError("graph is not connected, no spanning tree")
    bottleneck = max((e.weight for e in chosen), default=None)
    return BottleneckTree(tuple(chosen), bottleneck)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Compute the bottleneck spanning tree of a sample graph."
    ).parse_args(argv)

    edges = [Edge(1, 0, 10), Edge(2, 0, 6), Edge(3, 0, 5), Edge(3, 1, 15), Edge(3, 2, 4)]
    try:
        tree = compute_bottleneck_spanning_tree(4, edges)
    except GraphNotConnectedError:
        print("Graph is not connected, no spanning tree.")
        return 1
    print("Bottleneck Spanning Tree Edges:")
    for edge in tree.edges:
        print(f"{edge.src} -- {edge.dest} == {edge.weight}")
    print(f"Bottleneck value: {tree.bottleneck}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())