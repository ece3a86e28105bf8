"""Prim's and Kruskal's minimum spanning trees over one weighted graph."""

from __future__ import annotations

import argparse
import math
from typing import NamedTuple

from spantree.disjoint_set import DisjointSet


class Edge(NamedTuple):
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


class GraphNotConnectedError(Exception):
    """Raised when a spanning tree cannot reach every vertex."""


class WeightedGraph:
    """An undirected weighted graph stored as adjacency lists, newest first."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 1:
            raise ValueError(f"vertex_count must be positive, got {vertex_count}")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].insert(0, (v, weight))
        self._adjacency[v].insert(0, (u, weight))

    def prim_order(self) -> list[Edge]:
        """Return the MST edges found by Prim's algorithm from vertex 0.

        Edges are listed by their child vertex, as ``(parent, child, weight)``.
        """
        count = self.vertex_count
        in_tree = [False] * count
        key = [math.inf] * count
        parent: list[int | None] = [None] * count
        key[0] = 0

        for _ in range(count):
            candidates = [v for v in range(count) if not in_tree[v] and key[v] < math.inf]
            if not candidates:
                raise GraphNotConnectedError("graph is not connected (Prim)")
            u = min(candidates, key=lambda v: key[v])
            in_tree[u] = True
            for v, weight in self._adjacency[u]:
                if not in_tree[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u

        return [
            Edge(p, child, int(key[child]))
            for child, p in enumerate(parent)
            if child > 0 and p is not None
        ]

    def _unique_edges(self) -> list[Edge]:
        seen: set[frozenset[int]] = set()
        edges = []
        for u, neighbours in enumerate(self._adjacency):
            for v, weight in neighbours:
                pair = frozenset((u, v))
                if pair not in seen:
                    seen.add(pair)
                    edges.append(Edge(u, v, weight))
        return edges

    def kruskal_order(self) -> list[Edge]:
        """Return the MST edges in the order Kruskal's algorithm accepts them."""
        count = self.vertex_count
        sets = DisjointSet(count)
        chosen: list[Edge] = []
        for edge in sorted(self._unique_edges(), key=lambda e: e.weight):
            if len(chosen) >= count - 1:
                break
            if sets.union(edge.src, edge.dest):
                chosen.append(edge)
        if len(chosen) < count - 1:
            raise GraphNotConnectedError("graph is not connected (Kruskal)")
        return chosen


def compare_mst_orders(graph: WeightedGraph) -> tuple[list[Edge], list[Edge]]:
    """Return the Prim and Kruskal edge orders of ``graph``."""
    return graph.prim_order(), graph.kruskal_order()


def _format_order(title: str, edges: list[Edge]) -> str:
    lines = [f"\n{title}:"]
    lines.extend(f"{e.src} -- {e.dest} (w={e.weight})" for e in edges)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Compare the order in which Prim and Kruskal pick MST edges."
    ).parse_args(argv)

    graph = WeightedGraph(5)
    for u, v, weight in [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8),
                         (1, 4, 5), (2, 4, 7), (3, 4, 9)]:
        graph.add_edge(u, v, weight)

    try:
        prim, kruskal = compare_mst_orders(graph)
    except GraphNotConnectedError as error:
        print(error)
        return 1
    print(_format_order("Prim's MST Order", prim))
    print(_format_order("Kruskal's MST Order", kruskal))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())