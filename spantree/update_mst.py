"""Incremental update of a minimum spanning tree when a vertex is added."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

MAX_VERTICES = 100


class MinimumSpanningTree:
    """An MST stored as adjacency lists; newest edges come first."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[tuple[int, int]]] = {}
        self._vertex_count = 0

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @staticmethod
    def _check(vertex: int) -> None:
        if not 0 <= vertex < MAX_VERTICES:
            raise ValueError(f"vertex {vertex} is outside 0..{MAX_VERTICES - 1}")

    def _grow(self, vertex: int) -> None:
        if vertex >= self._vertex_count:
            self._vertex_count = vertex + 1

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Add a directed adjacency entry from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self._adjacency.setdefault(src, []).insert(0, (dest, weight))
        self._grow(src)
        self._grow(dest)

    def add_vertex(
        self, new_vertex: int, edges: Iterable[tuple[int, int]] | None
    ) -> tuple[int, int] | None:
        """Attach ``new_vertex`` through its lightest edge to an existing vertex.

        ``edges`` holds ``(dest, weight)`` pairs; pairs naming a vertex not yet
        in the tree are ignored, and on equal weights the first one wins.
        Returns the chosen ``(dest, weight)``, or None if the vertex stays
        disconnected.
        """
        self._check(new_vertex)
        self._adjacency[new_vertex] = []

        best: tuple[int, int] | None = None
        for dest, weight in edges or ():
            if dest < self._vertex_count and (best is None or weight < best[1]):
                best = (dest, weight)

        if best is not None:
            dest, weight = best
            self.add_edge(new_vertex, dest, weight)
            self.add_edge(dest, new_vertex, weight)

        self._grow(new_vertex)
        return best

    def neighbours(self, vertex: int) -> list[tuple[int, int]]:
        """Return the ``(dest, weight)`` entries of ``vertex``, newest first."""
        self._check(vertex)
        return list(self._adjacency.get(vertex, ()))

    def format(self) -> str:
        """Render one line per vertex in the tree."""
        lines = []
        for vertex in range(self._vertex_count):
            entries = "".join(
                f" -> ({dest}, {weight})" for dest, weight in self._adjacency.get(vertex, ())
            )
            lines.append(f"Vertex {vertex}:{entries}")
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Demonstrate updating an MST when vertices are added."
    ).parse_args(argv)

    print("MST Problem")
    print("---------------------------")
    print("MST Update Only")
    print("---------------------------")

    tree = MinimumSpanningTree()
    tree.add_edge(0, 1, 1)
    tree.add_edge(1, 0, 1)
    tree.add_edge(1, 2, 2)
    tree.add_edge(2, 1, 2)

    print("Initial MST:")
    print(tree.format())

    tree.add_vertex(3, [(2, 1), (0, 4)])
    print("\nMST after adding vertex 3:")
    print(tree.format())

    tree.add_vertex(4, None)
    print("\nMST after adding vertex 4 (disconnected):")
    print(tree.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())