"""Union-find structure with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """A fixed-size collection of disjoint sets over the integers ``0..size-1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"element {item} is outside 0..{len(self._parent) - 1}")

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            next_item = self._parent[item]
            self._parent[item] = root
            item = next_item
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``.

        On equal ranks the root of ``x`` becomes the new root. Returns False
        when both were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True