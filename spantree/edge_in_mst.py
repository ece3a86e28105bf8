"""Membership test for an undirected edge in a spanning tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable


def is_edge_in_mst(mst: Iterable[tuple[int, int]], source: int, destination: int) -> bool:
    """Return True if the undirected edge ``source``-``destination`` is in ``mst``.

    ``mst`` holds ``(source, destination)`` pairs; direction is ignored.
    """
    return any(
        (a, b) == (source, destination) or (b, a) == (source, destination)
        for a, b in mst
    )


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Check whether sample edges belong to a sample MST."
    ).parse_args(argv)

    mst = [(2, 3), (0, 3), (0, 2)]
    for source, destination in [(0, 2), (0, 1)]:
        verdict = "is" if is_edge_in_mst(mst, source, destination) else "is not"
        print(f"Edge ({source}, {destination}) {verdict} in the MST")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())