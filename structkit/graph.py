"""A directed graph stored as adjacency lists."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional


class Graph:
    """A directed graph over the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge from ``src`` to ``dest``."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].append(dest)

    def neighbors(self, vertex: int) -> list[int]:
        """Vertices reachable from ``vertex`` by one edge, in insertion order."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "".join(
            f"\nAdjacency list of vertex {vertex}\n head "
            + "".join(f"-> {adjacent}" for adjacent in adjacent_list)
            + "\n"
            for vertex, adjacent_list in enumerate(self._adjacency)
        )

    def __repr__(self) -> str:
        return f"Graph({self._adjacency!r})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a small example graph and print its adjacency lists."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    graph = Graph(5)
    for src, dest in ((0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)):
        graph.add_edge(src, dest)
    print(graph, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())