"""A disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional


class DisjointSet:
    """Partitions ``0 .. size - 1`` into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set, compressing the path."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

    def connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        return len(self._parent)


def _flag(value: bool) -> str:
    return str(value).lower()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Join a few elements and print which ones are connected."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    sets = DisjointSet(7)
    for x, y in ((0, 1), (1, 2), (3, 4), (5, 6), (4, 5)):
        sets.union(x, y)
    print(f"0 connected to 2? {_flag(sets.connected(0, 2))}")
    print(f"3 connected to 6? {_flag(sets.connected(3, 6))}")
    print(f"0 connected to 4? {_flag(sets.connected(0, 4))}")
    sets.union(2, 4)
    print(f"Now 0 connected to 4? {_flag(sets.connected(0, 4))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())