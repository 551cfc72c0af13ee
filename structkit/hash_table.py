"""A hash set of integers with separate chaining."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional


class HashTable:
    """Integer keys hashed by ``key % size`` into chained buckets."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket_for(self, key: int) -> list[int]:
        return self._buckets[key % len(self._buckets)]

    def insert(self, key: int) -> None:
        """Append ``key`` to its bucket; duplicates are kept."""
        self._bucket_for(key).append(key)

    def remove(self, key: int) -> None:
        """Remove every occurrence of ``key``; absent keys are ignored."""
        bucket = self._bucket_for(key)
        bucket[:] = [item for item in bucket if item != key]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._bucket_for(key)

    def bucket(self, index: int) -> list[int]:
        """The keys chained at bucket ``index``, in insertion order."""
        if not 0 <= index < len(self._buckets):
            raise IndexError(f"bucket {index} out of range")
        return list(self._buckets[index])

    def __str__(self) -> str:
        return "\n".join(
            f"table[{index}]" + "".join(f" --> {key}" for key in bucket)
            for index, bucket in enumerate(self._buckets)
        )

    def __repr__(self) -> str:
        return f"HashTable({self._buckets!r})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a small table, search it, remove a key and print it."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    table = HashTable(10)
    for key in (10, 20, 11, 21, 31):
        table.insert(key)
    print(table)
    for key in (20, 25):
        verdict = "Found" if key in table else "Not Found"
        print(f"Searching for {key}: {verdict}")
    table.remove(20)
    print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())