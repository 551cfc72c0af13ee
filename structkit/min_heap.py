"""A binary min-heap of integers."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Optional


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""


class MinHeap:
    """An array-backed binary heap whose root is its smallest value."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent] <= heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] < heap[smallest]:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def insert(self, value: int) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._heap:
            raise HeapEmptyError("Heap is empty")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return smallest

    def peek_min(self) -> int:
        """Return the smallest value without removing it."""
        if not self._heap:
            raise HeapEmptyError("Heap is empty")
        return self._heap[0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[int]:
        """Yield values in their array order."""
        return iter(self._heap)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._heap)

    def __repr__(self) -> str:
        return f"MinHeap({self._heap!r})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a heap, extract its minimum and print each step."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    heap = MinHeap()
    for value in (3, 2, 15, 5, 4, 45):
        heap.insert(value)
    print(f"Min Heap elements: {heap}")
    print(f"Extracted min: {heap.extract_min()}")
    print(f"Min Heap elements after extraction: {heap}")
    print(f"Peek min: {heap.peek_min()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())