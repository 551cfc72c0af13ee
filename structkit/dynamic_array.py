"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterator

INITIAL_CAPACITY = 1
GROWTH_FACTOR = 2


class DynamicArray:
    """An integer array that grows by doubling its reserved capacity."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = INITIAL_CAPACITY

    def append(self, value: int) -> None:
        """Add ``value`` at the end, doubling capacity if no slot is free."""
        if len(self._items) == self._capacity:
            self._capacity *= GROWTH_FACTOR
        self._items.append(value)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """Number of slots reserved, always at least ``len(self)``."""
        return self._capacity

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"