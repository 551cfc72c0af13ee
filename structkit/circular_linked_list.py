"""A circular singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

EMPTY_MESSAGE = "List is empty"


@dataclass
class _Node:
    data: int
    next: Optional[_Node] = field(default=None, repr=False)


class CircularLinkedList:
    """A list whose last node links back to the first.

    Only the tail is stored; the head is always the tail's successor.
    """

    def __init__(self) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0

    def _link(self, value: int) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the list."""
        self._link(value)

    def insert_at_end(self, value: int) -> None:
        """Put ``value`` after the last node."""
        self._tail = self._link(value)

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if the list is empty or holds no such value.
        """
        if self._tail is None:
            raise ValueError(EMPTY_MESSAGE)
        previous = self._tail
        for _ in range(self._size):
            current = previous.next
            assert current is not None
            if current.data == value:
                break
            previous = current
        else:
            raise ValueError("Value not found")
        if current is previous:
            self._tail = None
        else:
            previous.next = current.next
            if current is self._tail:
                self._tail = previous
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        """Yield each value once, starting at the head."""
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._tail is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"