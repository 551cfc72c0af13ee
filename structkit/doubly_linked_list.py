"""A doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

EMPTY_MESSAGE = "List is empty"


@dataclass
class _Node:
    data: int
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A list whose nodes link both to their successor and predecessor."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: int) -> None:
        """Put ``value`` after the last node."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if the list is empty or holds no such value.
        """
        if self._head is None:
            raise ValueError(EMPTY_MESSAGE)
        node = self._head
        while node is not None and node.data != value:
            node = node.next
        if node is None:
            raise ValueError("Value not found")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def format_forward(self) -> str:
        """Values from head to tail, or a notice when the list is empty."""
        if self._head is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in self)

    def format_backward(self) -> str:
        """Values from tail to head, or a notice when the list is empty."""
        if self._tail is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in reversed(self))

    def __str__(self) -> str:
        return self.format_forward()

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"