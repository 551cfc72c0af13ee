"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    data: int
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A chain of nodes reachable from a head pointer."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def insert_at_head(self, value: int) -> None:
        """Put ``value`` in front of the list."""
        self._head = _Node(value, self._head)

    def insert_at_tail(self, value: int) -> None:
        """Put ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def delete(self, key: int) -> bool:
        """Remove the first node holding ``key``; return whether one was found."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None and current.data != key:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        return True

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __contains__(self, key: object) -> bool:
        return any(node.data == key for node in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"