"""Singly linked list with in-place reversal and pairwise swapping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """Singly linked list that relinks its nodes rather than copying values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def search(self, value: Any) -> int:
        """Return the index of the first node holding ``value``, or -1."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return -1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[_Node] = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def swap_adjacent(self) -> None:
        """Swap every two neighbouring nodes; an odd last node stays put."""
        if self._head is None:
            return
        anchor = _Node(None, self._head)
        previous = anchor
        while previous.next is not None and previous.next.next is not None:
            first = previous.next
            second = first.next
            first.next = second.next
            second.next = first
            previous.next = second
            previous = first
        self._head = anchor.next
        self._tail = previous if previous.next is None else previous.next

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"