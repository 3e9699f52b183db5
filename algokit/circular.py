"""Circular singly linked list reached through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """Circular list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node; it becomes the new last node."""
        node = _Node(value)
        if self._last is None:
            node.next = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._last = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        if self._last is None:
            self.append(value)
            return
        self._last.next = _Node(value, self._last.next)
        self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at 1-based ``position``.

        Raises IndexError unless ``1 <= position <= len(self)``.
        """
        if self._last is None or not 1 <= position <= self._size:
            raise IndexError("position out of range")
        anchor = self._last.next
        for _ in range(position - 1):
            anchor = anchor.next
        node = _Node(value, anchor.next)
        anchor.next = node
        if anchor is self._last:
            self._last = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return False if none does."""
        if self._last is None:
            return False
        previous = self._last
        node = self._last.next
        for _ in range(self._size):
            if node.value == value:
                if self._size == 1:
                    self._last = None
                else:
                    previous.next = node.next
                    if node is self._last:
                        self._last = previous
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        node = self._last.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"