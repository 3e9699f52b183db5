"""Doubly linked list with insertion and deletion around a given value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """Doubly linked list addressed by the values its nodes hold."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _find(self, target: Any) -> _Node:
        node = self._head
        while node is not None:
            if node.value == target:
                return node
            node = node.next
        raise ValueError(f"{target!r} is not in the list")

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the beginning."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` before the first node holding ``target``."""
        anchor = self._find(target)
        node = _Node(value, anchor.prev, anchor)
        if anchor.prev is None:
            self._head = node
        else:
            anchor.prev.next = node
        anchor.prev = node
        self._size += 1

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``target``."""
        anchor = self._find(target)
        node = _Node(value, anchor, anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def pop_first(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_last(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def delete_before(self, target: Any) -> Any:
        """Remove and return the value just before the first ``target``."""
        anchor = self._find(target)
        if anchor.prev is None:
            raise ValueError(f"nothing precedes {target!r}")
        return self._unlink(anchor.prev)

    def delete_after(self, target: Any) -> Any:
        """Remove and return the value just after the first ``target``."""
        anchor = self._find(target)
        if anchor.next is None:
            raise ValueError(f"nothing follows {target!r}")
        return self._unlink(anchor.next)

    def position(self, value: Any) -> Optional[int]:
        """Return the 1-based position of the first ``value``, or None."""
        for index, item in enumerate(self, start=1):
            if item == value:
                return index
        return None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"