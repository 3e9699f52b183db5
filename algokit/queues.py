"""First-in, first-out queues: a fixed ring buffer, a bounded one-shot array
queue and an unbounded linked queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice
from typing import Any, List, Optional

DEFAULT_CIRCULAR_CAPACITY = 8
MAX_ARRAY_CAPACITY = 100


class QueueOverflow(Exception):
    """Raised when a value is added to a queue that has no room left."""


class QueueUnderflow(Exception):
    """Raised when a value is taken from an empty queue."""


class CircularQueue:
    """Bounded FIFO queue on a ring of fixed size; freed slots are reused."""

    def __init__(self, capacity: int = DEFAULT_CIRCULAR_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: List[Optional[Any]] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        """True when every slot of the ring holds a value."""
        return self._size == len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueOverflow when full."""
        if self.is_full():
            raise QueueOverflow("circular queue is full")
        rear = (self._front + self._size) % len(self._slots)
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise QueueUnderflow when empty."""
        if not self._size:
            raise QueueUnderflow("circular queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % capacity]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


class ArrayQueue:
    """Queue over an array of ``capacity`` slots that are used only once.

    A dequeued slot is not reused, so after ``capacity`` values have been
    enqueued in total the queue overflows, however many were taken out.
    """

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= MAX_ARRAY_CAPACITY:
            raise ValueError(
                f"capacity must be between 0 and {MAX_ARRAY_CAPACITY}"
            )
        self._capacity = capacity
        self._items: List[Any] = []
        self._head = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueOverflow once slots run out."""
        if len(self._items) == self._capacity:
            raise QueueOverflow("array queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise QueueUnderflow when empty."""
        if self._head >= len(self._items):
            raise QueueUnderflow("array queue is empty")
        value = self._items[self._head]
        self._head += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        return islice(self._items, self._head, None)

    def __len__(self) -> int:
        return len(self._items) - self._head

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self._capacity})"


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("linked queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"