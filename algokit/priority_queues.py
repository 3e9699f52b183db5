"""Priority queues: a sorted list keyed on ascending priority, a bounded
max-heap and a bounded array ordered by descending priority."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from operator import itemgetter
from typing import Any, List, Tuple

from algokit.queues import QueueOverflow, QueueUnderflow

DEFAULT_HEAP_CAPACITY = 10000
DEFAULT_ARRAY_CAPACITY = 20000


class LinkedPriorityQueue:
    """Queue served in ascending priority order (smaller number first).

    A new entry goes to the front only when its priority is strictly
    smaller than the front's; otherwise it is placed after the front, ahead
    of the first later entry whose priority is not smaller.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[Any, Any]] = []

    def insert(self, item: Any, priority: Any) -> None:
        """Add ``item`` with ``priority``."""
        if not self._entries or priority < self._entries[0][0]:
            index = 0
        else:
            index = bisect_left(self._entries, priority, lo=1, key=itemgetter(0))
        self._entries.insert(index, (priority, item))

    def pop(self) -> Any:
        """Remove and return the front item; raise QueueUnderflow when empty."""
        if not self._entries:
            raise QueueUnderflow("priority queue is empty")
        return self._entries.pop(0)[1]

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(item, priority)`` pairs from front to back."""
        return ((item, priority) for priority, item in self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class MaxHeapQueue:
    """Bounded priority queue that always yields its largest value first."""

    def __init__(self, capacity: int = DEFAULT_HEAP_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._heap: List[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Add ``value``; raise QueueOverflow when the heap is full."""
        if len(self._heap) == self._capacity:
            raise QueueOverflow("heap queue is full")
        heap = self._heap
        heap.append(value)
        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if heap[parent] >= heap[child]:
                break
            heap[parent], heap[child] = heap[child], heap[parent]
            child = parent

    def pop(self) -> Any:
        """Remove and return the largest value; raise QueueUnderflow when empty."""
        heap = self._heap
        if not heap:
            raise QueueUnderflow("heap queue is empty")
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down()
        return top

    def _sift_down(self) -> None:
        heap = self._heap
        size = len(heap)
        node = 0
        while True:
            left = 2 * node + 1
            if left >= size:
                return
            right = left + 1
            child = right if right < size and heap[right] > heap[left] else left
            if heap[node] >= heap[child]:
                return
            heap[node], heap[child] = heap[child], heap[node]
            node = child

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in heap storage order."""
        return iter(list(self._heap))

    def __len__(self) -> int:
        return len(self._heap)


class ArrayPriorityQueue:
    """Bounded queue served in descending priority order.

    Entries of equal priority leave in the order they arrived.
    """

    def __init__(self, capacity: int = DEFAULT_ARRAY_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._entries: List[Tuple[Any, Any]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, item: Any, priority: Any) -> None:
        """Add ``item`` with ``priority``; raise QueueOverflow when full."""
        if len(self._entries) == self._capacity:
            raise QueueOverflow("priority queue is full")
        index = next(
            (i for i, (_, p) in enumerate(self._entries) if p < priority),
            len(self._entries),
        )
        self._entries.insert(index, (item, priority))

    def pop(self) -> Tuple[Any, Any]:
        """Remove and return the front ``(item, priority)`` pair."""
        if not self._entries:
            raise QueueUnderflow("priority queue is empty")
        return self._entries.pop(0)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(item, priority)`` pairs from front to back."""
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)