"""Comparison and distribution sorts over sequences of comparable values.

Every function takes any iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, List


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> List[Any]:
    """Sort by moving the smallest remaining value to the front each round."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged: List[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: List[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> List[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))
    return items


def _sift_down(items: List[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> List[Any]:
    """Ascending sort through a max-heap built in place."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def radix_passes(values: Iterable[int]) -> Iterator[List[int]]:
    """Yield the list after each least-significant-digit pass.

    There is one pass per decimal digit of the largest value. Negative
    values are rejected.
    """
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return
    largest = max(items)
    digits = len(str(largest)) if largest > 0 else 0
    divisor = 1
    for _ in range(digits):
        buckets: List[List[int]] = [[] for _ in range(10)]
        for v in items:
            buckets[(v // divisor) % 10].append(v)
        items = [v for bucket in buckets for v in bucket]
        divisor *= 10
        yield list(items)


def radix_sort(values: Iterable[int]) -> List[int]:
    """Sort non-negative integers by decimal digits, least significant first."""
    items = list(values)
    result = items
    for result in radix_passes(items):
        pass
    return list(result)


def _search(items: Sequence[Any], target: Any, low: int, high: int) -> int:
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return low


def insertion_position(values: Sequence[Any], target: Any) -> int:
    """Binary-search a sorted sequence for where ``target`` belongs.

    Returns the index of a matching element if one is met, otherwise the
    index at which ``target`` would be inserted to keep the order.
    """
    return _search(values, target, 0, len(values) - 1)


def binary_insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Insertion sort that finds each insertion point by binary search."""
    items = list(values)
    for i in range(1, len(items)):
        pos = _search(items, items[i], 0, i - 1)
        items.insert(pos, items.pop(i))
    return items