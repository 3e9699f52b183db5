"""Searching and scanning helpers over strings and sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Occurrence:
    """Where and how often a value was found in a sequence.

    ``last_index`` is None when the value is absent. ``position_from_end``
    is the sequence length minus the last index (the full length when the
    value is absent).
    """

    last_index: Optional[int]
    count: int
    position_from_end: int


def find_substring(pattern: str, text: str) -> int:
    """Return the first index at which ``pattern`` occurs in ``text``, or -1."""
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if text[start:start + width] == pattern:
            return start
    return -1


def last_occurrence(values: Sequence[Any], target: Any) -> Occurrence:
    """Count ``target`` in ``values`` and locate its last occurrence."""
    last: Optional[int] = None
    count = 0
    for index, value in enumerate(values):
        if value == target:
            last = index
            count += 1
    return Occurrence(
        last_index=last,
        count=count,
        position_from_end=len(values) - (last if last is not None else 0),
    )


def most_frequent(values: Iterable[Any]) -> Any:
    """Return the most frequent value; ties go to the one seen first."""
    items = list(values)
    if not items:
        raise ValueError("most_frequent() of an empty sequence")
    counts = Counter(items)
    best = max(counts.values())
    return next(v for v in items if counts[v] == best)


def _min_max(items: Sequence[Any], low: int, high: int) -> Tuple[Any, Any]:
    if low == high:
        return items[low], items[low]
    if low == high - 1:
        if items[low] < items[high]:
            return items[low], items[high]
        return items[high], items[low]
    mid = (low + high) // 2
    left_min, left_max = _min_max(items, low, mid)
    right_min, right_max = _min_max(items, mid + 1, high)
    return min(left_min, right_min), max(left_max, right_max)


def min_max(values: Iterable[Any]) -> Tuple[Any, Any]:
    """Return ``(minimum, maximum)`` found by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return _min_max(items, 0, len(items) - 1)