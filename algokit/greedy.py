"""Greedy algorithms: activity selection and the fractional knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import List


def select_activities(starts: Sequence[float], finishes: Sequence[float]) -> List[int]:
    """Pick a set of compatible activities greedily.

    The activities are expected in order of finishing time. The first one is
    always taken; each later one is taken when it starts no earlier than the
    last taken activity finishes. Returns the indices that were taken.
    """
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")
    if not starts:
        return []
    chosen = [0]
    for index, start in enumerate(starts):
        if index and start >= finishes[chosen[-1]]:
            chosen.append(index)
    return chosen


def _ratio(weight: float, profit: float) -> float:
    return math.inf if weight == 0 else profit / weight


def fractional_knapsack(
    weights: Sequence[float], profits: Sequence[float], capacity: float
) -> float:
    """Return the largest profit that fits in ``capacity``.

    Items are taken whole in order of falling profit per unit of weight;
    the first item that no longer fits is taken in the fraction that fills
    the remaining capacity.
    """
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    items = sorted(zip(weights, profits), key=lambda wp: _ratio(*wp), reverse=True)
    remaining = capacity
    total = 0.0
    for weight, profit in items:
        if weight > remaining:
            total += profit * remaining / weight
            break
        total += profit
        remaining -= weight
    return total