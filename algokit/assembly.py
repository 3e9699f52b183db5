"""Two-line assembly scheduling by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AssemblySchedule:
    """Result of scheduling.

    ``total_time`` is the least time to pass through all stations.
    ``lines`` gives, for each station in order, the line (1 or 2) whose
    accumulated time is the smaller there; for the last station the exit
    time is included in the comparison, and ties go to line 2.
    """

    total_time: float
    lines: Tuple[int, ...]


def schedule_assembly(
    entry: Sequence[float],
    exit: Sequence[float],
    processing: Sequence[Sequence[float]],
    transfer: Sequence[Sequence[float]],
) -> AssemblySchedule:
    """Find the fastest way through two parallel assembly lines.

    ``processing[k][i]`` is the time at station ``i`` of line ``k``;
    ``transfer[0][i]`` is the time to move from station ``i`` of line 1 to
    station ``i + 1`` of line 2, and ``transfer[1][i]`` the reverse.
    """
    if len(entry) != 2 or len(exit) != 2:
        raise ValueError("entry and exit need one time per line")
    if len(processing) != 2 or len(transfer) != 2:
        raise ValueError("processing and transfer need one row per line")
    first, second = processing
    to_second, to_first = transfer
    stations = len(first)
    if stations == 0 or len(second) != stations:
        raise ValueError("both lines need the same, non-zero number of stations")
    if len(to_second) != stations - 1 or len(to_first) != stations - 1:
        raise ValueError("transfer rows need one time fewer than stations")

    line1 = [entry[0] + first[0]]
    line2 = [entry[1] + second[0]]
    for p1, p2, t12, t21 in zip(first[1:], second[1:], to_second, to_first):
        prev1, prev2 = line1[-1], line2[-1]
        line1.append(min(prev1, prev2 + t21) + p1)
        line2.append(min(prev2, prev1 + t12) + p2)

    finish1 = line1[-1] + exit[0]
    finish2 = line2[-1] + exit[1]
    lines = [1 if a < b else 2 for a, b in zip(line1[:-1], line2[:-1])]
    lines.append(1 if finish1 < finish2 else 2)
    return AssemblySchedule(total_time=min(finish1, finish2), lines=tuple(lines))