"""Single-source shortest paths on a weighted undirected graph."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class VertexState:
    """Shortest-path data for one vertex.

    ``distance`` is infinite and ``previous`` is None for a vertex that
    cannot be reached; ``visited`` tells whether the vertex was settled.
    """

    distance: float = math.inf
    previous: Optional[int] = None
    visited: bool = False


def adjacency_matrix(n: int, edges: Iterable[Tuple[int, int, float]]) -> List[List[float]]:
    """Build a symmetric ``n`` by ``n`` weight matrix from ``(u, v, w)`` edges.

    A weight of 0 means that there is no edge.
    """
    if n < 0:
        raise ValueError("vertex count must not be negative")
    matrix: List[List[float]] = [[0] * n for _ in range(n)]
    for u, v, weight in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range")
        matrix[u][v] = weight
        matrix[v][u] = weight
    return matrix


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> List[VertexState]:
    """Return the shortest-path state of every vertex seen from ``source``.

    Zero entries of ``matrix`` are read as missing edges; negative weights
    are rejected.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise ValueError("source vertex out of range")
    if any(w < 0 for row in matrix for w in row):
        raise ValueError("edge weights must not be negative")

    states = [VertexState() for _ in range(n)]
    states[source].distance = 0
    pending = [(0, source)]
    while pending:
        distance, vertex = heapq.heappop(pending)
        current = states[vertex]
        if current.visited:
            continue
        current.visited = True
        for neighbour, weight in enumerate(matrix[vertex]):
            target = states[neighbour]
            if weight == 0 or target.visited:
                continue
            candidate = distance + weight
            if candidate < target.distance:
                target.distance = candidate
                target.previous = vertex
                heapq.heappush(pending, (candidate, neighbour))
    return states