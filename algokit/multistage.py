"""Shortest path through a multistage graph by backward dynamic programming."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

_ = None

# Twelve-node, five-stage sample graph; None marks a missing edge.
SAMPLE_GRAPH: Tuple[Tuple[Optional[int], ...], ...] = (
    (0, 9, 7, 3, 2, _, _, _, _, _, _, _),
    (_, 0, _, _, _, 4, 2, 1, _, _, _, _),
    (_, _, 0, _, _, 2, 7, _, _, _, _, _),
    (_, _, _, 0, _, _, _, 11, _, _, _, _),
    (_, _, _, _, 0, _, 11, 8, _, _, _, _),
    (_, _, _, _, _, 0, _, _, 6, 5, _, _),
    (_, _, _, _, _, _, 0, _, 4, 3, _, _),
    (_, _, _, _, _, _, _, 0, _, 5, 6, _),
    (_, _, _, _, _, _, _, _, 0, _, _, 4),
    (_, _, _, _, _, _, _, _, _, 0, _, 2),
    (_, _, _, _, _, _, _, _, _, _, 0, 5),
    (_, _, _, _, _, _, _, _, _, _, _, 0),
)


def shortest_path(graph: Sequence[Sequence[Optional[float]]]) -> Tuple[List[int], float]:
    """Return the cheapest path from the first node to the last, and its cost.

    Only edges from a node to a later node are considered. A missing edge is
    given as None or ``math.inf``. Ties go to the lowest-numbered successor.
    """
    n = len(graph)
    if n == 0:
        raise ValueError("graph must not be empty")
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")

    cost: List[float] = [math.inf] * n
    successor: List[int] = [-1] * n
    cost[-1] = 0

    for i in range(n - 2, -1, -1):
        for j in range(i + 1, n):
            weight = graph[i][j]
            if weight is None or weight == math.inf:
                continue
            if cost[j] + weight < cost[i]:
                cost[i] = cost[j] + weight
                successor[i] = j

    if cost[0] == math.inf:
        raise ValueError("the last node cannot be reached from the first")

    path = [0]
    node = 0
    while node != n - 1:
        node = successor[node]
        path.append(node)
    return path, cost[0]