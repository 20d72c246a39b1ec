"""Travelling salesman tour cost by dynamic programming over subsets."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def tsp_cost(cost: Sequence[Sequence[int]]) -> int:
    """Return the cheapest round trip from city 0 visiting every city once."""
    n = len(cost)
    if n == 0:
        raise ValueError("cost matrix must not be empty")
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")

    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def total(mask: int, pos: int) -> int:
        if mask == full:
            return cost[pos][0]
        return min(
            cost[pos][city] + total(mask | (1 << city), city)
            for city in range(n)
            if not mask & (1 << city)
        )

    return total(1, 0)