"""Knapsack solvers: the 0/1 variant and the fractional (greedy) variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Item:
    """An item with a value and a weight."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of whole items that fit within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    # best[w] is the best value achievable with capacity w using the items
    # seen so far; a zero capacity always yields zero.
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for w in range(capacity, 0, -1):
            if weight <= w:
                best[w] = max(best[w], value + best[w - weight])
    return best[capacity]


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Return the best total value when items may be taken in fractions."""
    ordered = list(items)
    if any(item.weight <= 0 for item in ordered):
        raise ValueError("item weights must be positive")
    ordered.sort(key=lambda item: item.ratio, reverse=True)

    total_value = 0.0
    current_weight = 0
    for item in ordered:
        if current_weight + item.weight <= capacity:
            current_weight += item.weight
            total_value += item.value
        else:
            remaining = capacity - current_weight
            total_value += item.value * (remaining / item.weight)
            break
    return total_value