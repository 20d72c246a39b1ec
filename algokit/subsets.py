"""Sum-of-subsets enumeration by depth-first search."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


def subset_sums(numbers: Iterable[int], target: int) -> Iterator[Tuple[int, ...]]:
    """Yield each subset, in index order, whose elements add up to ``target``.

    A subset that reaches the target is reported and not extended further.
    """
    values = list(numbers)

    def walk(start: int, chosen: List[int], total: int) -> Iterator[Tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
            return
        for i in range(start, len(values)):
            chosen.append(values[i])
            yield from walk(i + 1, chosen, total + values[i])
            chosen.pop()

    yield from walk(0, [], 0)