"""Binary search over a sorted sequence, iterative and recursive."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(array: Sequence[Any], x: Any) -> Optional[int]:
    """Return an index of ``x`` in the sorted ``array``, or None if absent."""
    low, high = 0, len(array) - 1
    while low <= high:
        mid = (low + high) // 2
        if x == array[mid]:
            return mid
        if x > array[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(array: Sequence[Any], x: Any) -> Optional[int]:
    """Return an index of ``x`` in the sorted ``array``, or None if absent."""

    def search(low: int, high: int) -> Optional[int]:
        if high < low:
            return None
        mid = (low + high) // 2
        if x == array[mid]:
            return mid
        if x > array[mid]:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(array) - 1)