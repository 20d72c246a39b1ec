"""Stable merge sort."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence


def merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """Merge two sorted sequences into a new sorted list, preferring ``left`` on ties."""
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list with the items in ascending order."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return merge(merge_sort(data[:mid]), merge_sort(data[mid:]))