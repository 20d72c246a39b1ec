from dataclasses import dataclass, field

from algokit.sorting import merge, merge_sort


def test_source_example():
    data = [9, 4, 7, 6, 3, 1, 5]
    assert merge_sort(data) == sorted(data)


def test_input_is_not_modified():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [3, 1, 2]


def test_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([42]) == [42]


def test_duplicates_and_negatives():
    data = [5, -1, 5, 0, -1, 3, 3]
    assert merge_sort(data) == sorted(data)


def test_merge_two_sorted_lists():
    left = [1, 4, 9]
    right = [2, 3, 10, 11]
    assert merge(left, right) == sorted(left + right)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


@dataclass(order=True)
class _Tagged:
    key: int
    label: str = field(compare=False)


def test_sort_is_stable():
    data = [_Tagged(2, "a"), _Tagged(1, "b"), _Tagged(2, "c"), _Tagged(1, "d")]
    result = merge_sort(data)
    assert [t.label for t in result] == ["b", "d", "a", "c"]