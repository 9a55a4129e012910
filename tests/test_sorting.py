from collections import Counter

import pytest

from algobox.sorting import (
    insertion_sort,
    merge_sort,
    partition_negatives,
    reverse_array,
    selection_sort,
)

SAMPLES = [
    [],
    [1],
    [12, 11, 13, 5, 6],
    [6, 5, 12, 10, 9, 1],
    [4, 11, 6, 30, 1, 8],
    [3, 3, 1, 2, 2, -7, 0],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort, selection_sort])
@pytest.mark.parametrize("values", SAMPLES)
def test_sorters_agree_with_sorted(sorter, values):
    assert sorter(values) == sorted(values)


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort, selection_sort])
def test_sorters_leave_input_untouched(sorter):
    values = [5, 2, 9, 1]
    sorter(values)
    assert values == [5, 2, 9, 1]


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort])
def test_stable_sorters_keep_equal_order(sorter):
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __lt__(self, other):
            return self.key < other.key

        def __le__(self, other):
            return self.key <= other.key

        def __gt__(self, other):
            return self.key > other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    assert [item.tag for item in sorter(items)] == ["b", "d", "a", "c"]


@pytest.mark.parametrize(
    "values",
    [[-1, 2, -3], [1, -2, 3, -4, 5, -6], [4, 5, 6], [-1, -2], [], [0, -1, 0]],
)
def test_partition_negatives_puts_negatives_first(values):
    result = partition_negatives(values)
    assert Counter(result) == Counter(values)
    negatives = sum(1 for v in values if v < 0)
    assert all(v < 0 for v in result[:negatives])
    assert all(v >= 0 for v in result[negatives:])


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_twice_is_identity(values):
    assert reverse_array(reverse_array(values)) == values


def test_reverse_swaps_ends():
    values = [7, 8, 9, 10]
    result = reverse_array(values)
    assert result[0] == values[-1]
    assert result[-1] == values[0]
    assert len(result) == len(values)