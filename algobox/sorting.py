"""Elementary sorting and rearranging of sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by inserting each value in turn."""
    result: list[Any] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    a = next(left_iter, None)
    b = next(right_iter, None)
    taken_left = taken_right = 0
    while taken_left < len(left) and taken_right < len(right):
        if a <= b:
            merged.append(a)
            taken_left += 1
            a = next(left_iter, None)
        else:
            merged.append(b)
            taken_right += 1
            b = next(right_iter, None)
    merged.extend(left[taken_left:])
    merged.extend(right[taken_right:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list by repeatedly selecting the minimum."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def partition_negatives(values: Iterable[Any]) -> list[Any]:
    """Return a copy with every negative value moved before the others."""
    result = list(values)
    boundary = 0
    for i, value in enumerate(result):
        if value < 0:
            if i != boundary:
                result[i], result[boundary] = result[boundary], value
            boundary += 1
    return result


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the values in reverse order."""
    return list(values)[::-1]