"""Searching in arrays, matrices and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import combinations  # noqa: F401  (kept for callers' convenience)
from typing import Any


def binary_search(
    values: Sequence[Any], target: Any, low: int = 0, high: int | None = None
) -> int | None:
    """Return an index of ``target`` within ``values[low:high + 1]``, or None."""
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def exponential_search(values: Sequence[Any], target: Any) -> int | None:
    """Find ``target`` in sorted ``values`` by doubling the search bound."""
    if not values:
        return None
    if values[0] == target:
        return 0
    n = len(values)
    bound = 1
    while bound < n and values[bound] <= target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, n - 1))


def search_sorted_matrix(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Locate ``target`` in a matrix sorted along rows and columns."""
    if not matrix or not matrix[0]:
        return None
    if target < matrix[0][0] or target > matrix[-1][-1]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return row, col
        if value > target:
            col -= 1
        else:
            row += 1
    return None


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(pattern: Sequence[Any], text: Sequence[Any]) -> list[int]:
    """Return every start index at which ``pattern`` occurs in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    size = len(pattern)
    matches: list[int] = []
    matched = 0
    for i, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = lps[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == size:
            matches.append(i - size + 1)
            matched = lps[matched - 1]
    return matches


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every contiguous window of length ``k``."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[Any] = []
    for i, value in enumerate(items):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value >= items[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(items[window[0]])
    return maxima


def count_anagrams(pattern: str, text: str) -> int:
    """Count the windows of ``text`` that are anagrams of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    needed = Counter(pattern)
    unmatched = len(needed)
    size = len(pattern)
    found = 0
    for j, ch in enumerate(text):
        if ch in needed:
            needed[ch] -= 1
            if needed[ch] == 0:
                unmatched -= 1
        if j >= size - 1:
            if unmatched == 0:
                found += 1
            leaving = text[j - size + 1]
            if leaving in needed:
                if needed[leaving] == 0:
                    unmatched += 1
                needed[leaving] += 1
    return found


def count_triplets_below(values: Sequence[int], limit: int) -> int:
    """Count index triplets whose values sum to less than ``limit``."""
    items = sorted(values)
    count = 0
    for i in range(len(items) - 2):
        lo, hi = i + 1, len(items) - 1
        while lo < hi:
            if items[i] + items[lo] + items[hi] < limit:
                count += hi - lo
                lo += 1
            else:
                hi -= 1
    return count


def min_max(values: Sequence[Any]) -> tuple[Any, Any]:
    """Return ``(smallest, largest)`` of a non-empty sequence in one pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if largest < value:
            largest = value
        elif smallest > value:
            smallest = value
    return smallest, largest