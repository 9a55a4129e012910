"""Dynamic-programming problems over sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

MODULUS = 10**9 + 7


def longest_increasing_subsequence(values: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    items = list(values)
    lengths: list[int] = []
    for value in items:
        best = max(
            (length for earlier, length in zip(items, lengths) if earlier < value),
            default=0,
        )
        lengths.append(best + 1)
    return max(lengths, default=0)


def count_decodings(digits: str) -> int:
    """Count ways to read ``digits`` with A=1 ... Z=26, modulo 10**9 + 7."""
    if any(ch not in "0123456789" for ch in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    before, current = 1, 1
    for first, second in zip(digits, digits[1:]):
        ways = current
        if int(first) * 10 + int(second) <= 26:
            ways += before
        before, current = current, ways % MODULUS
    return current