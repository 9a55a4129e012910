"""Small number-theoretic and combinatorial routines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


class Move(NamedTuple):
    """One Tower of Hanoi move: a disk goes from one peg to another."""

    disk: int
    source: str
    target: str


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the n-th Catalan number."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return binomial(2 * n, n) // (n + 1)


def primes_up_to(n: int) -> list[int]:
    """Return all primes not greater than ``n`` (Sieve of Eratosthenes)."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [number for number, flag in enumerate(is_prime) if flag]


def equal_without_compare(a: int, b: int) -> bool:
    """Tell whether two integers are equal using only exclusive-or."""
    return not (a ^ b)


def hanoi_moves(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        return
    if n == 1:
        yield Move(1, source, target)
        return
    yield from hanoi_moves(n - 1, source, target, spare)
    yield Move(n, source, target)
    yield from hanoi_moves(n - 1, spare, source, target)