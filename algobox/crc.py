"""Cyclic redundancy check by modulo-2 polynomial division."""

from __future__ import annotations

from collections.abc import Iterable


def _bits(values: Iterable[int] | str, what: str) -> list[int]:
    bits = [int(ch) for ch in values] if isinstance(values, str) else list(values)
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"{what} must contain only 0 and 1")
    return bits


def _generator(generator: Iterable[int] | str) -> list[int]:
    gen = _bits(generator, "generator")
    if not gen:
        raise ValueError("generator must not be empty")
    if gen[0] != 1:
        raise ValueError("generator must start with a 1 bit")
    return gen


def mod2_remainder(bits: Iterable[int] | str, generator: Iterable[int] | str) -> list[int]:
    """Return the remainder of dividing ``bits`` by ``generator`` modulo 2.

    The remainder has one bit fewer than the generator.
    """
    gen = _generator(generator)
    work = _bits(bits, "bits")
    width = len(gen) - 1
    if len(work) < width:
        raise ValueError("bits must be at least as long as the remainder")
    for start in range(len(work) - width):
        if work[start]:
            for offset, g in enumerate(gen):
                work[start + offset] ^= g
    return work[len(work) - width:]


def crc_bits(frame: Iterable[int] | str, generator: Iterable[int] | str) -> list[int]:
    """Return the check bits the sender appends to ``frame``."""
    gen = _generator(generator)
    data = _bits(frame, "frame")
    return mod2_remainder(data + [0] * (len(gen) - 1), gen)


def encode(frame: Iterable[int] | str, generator: Iterable[int] | str) -> list[int]:
    """Return ``frame`` followed by its check bits: the transmitted frame."""
    data = _bits(frame, "frame")
    return data + crc_bits(data, generator)


def check(received: Iterable[int] | str, generator: Iterable[int] | str) -> bool:
    """Tell whether a received frame divides evenly by ``generator``."""
    return not any(mod2_remainder(received, generator))