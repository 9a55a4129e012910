"""Stack-based structures and algorithms."""

from __future__ import annotations

from typing import Any

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class StackOverflow(IndexError):
    """Raised when pushing into a stack that has no free slot."""


class StackUnderflow(IndexError):
    """Raised when popping from an empty stack."""


class TwoStacks:
    """Two stacks sharing one fixed-size array, growing toward each other."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._slots: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top1 < self._top2 - 1

    def push1(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        if not self._has_room():
            raise StackOverflow("Stack Overflow")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        if not self._has_room():
            raise StackOverflow("Stack Overflow")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Pop and return the top of the first stack."""
        if self._top1 < 0:
            raise StackUnderflow("Stack UnderFlow")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Pop and return the top of the second stack."""
        if self._top2 >= self._size:
            raise StackUnderflow("Stack UnderFlow")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


def is_balanced(expr: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``expr`` are balanced.

    Any character that is not an opening bracket found while nothing is
    open makes the expression unbalanced.
    """
    stack: list[str] = []
    for ch in expr:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        expected = _PAIRS.get(ch)
        if expected is not None and stack.pop() != expected:
            return False
    return not stack


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(expr: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for ch in expr:
        if "0" <= ch <= "9":
            stack.append(int(ch))
            continue
        operation = _OPERATIONS.get(ch)
        if operation is None:
            raise ValueError(f"unexpected character {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {ch!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]