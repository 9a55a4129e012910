"""Four-function calculator working on two floating-point operands."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

OPERATORS = "+-*/"


def _divide(a: float, b: float) -> float:
    """Divide following IEEE rules: a zero divisor gives an infinity or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_DISPATCH: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calculate(op: str, a: float, b: float) -> float:
    """Apply the operator ``op`` (one of ``+ - * /``) to ``a`` and ``b``."""
    try:
        func = _DISPATCH[op]
    except (KeyError, TypeError):
        raise ValueError(f"operator is not correct: {op!r}") from None
    return func(float(a), float(b))


def _format(value: float) -> str:
    return f"{value:g}"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read an operator and two operands, then print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    interactive = not args
    tokens = _tokens(sys.stdin) if interactive else iter(args)

    try:
        if interactive:
            print("Enter operator: +, -, *, /: ", end="", flush=True)
        op = next(tokens)
        if interactive:
            print("Enter two operands: ", end="", flush=True)
        a = float(next(tokens))
        b = float(next(tokens))
    except StopIteration:
        print("missing input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid operand: {exc}", file=sys.stderr)
        return 1

    try:
        result = calculate(op, a, b)
    except ValueError:
        print("Error! operator is not correct")
        return 0

    print(f"{_format(a)} {op} {_format(b)} = {_format(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())