"""Fewest refuelling stops for a truck heading to a town."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator, Sequence


def min_refuel_stops(
    stations: Iterable[tuple[int, int]], distance: int, fuel: int
) -> int | None:
    """Return the fewest stops needed to reach the town, or None if impossible.

    Each station is ``(distance_from_town, fuel_available)``; the truck
    starts ``distance`` units from the town with ``fuel`` units of fuel and
    burns one unit per unit travelled.
    """
    ahead = sorted(
        ((distance - position, amount) for position, amount in stations),
        key=lambda station: station[0],
    )
    passed: list[int] = []
    stops = 0
    travelled = 0

    def refuel() -> bool:
        nonlocal fuel, stops
        if not passed:
            return False
        fuel += -heapq.heappop(passed)
        stops += 1
        return True

    for position, amount in ahead:
        leg = position - travelled
        while fuel < leg:
            if not refuel():
                return None
        fuel -= leg
        heapq.heappush(passed, -amount)
        travelled = position

    remaining = distance - travelled
    while fuel < remaining:
        if not refuel():
            return None
    return stops


def _numbers(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def _cases(
    numbers: Iterator[int],
) -> Iterator[tuple[list[tuple[int, int]], int, int]]:
    for _ in range(next(numbers)):
        count = next(numbers)
        stations = [(next(numbers), next(numbers)) for _ in range(count)]
        distance = next(numbers)
        fuel = next(numbers)
        yield stations, distance, fuel


def main(argv: Sequence[str] | None = None) -> int:
    """Solve each test case in the input and print one answer per line."""
    parser = argparse.ArgumentParser(
        prog="expedition",
        description="Print the fewest refuelling stops for each case, or -1.",
    )
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as stream:
            text = stream.read()

    try:
        for stations, distance, fuel in _cases(_numbers(text)):
            stops = min_refuel_stops(stations, distance, fuel)
            print(-1 if stops is None else stops)
    except StopIteration:
        print("incomplete input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())