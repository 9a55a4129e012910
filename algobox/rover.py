"""A rover driving on a grid under single-letter commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Heading(str, Enum):
    """Compass direction the rover faces."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"


_CLOCKWISE = [Heading.N, Heading.E, Heading.S, Heading.W]
_STEP = {
    Heading.N: (0, 1),
    Heading.S: (0, -1),
    Heading.E: (1, 0),
    Heading.W: (-1, 0),
}


@dataclass
class Rover:
    """Position and heading of a rover; ``L`` and ``R`` turn, anything else moves."""

    x: int
    y: int
    heading: Heading

    def __post_init__(self) -> None:
        self.heading = Heading(self.heading)

    def _turn(self, quarter_turns: int) -> None:
        index = _CLOCKWISE.index(self.heading)
        self.heading = _CLOCKWISE[(index + quarter_turns) % len(_CLOCKWISE)]

    def rotate_left(self) -> None:
        """Turn a quarter counter-clockwise."""
        self._turn(-1)

    def rotate_right(self) -> None:
        """Turn a quarter clockwise."""
        self._turn(1)

    def move_forward(self) -> None:
        """Advance one cell in the direction of the heading."""
        dx, dy = _STEP[self.heading]
        self.x += dx
        self.y += dy

    def process(self, message: str) -> None:
        """Carry out each command letter of ``message`` in turn."""
        for command in message:
            if command == "L":
                self.rotate_left()
            elif command == "R":
                self.rotate_right()
            else:
                self.move_forward()

    def position(self) -> tuple[int, int, Heading]:
        """Return ``(x, y, heading)``."""
        return self.x, self.y, self.heading

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading.value}"