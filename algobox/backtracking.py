"""Backtracking searches: Sudoku, N queens and a rat in a maze."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

SIZE = 9
BOX = 3

Grid = list[list[int]]


def _cell(value: Any) -> int:
    if isinstance(value, str):
        if value == ".":
            return 0
        if len(value) != 1 or value not in "0123456789":
            raise ValueError(f"invalid sudoku cell {value!r}")
        return int(value)
    number = int(value)
    if not 0 <= number <= SIZE:
        raise ValueError(f"invalid sudoku cell {value!r}")
    return number


def _normalise(board: Iterable[Iterable[Any]]) -> Grid:
    grid = [[_cell(c) for c in row] for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("sudoku board must be 9 by 9")
    return grid


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Tell whether ``num`` may go at ``(row, col)`` by the Sudoku rules."""
    if num in board[row]:
        return False
    if any(board[r][col] == num for r in range(SIZE)):
        return False
    top = row - row % BOX
    left = col - col % BOX
    return all(
        board[r][c] != num
        for r in range(top, top + BOX)
        for c in range(left, left + BOX)
    )


def _first_empty(grid: Grid) -> tuple[int, int] | None:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 0:
                return r, c
    return None


def _fill(grid: Grid) -> bool:
    empty = _first_empty(grid)
    if empty is None:
        return True
    row, col = empty
    for num in range(1, SIZE + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid):
                return True
            grid[row][col] = 0
    return False


def solve_sudoku(board: Iterable[Iterable[Any]]) -> Grid | None:
    """Return a solved copy of a 9x9 board, or None if it has no solution.

    Empty cells are 0, ``"0"`` or ``"."``; the input is left unchanged.
    """
    grid = _normalise(board)
    return grid if _fill(grid) else None


def solve_n_queens(n: int) -> Grid | None:
    """Place ``n`` non-attacking queens; return a 0/1 board or None."""
    if n < 0:
        raise ValueError("n must be non-negative")
    columns: list[int] = []

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if all(
                c != col and abs(c - col) != row - r
                for r, c in enumerate(columns)
            ):
                columns.append(col)
                if place(row + 1):
                    return True
                columns.pop()
        return False

    if not place(0):
        return None
    return [[int(c == col) for c in range(n)] for col in columns]


def rat_in_maze(maze: Iterable[Iterable[int]]) -> Grid | None:
    """Find a path from the top-left to the bottom-right of a square maze.

    Open cells are 1 and the rat moves down or right, trying down first.
    Returns a grid marking the path with 1, or None if there is none.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0:
        return None
    solution = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            solution[x][y] = 1
            return True
        if x < n and y < n and grid[x][y] == 1:
            solution[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None