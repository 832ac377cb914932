"""A 9x9 sudoku solver using cell-by-cell backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

DEFAULT_PUZZLE = (
    (0, 2, 0, 0, 0, 4, 3, 0, 0),
    (9, 0, 0, 0, 2, 0, 0, 0, 8),
    (0, 0, 0, 6, 0, 9, 0, 5, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 7, 2, 5, 0, 3, 6, 8, 0),
    (6, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 8, 0, 2, 0, 5, 0, 0, 0),
    (1, 0, 0, 0, 9, 0, 0, 0, 3),
    (0, 0, 9, 8, 0, 0, 0, 6, 0),
)


def _checked_copy(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    cells = [list(row) for row in grid]
    if any(not 0 <= value <= 9 for row in cells for value in row):
        raise ValueError("sudoku values must be between 0 and 9")
    return cells


def is_valid(grid: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Whether the value at (row, col) is unique in its row, column and box."""
    value = grid[row][col]
    if any(grid[row][c] == value for c in range(9) if c != col):
        return False
    if any(grid[r][col] == value for r in range(9) if r != row):
        return False
    top, left = 3 * (row // 3), 3 * (col // 3)
    return not any(
        grid[r][c] == value
        for r in range(top, top + 3)
        for c in range(left, left + 3)
        if r != row and c != col
    )


def is_solved(grid: Sequence[Sequence[int]]) -> bool:
    """Whether every cell is filled and no value repeats in a unit."""
    return all(
        grid[r][c] != 0 and is_valid(grid, r, c) for r in range(9) for c in range(9)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return the first solution found, or ``None`` if there is none.

    Empty cells are 0. Cells are filled in row-major order trying 1 to 9,
    so the result is the lexicographically first completion.
    """
    cells = _checked_copy(grid)
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []

    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value == 0:
                empties.append((r, c))
                continue
            box = 3 * (r // 3) + c // 3
            if value in rows[r] or value in cols[c] or value in boxes[box]:
                return None
            rows[r].add(value)
            cols[c].add(value)
            boxes[box].add(value)

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        box = 3 * (r // 3) + c // 3
        for value in range(1, 10):
            if value in rows[r] or value in cols[c] or value in boxes[box]:
                continue
            cells[r][c] = value
            rows[r].add(value)
            cols[c].add(value)
            boxes[box].add(value)
            if fill(index + 1):
                return True
            rows[r].discard(value)
            cols[c].discard(value)
            boxes[box].discard(value)
        cells[r][c] = 0
        return False

    return cells if fill(0) else None


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with each value followed by a space, one line per row."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Read an optional puzzle from standard input and print its solution."""
    parser = argparse.ArgumentParser(
        prog="sudoku",
        description="Solve a 9x9 sudoku read from standard input.",
    )
    parser.parse_args(argv)

    print("This is sudoku solver of size 9*9")
    print("Would you like to have custom initial input ? y=yes, n=no")
    data = sys.stdin.read()
    grid = [list(row) for row in DEFAULT_PUZZLE]

    if data[:1] != "n":
        tokens = iter(data[1:].split())
        for r in range(9):
            print(f"Enter 9 entries for row {r + 1}")
            for c in range(9):
                token = next(tokens, None)
                try:
                    value = int(token) if token is not None else None
                except ValueError:
                    value = None
                if value is None or not 0 <= value <= 9:
                    print("expected an integer between 0 and 9", file=sys.stderr)
                    return 1
                grid[r][c] = value

    print(format_sudoku(grid), end="")
    solution = solve_sudoku(grid)
    if solution is not None:
        print("Solution of sudoku puzzle is >> ")
        print(format_sudoku(solution), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())