"""Enumerate every route of a rat through a square maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

# down, right, up, left
_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1))


def maze_paths(maze: Sequence[Sequence[int]]) -> Iterator[list[list[int]]]:
    """Yield each simple path from the top-left to the bottom-right cell.

    ``maze`` is square; a non-zero cell is open. Each path is yielded as a
    grid where the cells on the path are 1. Moves are tried in the order
    down, right, up, left. The destination cell is entered without checking
    whether it is open itself.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")

    path = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> Iterator[list[list[int]]]:
        if x == n - 1 and y == n - 1:
            path[x][y] = 1
            yield [row[:] for row in path]
        if not (0 <= x < n and 0 <= y < n) or not maze[x][y] or path[x][y]:
            return
        path[x][y] = 1
        for dx, dy in _MOVES:
            yield from walk(x + dx, y + dy)
        path[x][y] = 0

    return walk(0, 0)


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with each value followed by a space, one line per row."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)