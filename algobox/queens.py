"""N-queens placement by column-wise backtracking."""

from __future__ import annotations


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` queens on an ``n`` x ``n`` board.

    Queens are placed one column at a time, trying rows from top to bottom,
    and the first complete placement found is returned as a grid of 0/1
    values. ``None`` is returned when no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    rows_used: set[int] = set()
    falling: set[int] = set()  # row - col
    rising: set[int] = set()  # row + col
    queen_rows: list[int] = []

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows_used or row - col in falling or row + col in rising:
                continue
            rows_used.add(row)
            falling.add(row - col)
            rising.add(row + col)
            queen_rows.append(row)
            if place(col + 1):
                return True
            queen_rows.pop()
            rows_used.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    if not place(0):
        return None

    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(queen_rows):
        board[row][col] = 1
    return board


def format_board(board: list[list[int]]) -> str:
    """Render a board with each cell as `` v `` and one line per row."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)