"""Backtracking solver for the N-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["solve_n_queens", "format_board"]


def solve_n_queens(n: int = 8) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens, filling columns left to right.

    Returns the first board found, with 1 marking a queen, or ``None`` when
    no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def search(col: int) -> bool:
        if col == n:
            return True
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if search(col + 1):
                return True
            rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not search(0):
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(rows):
        board[row][col] = 1
    return board


def format_board(board: Iterable[Sequence[int]]) -> str:
    """Render a board one row per line, cells separated by spaces."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)