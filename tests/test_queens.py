import itertools

import pytest

from algokit.queens import format_board, solve_n_queens


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


def test_default_is_eight_queens():
    board = solve_n_queens()
    assert board == [
        [1, 0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0, 1],
        [0, 1, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0, 0, 0, 0],
    ]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8, 10])
def test_solutions_are_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    assert all(len(row) == n for row in board)
    queens = _queens(board)
    assert len(queens) == n
    assert sorted(r for r, _ in queens) == list(range(n))
    assert sorted(c for _, c in queens) == list(range(n))
    for (r1, c1), (r2, c2) in itertools.combinations(queens, 2):
        assert abs(r1 - r2) != abs(c1 - c2)


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert solve_n_queens(n) is None


def test_single_square():
    assert solve_n_queens(1) == [[1]]


def test_first_column_filled_from_top():
    board = solve_n_queens(8)
    assert board[0][0] == 1


def test_negative_size_raises():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_format_board_round_trip():
    board = solve_n_queens(6)
    text = format_board(board)
    parsed = [[int(cell) for cell in line.split(" ")] for line in text.split("\n")]
    assert parsed == board