"""Unit tests for /src/tictactoe/board.py"""

import pytest

from src.core.shared_types import Player
from src.tictactoe.board import Board, is_valid_board, is_within_bounds


def test_empty_board() -> None:
    board = Board.empty()
    assert board.to_rows() == [["", "", ""], ["", "", ""], ["", "", ""]]
    assert len(board.empty_cells()) == 9
    assert board.count_marks() == 0
    assert not board.is_full()


def test_from_rows_makes_a_copy() -> None:
    """Mutating the board must not leak into the rows it was built from (or the other way around)."""
    rows = [["X", "", ""], ["", "", ""], ["", "", ""]]
    board = Board.from_rows(rows)
    board.place(1, 1, Player.O)
    assert rows[1][1] == ""

    exported = board.to_rows()
    exported[2][2] = "X"
    assert board.cell(2, 2) == ""


def test_empty_cells_row_major_order() -> None:
    board = Board.from_rows([["X", "", "O"], ["", "X", ""], ["O", "", "X"]])
    assert board.empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_full_board() -> None:
    board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
    assert board.is_full()
    assert board.count_marks() == 9


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (0, 0, True),
        (2, 2, True),
        (1, 2, True),
        (3, 0, False),
        (0, 3, False),
        (-1, 0, False),
        (0, -1, False),
    ],
)
def test_is_within_bounds(row: int, col: int, expected: bool) -> None:
    assert is_within_bounds(row, col) is expected


def test_cell_of_corrupted_grid() -> None:
    """Positions that the (corrupted) grid does not have are neither empty nor occupied."""
    board = Board.from_rows([["X", ""], ["", "", ""]])
    assert board.cell(0, 2) is None
    assert board.cell(2, 0) is None
    assert not board.is_empty(0, 2)
    assert not board.is_occupied(0, 2)


def test_unknown_mark_counts_as_occupied() -> None:
    board = Board.from_rows([["Z", "", ""], ["", "", ""], ["", "", ""]])
    assert board.is_occupied(0, 0)


# --- is_valid_board ---
def test_valid_boards() -> None:
    assert is_valid_board([["", "", ""], ["", "", ""], ["", "", ""]])
    assert is_valid_board([["X", "O", "X"], ["", "O", ""], ["X", "", ""]])


@pytest.mark.parametrize(
    "grid",
    [
        [["", "", ""], ["", "", ""]],  # two rows
        [["", "", ""], ["", "", ""], ["", "", ""], ["", "", ""]],  # four rows
        [["", ""], ["", "", ""], ["", "", ""]],  # short row
        [["", "", "", ""], ["", "", ""], ["", "", ""]],  # long row
        [["x", "", ""], ["", "", ""], ["", "", ""]],  # lower case mark
        [["Z", "", ""], ["", "", ""], ["", "", ""]],  # unknown mark
        [[None, "", ""], ["", "", ""], ["", "", ""]],  # not a string
        [[1, "", ""], ["", "", ""], ["", "", ""]],  # not a string
        ["XOX", ["", "", ""], ["", "", ""]],  # row is not a list
        [],
        None,
        "not a board",
    ],
)
def test_invalid_boards(grid: object) -> None:
    assert is_valid_board(grid) is False
