"""Unit tests for /src/tictactoe/opponent.py"""

import random
from unittest.mock import patch

import pytest

from src.core.exceptions import NoMovesAvailableError
from src.tictactoe.board import Board
from src.tictactoe.opponent import select_move


def test_takes_center_when_empty() -> None:
    board = Board.from_rows([["X", "", ""], ["", "", ""], ["", "", ""]])
    assert select_move(board) == (1, 1)


def test_takes_center_on_empty_board() -> None:
    assert select_move(Board.empty()) == (1, 1)


def test_random_empty_cell_when_center_taken() -> None:
    board = Board.from_rows([["X", "", "O"], ["", "X", ""], ["", "", ""]])
    for seed in range(20):
        move = select_move(board, random.Random(seed))
        assert move in board.empty_cells()


def test_only_one_empty_cell() -> None:
    board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", ""]])
    assert select_move(board) == (2, 2)


def test_random_choice_is_over_all_empty_cells() -> None:
    """The candidates handed to the random choice are exactly the empty cells."""
    board = Board.from_rows([["X", "", ""], ["", "O", ""], ["", "", "X"]])
    rng = random.Random()
    with patch.object(rng, "choice", return_value=(2, 0)) as mocked_choice:
        assert select_move(board, rng) == (2, 0)
    mocked_choice.assert_called_once_with(
        [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]
    )


def test_injected_rng_is_deterministic() -> None:
    board = Board.from_rows([["X", "", ""], ["", "O", ""], ["", "", "X"]])
    first = [select_move(board, random.Random(7)) for _ in range(5)]
    second = [select_move(board, random.Random(7)) for _ in range(5)]
    assert first == second


def test_full_board() -> None:
    board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
    with pytest.raises(NoMovesAvailableError):
        select_move(board)
