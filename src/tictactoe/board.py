"""The Game board: a 3x3 grid of cells, each either empty or holding a player's mark."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Optional, Self

from src.core.shared_types import CELL_VALUES, EMPTY_CELL, Player

# Tic-tac-toe is always played on 3x3.
BOARD_SIZE = 3
CENTER = (1, 1)

Cell = tuple[int, int]


def is_within_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_board(grid: Any) -> bool:
    """
    Check the shape and content of a (persisted) grid.

    Valid means: exactly 3 rows, each row exactly 3 cells, and every cell one of "", "X", "O".
    Never raises, so it can be used on whatever came out of storage.
    """
    if not isinstance(grid, list) or len(grid) != BOARD_SIZE:
        return False
    for row in grid:
        if not isinstance(row, list) or len(row) != BOARD_SIZE:
            return False
        if not all(isinstance(cell, str) and cell in CELL_VALUES for cell in row):
            return False
    return True


@dataclass
class Board:
    grid: list[list[str]]

    @classmethod
    def empty(cls) -> Self:
        return cls([[EMPTY_CELL] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> Self:
        """Wrap a copy of the rows as given. No validation here: a corrupted grid must reach the move checks."""
        return cls(deepcopy(rows))

    def to_rows(self) -> list[list[str]]:
        return deepcopy(self.grid)

    def is_valid(self) -> bool:
        return is_valid_board(self.grid)

    def cell(self, row: int, col: int) -> Optional[str]:
        """Value of the cell, or None if the grid does not have that position (corrupted shape)."""
        try:
            return self.grid[row][col]
        except (IndexError, TypeError, KeyError):
            return None

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) == EMPTY_CELL

    def is_occupied(self, row: int, col: int) -> bool:
        """
        Anything present that is not the empty marker counts as occupied.
        A missing cell is not occupied: that is a corrupted board, which is reported separately.
        """
        value = self.cell(row, col)
        return value is not None and value != EMPTY_CELL

    def empty_cells(self) -> list[Cell]:
        """Empty cells in row-major order."""
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_empty(row, col)
        ]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def count_marks(self) -> int:
        return sum(
            1
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_occupied(row, col)
        )

    def place(self, row: int, col: int, player: Player) -> None:
        """Put the player's mark on a cell. Legality is checked by the Game, not here."""
        self.grid[row][col] = player.value
