"""
Type definitions used across layers
"""

from enum import StrEnum


class Player(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Player":
        return Player.O if self == Player.X else Player.X


class Status(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    X_WON = "X_WON"
    O_WON = "O_WON"
    DRAW = "DRAW"


# --- Cell values as they are stored / sent over the wire. An empty cell is the empty string.
EMPTY_CELL = ""
CELL_VALUES: frozenset[str] = frozenset({EMPTY_CELL, Player.X.value, Player.O.value})
