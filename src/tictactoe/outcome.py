"""
Terminal evaluation.

The status of a game is a tagged union: still going, won by one player, or drawn.
A `Won` without a winner cannot be constructed. `Status` is only the serialized form of it.
"""

from dataclasses import dataclass

from src.core.exceptions import CorruptedStateError
from src.core.shared_types import Player, Status
from src.tictactoe.board import BOARD_SIZE, Board, Cell


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Won:
    winner: Player


@dataclass(frozen=True)
class Draw:
    pass


Outcome = InProgress | Won | Draw

# Order matters only for diagnosing corrupted boards: rows, columns, main diagonal, anti-diagonal.
ROWS: list[tuple[Cell, ...]] = [
    tuple((row, col) for col in range(BOARD_SIZE)) for row in range(BOARD_SIZE)
]
COLUMNS: list[tuple[Cell, ...]] = [
    tuple((row, col) for row in range(BOARD_SIZE)) for col in range(BOARD_SIZE)
]
MAIN_DIAGONAL: tuple[Cell, ...] = tuple((i, i) for i in range(BOARD_SIZE))
ANTI_DIAGONAL: tuple[Cell, ...] = tuple(
    (i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)
)
LINES: list[tuple[Cell, ...]] = [*ROWS, *COLUMNS, MAIN_DIAGONAL, ANTI_DIAGONAL]

WON_STATUS: dict[Player, Status] = {
    Player.X: Status.X_WON,
    Player.O: Status.O_WON,
}


def line_winner(board: Board, line: tuple[Cell, ...]) -> Player | None:
    """The player holding every cell of the line, if any."""
    first = board.cell(*line[0])
    if any(board.cell(row, col) != first for row, col in line[1:]):
        return None
    # empty or garbage marks never count as a win
    if first not in (Player.X, Player.O):
        return None
    return Player(first)


def evaluate(board: Board) -> Outcome:
    """Win if any line is complete (first in LINES order), draw if the board is full, otherwise still in progress."""
    for line in LINES:
        winner = line_winner(board, line)
        if winner is not None:
            return Won(winner)

    if board.is_full():
        return Draw()
    return InProgress()


def is_terminal(outcome: Outcome) -> bool:
    return not isinstance(outcome, InProgress)


def to_status(outcome: Outcome) -> Status:
    match outcome:
        case Won(winner=winner):
            return WON_STATUS[winner]
        case Draw():
            return Status.DRAW
        case _:
            return Status.IN_PROGRESS


def from_status(status: str) -> Outcome:
    """Decode a persisted status string."""
    try:
        status = Status(status)
    except ValueError:
        raise CorruptedStateError(
            f"Invalid status: {status!r}. Pick one from {','.join(Status)}"
        ) from None

    match status:
        case Status.X_WON:
            return Won(Player.X)
        case Status.O_WON:
            return Won(Player.O)
        case Status.DRAW:
            return Draw()
        case _:
            return InProgress()
