"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch one top-level type."""

from enum import StrEnum


class GameError(Exception):
    """Top-level exception for anything that goes wrong in this project."""


# --- DOMAIN ---
class MoveErrorKind(StrEnum):
    GAME_FINISHED = "GameFinished"
    OUT_OF_BOUNDS = "OutOfBounds"
    CELL_OCCUPIED = "CellOccupied"
    CORRUPTED_STATE = "CorruptedState"
    NOT_AUTOMATED_TURN = "NotAutomatedTurn"
    NO_MOVES_AVAILABLE = "NoMovesAvailable"


class MoveError(GameError):
    """A move (human or automated) was rejected. The Game it was attempted on is left untouched."""

    kind: MoveErrorKind


class GameFinishedError(MoveError):
    kind = MoveErrorKind.GAME_FINISHED


class OutOfBoundsError(MoveError):
    kind = MoveErrorKind.OUT_OF_BOUNDS


class CellOccupiedError(MoveError):
    kind = MoveErrorKind.CELL_OCCUPIED


class CorruptedStateError(MoveError):
    kind = MoveErrorKind.CORRUPTED_STATE


class NotAutomatedTurnError(MoveError):
    kind = MoveErrorKind.NOT_AUTOMATED_TURN


class NoMovesAvailableError(MoveError):
    kind = MoveErrorKind.NO_MOVES_AVAILABLE


# --- PERSISTENCE ---
class RepositoryError(GameError):
    pass


class GameNotFoundError(RepositoryError):
    pass


# --- API ---
class InvalidRequestError(GameError):
    pass
