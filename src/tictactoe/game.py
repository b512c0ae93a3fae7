"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for the rules of one game of tic-tac-toe: checking a move is legal, placing the mark,
detecting the end of the game, and letting the automated player pick its move.

The Game never talks to storage: the service layer hands it a GameModel, calls a move, and stores the result.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Self

from src.core.exceptions import (
    CellOccupiedError,
    CorruptedStateError,
    GameFinishedError,
    NotAutomatedTurnError,
    OutOfBoundsError,
)
from src.core.models import GameModel, Grid
from src.core.shared_types import Player, Status
from src.tictactoe.board import Board, is_within_bounds
from src.tictactoe.opponent import select_move
from src.tictactoe.outcome import (
    Draw,
    InProgress,
    Outcome,
    Won,
    from_status,
    is_terminal,
    to_status,
)
from src.tictactoe.outcome import evaluate as evaluate_board

logger = logging.getLogger(__name__)

__all__ = [
    "Board",
    "Draw",
    "Game",
    "GameModel",
    "InProgress",
    "Outcome",
    "Player",
    "Status",
    "Won",
    "apply_automated_move",
    "apply_move",
    "create_game",
    "evaluate",
]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Player
    outcome: Outcome
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new_game(cls, now: Optional[datetime] = None) -> Self:
        """Empty board, X to move."""
        timestamp = now or utc_now()
        return cls(
            board=Board.empty(),
            current_player=Player.X,
            outcome=InProgress(),
            created_at=timestamp,
            updated_at=timestamp,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Define how to construct a Game from the information the Service layer actually has.

        NOTE the board is taken as-is. If it got corrupted in storage, the move checks will refuse to touch it.
        """
        if model.current_player not in (Player.X, Player.O):
            raise CorruptedStateError(
                f"Invalid current player: {model.current_player!r}. Pick one from {','.join(Player)}"
            )

        return cls(
            board=Board.from_rows(model.board),
            current_player=Player(model.current_player),
            outcome=from_status(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_rows(),
            current_player=self.current_player.value,
            status=self.status.value,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @property
    def status(self) -> Status:
        return to_status(self.outcome)

    @property
    def is_in_progress(self) -> bool:
        return isinstance(self.outcome, InProgress)

    @property
    def winner(self) -> Optional[Player]:
        if isinstance(self.outcome, Won):
            return self.outcome.winner
        return None

    def apply_move(self, row: int, col: int) -> Self:
        """
        Place the current player's mark on (row, col).
        -----

        Checked in this order, the first failure is the one reported:
        1. the game is still in progress
        2. (row, col) lies on the board
        3. the cell is empty
        4. the board itself is intact

        Then:
        5. place the mark
        6. evaluate the board
        7. game over? keep the current player (no more turns). Otherwise, pass the turn.

        This is the only place where the board, the outcome, and the player to move get changed.
        """
        if not self.is_in_progress:
            raise GameFinishedError(f"Game is already finished. status: {self.status}")

        if not is_within_bounds(row, col):
            raise OutOfBoundsError(f"Invalid move: Position ({row}, {col}) out of bounds")

        if self.board.is_occupied(row, col):
            raise CellOccupiedError(
                f"Invalid move: Cell ({row}, {col}) is already occupied"
            )

        if not self.board.is_valid():
            raise CorruptedStateError("Invalid game state: Corrupted board")

        player = self.current_player
        self.board.place(row, col, player)
        self.outcome = evaluate_board(self.board)
        if not is_terminal(self.outcome):
            self.current_player = player.opponent
        self.updated_at = utc_now()

        logger.debug(
            "%s played (%d, %d), status is now %s", player, row, col, self.status
        )
        return self

    def apply_automated_move(
        self,
        automated_player: Player = Player.O,
        rng: Optional[random.Random] = None,
    ) -> Self:
        """Let the built-in opponent pick a cell, then play it through `apply_move` (so all move checks still apply)."""
        if not self.is_in_progress:
            raise GameFinishedError(f"Game is already finished. status: {self.status}")

        if self.current_player != automated_player:
            raise NotAutomatedTurnError(
                f"Not the automated player's turn. Waiting for {self.current_player} to move."
            )

        if not self.board.is_valid():
            raise CorruptedStateError("Invalid game state: Corrupted board")

        row, col = select_move(self.board, rng)
        return self.apply_move(row, col)


# --- Operations exposed to the collaborator layer ---
def create_game() -> Game:
    return Game.new_game()


def apply_move(game: Game, row: int, col: int) -> Game:
    return game.apply_move(row, col)


def apply_automated_move(
    game: Game,
    automated_player: Player = Player.O,
    rng: Optional[random.Random] = None,
) -> Game:
    return game.apply_automated_move(automated_player, rng)


def evaluate(board: Board | Grid) -> Status:
    """Read-only status of a board (or of its serialized rows), usable for diagnostics."""
    if not isinstance(board, Board):
        board = Board.from_rows(board)
    return to_status(evaluate_board(board))
