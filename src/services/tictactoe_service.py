"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    AutomatedMoveRequest,
    DeleteGameRequest,
    GameHistoryRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.core import config
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel
from src.core.shared_types import Player
from src.db.repository import GameRepository
from src.services.locks import GameLocks, game_locks
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe game against the automated player."""

    def __init__(
        self,
        repository: GameRepository,
        locks: Optional[GameLocks] = None,
        automated_player: Player | str = config.AUTOMATED_PLAYER,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.locks = locks if locks is not None else game_locks
        self.automated_player = Player(automated_player)
        self.rng = rng

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """A player requested to start a new game."""

        # Create a new Game, and convert into GameModel
        new_game = Game.new_game()
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the frontend to (re)load a game.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def list_games(self) -> list[GameResponse]:
        """Show all recorded games, most recent first."""
        return [
            self._create_game_response(game_id, model)
            for game_id, model in self.repo.list_games()
        ]

    def game_history(self, request: GameHistoryRequest) -> list[GameResponse]:
        """The most recent games, optionally only those that ended (or are still going) a certain way."""
        status = request.status.value if request.status else None
        return [
            self._create_game_response(game_id, model)
            for game_id, model in self.repo.list_games(limit=request.limit, status=status)
        ]

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Human move attempt.
        ----

        If the game is still going afterwards and it is the automated player's turn, it answers straight away.
        A move that ends the game never triggers an automated move.
        """
        with self.locks.hold(request.game_id):
            # Retrieve persisted GameModel from repository
            stored_model = self._fetch_game(request.game_id)

            # Create a new Game instance from the retrieved GameModel
            game = Game.from_model(stored_model)

            # Attempt the move
            game.apply_move(request.row, request.col)

            # store in repository
            after_move = self._store(request.game_id, game)

            # Let the automated player answer
            if game.is_in_progress and game.current_player == self.automated_player:
                game.apply_automated_move(self.automated_player, self.rng)
                after_move = self._store(request.game_id, game)

        logger.info(
            "Game %s: human played (%d, %d), status %s",
            request.game_id,
            request.row,
            request.col,
            after_move.status,
        )
        return self._create_game_response(request.game_id, after_move)

    def make_automated_move(self, request: AutomatedMoveRequest) -> GameResponse:
        """Let the automated player make its move."""
        with self.locks.hold(request.game_id):
            stored_model = self._fetch_game(request.game_id)
            game = Game.from_model(stored_model)
            game.apply_automated_move(self.automated_player, self.rng)
            after_move = self._store(request.game_id, game)

        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self.locks.hold(request.game_id):
            deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise GameNotFoundError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            board=model.board,
            current_player=model.current_player,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model

    def _store(self, game_id: UUID, game: Game) -> GameModel:
        """Capture updated state in GameModel and store in repository."""
        updated = self.repo.update_game(game_id, game.to_model())
        if updated is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return updated
