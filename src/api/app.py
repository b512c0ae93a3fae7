"""
FastAPI application: routing, error translation, CORS.

Endpoints:
    GET    /                    Welcome page
    GET    /game                All games, most recent first
    GET    /game/history        Most recent games (?limit=1..50, ?status=IN_PROGRESS|X_WON|O_WON|DRAW)
    POST   /game                Create a new game
    GET    /game/{id}           Get a game
    POST   /game/{id}/move      Human move, answered by the automated player if the game goes on
    POST   /game/{id}/automated-move  Let the automated player move (when it is its turn)
    DELETE /game/{id}           Delete a game
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import Session

from src.api.models import (
    AutomatedMoveRequest,
    DeleteGameRequest,
    GameHistoryRequest,
    GameResponse,
    GetGameRequest,
    MoveBody,
    MoveRequest,
)
from src.core import config
from src.core.exceptions import (
    GameError,
    GameNotFoundError,
    InvalidRequestError,
    MoveError,
)
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.tictactoe_service import TicTacToeService

logger = logging.getLogger(__name__)

WELCOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Tic Tac Toe API</title>
  <style>
    body { font-family: Arial, sans-serif; background-color: #f0f0f0; color: #333; text-align: center; padding: 50px; }
    h1 { color: #4a90e2; }
    p { font-size: 18px; }
  </style>
</head>
<body>
  <h1>Welcome to the Tic Tac Toe API</h1>
  <p>This API allows you to manage and play games of tic-tac-toe against the computer.</p>
  <p>See <a href="/api">/api</a> for the documentation.</p>
</body>
</html>
"""


def get_service(db: Session = Depends(get_db)) -> TicTacToeService:
    """One service (and repository) per request, all sharing the process-wide game locks."""
    return TicTacToeService(SQLGameRepository(db))


def parse_game_id(game_id: str) -> UUID:
    try:
        return UUID(game_id)
    except ValueError:
        raise InvalidRequestError(f"Invalid game ID format: {game_id!r}") from None


def error_status_code(error: GameError) -> int:
    """Which HTTP status a (domain) error maps to."""
    if isinstance(error, GameNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, (MoveError, InvalidRequestError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tic Tac Toe API",
        description="Play tic-tac-toe against a (not very clever) automated opponent.",
        version="1.0.0",
        docs_url="/api",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, error: GameError) -> JSONResponse:
        status_code = error_status_code(error)
        kind = error.kind.value if isinstance(error, MoveError) else type(error).__name__
        logger.warning(
            "%s %s failed with %s: %s", request.method, request.url.path, kind, error
        )
        return JSONResponse(
            status_code=status_code, content={"detail": str(error), "error": kind}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, error: RequestValidationError
    ) -> JSONResponse:
        """Malformed body or query values are reported like any other invalid request."""
        message = "; ".join(
            f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
            for detail in error.errors()
        )
        logger.warning(
            "%s %s failed with InvalidRequestError: %s",
            request.method,
            request.url.path,
            message,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": message, "error": InvalidRequestError.__name__},
        )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def welcome() -> str:
        return WELCOME_PAGE

    @app.get("/game", response_model=list[GameResponse], tags=["game"])
    def get_all_games(
        service: TicTacToeService = Depends(get_service),
    ) -> list[GameResponse]:
        return service.list_games()

    @app.get("/game/history", response_model=list[GameResponse], tags=["game"])
    def get_game_history(
        limit: Optional[int] = Query(default=None),
        game_status: Optional[str] = Query(default=None, alias="status"),
        service: TicTacToeService = Depends(get_service),
    ) -> list[GameResponse]:
        request = GameHistoryRequest(limit=limit, status=game_status)
        return service.game_history(request)

    @app.post(
        "/game",
        response_model=GameResponse,
        status_code=status.HTTP_201_CREATED,
        tags=["game"],
    )
    def create_game(service: TicTacToeService = Depends(get_service)) -> GameResponse:
        return service.create_new_game()

    @app.get("/game/{game_id}", response_model=GameResponse, tags=["game"])
    def get_game(
        game_id: str, service: TicTacToeService = Depends(get_service)
    ) -> GameResponse:
        return service.get_game(GetGameRequest(game_id=parse_game_id(game_id)))

    @app.post("/game/{game_id}/move", response_model=GameResponse, tags=["game"])
    def make_move(
        game_id: str,
        body: MoveBody,
        service: TicTacToeService = Depends(get_service),
    ) -> GameResponse:
        request = MoveRequest(game_id=parse_game_id(game_id), row=body.row, col=body.col)
        return service.make_move(request)

    @app.post(
        "/game/{game_id}/automated-move", response_model=GameResponse, tags=["game"]
    )
    def make_automated_move(
        game_id: str, service: TicTacToeService = Depends(get_service)
    ) -> GameResponse:
        request = AutomatedMoveRequest(game_id=parse_game_id(game_id))
        return service.make_automated_move(request)

    @app.delete(
        "/game/{game_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["game"]
    )
    def delete_game(
        game_id: str, service: TicTacToeService = Depends(get_service)
    ) -> None:
        service.delete_game(DeleteGameRequest(game_id=parse_game_id(game_id)))

    return app
