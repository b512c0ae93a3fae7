"""Unit tests for src/api/models.py"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import GameHistoryRequest, MoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - MoveRequest --
def test_valid_move(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, row=2, col=0)
    assert request.row == 2
    assert request.col == 0


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 1), (1, -1)])
def test_position_out_of_range(mock_id: UUID, row: int, col: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, row=row, col=col)


# -- Validation - GameHistoryRequest --
def test_history_defaults() -> None:
    request = GameHistoryRequest()
    assert request.limit == 10
    assert request.status is None


def test_history_missing_limit_uses_default() -> None:
    request = GameHistoryRequest(limit=None, status=None)
    assert request.limit == 10


def test_history_with_status() -> None:
    request = GameHistoryRequest(limit=50, status="O_WON")
    assert request.limit == 50
    assert request.status == Status.O_WON


@pytest.mark.parametrize("limit", [0, 51, -3])
def test_history_invalid_limit(limit: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = GameHistoryRequest(limit=limit)


@pytest.mark.parametrize("status", ["INVALID_STATUS", "x_won", "FINISHED"])
def test_history_invalid_status(status: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = GameHistoryRequest(status=status)


@pytest.mark.parametrize("value", [True, "1", 1.0])
def test_position_must_be_an_integer(mock_id: UUID, value: object) -> None:
    with pytest.raises(ValidationError):
        _ = MoveRequest(game_id=mock_id, row=value, col=0)
