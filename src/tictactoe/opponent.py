"""
The built-in (automated) opponent.

Deliberately weak: take the center if it is free, otherwise any empty cell at random.
There is no lookahead, so it will neither block a win nor go for a forced one.
"""

import logging
import random
from typing import Optional

from src.core.exceptions import NoMovesAvailableError
from src.tictactoe.board import CENTER, Board, Cell

logger = logging.getLogger(__name__)

# Seeded from OS entropy once per process, so games in different processes do not play in lockstep.
_rng = random.Random()


def select_move(board: Board, rng: Optional[random.Random] = None) -> Cell:
    """
    Pick the cell for the automated player.
    ----

    1. Center (1, 1) if empty
    2. Otherwise a uniformly random empty cell
    """
    empty_cells = board.empty_cells()
    if not empty_cells:
        raise NoMovesAvailableError("No valid moves available: the board is full.")

    if CENTER in empty_cells:
        return CENTER

    chosen = (rng or _rng).choice(empty_cells)
    logger.debug("Center taken, picked %s out of %d empty cells", chosen, len(empty_cells))
    return chosen
