"""
Per-game locks.

Two move requests against the same game must not interleave: both could read the board before either stored its move,
both pass the "cell is empty" check, and the second write would silently undo the first.
"""

import threading
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID


class GameLocks:
    """
    Registry of one lock per game ID. Shared by all service instances in the process.

    An entry only lives while someone holds or waits for its lock, so finished (or abandoned) games leave nothing behind.
    """

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._locks: dict[UUID, threading.Lock] = {}
        # number of requests holding or waiting for each game's lock
        self._users: dict[UUID, int] = {}

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)

    @contextmanager
    def hold(self, game_id: UUID) -> Iterator[None]:
        """Exclusive access to one game for the duration of the block."""
        lock = self._checkout(game_id)
        try:
            with lock:
                yield
        finally:
            self._checkin(game_id)

    def _checkout(self, game_id: UUID) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.setdefault(game_id, threading.Lock())
            self._users[game_id] = self._users.get(game_id, 0) + 1
            return lock

    def _checkin(self, game_id: UUID) -> None:
        with self._registry_lock:
            self._users[game_id] -= 1
            if self._users[game_id] == 0:
                del self._users[game_id]
                del self._locks[game_id]


# Default registry for the running application
game_locks = GameLocks()
