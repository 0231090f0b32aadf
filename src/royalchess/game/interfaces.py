"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on a concrete storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

GameId = int
Snapshot = dict[str, Any]


class GameStoreError(Exception):
    """Raised when a game snapshot cannot be saved or loaded."""


class IGameStore(ABC):
    """Interface for persisting game snapshots."""

    @abstractmethod
    def save(self, snapshot: Snapshot, game_id: GameId | None = None) -> GameId:
        """Create a record (``game_id is None``) or update an existing one.

        Returns the id of the stored record.
        """

    @abstractmethod
    def load(self, game_id: GameId) -> Snapshot:
        """Return the snapshot stored under *game_id*."""
