"""GameController — drives a game and autosaves it after every move.

Coordinates: GameState, the rules core and an optional IGameStore.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from royalchess.config import RulesSettings
from royalchess.core.enums import GameStatus, MoveRejection
from royalchess.core.move import MoveRecord
from royalchess.core.transition import MoveResult
from royalchess.game.interfaces import GameId, IGameStore
from royalchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[MoveRejection], None]
StatusCallback = Callable[[GameStatus], None]
SavedCallback = Callable[[GameId], None]
SaveFailedCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_saved: list[SavedCallback] = field(default_factory=list)
    on_save_failed: list[SaveFailedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves, reclassifies the position, notifies
    listeners and autosaves the game.

    Storage failures never stop the game: they are logged and reported
    through ``events.on_save_failed``.
    """

    __slots__ = ("_state", "_store", "_settings", "_game_id", "events")

    def __init__(
        self,
        store: IGameStore | None = None,
        settings: RulesSettings | None = None,
    ) -> None:
        self._settings = settings or RulesSettings()
        self._state = GameState(self._settings)
        self._store = store
        self._game_id: GameId | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def game_id(self) -> GameId | None:
        """Id of the stored record, once the first autosave succeeded."""
        return self._game_id

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._state.setup()
        self._game_id = None
        self._emit_status(self._state.status)

    def submit_move(
        self, from_sq: tuple[int, int], to_sq: tuple[int, int]
    ) -> MoveResult:
        """Play a move for the side to move. Returns the core's result."""
        mover = self._state.side_to_move
        previous_status = self._state.status
        result = self._state.apply_move(from_sq, to_sq)

        if not result.accepted:
            _LOGGER.debug(
                "Rejected %s move %s -> %s: %s", mover, from_sq, to_sq, result.reason
            )
            if result.reason is not None:
                self._emit_rejected(result.reason)
            return result

        record = self._state.move_history[-1]
        _LOGGER.debug("%s played %s -> %s", mover, record.from_sq, record.to_sq)
        self._emit_move(record)

        status = self._state.status
        if status != previous_status:
            self._emit_status(status)
        if status == GameStatus.CHECKMATE:
            _LOGGER.info("Checkmate, %s wins", mover)
        elif status == GameStatus.STALEMATE:
            _LOGGER.info("Stalemate after %d plies", self._state.ply_count)

        self._autosave()
        return result

    def undo_move(self) -> bool:
        previous_status = self._state.status
        if self._state.undo_last_move() is None:
            return False
        if self._state.status != previous_status:
            self._emit_status(self._state.status)
        self._autosave()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _autosave(self) -> None:
        if self._store is None or not self._settings.autosave:
            return

        snapshot = self._state.to_snapshot()
        snapshot["title"] = self._settings.game_title
        snapshot["createdAt"] = datetime.now(timezone.utc).isoformat()
        snapshot["players"] = {
            "whitePlayerId": self._settings.white_player_id,
            "blackPlayerId": self._settings.black_player_id,
        }
        try:
            self._game_id = self._store.save(snapshot, self._game_id)
        except Exception as exc:
            _LOGGER.warning("Autosave failed: %s", exc)
            for cb in self.events.on_save_failed:
                cb(str(exc))
            return

        for cb in self.events.on_saved:
            cb(self._game_id)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_rejected(self, reason: MoveRejection) -> None:
        for cb in self.events.on_rejected:
            cb(reason)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)
