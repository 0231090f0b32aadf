"""Game management layer — state, controller, snapshot stores.

Quick start::

    from royalchess.core import parse_square
    from royalchess.game import GameController, InMemoryGameStore

    ctrl = GameController(store=InMemoryGameStore())
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
    print(ctrl.state.status, ctrl.game_id)

The Qt signal bridge lives in :mod:`royalchess.game.qt_bridge` and is not
imported here, so the rest of the layer works without a Qt runtime.
"""

from royalchess.game.controller import GameController, GameEvents
from royalchess.game.interfaces import GameId, GameStoreError, IGameStore, Snapshot
from royalchess.game.state import GameState
from royalchess.game.store import InMemoryGameStore, JsonFileGameStore

__all__ = [
    # Interfaces
    "GameId",
    "GameStoreError",
    "IGameStore",
    "Snapshot",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "InMemoryGameStore",
    "JsonFileGameStore",
]
