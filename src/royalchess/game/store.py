"""Game snapshot stores."""

from __future__ import annotations

import contextlib
import copy
import json
import logging
from pathlib import Path

from royalchess.game.interfaces import GameId, GameStoreError, IGameStore, Snapshot

_LOGGER = logging.getLogger(__name__)


class InMemoryGameStore(IGameStore):
    """Keeps snapshots in a dict; ids count up from 1."""

    __slots__ = ("_records", "_next_id")

    def __init__(self) -> None:
        self._records: dict[GameId, Snapshot] = {}
        self._next_id = 1

    def save(self, snapshot: Snapshot, game_id: GameId | None = None) -> GameId:
        if game_id is None:
            game_id = self._next_id
            self._next_id += 1
        elif game_id not in self._records:
            raise GameStoreError(f"Unknown game id: {game_id}")
        self._records[game_id] = {**copy.deepcopy(snapshot), "id": game_id}
        return game_id

    def load(self, game_id: GameId) -> Snapshot:
        try:
            return copy.deepcopy(self._records[game_id])
        except KeyError:
            raise GameStoreError(f"Unknown game id: {game_id}") from None

    def __len__(self) -> int:
        return len(self._records)


class JsonFileGameStore(IGameStore):
    """One ``game-<id>.json`` file per game inside *directory*."""

    __slots__ = ("_directory",)

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, game_id: GameId) -> Path:
        return self._directory / f"game-{game_id}.json"

    def save(self, snapshot: Snapshot, game_id: GameId | None = None) -> GameId:
        if game_id is None:
            game_id = self._next_id()
        elif not self.path_for(game_id).is_file():
            raise GameStoreError(f"Unknown game id: {game_id}")

        path = self.path_for(game_id)
        tmp_path = path.with_name(path.name + ".tmp")
        payload = {**snapshot, "id": game_id}
        try:
            text = json.dumps(payload, indent=2)
            self._directory.mkdir(parents=True, exist_ok=True)
            # Write beside the record, then swap it in whole.
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(path)
        except (OSError, TypeError) as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise GameStoreError(f"Failed to write {path}: {exc}") from exc
        _LOGGER.debug("Saved game %s to %s", game_id, path)
        return game_id

    def load(self, game_id: GameId) -> Snapshot:
        path = self.path_for(game_id)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise GameStoreError(f"Unknown game id: {game_id}") from None
        except (OSError, json.JSONDecodeError) as exc:
            raise GameStoreError(f"Failed to read {path}: {exc}") from exc

    def _next_id(self) -> GameId:
        ids = [0]
        if self._directory.is_dir():
            for path in self._directory.glob("game-*.json"):
                suffix = path.stem.removeprefix("game-")
                if suffix.isdigit():
                    ids.append(int(suffix))
        return max(ids) + 1
