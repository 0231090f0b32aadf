"""Engine and game settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RulesSettings:
    """All user-configurable rule and game-layer settings."""

    # Rules
    # Also require the square passed over by a two-square pawn advance to be
    # empty. Off by default: only the destination is checked.
    strict_pawn_double_step: bool = False

    # Persistence
    autosave: bool = True
    game_title: str = "Saved Game"
    white_player_id: int = 1
    black_player_id: int = 2


DEFAULT_SETTINGS = RulesSettings()
