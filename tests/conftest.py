"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from royalchess.core.board import Board
from royalchess.core.enums import Color
from royalchess.core.transition import apply_move
from royalchess.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


def _play(board: Board, *moves: str) -> Board:
    """Apply 'e2e4'-style moves alternately, white first."""
    color = Color.WHITE
    for text in moves:
        result = apply_move(board, parse_square(text[:2]), parse_square(text[2:]), color)
        assert result.accepted, f"{text} rejected: {result.reason}"
        assert result.board is not None
        board = result.board
        color = color.opposite
    return board


@pytest.fixture
def play() -> Callable[..., Board]:
    """Helper that plays a move sequence and returns the resulting board."""
    return _play
