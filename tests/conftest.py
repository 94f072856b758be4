"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.game.controller import GameController
from chessrules.game.state import GameState

StateFactory = Callable[..., GameState]


@pytest.fixture
def start_board() -> Board:
    return Board.initial()


@pytest.fixture
def ctrl() -> GameController:
    return GameController()


@pytest.fixture
def make_state() -> StateFactory:
    """Build a GameState from an 8-row layout (rank 8 first)."""

    def _make(
        *rows: str,
        side: Color = Color.WHITE,
        moves_since_capture: int = 0,
        move_limit: int | None = None,
    ) -> GameState:
        config = RulesConfig() if move_limit is None else RulesConfig(move_limit)
        return GameState(
            board=Board.from_layout(rows),
            side_to_move=side,
            moves_since_capture=moves_since_capture,
            config=config,
        )

    return _make
