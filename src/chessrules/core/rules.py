"""High-level chess rules: check, checkmate, stalemate, move-limit draw."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

# 100 half-moves without a capture = 50 full moves.
DEFAULT_MOVE_LIMIT = 100


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Draw policy: only the no-capture move limit. No repetition or
    # insufficient-material draws.

    @staticmethod
    def is_in_check(color: Color, board: Board) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def would_be_in_check(
        origin: Square, destination: Square, color: Color, board: Board
    ) -> bool:
        return MoveGenerator(board).would_be_in_check(origin, destination, color)

    @staticmethod
    def is_checkmate(color: Color, board: Board) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(color: Color, board: Board) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_move_limit_draw(
        moves_since_capture: int, limit: int = DEFAULT_MOVE_LIMIT
    ) -> bool:
        return moves_since_capture >= limit
