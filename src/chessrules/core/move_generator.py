"""Legal move generation + attack detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.catalog import possible_moves
from chessrules.core.enums import Color
from chessrules.core.legality import is_pseudo_legal
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)


class MoveGenerator:
    """Generates legal destinations for pieces on a :class:`Board`.

    The generator relocates pieces via :meth:`Board.speculate` internally but
    always restores the board before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, origin: Square) -> list[Square]:
        """Legal destinations for the piece on *origin* (castling excluded)."""
        piece = self._board[origin]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in possible_moves(piece, origin, self._board)
            if not self.would_be_in_check(origin, to_sq, piece.color)
        ]

    def generate_legal_moves(self, color: Color) -> list[tuple[Square, Square]]:
        """All (origin, destination) pairs *color* may legally play."""
        legal: list[tuple[Square, Square]] = []
        for origin, _piece in self._board.pieces(color):
            legal.extend((origin, to_sq) for to_sq in self.legal_destinations(origin))
        return legal

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move; stops at the first."""
        board = self._board
        for origin, piece in board.pieces(color):
            for to_sq in possible_moves(piece, origin, board):
                if not self.would_be_in_check(origin, to_sq, color):
                    return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without that king is reported as not in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board; treating as not in check", color.name)
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Does any piece of *by_color* pseudo-legally target *sq*?"""
        board = self._board
        return any(
            is_pseudo_legal(origin, sq, board) for origin, _ in board.pieces(by_color)
        )

    def would_be_in_check(self, origin: Square, destination: Square, color: Color) -> bool:
        """Would *color* be in check after relocating origin → destination?"""
        with self._board.speculate(origin, destination):
            return self.is_in_check(color)
