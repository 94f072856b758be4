"""Pseudo-legality: shape, path obstruction and target occupancy.

Nothing here considers check. A pseudo-legal move may still leave the
mover's king attacked; :class:`~chessrules.core.rules.Rules` filters those.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.catalog import JUMPING_KINDS, shape_is_valid
from chessrules.core.enums import RejectionReason
from chessrules.core.types import Square, is_valid_square, sign

if TYPE_CHECKING:
    from chessrules.core.board import Board


def squares_between(origin: Square, destination: Square) -> list[Square]:
    """Squares strictly between two squares on a shared row, column or diagonal.

    Returns an empty list for adjacent squares and for pairs that are not
    aligned (a knight hop, for instance).
    """
    d_row = destination[0] - origin[0]
    d_col = destination[1] - origin[1]
    if d_row and d_col and abs(d_row) != abs(d_col):
        return []
    step_r, step_c = sign(d_row), sign(d_col)
    between: list[Square] = []
    sq = (origin[0] + step_r, origin[1] + step_c)
    while sq != destination and (step_r or step_c):
        between.append(sq)
        sq = (sq[0] + step_r, sq[1] + step_c)
    return between


def path_is_clear(origin: Square, destination: Square, board: Board) -> bool:
    """Every square strictly between origin and destination is empty."""
    return all(board.is_empty(sq) for sq in squares_between(origin, destination))


def check_pseudo_legal(
    origin: Square, destination: Square, board: Board
) -> RejectionReason | None:
    """Return why origin → destination is not pseudo-legal, or None if it is."""
    if not (is_valid_square(origin) and is_valid_square(destination)):
        return RejectionReason.OUT_OF_BOUNDS

    piece = board[origin]
    if piece is None:
        return RejectionReason.UNKNOWN_PIECE

    if origin == destination:
        return RejectionReason.SHAPE_INVALID

    target = board[destination]
    if target is not None and target.color == piece.color:
        return RejectionReason.DESTINATION_OCCUPIED_BY_SAME_COLOR

    if not shape_is_valid(piece, origin, destination, board):
        return RejectionReason.SHAPE_INVALID

    if piece.piece_type not in JUMPING_KINDS and not path_is_clear(
        origin, destination, board
    ):
        return RejectionReason.PATH_BLOCKED

    return None


def is_pseudo_legal(origin: Square, destination: Square, board: Board) -> bool:
    return check_pseudo_legal(origin, destination, board) is None
