"""Piece catalog: per-kind move shapes and reachable-square enumeration.

Each :class:`PieceType` maps to two pure functions in a closed dispatch
table. Neither function looks at check; that is the detector's job.

* ``shape``: is the geometry origin → destination valid for this piece,
  ignoring anything standing in between?
* ``moves``: every destination reachable from origin, where same-color
  pieces block, opposing pieces can be captured, and sliders stop at the
  first occupied square.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

ShapeRule = Callable[["Piece", Square, Square, "Board"], bool]
MoveRule = Callable[["Piece", Square, "Board"], list[Square]]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move: White moves toward row 0."""
    return -1 if color == Color.WHITE else 1


# -- Shape rules -------------------------------------------------------------


def _pawn_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    (fr, fc), (tr, tc) = origin, destination
    step = pawn_direction(piece.color)

    if fc == tc:
        if tr == fr + step:
            return board.is_empty(destination)
        if tr == fr + 2 * step and not piece.has_moved:
            return board.is_empty((fr + step, fc)) and board.is_empty(destination)
        return False

    if abs(fc - tc) == 1 and tr == fr + step:
        target = board[destination]
        return target is not None and target.color != piece.color
    return False


def _knight_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    dr = abs(origin[0] - destination[0])
    dc = abs(origin[1] - destination[1])
    return (dr, dc) in ((2, 1), (1, 2))


def _bishop_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    dr = abs(origin[0] - destination[0])
    dc = abs(origin[1] - destination[1])
    return dr == dc and dr > 0


def _rook_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    same_row = origin[0] == destination[0]
    same_col = origin[1] == destination[1]
    return same_row != same_col


def _queen_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    return _rook_shape(piece, origin, destination, board) or _bishop_shape(
        piece, origin, destination, board
    )


def _king_shape(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    dr = abs(origin[0] - destination[0])
    dc = abs(origin[1] - destination[1])
    return max(dr, dc) == 1


# -- Move enumeration --------------------------------------------------------


def _pawn_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    moves: list[Square] = []
    row, col = origin
    step = pawn_direction(piece.color)

    one_step = (row + step, col)
    if is_valid_square(one_step) and board.is_empty(one_step):
        moves.append(one_step)
        two_step = (row + 2 * step, col)
        if not piece.has_moved and is_valid_square(two_step) and board.is_empty(two_step):
            moves.append(two_step)

    for dc in (-1, 1):
        cap_sq = (row + step, col + dc)
        if not is_valid_square(cap_sq):
            continue
        target = board[cap_sq]
        if target is not None and target.color != piece.color:
            moves.append(cap_sq)
    return moves


def _step_moves(
    piece: Piece, origin: Square, board: Board, offsets: tuple[tuple[int, int], ...]
) -> list[Square]:
    moves: list[Square] = []
    row, col = origin
    for dr, dc in offsets:
        to_sq = (row + dr, col + dc)
        if not is_valid_square(to_sq):
            continue
        target = board[to_sq]
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves


def _sliding_moves(
    piece: Piece, origin: Square, board: Board, directions: tuple[tuple[int, int], ...]
) -> list[Square]:
    moves: list[Square] = []
    for dr, dc in directions:
        to_sq = (origin[0] + dr, origin[1] + dc)
        while is_valid_square(to_sq):
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                to_sq = (to_sq[0] + dr, to_sq[1] + dc)
                continue
            if target.color != piece.color:
                moves.append(to_sq)
            break
    return moves


def _knight_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    return _step_moves(piece, origin, board, KNIGHT_OFFSETS)


def _king_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    return _step_moves(piece, origin, board, KING_OFFSETS)


def _bishop_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    return _sliding_moves(piece, origin, board, BISHOP_DIRS)


def _rook_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    return _sliding_moves(piece, origin, board, ROOK_DIRS)


def _queen_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    return _sliding_moves(piece, origin, board, QUEEN_DIRS)


# -- Dispatch tables ---------------------------------------------------------

_SHAPE_RULES: dict[PieceType, ShapeRule] = {
    PieceType.PAWN: _pawn_shape,
    PieceType.KNIGHT: _knight_shape,
    PieceType.BISHOP: _bishop_shape,
    PieceType.ROOK: _rook_shape,
    PieceType.QUEEN: _queen_shape,
    PieceType.KING: _king_shape,
}

_MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}

# Knights jump; every other kind needs a clear line.
JUMPING_KINDS: frozenset[PieceType] = frozenset({PieceType.KNIGHT})


def shape_is_valid(piece: Piece, origin: Square, destination: Square, board: Board) -> bool:
    """Whether *piece* may travel origin → destination, ignoring obstruction."""
    return _SHAPE_RULES[piece.piece_type](piece, origin, destination, board)


def possible_moves(piece: Piece, origin: Square, board: Board) -> list[Square]:
    """All squares *piece* on *origin* can reach, ignoring check."""
    return _MOVE_RULES[piece.piece_type](piece, origin, board)
