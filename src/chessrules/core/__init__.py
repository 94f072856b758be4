"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveGenerator, Rules

    board = Board.initial()
    gen = MoveGenerator(board)
    for origin, destination in gen.generate_legal_moves(Color.WHITE):
        print(origin, destination)
"""

from chessrules.core.board import Board
from chessrules.core.catalog import possible_moves, shape_is_valid
from chessrules.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    GameResult,
    PieceType,
    RejectionReason,
)
from chessrules.core.legality import (
    check_pseudo_legal,
    is_pseudo_legal,
    path_is_clear,
    squares_between,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import DEFAULT_MOVE_LIMIT, Rules
from chessrules.core.types import (
    Delta,
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    "RejectionReason",
    # Types / helpers
    "Delta",
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    "DEFAULT_MOVE_LIMIT",
    # Catalog / legality
    "check_pseudo_legal",
    "is_pseudo_legal",
    "path_is_clear",
    "possible_moves",
    "shape_is_valid",
    "squares_between",
]
