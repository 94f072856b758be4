"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def prefix(self) -> str:
        """Identity prefix, e.g. ``W`` for white pieces."""
        return "W" if self == Color.WHITE else "B"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def value_points(self) -> int:
        """Capture value (the king is never captured, so it is worth 0)."""
        return _PIECE_VALUES[self]


_PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 0  # right rook, file h
    QUEENSIDE = 1  # left rook, file a


class CastlingRights(IntFlag):
    """Latched "has moved" flags gating castling.

    A set bit means the piece has left its original square at least once.
    Bits are only ever OR-ed in, so the flags never revert.
    """

    NONE = 0
    WHITE_KING_MOVED = auto()
    WHITE_LEFT_ROOK_MOVED = auto()
    WHITE_RIGHT_ROOK_MOVED = auto()
    BLACK_KING_MOVED = auto()
    BLACK_LEFT_ROOK_MOVED = auto()
    BLACK_RIGHT_ROOK_MOVED = auto()

    WHITE_ALL = WHITE_KING_MOVED | WHITE_LEFT_ROOK_MOVED | WHITE_RIGHT_ROOK_MOVED
    BLACK_ALL = BLACK_KING_MOVED | BLACK_LEFT_ROOK_MOVED | BLACK_RIGHT_ROOK_MOVED

    @classmethod
    def king_moved(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KING_MOVED if color == Color.WHITE else cls.BLACK_KING_MOVED

    @classmethod
    def rook_moved(cls, color: Color, side: CastleSide) -> CastlingRights:
        if color == Color.WHITE:
            if side == CastleSide.KINGSIDE:
                return cls.WHITE_RIGHT_ROOK_MOVED
            return cls.WHITE_LEFT_ROOK_MOVED
        if side == CastleSide.KINGSIDE:
            return cls.BLACK_RIGHT_ROOK_MOVED
        return cls.BLACK_LEFT_ROOK_MOVED


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


class RejectionReason(IntEnum):
    """Why a move or castling request was refused.

    Rejections are ordinary results, not errors: the caller simply asks for
    a different move.
    """

    UNKNOWN_PIECE = auto()
    NOT_YOUR_TURN = auto()
    OUT_OF_BOUNDS = auto()
    SHAPE_INVALID = auto()
    PATH_BLOCKED = auto()
    DESTINATION_OCCUPIED_BY_SAME_COLOR = auto()
    CASTLING_RIGHT_LOST = auto()
    CASTLING_PATH_BLOCKED = auto()
    CASTLING_PATH_ATTACKED = auto()
    MOVES_INTO_CHECK = auto()
    GAME_OVER = auto()

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.UNKNOWN_PIECE: "Piece not found",
    RejectionReason.NOT_YOUR_TURN: "It's not your turn",
    RejectionReason.OUT_OF_BOUNDS: "Invalid move - out of bounds",
    RejectionReason.SHAPE_INVALID: "That piece cannot move that way",
    RejectionReason.PATH_BLOCKED: "Path blocked",
    RejectionReason.DESTINATION_OCCUPIED_BY_SAME_COLOR: (
        "Destination is occupied by your own piece"
    ),
    RejectionReason.CASTLING_RIGHT_LOST: "Cannot castle - king or rook has moved",
    RejectionReason.CASTLING_PATH_BLOCKED: "Cannot castle - pieces in the way",
    RejectionReason.CASTLING_PATH_ATTACKED: (
        "Cannot castle - king would start in, pass through or land in check"
    ),
    RejectionReason.MOVES_INTO_CHECK: "Move would leave king in check",
    RejectionReason.GAME_OVER: "The game is over",
}
