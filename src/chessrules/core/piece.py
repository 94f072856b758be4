"""Piece entity: kind, color, stable identity and the has-moved latch."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Layout character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_LAYOUT_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Identity codes: WP3, BN1, WQ, BKG ...
_IDENTITY_CODES: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "KG",
}

# Kinds that carry a number even when they are the only one of their kind.
_NUMBERED: frozenset[PieceType] = frozenset(
    {PieceType.PAWN, PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK}
)


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``identity`` never changes once assigned and is unique within a game.
    ``has_moved`` only ever goes from ``False`` to ``True``.
    """

    color: Color
    piece_type: PieceType
    identity: str
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (uppercase = white, lowercase = black)."""
        return _LAYOUT_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, identity: str) -> Piece:
        """Create piece from a layout character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, identity)

    @property
    def value(self) -> int:
        return self.piece_type.value_points

    def mark_moved(self) -> None:
        self.has_moved = True


class IdentityAllocator:
    """Hands out identities in the order pieces are placed.

    Pawns, knights, bishops and rooks are always numbered (``WR1``, ``WR2``).
    The first queen and king of a color get the bare code (``WQ``, ``WKG``);
    any extra queen is numbered from 2.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[tuple[Color, PieceType], int] = {}

    def next_identity(self, color: Color, piece_type: PieceType) -> str:
        key = (color, piece_type)
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        base = color.prefix + _IDENTITY_CODES[piece_type]
        if piece_type in _NUMBERED or count > 1:
            return f"{base}{count}"
        return base
