"""Board - piece placement on an 8x8 grid with an identity index."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import IdentityAllocator, Piece
from chessrules.core.types import BOARD_SIZE, Square, all_squares

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 board with incremental identity and king indexes."""

    __slots__ = ("_grid", "_positions", "_king_squares")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # identity -> square currently holding that piece.
        self._positions: dict[str, Square] = {}
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        old_piece = self._grid[row][col]
        if old_piece is piece:
            return

        if old_piece is not None:
            if self._positions.get(old_piece.identity) == sq:
                del self._positions[old_piece.identity]
            color_idx = int(old_piece.color)
            if (
                old_piece.piece_type == PieceType.KING
                and self._king_squares[color_idx] == sq
            ):
                self._king_squares[color_idx] = None

        self._grid[row][col] = piece

        if piece is None:
            return

        self._positions[piece.identity] = sq
        if piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def square_of(self, identity: str) -> Square | None:
        """Square of the piece with *identity*, or None if it is not on the board."""
        return self._positions.get(identity)

    def piece_by_identity(self, identity: str) -> Piece | None:
        sq = self._positions.get(identity)
        return None if sq is None else self[sq]

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """*color*'s pieces with their squares, in scan order (row 0 → 7)."""
        found: list[tuple[Square, Piece]] = []
        for row_idx, row in enumerate(self._grid):
            for col_idx, piece in enumerate(row):
                if piece is not None and piece.color == color:
                    found.append(((row_idx, col_idx), piece))
        return found

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or None when no king is on the board."""
        return self._king_squares[int(color)]

    # -- Mutation / copying -------------------------------------------------

    def relocate(self, origin: Square, destination: Square) -> Piece | None:
        """Move the piece on *origin* to *destination*; return the displaced piece."""
        piece = self[origin]
        if piece is None:
            raise ValueError(f"No piece on {origin}")
        captured = self[destination]
        self[destination] = None
        self[origin] = None
        self[destination] = piece
        return captured

    @contextmanager
    def speculate(self, origin: Square, destination: Square) -> Iterator[Piece | None]:
        """Temporarily relocate a piece; the board is restored on exit.

        Yields the displaced occupant (if any). Restoration happens in a
        ``finally`` block, so it also runs when the body raises.
        """
        piece = self[origin]
        if piece is None:
            raise ValueError(f"No piece on {origin}")
        if origin == destination:
            yield None
            return
        displaced = self.relocate(origin, destination)
        try:
            yield displaced
        finally:
            self[destination] = None
            self[origin] = piece
            self[destination] = displaced

    def copy(self) -> Board:
        """Deep copy: pieces are duplicated so latches do not leak between copies."""
        b = Board()
        for sq in all_squares():
            piece = self[sq]
            if piece is not None:
                b[sq] = replace(piece)
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._positions = {}
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on rows 0–1, White on rows 6–7."""
        layout = [
            "rnbqkbnr",
            "pppppppp",
            "........",
            "........",
            "........",
            "........",
            "PPPPPPPP",
            "RNBQKBNR",
        ]
        return cls.from_layout(layout)

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight strings of eight characters.

        Row 0 is the first string (rank 8). Uppercase letters are white,
        lowercase black, ``.`` is an empty square. Identities are assigned in
        scan order, so the standard layout yields ``WP1``…``WP8`` left to right
        and ``WR1`` on a1. Pawns off their home row are marked as moved.
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Layout must be 8 rows of 8 characters")

        b = cls()
        ids = IdentityAllocator()
        for row_idx, row in enumerate(rows):
            for col_idx, char in enumerate(row):
                if char == ".":
                    continue
                piece = Piece.from_char(char, "")
                if (
                    piece.piece_type == PieceType.KING
                    and b.king_square(piece.color) is not None
                ):
                    raise ValueError(f"Layout has more than one {piece.color.name} king")
                piece.identity = ids.next_identity(piece.color, piece.piece_type)
                home_row = 6 if piece.color == Color.WHITE else 1
                if piece.piece_type == PieceType.PAWN and row_idx != home_row:
                    piece.has_moved = True
                b[(row_idx, col_idx)] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
