"""Square type alias and coordinate helpers.

Board layout (row, col), not mirrored per side:
    row 0 = rank 8 (Black's back rank) ... row 7 = rank 1 (White's back rank)
    col 0 = file a ... col 7 = file h

So ``(7, 4)`` is e1 and ``(0, 4)`` is e8.
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


class Delta(NamedTuple):
    """Relative displacement from a piece's current square."""

    d_row: int
    d_col: int

    def scaled(self, steps: int) -> Delta:
        return Delta(self.d_row * steps, self.d_col * steps)

    def apply(self, sq: Square) -> Square:
        return (sq[0] + self.d_row, sq[1] + self.d_col)


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return (row, col)


def is_valid_square(sq: Square) -> bool:
    """Check whether the coordinates lie on the board."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1', (0, 0) → 'a8'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_squares() -> list[Square]:
    """Every square in scan order: row 0 → 7, file a → h."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
