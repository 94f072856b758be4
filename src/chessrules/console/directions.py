"""Direction codes typed at the console, mapped to board displacements.

Rows grow downward (row 0 is Black's back rank), so "up" is toward row 0
regardless of which side is moving.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastleSide
from chessrules.core.types import Delta


@dataclass(frozen=True, slots=True)
class Direction:
    """A named movement direction.

    Sliding directions are multiplied by the step count; knight hops and
    castling ignore it.
    """

    name: str
    delta: Delta | None = None
    takes_steps: bool = True
    castle: CastleSide | None = None

    def displacement(self, steps: int = 1) -> Delta:
        if self.delta is None:
            raise ValueError(f"Direction {self.name!r} has no displacement")
        return self.delta.scaled(steps) if self.takes_steps else self.delta


_DIRECTIONS: tuple[Direction, ...] = (
    Direction("up", Delta(-1, 0)),
    Direction("down", Delta(1, 0)),
    Direction("left", Delta(0, -1)),
    Direction("right", Delta(0, 1)),
    Direction("slantleftup", Delta(-1, -1)),
    Direction("slantrightup", Delta(-1, 1)),
    Direction("slantleftdown", Delta(1, -1)),
    Direction("slantrightdown", Delta(1, 1)),
    # Knight hops
    Direction("upleft", Delta(-2, -1), takes_steps=False),
    Direction("upright", Delta(-2, 1), takes_steps=False),
    Direction("leftup", Delta(-1, -2), takes_steps=False),
    Direction("leftdown", Delta(1, -2), takes_steps=False),
    Direction("rightup", Delta(-1, 2), takes_steps=False),
    Direction("rightdown", Delta(1, 2), takes_steps=False),
    Direction("downleft", Delta(2, -1), takes_steps=False),
    Direction("downright", Delta(2, 1), takes_steps=False),
    # Castling
    Direction("castle-left", takes_steps=False, castle=CastleSide.QUEENSIDE),
    Direction("castle-right", takes_steps=False, castle=CastleSide.KINGSIDE),
)

SHORT_CODES: dict[str, str] = {
    "U": "up",
    "D": "down",
    "L": "left",
    "R": "right",
    "SLU": "slantleftup",
    "SLD": "slantleftdown",
    "SRU": "slantrightup",
    "SRD": "slantrightdown",
    "UL": "upleft",
    "UR": "upright",
    "LU": "leftup",
    "LD": "leftdown",
    "RU": "rightup",
    "RD": "rightdown",
    "DL": "downleft",
    "DR": "downright",
    "CL": "castle-left",
    "CR": "castle-right",
}

_BY_NAME: dict[str, Direction] = {d.name: d for d in _DIRECTIONS}


def parse_direction(code: str) -> Direction:
    """Resolve a short code (``SLU``) or full name (``slantleftup``)."""
    text = code.strip()
    name = SHORT_CODES.get(text.upper(), text.lower())
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown direction: {code!r}") from None


HELP_TEXT = (
    "For Pawns: U, SLU, SRU (White) / D, SLD, SRD (Black)\n"
    "For Knights: UL, UR, LU, LD, RU, RD, DL, DR\n"
    "For others: U, D, L, R, SLU, SLD, SRU, SRD\n"
    "For King: CL, CR (in addition to above)"
)
