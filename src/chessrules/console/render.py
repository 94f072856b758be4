"""Plain-text rendering of board snapshots."""

from __future__ import annotations

from collections.abc import Sequence

from chessrules.core.enums import Color
from chessrules.game.interfaces import PieceView

_RULE = "  +" + "-----+" * 8
_FILES = "     " + "     ".join("abcdefgh")


def render_board(snapshot: Sequence[Sequence[PieceView | None]]) -> str:
    """Boxed grid showing piece identities, rank 8 at the top."""
    lines = [_RULE]
    for row_idx, row in enumerate(snapshot):
        cells = "".join(
            f"{view.identity:>4} |" if view is not None else "     |" for view in row
        )
        lines.append(f"{8 - row_idx} |{cells}")
        lines.append(_RULE)
    lines.append(_FILES)
    return "\n".join(lines)


def render_living(color: Color, identities: Sequence[str]) -> str:
    owner = "White's" if color == Color.WHITE else "Black's"
    return f"*** {owner} alive pieces: ***\n{', '.join(identities)}"
