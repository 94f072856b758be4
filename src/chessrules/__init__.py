"""chessrules — a two-player chess rules engine.

Value-style API::

    import chessrules
    from chessrules.core import parse_square

    state = chessrules.new_game()
    state, outcome = chessrules.apply_move(state, "WP5", parse_square("e4"))
"""

from chessrules.config import RulesConfig
from chessrules.core import (
    Board,
    CastleSide,
    CastlingRights,
    Color,
    Delta,
    PieceType,
    RejectionReason,
    Rules,
)
from chessrules.game import (
    GameController,
    GamePhase,
    GameState,
    MoveOutcome,
    OutcomeKind,
    PieceView,
    apply_move,
    board_snapshot,
    castle,
    living_pieces,
    new_game,
)

__all__ = [
    "Board",
    "CastleSide",
    "CastlingRights",
    "Color",
    "Delta",
    "GameController",
    "GamePhase",
    "GameState",
    "MoveOutcome",
    "OutcomeKind",
    "PieceType",
    "PieceView",
    "RejectionReason",
    "Rules",
    "RulesConfig",
    "apply_move",
    "board_snapshot",
    "castle",
    "living_pieces",
    "new_game",
]
