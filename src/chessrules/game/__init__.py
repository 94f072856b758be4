"""Game management layer — controller, state, transitions.

Quick start::

    from chessrules.game import GameController
    from chessrules.core import parse_square

    ctrl = GameController()
    outcome = ctrl.submit_move("WP5", parse_square("e4"))
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.engine import (
    apply_move,
    board_snapshot,
    castle,
    living_pieces,
    new_game,
)
from chessrules.game.interfaces import (
    GameEndReason,
    GamePhase,
    IGameController,
    MoveOutcome,
    OutcomeKind,
    PieceView,
)
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameController",
    "MoveOutcome",
    "OutcomeKind",
    "PieceView",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    # Functional API
    "apply_move",
    "board_snapshot",
    "castle",
    "living_pieces",
    "new_game",
]
