"""Game state — board, turn, castling latches, counters and history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import CastleSide, CastlingRights, Color, GameResult
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.interfaces import GameEndReason, GamePhase, MoveOutcome


@dataclass(frozen=True)
class MoveRecord:
    """A single committed move."""

    identity: str
    origin: Square
    destination: Square
    outcome: MoveOutcome
    captured: str | None = None
    castle: CastleSide | None = None


@dataclass
class GameState:
    """Everything needed to continue a game.

    This is a pure data class with no threading or I/O. Transitions live in
    :mod:`chessrules.game.engine`.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.NONE
    moves_since_capture: int = 0
    phase: GamePhase = GamePhase.AWAITING_MOVE
    result: GameResult = GameResult.IN_PROGRESS
    end_reason: GameEndReason | None = None
    config: RulesConfig = field(default_factory=RulesConfig)
    move_history: list[MoveRecord] = field(default_factory=list)
    # Pieces captured *by* each color.
    captured: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []}
    )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def material_captured(self, color: Color) -> int:
        """Total capture value of the pieces *color* has taken."""
        return sum(p.value for p in self.captured[color])

    # ── Copying ──────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        """Independent copy; mutating it never affects this state."""
        return GameState(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            moves_since_capture=self.moves_since_capture,
            phase=self.phase,
            result=self.result,
            end_reason=self.end_reason,
            config=self.config,
            move_history=self.move_history.copy(),
            captured={color: pieces.copy() for color, pieces in self.captured.items()},
        )
