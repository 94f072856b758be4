"""GameController — the stateful orchestrator of a single game.

Owns one :class:`GameState` and drives it through
:mod:`chessrules.game.engine`. Emits events via simple callbacks so the
console adapter / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.config import RulesConfig
from chessrules.core.enums import CastleSide, Color, GameResult, RejectionReason
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Delta, Square
from chessrules.game import engine
from chessrules.game.interfaces import (
    GamePhase,
    IGameController,
    MoveOutcome,
    PieceView,
)
from chessrules.game.state import GameState, MoveRecord

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[RejectionReason], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates moves, switches turns, notifies listeners.

    Thread-safety: not reentrant. Legality checks relocate pieces on the
    live board and restore them, so calls on one instance must be
    serialized (one move in flight at a time).
    """

    __slots__ = ("_state", "_config", "events")

    def __init__(self, config: RulesConfig | None = None) -> None:
        self._config = config or RulesConfig()
        self._state = engine.new_game(self._config)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self) -> None:
        self._state = engine.new_game(self._config)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def load(self, state: GameState) -> None:
        """Continue from an existing state (e.g. a custom test position)."""
        self._state = state
        self._emit_phase(state.phase)

    def submit_move(self, identity: str, destination: Square | Delta) -> MoveOutcome:
        outcome = engine.play_move(self._state, identity, destination)
        self._after(outcome)
        return outcome

    def castle(self, side: CastleSide) -> MoveOutcome:
        outcome = engine.play_castle(self._state, self._state.side_to_move, side)
        self._after(outcome)
        return outcome

    def snapshot(self) -> tuple[tuple[PieceView | None, ...], ...]:
        return engine.board_snapshot(self._state)

    def living_pieces(self, color: Color) -> list[str]:
        return engine.living_pieces(self._state, color)

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_destinations(self, identity: str) -> list[Square]:
        """Legal non-castling destinations for *identity* (empty if unknown)."""
        origin = self._state.board.square_of(identity)
        if origin is None:
            return []
        return MoveGenerator(self._state.board).legal_destinations(origin)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after(self, outcome: MoveOutcome) -> None:
        if not outcome.accepted:
            assert outcome.reason is not None
            for cb in self.events.on_rejected:
                cb(outcome.reason)
            return

        record = self._state.move_history[-1]
        for cb in self.events.on_move:
            cb(record, self._state)

        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            for cb in self.events.on_game_over:
                cb(self._state.result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
