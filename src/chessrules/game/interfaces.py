"""Game-layer vocabulary: phases, outcomes, read-only views.

Also holds the abstract controller interface, so callers (the console
adapter, tests) depend on :class:`IGameController` rather than the concrete
class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import CastleSide, Color, PieceType, RejectionReason

if TYPE_CHECKING:
    from chessrules.core.types import Delta, Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game.

    AWAITING_MOVE and CHECK accept moves from ``side_to_move``; the other
    three are terminal.
    """

    AWAITING_MOVE = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW_BY_MOVE_LIMIT = auto()

    @property
    def is_terminal(self) -> bool:
        return self not in (GamePhase.AWAITING_MOVE, GamePhase.CHECK)


class GameEndReason(IntEnum):
    CHECKMATE = auto()
    STALEMATE = auto()
    MOVE_LIMIT = auto()


# ── Move outcomes ────────────────────────────────────────────────────────────


class OutcomeKind(IntEnum):
    REJECTED = auto()
    CONTINUED = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW_BY_MOVE_LIMIT = auto()


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move or castling request.

    ``color`` is the checked side for CHECK and the winner for CHECKMATE.
    ``reason`` is set only for REJECTED.
    """

    kind: OutcomeKind
    color: Color | None = None
    reason: RejectionReason | None = None

    @classmethod
    def rejected(cls, reason: RejectionReason) -> MoveOutcome:
        return cls(OutcomeKind.REJECTED, reason=reason)

    @classmethod
    def continued(cls) -> MoveOutcome:
        return cls(OutcomeKind.CONTINUED)

    @classmethod
    def check(cls, color: Color) -> MoveOutcome:
        return cls(OutcomeKind.CHECK, color=color)

    @classmethod
    def checkmate(cls, winner: Color) -> MoveOutcome:
        return cls(OutcomeKind.CHECKMATE, color=winner)

    @classmethod
    def stalemate(cls) -> MoveOutcome:
        return cls(OutcomeKind.STALEMATE)

    @classmethod
    def draw_by_move_limit(cls) -> MoveOutcome:
        return cls(OutcomeKind.DRAW_BY_MOVE_LIMIT)

    @property
    def accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.kind in (
            OutcomeKind.CHECKMATE,
            OutcomeKind.STALEMATE,
            OutcomeKind.DRAW_BY_MOVE_LIMIT,
        )

    def __str__(self) -> str:
        if self.kind == OutcomeKind.REJECTED:
            assert self.reason is not None
            return f"rejected: {self.reason.message}"
        if self.color is not None:
            return f"{self.kind.name.lower()} ({self.color})"
        return self.kind.name.lower()


@dataclass(frozen=True, slots=True)
class PieceView:
    """Read-only rendering view of a piece."""

    piece_type: PieceType
    color: Color
    identity: str


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self) -> None:
        """Set up a new game from the standard position."""

    @abstractmethod
    def submit_move(self, identity: str, destination: Square | Delta) -> MoveOutcome:
        """Move the piece named *identity*. Never raises for illegal moves."""

    @abstractmethod
    def castle(self, side: CastleSide) -> MoveOutcome:
        """Castle the side to move toward *side*."""

    @abstractmethod
    def snapshot(self) -> tuple[tuple[PieceView | None, ...], ...]:
        """8x8 grid view of the board for rendering."""

    @abstractmethod
    def living_pieces(self, color: Color) -> list[str]:
        """Identities of *color*'s pieces still on the board."""
