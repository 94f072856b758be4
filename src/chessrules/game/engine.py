"""State transitions: moves, castling, end-of-turn evaluation.

``play_move`` / ``play_castle`` mutate a :class:`GameState` in place and are
what :class:`~chessrules.game.controller.GameController` uses. Every
rejection is decided before the board is touched, so a rejected request
leaves the state exactly as it was.

``apply_move`` / ``castle`` are the value-style API: they work on a copy and
return ``(new_state, outcome)``, never modifying their input.
"""

from __future__ import annotations

import logging

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    GameResult,
    PieceType,
    RejectionReason,
)
from chessrules.core.legality import check_pseudo_legal, path_is_clear
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    BOARD_SIZE,
    Delta,
    Square,
    is_valid_square,
    make_square,
    square_name,
)
from chessrules.game.interfaces import GameEndReason, GamePhase, MoveOutcome, PieceView
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

_KING_FILE = 4
_LEFT_ROOK_FILE = 0
_RIGHT_ROOK_FILE = 7

# side -> (rook file, rook destination file, king destination file)
_CASTLE_FILES: dict[CastleSide, tuple[int, int, int]] = {
    CastleSide.KINGSIDE: (_RIGHT_ROOK_FILE, 5, 6),
    CastleSide.QUEENSIDE: (_LEFT_ROOK_FILE, 3, 2),
}


def home_row(color: Color) -> int:
    """Back rank of *color*: row 7 for White, row 0 for Black."""
    return 7 if color == Color.WHITE else 0


# ── Value-style API ─────────────────────────────────────────────────────────


def new_game(config: RulesConfig | None = None) -> GameState:
    """Standard start, White to move, no latches set, counter at 0."""
    return GameState(board=Board.initial(), config=config or RulesConfig())


def apply_move(
    state: GameState, identity: str, destination: Square | Delta
) -> tuple[GameState, MoveOutcome]:
    """Move the piece named *identity*; *state* itself is left untouched."""
    next_state = state.copy()
    outcome = play_move(next_state, identity, destination)
    if not outcome.accepted:
        return state, outcome
    return next_state, outcome


def castle(
    state: GameState, color: Color, side: CastleSide
) -> tuple[GameState, MoveOutcome]:
    """Castle *color* toward *side*; *state* itself is left untouched."""
    next_state = state.copy()
    outcome = play_castle(next_state, color, side)
    if not outcome.accepted:
        return state, outcome
    return next_state, outcome


def board_snapshot(state: GameState) -> tuple[tuple[PieceView | None, ...], ...]:
    """8x8 grid (row 0 first) of piece views for rendering."""
    board = state.board
    return tuple(
        tuple(_view(board[(row, col)]) for col in range(BOARD_SIZE))
        for row in range(BOARD_SIZE)
    )


def living_pieces(state: GameState, color: Color) -> list[str]:
    """Identities of *color*'s pieces on the board, in scan order."""
    return [piece.identity for _, piece in state.board.pieces(color)]


# ── In-place transitions ────────────────────────────────────────────────────


def play_move(
    state: GameState, identity: str, destination: Square | Delta
) -> MoveOutcome:
    """Validate and commit a normal move on *state*."""
    if state.is_game_over:
        return _reject(RejectionReason.GAME_OVER, identity)

    board = state.board
    origin = board.square_of(identity)
    if origin is None:
        return _reject(RejectionReason.UNKNOWN_PIECE, identity)

    piece = board[origin]
    assert piece is not None
    mover = state.side_to_move
    if piece.color != mover:
        return _reject(RejectionReason.NOT_YOUR_TURN, identity)

    to_sq = destination.apply(origin) if isinstance(destination, Delta) else destination
    if not is_valid_square(to_sq):
        return _reject(RejectionReason.OUT_OF_BOUNDS, identity)

    reason = check_pseudo_legal(origin, to_sq, board)
    if reason is not None:
        return _reject(reason, identity)

    if Rules.would_be_in_check(origin, to_sq, mover, board):
        return _reject(RejectionReason.MOVES_INTO_CHECK, identity)

    # Commit
    captured = board.relocate(origin, to_sq)
    piece.mark_moved()
    if captured is not None:
        state.moves_since_capture = 0
        state.captured[mover].append(captured)
    else:
        state.moves_since_capture += 1

    if piece.piece_type == PieceType.KING:
        state.castling |= CastlingRights.king_moved(mover)
    elif piece.piece_type == PieceType.ROOK:
        if origin[1] == _LEFT_ROOK_FILE:
            state.castling |= CastlingRights.rook_moved(mover, CastleSide.QUEENSIDE)
        elif origin[1] == _RIGHT_ROOK_FILE:
            state.castling |= CastlingRights.rook_moved(mover, CastleSide.KINGSIDE)

    outcome = _finish_turn(state, mover)
    state.move_history.append(
        MoveRecord(
            identity=identity,
            origin=origin,
            destination=to_sq,
            outcome=outcome,
            captured=captured.identity if captured is not None else None,
        )
    )
    _LOGGER.debug(
        "%s %s -> %s: %s",
        identity,
        square_name(origin),
        square_name(to_sq),
        outcome,
    )
    return outcome


def play_castle(state: GameState, color: Color, side: CastleSide) -> MoveOutcome:
    """Validate and commit castling on *state*."""
    label = f"{color} castle {side.name.lower()}"
    if state.is_game_over:
        return _reject(RejectionReason.GAME_OVER, label)
    if color != state.side_to_move:
        return _reject(RejectionReason.NOT_YOUR_TURN, label)

    reason = castling_rejection(state, color, side)
    if reason is not None:
        return _reject(reason, label)

    board = state.board
    row = home_row(color)
    rook_file, rook_to_file, king_to_file = _CASTLE_FILES[side]
    king_from, king_to = make_square(row, _KING_FILE), make_square(row, king_to_file)
    rook_from, rook_to = make_square(row, rook_file), make_square(row, rook_to_file)

    king = board[king_from]
    rook = board[rook_from]
    assert king is not None and rook is not None
    board.relocate(rook_from, rook_to)
    board.relocate(king_from, king_to)
    king.mark_moved()
    rook.mark_moved()
    state.castling |= CastlingRights.king_moved(color) | CastlingRights.rook_moved(
        color, side
    )
    state.moves_since_capture += 1

    outcome = _finish_turn(state, color)
    state.move_history.append(
        MoveRecord(
            identity=king.identity,
            origin=king_from,
            destination=king_to,
            outcome=outcome,
            castle=side,
        )
    )
    _LOGGER.debug("%s: %s", label, outcome)
    return outcome


def castling_rejection(
    state: GameState, color: Color, side: CastleSide
) -> RejectionReason | None:
    """Why *color* may not castle toward *side* right now, or None if it may."""
    board = state.board
    row = home_row(color)
    rook_file, _, king_to_file = _CASTLE_FILES[side]
    king_from = make_square(row, _KING_FILE)
    rook_from = make_square(row, rook_file)

    latches = CastlingRights.king_moved(color) | CastlingRights.rook_moved(color, side)
    if state.castling & latches:
        return RejectionReason.CASTLING_RIGHT_LOST

    king = board[king_from]
    if (
        king is None
        or king.piece_type != PieceType.KING
        or king.color != color
        or king.has_moved
    ):
        return RejectionReason.CASTLING_RIGHT_LOST

    rook = board[rook_from]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != color
        or rook.has_moved
    ):
        return RejectionReason.CASTLING_RIGHT_LOST

    if not path_is_clear(king_from, rook_from, board):
        return RejectionReason.CASTLING_PATH_BLOCKED

    # The king may not start in, pass through, or land in check.
    step = 1 if king_to_file > _KING_FILE else -1
    for file in range(_KING_FILE, king_to_file + step, step):
        if Rules.would_be_in_check(king_from, make_square(row, file), color, board):
            return RejectionReason.CASTLING_PATH_ATTACKED

    return None


# ── Internal helpers ────────────────────────────────────────────────────────


def _finish_turn(state: GameState, mover: Color) -> MoveOutcome:
    """Evaluate the opponent after a commit and advance the state machine."""
    board = state.board
    opponent = mover.opposite
    outcome: MoveOutcome | None = None

    if Rules.is_in_check(opponent, board):
        if Rules.is_checkmate(opponent, board):
            _end_game(state, GamePhase.CHECKMATE, GameResult.win_for(mover))
            return MoveOutcome.checkmate(mover)
        outcome = MoveOutcome.check(opponent)
    elif Rules.is_stalemate(opponent, board):
        _end_game(state, GamePhase.STALEMATE, GameResult.DRAW)
        return MoveOutcome.stalemate()

    # Applies after a non-mating check too.
    if Rules.is_move_limit_draw(state.moves_since_capture, state.config.move_limit):
        _end_game(state, GamePhase.DRAW_BY_MOVE_LIMIT, GameResult.DRAW)
        return MoveOutcome.draw_by_move_limit()

    state.side_to_move = opponent
    if outcome is not None:
        state.phase = GamePhase.CHECK
        return outcome
    state.phase = GamePhase.AWAITING_MOVE
    return MoveOutcome.continued()


_END_REASONS: dict[GamePhase, GameEndReason] = {
    GamePhase.CHECKMATE: GameEndReason.CHECKMATE,
    GamePhase.STALEMATE: GameEndReason.STALEMATE,
    GamePhase.DRAW_BY_MOVE_LIMIT: GameEndReason.MOVE_LIMIT,
}


def _end_game(state: GameState, phase: GamePhase, result: GameResult) -> None:
    state.phase = phase
    state.result = result
    state.end_reason = _END_REASONS[phase]
    _LOGGER.info("Game over: %s (%s)", result.name, phase.name)


def _view(piece: Piece | None) -> PieceView | None:
    if piece is None:
        return None
    return PieceView(piece.piece_type, piece.color, piece.identity)


def _reject(reason: RejectionReason, subject: str) -> MoveOutcome:
    _LOGGER.debug("Rejected %s: %s", subject, reason.name)
    return MoveOutcome.rejected(reason)
