"""Interactive console game: piece code, direction code, step count."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessrules.console.directions import HELP_TEXT, Direction, parse_direction
from chessrules.console.render import render_board, render_living
from chessrules.core.enums import CastleSide, Color, PieceType
from chessrules.core.types import Delta
from chessrules.game.controller import GameController
from chessrules.game.interfaces import MoveOutcome, OutcomeKind

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT_COMMAND = "quit"


class ConsoleSession:
    """Reads moves from *input_fn*, writes the game to *output_fn*.

    The session ends on a terminal outcome, on ``quit``, or when input is
    exhausted (``EOFError``).
    """

    __slots__ = ("_ctrl", "_input", "_output")

    def __init__(
        self,
        controller: GameController | None = None,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ) -> None:
        self._ctrl = controller or GameController()
        self._input = input_fn or input
        self._output = output_fn or print

    @property
    def controller(self) -> GameController:
        return self._ctrl

    def run(self) -> MoveOutcome | None:
        """Play until the game ends; return the last accepted outcome."""
        last: MoveOutcome | None = None
        self._output(render_board(self._ctrl.snapshot()))
        while True:
            try:
                outcome = self.play_turn()
            except EOFError:
                _LOGGER.info("Input closed, ending session")
                return last
            if outcome is None:
                self._output("*** Game ended by user. ***")
                return last
            if outcome.accepted:
                last = outcome
            self._output(render_board(self._ctrl.snapshot()))
            if outcome.is_terminal:
                self._output("*** Game Over! ***")
                return last

    def play_turn(self) -> MoveOutcome | None:
        """Prompt for and submit one move. Returns None when the user quits."""
        color = self._ctrl.side_to_move
        owner = "White's" if color == Color.WHITE else "Black's"
        self._output(f"*** {owner} turn ***")
        self._output(render_living(color, self._ctrl.living_pieces(color)))
        self._output(HELP_TEXT)

        code = self._input(f"Enter piece code (or '{QUIT_COMMAND}' to exit): ").strip()
        if code.lower() == QUIT_COMMAND:
            return None

        direction = self._read_direction()
        if direction.castle is not None:
            outcome = self._castle(code, color, direction.castle)
        else:
            steps = self._read_steps() if direction.takes_steps else 1
            outcome = self._ctrl.submit_move(code, direction.displacement(steps))

        self._report(outcome, color)
        return outcome

    # ── Internal helpers ─────────────────────────────────────────────────

    def _castle(self, code: str, color: Color, side: CastleSide) -> MoveOutcome:
        piece = self._ctrl.state.board.piece_by_identity(code)
        if piece is None or piece.color != color or piece.piece_type != PieceType.KING:
            # Only the king castles; other codes go through as a zero displacement.
            return self._ctrl.submit_move(code, Delta(0, 0))
        return self._ctrl.castle(side)

    def _read_direction(self) -> Direction:
        while True:
            try:
                return parse_direction(self._input("Enter direction (short form): "))
            except ValueError as exc:
                self._output(f"*** ERROR: {exc} ***")

    def _read_steps(self) -> int:
        while True:
            raw = self._input("Enter number of steps: ")
            try:
                return int(raw)
            except ValueError:
                self._output("*** ERROR: Please enter a valid number! ***")

    def _report(self, outcome: MoveOutcome, mover: Color) -> None:
        if outcome.kind == OutcomeKind.REJECTED:
            assert outcome.reason is not None
            self._output(f"*** ERROR: {outcome.reason.message}! ***")
            return

        record = self._ctrl.state.move_history[-1]
        if record.captured is not None:
            self._output(f"*** SUCCESS: You captured {record.captured}! ***")

        winner = "White" if mover == Color.WHITE else "Black"
        moves = f"{self._ctrl.state.config.move_limit / 2:g}"
        messages = {
            OutcomeKind.CHECK: "*** CHECK! ***",
            OutcomeKind.CHECKMATE: f"*** CHECKMATE! {winner} wins! ***",
            OutcomeKind.STALEMATE: "*** STALEMATE! It's a draw! ***",
            OutcomeKind.DRAW_BY_MOVE_LIMIT: f"*** DRAW by {moves}-move rule! ***",
        }
        message = messages.get(outcome.kind)
        if message is not None:
            self._output(message)
