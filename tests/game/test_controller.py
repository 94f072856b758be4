"""Tests for GameController — the orchestrator."""

from chessrules.config import RulesConfig
from chessrules.core.enums import CastleSide, Color, GameResult, RejectionReason
from chessrules.core.types import A3, C3, C4, C6, D5, E4, E5, F6, F7, H5, Delta
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase, IGameController, OutcomeKind

SCHOLARS_MATE = [
    ("WP5", E4), ("BP5", E5),
    ("WB2", C4), ("BN1", C6),
    ("WQ", H5), ("BN2", F6),
    ("WQ", F7),
]


class TestNewGame:
    def test_is_a_controller(self, ctrl: GameController) -> None:
        assert isinstance(ctrl, IGameController)

    def test_phase_awaiting(self, ctrl: GameController) -> None:
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.side_to_move == Color.WHITE

    def test_new_game_resets(self, ctrl: GameController) -> None:
        ctrl.submit_move("WP5", E4)
        ctrl.new_game()
        assert ctrl.state.ply_count == 0
        assert ctrl.side_to_move == Color.WHITE

    def test_new_game_keeps_config(self) -> None:
        ctrl = GameController(RulesConfig(move_limit=6))
        ctrl.new_game()
        assert ctrl.state.config.move_limit == 6

    def test_load(self, ctrl: GameController, make_state) -> None:
        state = make_state("....k...", *["........"] * 6, "....K...", side=Color.BLACK)
        ctrl.load(state)
        assert ctrl.state is state
        assert ctrl.side_to_move == Color.BLACK


class TestMoves:
    def test_accepted_move_switches_turn(self, ctrl: GameController) -> None:
        outcome = ctrl.submit_move("WP5", E4)
        assert outcome.kind == OutcomeKind.CONTINUED
        assert ctrl.side_to_move == Color.BLACK

    def test_delta_move(self, ctrl: GameController) -> None:
        outcome = ctrl.submit_move("WP1", Delta(-1, 0).scaled(1))
        assert outcome.accepted
        assert ctrl.state.board.square_of("WP1") == A3

    def test_rejected_move_keeps_turn(self, ctrl: GameController) -> None:
        outcome = ctrl.submit_move("BP4", D5)
        assert outcome.reason == RejectionReason.NOT_YOUR_TURN
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 0

    def test_castle_uses_side_to_move(self, ctrl: GameController) -> None:
        outcome = ctrl.castle(CastleSide.KINGSIDE)
        assert outcome.reason == RejectionReason.CASTLING_PATH_BLOCKED

    def test_scholars_mate_ends_game(self, ctrl: GameController) -> None:
        for identity, dest in SCHOLARS_MATE:
            outcome = ctrl.submit_move(identity, dest)
        assert outcome.kind == OutcomeKind.CHECKMATE
        assert ctrl.phase == GamePhase.CHECKMATE
        assert ctrl.state.result == GameResult.WHITE_WINS
        assert ctrl.submit_move("BKG", (1, 4)).reason == RejectionReason.GAME_OVER


class TestEvents:
    def test_move_event(self, ctrl: GameController) -> None:
        records = []
        ctrl.events.on_move.append(lambda record, state: records.append(record))
        ctrl.submit_move("WN1", C3)
        assert [r.identity for r in records] == ["WN1"]

    def test_rejected_event(self, ctrl: GameController) -> None:
        reasons = []
        moves = []
        ctrl.events.on_rejected.append(reasons.append)
        ctrl.events.on_move.append(lambda record, state: moves.append(record))
        ctrl.submit_move("WZ9", E4)
        assert reasons == [RejectionReason.UNKNOWN_PIECE]
        assert moves == []

    def test_phase_and_game_over_events(self, ctrl: GameController) -> None:
        phases = []
        results = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_game_over.append(results.append)
        for identity, dest in SCHOLARS_MATE:
            ctrl.submit_move(identity, dest)
        assert phases[-1] == GamePhase.CHECKMATE
        assert phases.count(GamePhase.AWAITING_MOVE) == len(SCHOLARS_MATE) - 1
        assert results == [GameResult.WHITE_WINS]

    def test_new_game_emits_phase(self, ctrl: GameController) -> None:
        phases = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game()
        assert phases == [GamePhase.AWAITING_MOVE]


class TestQueries:
    def test_snapshot(self, ctrl: GameController) -> None:
        snap = ctrl.snapshot()
        assert snap[7][4].identity == "WKG"
        assert snap[0][4].identity == "BKG"

    def test_living_pieces(self, ctrl: GameController) -> None:
        assert len(ctrl.living_pieces(Color.BLACK)) == 16
        assert ctrl.living_pieces(Color.BLACK)[0] == "BR1"

    def test_legal_destinations(self, ctrl: GameController) -> None:
        assert sorted(ctrl.legal_destinations("WN1")) == sorted([A3, C3])
        assert ctrl.legal_destinations("WZ9") == []
        assert ctrl.legal_destinations("WQ") == []
