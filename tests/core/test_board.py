"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2, E2, H2,
    A7,
    A8, E8, H8,
    D5, E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        king = board[E1]
        assert king is not None
        assert (king.color, king.piece_type, king.identity) == (
            Color.WHITE, PieceType.KING, "WKG",
        )

    def test_black_king_position(self) -> None:
        board = Board.initial()
        king = board[E8]
        assert king is not None
        assert (king.color, king.piece_type, king.identity) == (
            Color.BLACK, PieceType.KING, "BKG",
        )

    def test_white_back_rank_identities(self) -> None:
        board = Board.initial()
        expected = [
            (A1, "WR1"), (B1, "WN1"), (C1, "WB1"), (D1, "WQ"),
            (E1, "WKG"), (F1, "WB2"), (G1, "WN2"), (H1, "WR2"),
        ]
        for sq, identity in expected:
            piece = board[sq]
            assert piece is not None and piece.identity == identity, f"Mismatch at {sq}"

    def test_pawns_numbered_left_to_right(self) -> None:
        board = Board.initial()
        assert board[A2].identity == "WP1"
        assert board[H2].identity == "WP8"
        assert board[A7].identity == "BP1"

    def test_black_rooks(self) -> None:
        board = Board.initial()
        assert board[A8].identity == "BR1"
        assert board[H8].identity == "BR2"

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        for color in Color:
            assert not any(p.has_moved for _, p in board.pieces(color))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN, "WP1")
        board[E4] = piece
        assert board[E4] is piece
        assert board.is_empty(E2)
        assert board.square_of("WP1") == E4

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] is not None and board[E1].identity == "WKG"

    def test_copy_duplicates_pieces(self) -> None:
        board = Board.initial()
        copy = board.copy()
        copy[E2].mark_moved()
        assert not board[E2].has_moved

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_is_none(self) -> None:
        board = Board()
        assert board.king_square(Color.WHITE) is None

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(board[(r, c)] is None for r in range(8) for c in range(8))
        assert board.square_of("WKG") is None

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestRelocate:
    def test_relocate_updates_index(self) -> None:
        board = Board.initial()
        captured = board.relocate(E2, E4)
        assert captured is None
        assert board.square_of("WP5") == E4
        assert board.is_empty(E2)

    def test_relocate_returns_captured_and_drops_it(self) -> None:
        board = Board.initial()
        board.relocate(E2, E4)
        board.relocate(board.square_of("BP4"), D5)
        captured = board.relocate(E4, D5)
        assert captured is not None and captured.identity == "BP4"
        assert board.square_of("BP4") is None
        assert board.piece_by_identity("WP5") is board[D5]

    def test_relocate_empty_origin_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No piece"):
            board.relocate(E4, E2)

    def test_king_cache_follows_king(self) -> None:
        board = Board.initial()
        board[E2] = None
        board.relocate(E1, E2)
        assert board.king_square(Color.WHITE) == E2


class TestSpeculate:
    def test_restores_after_block(self) -> None:
        board = Board.initial()
        before = board.copy()
        with board.speculate(D1, D5):
            assert board[D5].identity == "WQ"
            assert board.is_empty(D1)
        assert board == before
        assert board.square_of("WQ") == D1

    def test_restores_displaced_piece(self) -> None:
        board = Board.initial()
        with board.speculate(A1, A7) as displaced:
            assert displaced is not None and displaced.identity == "BP1"
            assert board.square_of("BP1") is None
        assert board[A7].identity == "BP1"
        assert board.square_of("BP1") == A7
        assert board.square_of("WR1") == A1

    def test_restores_when_body_raises(self) -> None:
        board = Board.initial()
        before = board.copy()
        with pytest.raises(RuntimeError):
            with board.speculate(E1, E8):
                raise RuntimeError("boom")
        assert board == before
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_same_square_is_a_no_op(self) -> None:
        board = Board.initial()
        with board.speculate(E1, E1) as displaced:
            assert displaced is None
            assert board[E1].identity == "WKG"


class TestFromLayout:
    def test_custom_layout(self) -> None:
        board = Board.from_layout(
            ["....k...", "........", "........", "........",
             "........", "........", "........", "R...K..R"]
        )
        assert board[A1].identity == "WR1"
        assert board[H1].identity == "WR2"
        assert board.king_square(Color.BLACK) == E8

    def test_pawn_off_home_row_has_moved(self) -> None:
        board = Board.from_layout(
            ["....k...", "........", "........", "........",
             "....P...", "........", "P.......", "....K..."]
        )
        assert board[E4].has_moved
        assert not board[A2].has_moved

    def test_extra_queen_is_numbered(self) -> None:
        board = Board.from_layout(
            ["....k...", "........", "........", "........",
             "........", "........", "Q......Q", "....K..."]
        )
        assert board[A2].identity == "WQ"
        assert board[H2].identity == "WQ2"

    def test_wrong_shape_raises(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board.from_layout(["........"] * 7)

    def test_bad_character_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_layout(["x......."] + ["........"] * 7)

    def test_two_kings_raise(self) -> None:
        with pytest.raises(ValueError, match="more than one WHITE king"):
            Board.from_layout(["K......K"] + ["........"] * 7)
