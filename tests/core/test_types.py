"""Tests for square helpers."""

import pytest

from chessrules.core.types import (
    A8, E1, E4, H1,
    Delta,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_make_square(self) -> None:
        assert make_square(7, 4) == E1
        assert make_square(0, 0) == A8

    def test_names(self) -> None:
        assert square_name(E1) == "e1"
        assert square_name(H1) == "h1"
        assert parse_square("e4") == E4

    def test_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square("i9")

    def test_bounds(self) -> None:
        assert is_valid_square(make_square(7, 7))
        assert not is_valid_square(make_square(8, 0))
        assert not is_valid_square(make_square(0, -1))


class TestDelta:
    def test_apply_and_scale(self) -> None:
        assert Delta(-1, 0).scaled(2).apply(make_square(6, 4)) == E4
