"""Tests for square notation → pixel rectangles."""

import pytest

from chess_render.board.notation import (
    Square,
    parse_square,
    split_notation,
    square_bounds,
    square_rect,
)
from chess_render.errors import InvalidNotationError, InvalidNotationLengthError
from chess_render.models.geometry import Rect


class TestParseSquare:
    def test_a1(self) -> None:
        sq = parse_square("a1")
        assert sq == Square(file=0, rank=1)
        assert sq.row == 7
        assert sq.index == 7

    def test_h8(self) -> None:
        sq = parse_square("h8")
        assert sq == Square(file=7, rank=8)
        assert sq.row == 0
        assert sq.index == 56

    def test_upper_case_accepted(self) -> None:
        assert parse_square("E4") == parse_square("e4")
        assert parse_square("E4").name == "e4"

    @pytest.mark.parametrize("bad", ["i9", "i1", "a9", "a0", "z5", "11", "aa"])
    def test_out_of_range(self, bad: str) -> None:
        with pytest.raises(InvalidNotationError, match="rank/file not found"):
            parse_square(bad)

    @pytest.mark.parametrize("bad", ["", "a", "abc", "a10"])
    def test_wrong_length(self, bad: str) -> None:
        with pytest.raises(InvalidNotationLengthError):
            parse_square(bad)


class TestSquareRect:
    def test_a1_with_80px_squares(self) -> None:
        rect = square_rect("a1", 80)
        assert rect.origin == (10, 570)
        assert rect == Rect(10, 570, 70, 630)

    def test_h8_with_80px_squares(self) -> None:
        assert square_rect("H8", 80) == Rect(570, 10, 630, 70)

    def test_sprite_fills_square_without_padding(self) -> None:
        assert square_rect("b2", 60) == Rect(60, 360, 120, 420)

    def test_rect_size_is_sprite_size(self) -> None:
        rect = square_rect("d5", 100, sprite_size=60)
        assert (rect.width, rect.height) == (60, 60)

    def test_invalid_notation(self) -> None:
        with pytest.raises(InvalidNotationError):
            square_rect("i9", 80)

    def test_invalid_length(self) -> None:
        with pytest.raises(InvalidNotationLengthError):
            square_rect("abc", 80)


class TestSplitNotation:
    def test_bare_square(self) -> None:
        assert split_notation("e4") == ("", "e4")

    def test_piece_prefix(self) -> None:
        assert split_notation("na1") == ("n", "a1")

    def test_other_lengths_pass_through(self) -> None:
        assert split_notation("abcd") == ("", "abcd")


class TestSquareBounds:
    def test_index_zero_is_top_left(self) -> None:
        assert square_bounds(0, 80) == Rect(0, 0, 80, 80)

    def test_column_major_layout(self) -> None:
        # index 1 is one row down, index 8 one file right
        assert square_bounds(1, 80) == Rect(0, 80, 80, 160)
        assert square_bounds(8, 80) == Rect(80, 0, 160, 80)
