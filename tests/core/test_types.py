"""Tests for square coordinates and algebraic names."""

import pytest

from arbiter.core.errors import InvalidNotationError, NotationError, OutOfBoundsError
from arbiter.core.types import (
    A1,
    A8,
    D5,
    E4,
    H1,
    H8,
    file_of,
    file_rank_to_square,
    make_square,
    parse_square,
    row_of,
    square_name,
    square_to_file_rank,
)


class TestCoordinates:
    def test_corners(self) -> None:
        assert square_to_file_rank(0) == (0, 0)
        assert square_to_file_rank(63) == (7, 7)

    def test_file_and_row(self) -> None:
        assert file_of(15) == 7
        assert row_of(15) == 1

    def test_inverse(self) -> None:
        for sq in range(64):
            assert file_rank_to_square(*square_to_file_rank(sq)) == sq

    def test_make_square(self) -> None:
        assert make_square(3, 3) == D5

    @pytest.mark.parametrize("sq", [-1, 64, 77])
    def test_index_out_of_bounds(self, sq: int) -> None:
        with pytest.raises(OutOfBoundsError):
            square_to_file_rank(sq)

    def test_coordinate_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBoundsError):
            file_rank_to_square(8, 0)


class TestSquareName:
    def test_known_squares(self) -> None:
        assert square_name(56) == "a1"
        assert square_name(7) == "h8"
        assert square_name(0) == "a8"
        assert square_name(27) == "d5"
        assert square_name(63) == "h1"

    @pytest.mark.parametrize("sq", [-3, 77])
    def test_out_of_bounds(self, sq: int) -> None:
        with pytest.raises(OutOfBoundsError):
            square_name(sq)


class TestParseSquare:
    def test_known_squares(self) -> None:
        assert parse_square("a1") == A1
        assert parse_square("h8") == H8
        assert parse_square("a8") == A8
        assert parse_square("h1") == H1
        assert parse_square("e4") == E4

    def test_round_trip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_rank_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBoundsError):
            parse_square("a9")
        with pytest.raises(OutOfBoundsError):
            parse_square("a0")

    def test_bad_file_letter(self) -> None:
        with pytest.raises(InvalidNotationError):
            parse_square("z1")

    def test_bad_length(self) -> None:
        with pytest.raises(InvalidNotationError):
            parse_square("e44")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_square("i1")
        assert issubclass(OutOfBoundsError, NotationError)
