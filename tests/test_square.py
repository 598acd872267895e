"""
Unit Tests for Square Coordinates
"""

import pytest

from qirkat_engine.board import square as sq
from qirkat_engine.exceptions import MalformedMove


class TestIndexing:
    """Tests for label ↔ index conversion."""

    def test_corners(self):
        assert sq.index("a", "1") == 0
        assert sq.index("e", "1") == 4
        assert sq.index("a", "5") == 20
        assert sq.index("e", "5") == 24

    def test_center(self):
        assert sq.index("c", "3") == 12
        assert sq.square_name(12) == "c3"

    def test_every_square_round_trips(self):
        for k in sq.SQUARES:
            assert sq.parse_square(sq.square_name(k)) == k
            assert sq.index(sq.col(k), sq.row(k)) == k

    def test_offsets(self):
        assert sq.col_index(13) == 3
        assert sq.row_index(13) == 2
        assert sq.coordinates_to_square(3, 2) == 13
        assert sq.coordinates_to_square(5, 0) is None
        assert sq.offset(0, -1, 0) is None
        assert sq.offset(0, 1, 1) == 6

    def test_valid_square(self):
        assert sq.valid_square("a", "1")
        assert not sq.valid_square("f", "1")
        assert not sq.valid_square("a", "6")
        assert not sq.valid_square("a", "0")
        assert sq.valid_index(24)
        assert not sq.valid_index(25)
        assert not sq.valid_index(-1)

    @pytest.mark.parametrize("name", ["f1", "a6", "a0", "c", "c33", "", None])
    def test_parse_invalid_square(self, name):
        with pytest.raises(MalformedMove):
            sq.parse_square(name)

    def test_square_name_out_of_range(self):
        with pytest.raises(MalformedMove):
            sq.square_name(25)


class TestCrossPoints:
    """Tests for the checkerboard of diagonal connections."""

    @pytest.mark.parametrize("name", ["a1", "c1", "e1", "b2", "d2", "c3", "a5", "e5"])
    def test_cross_points(self, name):
        assert sq.is_cross_point(sq.parse_square(name))

    @pytest.mark.parametrize("name", ["b1", "d1", "a2", "c2", "e2", "b3", "d3", "d5"])
    def test_plain_points(self, name):
        assert not sq.is_cross_point(sq.parse_square(name))

    def test_thirteen_cross_points(self):
        assert sum(1 for k in sq.SQUARES if sq.is_cross_point(k)) == 13
