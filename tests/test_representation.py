"""
Unit Tests for Tensor Representation

Tests for converting positions to numpy arrays and back.
"""

import numpy as np
import pytest

from qirkat_engine.board import BLACK, WHITE, Move, Position
from qirkat_engine.board import square as sq
from qirkat_engine.board.representation import (
    coordinates_to_square,
    position_to_tensor,
    position_to_tensor_3,
    square_to_coordinates,
    tensor_to_position,
)


class TestCoordinates:
    """Tests for square ↔ array coordinate mapping."""

    def test_corners(self):
        assert square_to_coordinates(sq.parse_square("a1")) == (4, 0)
        assert square_to_coordinates(sq.parse_square("e5")) == (0, 4)
        assert square_to_coordinates(sq.parse_square("c3")) == (2, 2)

    def test_round_trip(self):
        for k in sq.SQUARES:
            row, col = square_to_coordinates(k)
            assert coordinates_to_square(row, col) == k


class TestPositionToTensor:
    """Tests for the 2- and 3-channel encodings."""

    def test_initial_position(self):
        tensor = position_to_tensor(Position())

        assert tensor.shape == (2, 5, 5)
        assert tensor.dtype == np.float32
        assert tensor[0].sum() == 12, "White pieces"
        assert tensor[1].sum() == 12, "Black pieces"
        assert tensor[0, 4].sum() == 5, "Row 1 is White's home row"
        assert tensor[1, 0].sum() == 5, "Row 5 is Black's home row"
        assert tensor[:, 2, 2].sum() == 0, "c3 starts empty"

    def test_no_overlap(self):
        tensor = position_to_tensor(Position())

        assert (tensor.sum(axis=0) <= 1).all()

    def test_side_plane(self):
        white = position_to_tensor_3(Position())
        black = position_to_tensor_3(Position(side_to_move=BLACK))

        assert white.shape == (3, 5, 5)
        assert white[2].min() == 1.0
        assert black[2].max() == 0.0
        assert np.array_equal(white[:2], black[:2])

    def test_after_capture(self):
        position = Position()
        position.apply(Move.parse("c2-c3"))
        position.apply(Move.parse("c4-c2"))

        tensor = position_to_tensor(position)

        assert tensor[0].sum() == 11
        assert tensor[1, 3, 2] == 1.0, "Black piece landed on c2"
        assert tensor[0, 2, 2] == 0.0, "White piece on c3 was captured"


class TestTensorToPosition:
    """Tests for decoding tensors."""

    def test_round_trip(self):
        position = Position()
        for notation in ["c2-c3", "c4-c2", "c1-c3"]:
            position.apply(Move.parse(notation))

        decoded = tensor_to_position(position_to_tensor(position), position.side_to_move)

        assert decoded == position

    def test_round_trip_with_side(self):
        position = Position(side_to_move=BLACK)

        decoded = tensor_to_position(position_to_tensor_3(position), WHITE)

        assert decoded == position, "Side plane overrides the argument"

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            tensor_to_position(np.zeros((4, 5, 5), dtype=np.float32))

    def test_overlapping_pieces(self):
        tensor = position_to_tensor(Position())
        tensor[1, 4, 0] = 1.0

        with pytest.raises(ValueError, match="Multiple pieces"):
            tensor_to_position(tensor)
