"""
Tensor Representation of Positions

Converts a Position into a numpy array for analysis tooling.

2-Channel Representation (piece positions only):
    0: White pieces
    1: Black pieces

3-Channel Representation (pieces + side to move):
    0-1: Same as above
    2: Side to move (all 1s if White, all 0s if Black)

Each channel is a 5*5 binary mask where 1 indicates piece presence.

Board Orientation:
    - Row 0 = row 5 (Black's home row)
    - Row 4 = row 1 (White's home row)
    - Column 0 = column a
    - Column 4 = column e
"""

from typing import Tuple

import numpy as np

from qirkat_engine.board import square as sq
from qirkat_engine.board.piece import BLACK, EMPTY, WHITE, PieceColor
from qirkat_engine.board.position import Position

PIECE_TO_CHANNEL = {
    WHITE: 0,
    BLACK: 1,
}


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert a linearized index to (row, column) array coordinates.

    Args:
        square: Square index (0-24) where 0=a1, 24=e5

    Returns:
        Tuple of (row, col) where row 0 is board row 5
    """
    return sq.SIDE - 1 - sq.row_index(square), sq.col_index(square)


def coordinates_to_square(row: int, col: int) -> int:
    """Convert (row, column) array coordinates back to a linearized index."""
    return col + sq.SIDE * (sq.SIDE - 1 - row)


def position_to_tensor(position: Position) -> np.ndarray:
    """
    Convert a position to a 2-channel tensor.

    Returns:
        numpy array of shape (2, 5, 5) with dtype float32
    """
    tensor = np.zeros((2, sq.SIDE, sq.SIDE), dtype=np.float32)

    for square, piece in enumerate(position.pieces):
        if piece is EMPTY:
            continue
        row, col = square_to_coordinates(square)
        tensor[PIECE_TO_CHANNEL[piece], row, col] = 1.0

    return tensor


def position_to_tensor_3(position: Position) -> np.ndarray:
    """
    Convert a position to a 3-channel tensor with a side-to-move plane.

    Returns:
        numpy array of shape (3, 5, 5) with dtype float32
    """
    side = np.zeros((1, sq.SIDE, sq.SIDE), dtype=np.float32)
    if position.side_to_move is WHITE:
        side[0, :, :] = 1.0
    return np.concatenate([position_to_tensor(position), side], axis=0)


def tensor_to_position(tensor: np.ndarray, side_to_move: PieceColor = WHITE) -> Position:
    """
    Convert a 2- or 3-channel tensor back to a Position.

    This is the inverse of position_to_tensor() and position_to_tensor_3().
    For 3-channel input the side to move is read from channel 2 and the
    side_to_move argument is ignored.

    Raises:
        ValueError: If the tensor has an invalid shape or two pieces share
            a square
    """
    if tensor.shape not in ((2, sq.SIDE, sq.SIDE), (3, sq.SIDE, sq.SIDE)):
        raise ValueError(
            f"Invalid tensor shape: {tensor.shape}. Expected (2, 5, 5) or (3, 5, 5)"
        )

    if tensor.shape[0] == 3:
        side_to_move = WHITE if tensor[2].mean() > 0.5 else BLACK

    symbols = [EMPTY.symbol] * sq.NUM_SQUARES
    for piece, channel in PIECE_TO_CHANNEL.items():
        for row, col in np.argwhere(tensor[channel] > 0.5):
            square = coordinates_to_square(int(row), int(col))
            if symbols[square] != EMPTY.symbol:
                raise ValueError(
                    f"Multiple pieces on square {sq.square_name(square)}"
                )
            symbols[square] = piece.symbol

    return Position.from_layout("".join(symbols), side_to_move)
