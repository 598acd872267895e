"""
Board Module

Squares, pieces, moves and positions for Qirkat.

Key Components:
    - square: Mapping between square labels ('c3') and linearized indices
    - PieceColor: EMPTY, WHITE, BLACK
    - Move: Immutable step / capture / capture chain value
    - Position: Board state with reversal memory and undo history
    - position_to_tensor: Position → (2, 5, 5) numpy array

Data Flow:
    layout string → Position → legal_moves() → apply() / undo()
"""

from qirkat_engine.board import square
from qirkat_engine.board.piece import PieceColor, EMPTY, WHITE, BLACK
from qirkat_engine.board.move import Move
from qirkat_engine.board.position import Position, INITIAL_LAYOUT
from qirkat_engine.board.representation import position_to_tensor

__all__ = [
    'square',
    'PieceColor',
    'EMPTY',
    'WHITE',
    'BLACK',
    'Move',
    'Position',
    'INITIAL_LAYOUT',
    'position_to_tensor',
]
