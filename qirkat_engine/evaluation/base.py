"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always scores from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Terminal positions score ±WIN_VALUE

Convention:
    - Scores are counted in pieces (one piece = 1)
    - WIN_VALUE is larger than any material differential, so a forced
      outcome outranks every heuristic score at any depth
    - INFINITY is the search window sentinel and is larger than WIN_VALUE
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional

from qirkat_engine.board.piece import BLACK, WHITE
from qirkat_engine.board.position import Position

# Evaluation constants
INFINITY = sys.float_info.max  # Search window bound
WIN_VALUE = 1_000_000  # Forced win for White (negated for Black)


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.

    Methods:
        evaluate(position): Returns the score from White's perspective
        evaluate_terminal(position): Returns ±WIN_VALUE for finished games
    """

    @abstractmethod
    def evaluate(self, position: Position) -> float:
        """
        Evaluate a position from White's perspective.

        Args:
            position: Position to evaluate (not modified)

        Returns:
            float: Evaluation score
        """
        pass

    def material(self, position: Position) -> int:
        """Return White's piece count minus Black's."""
        white = black = 0
        for piece in position.pieces:
            if piece is WHITE:
                white += 1
            elif piece is BLACK:
                black += 1
        return white - black

    def evaluate_terminal(self, position: Position) -> Optional[float]:
        """
        Evaluate a position whose side to move has no legal moves.

        The winner is decided by the material differential: +WIN_VALUE if
        White is ahead, -WIN_VALUE otherwise.

        Returns:
            float: ±WIN_VALUE if the position is terminal
            None: If the game goes on
        """
        if not position.is_terminal():
            return None
        if self.material(position) > 0:
            return WIN_VALUE
        return -WIN_VALUE

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
