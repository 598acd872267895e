"""
Material Evaluation

The static evaluator used by the search: White's piece count minus
Black's. Finished games score ±WIN_VALUE instead (see
Evaluator.evaluate_terminal).

Qirkat pieces all move alike, so there is no piece-value table: a
material count is the whole heuristic.
"""

from qirkat_engine.board.position import Position
from qirkat_engine.evaluation.base import Evaluator


class MaterialEvaluator(Evaluator):
    """Material-count evaluation with terminal WIN scoring."""

    def evaluate(self, position: Position) -> float:
        """
        Evaluate position as |White| - |Black|.

        Returns:
            float: Material differential, or ±WIN_VALUE if terminal
        """
        terminal_score = self.evaluate_terminal(position)
        if terminal_score is not None:
            return terminal_score
        return self.material(position)
