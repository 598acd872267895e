"""
Evaluation Module

Static position evaluation for the search. Evaluators are SWAPPABLE: the
search works with any evaluator implementing the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Piece count differential with terminal WIN scoring

Data Flow:
    Position → evaluator.evaluate() → float
                                      Positive = White advantage
                                      Negative = Black advantage
"""

from qirkat_engine.evaluation.base import Evaluator, INFINITY, WIN_VALUE
from qirkat_engine.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator', 'INFINITY', 'WIN_VALUE']
