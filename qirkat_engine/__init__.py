"""
Qirkat Engine

A rules engine and minimax player for Qirkat, the 5x5 capture game
played on the cross-connected alquerque board.

## Architecture

The engine is organized into several key modules:

1. **board**: Squares, pieces, moves and positions
   - Square labels ('c3') ↔ linearized indices (0-24), cross points
   - Immutable Move values: steps, captures, capture chains
   - Position with reversal memory and apply/undo history
   - Tensor encoding of positions for analysis tooling

2. **rules**: Move generation and legality
   - Mandatory, maximal capture chains
   - Forward/lateral steps, diagonal steps from cross points
   - Independent validator for moves entered by hand

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: piece count, ±WIN_VALUE for finished games

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - Move ordering (longest chains first)

5. **utils**: Testing and benchmarking utilities
   - Regression fixtures, perft

## Quick Start

```python
from qirkat_engine import Position, Move, best_move

position = Position()
print(position)
position.apply(Move.parse("c2-c3"))
reply = best_move(position, max_depth=4)
print(f"Black replies: {reply}")
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from qirkat_engine.exceptions import QirkatError, MalformedMove, InvalidLayout
from qirkat_engine.board import Position, Move, PieceColor, EMPTY, WHITE, BLACK
from qirkat_engine.config import SearchConfig
from qirkat_engine.evaluation import Evaluator, MaterialEvaluator, WIN_VALUE
from qirkat_engine.search import best_move, find_best_move, minimax

__all__ = [
    'QirkatError',
    'MalformedMove',
    'InvalidLayout',
    'Position',
    'Move',
    'PieceColor',
    'EMPTY',
    'WHITE',
    'BLACK',
    'SearchConfig',
    'Evaluator',
    'MaterialEvaluator',
    'WIN_VALUE',
    'best_move',
    'find_best_move',
    'minimax',
]
