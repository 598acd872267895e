"""
Search Module

This module implements the adversarial search used by the automated
player: depth-bounded minimax with alpha-beta pruning over the legal move
generator, scored by a swappable static evaluator.

Key Components:
    - minimax: Core recursive search with alpha-beta pruning
    - find_best_move: Root-level search returning move, score, nodes, pv
    - best_move: Entry point for the automated player
    - order_moves: Longer capture chains first
"""

from qirkat_engine.search.minimax import best_move, find_best_move, minimax, order_moves

__all__ = ['minimax', 'find_best_move', 'best_move', 'order_moves']
