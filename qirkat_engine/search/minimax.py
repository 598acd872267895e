"""
Minimax Search with Alpha-Beta Pruning

This module implements the search algorithm behind the automated player.
Minimax explores the game tree to a fixed depth, and alpha-beta pruning
skips branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Sense: +1 when White (the maximizer) is to move, -1 for Black
    - Move Ordering: Longer capture chains first, to cut off earlier

State:
    The search mutates the Position it is given with apply() and restores
    it with undo() after every candidate, so the caller gets the position
    back unchanged. Each call owns its own candidate list; only the root
    records a move.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor, d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import List, Optional, Tuple

from qirkat_engine.board.move import Move
from qirkat_engine.board.piece import WHITE
from qirkat_engine.board.position import Position
from qirkat_engine.config import DEFAULT_CONFIG, SearchConfig
from qirkat_engine.evaluation.base import INFINITY, Evaluator
from qirkat_engine.evaluation.material import MaterialEvaluator

logger = logging.getLogger(__name__)


def order_moves(moves: List[Move]) -> List[Move]:
    """
    Order moves to improve alpha-beta pruning efficiency.

    Chains capturing more pieces come first; the sort is stable, so moves
    of equal length keep their generation order.
    """
    return sorted(moves, key=len, reverse=True)


def minimax(
    position: Position,
    depth: int,
    alpha: float,
    beta: float,
    sense: int,
    evaluator: Evaluator,
    nodes_searched: Optional[List[int]] = None,
    ordering: bool = True,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        position: Current position (restored before returning)
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score the maximizer is already assured of
        beta: Best score the minimizer is already assured of
        sense: +1 if the side to move maximizes (White), -1 if it minimizes
        evaluator: Position evaluation function
        nodes_searched: Optional mutable list [count] of positions visited
        ordering: If True, search longer capture chains first

    Returns:
        float: Value of the position from White's perspective

    Algorithm:
        1. Leaf (depth 0) or terminal position → static evaluation
        2. Generate all legal moves
        3. For each move:
            a. Apply it
            b. Recursively search (depth - 1) with the opposite sense
            c. Undo it
            d. Update alpha (maximizer) or beta (minimizer)
            e. Prune if beta <= alpha
        4. Return best score found
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0 or position.is_terminal():
        return evaluator.evaluate(position)

    moves = position.legal_moves()
    if ordering:
        moves = order_moves(moves)

    if sense == 1:
        best = -INFINITY
        for move in moves:
            position.apply(move)
            score = minimax(
                position, depth - 1, alpha, beta, -1,
                evaluator, nodes_searched, ordering,
            )
            position.undo()

            best = max(best, score)
            alpha = max(alpha, best)
            if beta <= alpha:
                break
        return best

    best = INFINITY
    for move in moves:
        position.apply(move)
        score = minimax(
            position, depth - 1, alpha, beta, 1,
            evaluator, nodes_searched, ordering,
        )
        position.undo()

        best = min(best, score)
        beta = min(beta, best)
        if beta <= alpha:
            break
    return best


def find_best_move(
    position: Position,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    config: Optional[SearchConfig] = None,
) -> Tuple[Move, float, int, List[Move]]:
    """
    Find the best move in the current position.

    Args:
        position: Current position (restored before returning)
        depth: Search depth in plies (at least 1)
        evaluator: Position evaluation function (default: MaterialEvaluator)
        config: Search settings (default: DEFAULT_CONFIG)

    Returns:
        Tuple of (best_move, score, nodes, pv)
            - best_move: The best move found (first one on ties)
            - score: Value of the best move from White's perspective
            - nodes: Number of positions visited
            - pv: Principal variation (the root move)

    Raises:
        ValueError: If there are no legal moves (game over) or depth < 1
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    legal_moves = position.legal_moves()
    if not legal_moves:
        raise ValueError("No legal moves available")

    evaluator = evaluator if evaluator is not None else MaterialEvaluator()
    config = config if config is not None else DEFAULT_CONFIG

    sense = 1 if position.side_to_move is WHITE else -1
    moves = order_moves(legal_moves) if config.order_moves else legal_moves

    alpha, beta = -INFINITY, INFINITY
    best_move = None
    best_score = -INFINITY if sense == 1 else INFINITY
    nodes = [1]

    for move in moves:
        position.apply(move)
        score = minimax(
            position, depth - 1, alpha, beta, -sense,
            evaluator, nodes, config.order_moves,
        )
        position.undo()

        if config.log_root_moves:
            logger.debug(f"Move: {move}, Score: {score}")

        if sense == 1:
            if best_move is None or score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)
        else:
            if best_move is None or score < best_score:
                best_score = score
                best_move = move
            beta = min(beta, best_score)

    logger.info(
        f"Best move: {best_move}, Score: {best_score}, "
        f"Depth: {depth}, Nodes searched: {nodes[0]}"
    )

    return best_move, best_score, nodes[0], [best_move]


def best_move(
    position: Position,
    max_depth: Optional[int] = None,
    evaluator: Optional[Evaluator] = None,
) -> Move:
    """
    Return the move the automated player should make.

    Args:
        position: A non-terminal position (restored before returning)
        max_depth: Search depth (default: QIRKAT_SEARCH_DEPTH if set, else
            8 plies)
        evaluator: Position evaluation function (default: MaterialEvaluator)

    Raises:
        ValueError: If the position is terminal
    """
    depth = SearchConfig.from_env().max_depth if max_depth is None else max_depth
    move, _, _, _ = find_best_move(position, depth, evaluator)
    return move
