"""
Engine Testing and Benchmarking

This module provides regression fixtures and benchmarking tools for the
move generator and the search.

Fixture Suite:
    Positions taken from recorded games and hand-built capture puzzles.
    Each fixture may pin down:
        - the number of legal moves
        - moves that must be legal
        - acceptable best moves for the search

Perft:
    Counts the leaf nodes of the legal move tree to a fixed depth using
    apply()/undo(). Useful to check that move generation and undo agree,
    and as a raw speed benchmark.

Export:
    Writes the fixture positions as (3, 5, 5) tensors to a compressed .npz
    archive, together with their ids and legal move counts, for offline
    analysis.

Evaluation Metrics:
    - Correct: fixture expectations met and best move acceptable
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes visited
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np
from tqdm import tqdm

from qirkat_engine.board.move import Move
from qirkat_engine.board.piece import BLACK, WHITE, PieceColor
from qirkat_engine.board.position import Position
from qirkat_engine.board.representation import position_to_tensor_3
from qirkat_engine.evaluation.base import Evaluator
from qirkat_engine.search.minimax import find_best_move


@dataclass
class FixturePosition:
    """
    A regression position with known properties.

    Attributes:
        id: Fixture identifier (e.g. "QK.03")
        layout: Compact board layout, row 1 first
        side_to_move: Color to move
        description: Human-readable description
        legal_move_count: Expected number of legal moves (None = unchecked)
        legal: Moves that must be legal (notation)
        best_moves: Acceptable best moves (empty = any legal move)
    """
    id: str
    layout: str
    side_to_move: PieceColor
    description: str = ""
    legal_move_count: Optional[int] = None
    legal: List[str] = field(default_factory=list)
    best_moves: List[str] = field(default_factory=list)

    def position(self) -> Position:
        """Return a fresh Position for this fixture."""
        return Position.from_layout(self.layout, self.side_to_move)


@dataclass
class FixtureResult:
    """
    Result of checking and searching a single fixture.

    Attributes:
        fixture: The fixture position
        found_move: Move the engine found (notation)
        score: Evaluation score for the move
        correct: Whether every expectation held
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
        errors: Expectations that failed
    """
    fixture: FixturePosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0
    errors: List[str] = field(default_factory=list)


# ============================================================================
# Regression Fixtures
# ============================================================================

REGRESSION_POSITIONS = [
    FixturePosition(
        id="QK.01",
        layout="wwwww wwwww bb-ww bbbbb bbbbb",
        side_to_move=WHITE,
        description="Initial position: four ways to fill c3",
        legal_move_count=4,
        legal=["b2-c3", "c2-c3", "d2-c3", "d3-c3"],
    ),
    FixturePosition(
        id="QK.02",
        layout="bww-- b---- -b--w ----- b--b-",
        side_to_move=BLACK,
        description="Quiet position: lateral step on the far row",
        legal=["d5-e5"],
    ),
    FixturePosition(
        id="QK.03",
        layout="----- wb-b- ----- ----- -----",
        side_to_move=WHITE,
        description="Two-leg chain is the only legal move",
        legal_move_count=1,
        legal=["a2-c2-e2"],
        best_moves=["a2-c2-e2"],
    ),
    FixturePosition(
        id="QK.04",
        layout="----- wb-b- b-b-- ----- -----",
        side_to_move=WHITE,
        description="Chain forks at c2",
        legal_move_count=3,
        legal=["a2-a4", "a2-c2-e2", "a2-c2-c4"],
    ),
    FixturePosition(
        id="QK.05",
        layout="----- ----b wb-b- b-b-b -----",
        side_to_move=WHITE,
        description="Three-leg chains fork at e3",
        legal_move_count=4,
        legal=["a3-a5", "a3-c3-c5", "a3-c3-e3-e5", "a3-c3-e3-e1"],
        best_moves=["a3-c3-e3-e5", "a3-c3-e3-e1"],
    ),
    FixturePosition(
        id="QK.06",
        layout="ww-ww ww-ww bbwww bb-bb bbbbb",
        side_to_move=BLACK,
        description="Diagonal capture forced in a crowded position",
        legal_move_count=1,
        legal=["a3-c1"],
        best_moves=["a3-c1"],
    ),
    FixturePosition(
        id="QK.07",
        layout="----- ----- --w-- ----- -----",
        side_to_move=WHITE,
        description="Lone piece on a cross point",
        legal_move_count=5,
        legal=["c3-b3", "c3-d3", "c3-c4", "c3-b4", "c3-d4"],
    ),
    FixturePosition(
        id="QK.08",
        layout="w---- b---- ----- ----- -----",
        side_to_move=WHITE,
        description="Capturing the last black piece wins",
        legal_move_count=1,
        best_moves=["a1-a3"],
    ),
    FixturePosition(
        id="QK.09",
        layout="w---- -b--- ----- ---b- -----",
        side_to_move=WHITE,
        description="Two-leg diagonal chain across the long diagonal",
        legal_move_count=1,
        legal=["a1-c3-e5"],
        best_moves=["a1-c3-e5"],
    ),
]


# ============================================================================
# Perft
# ============================================================================


def perft(position: Position, depth: int) -> int:
    """
    Count the leaf nodes of the legal move tree.

    Args:
        position: Starting position (restored before returning)
        depth: Number of plies to expand

    Returns:
        Number of positions reached after exactly depth plies (terminal
        positions reached earlier count as leaves)
    """
    if depth == 0:
        return 1
    moves = position.legal_moves()
    if not moves:
        return 1

    total = 0
    for move in moves:
        position.apply(move)
        total += perft(position, depth - 1)
        position.undo()
    return total


# ============================================================================
# Fixture Runner
# ============================================================================


def check_fixture(position: Position, fixture: FixturePosition) -> List[str]:
    """Return the fixture expectations that do not hold in position."""
    errors = []
    moves = position.legal_moves()

    if fixture.legal_move_count is not None and len(moves) != fixture.legal_move_count:
        errors.append(
            f"expected {fixture.legal_move_count} legal moves, got {len(moves)}"
        )

    for notation in fixture.legal:
        if Move.parse(notation) not in moves:
            errors.append(f"{notation} missing from legal moves")
        if not position.is_legal(notation):
            errors.append(f"{notation} rejected by validator")

    return errors


def evaluate_fixture(
    fixture: FixturePosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    verbose: bool = False,
) -> FixtureResult:
    """
    Check a fixture's expectations and search it.

    Args:
        fixture: Fixture to evaluate
        depth: Search depth
        evaluator: Position evaluator (default: MaterialEvaluator)
        verbose: If True, print detailed output

    Returns:
        FixtureResult with the engine's move and whether it was correct
    """
    position = fixture.position()
    errors = check_fixture(position, fixture)

    if verbose:
        print(f"\nTesting {fixture.id}: {fixture.description}")
        print(position.to_string(legend=True))

    start_time = time.time()
    best_move, score, nodes, pv = find_best_move(position, depth, evaluator)
    time_taken = time.time() - start_time

    found = str(best_move)
    if fixture.best_moves and found not in fixture.best_moves:
        errors.append(f"expected one of {fixture.best_moves}, got {found}")
    correct = not errors

    if verbose:
        print(f"Engine found: {found} (score: {score})")
        print(f"Nodes searched: {nodes:,}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'CORRECT' if correct else 'WRONG: ' + '; '.join(errors)}")

    return FixtureResult(
        fixture=fixture,
        found_move=found,
        score=score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=nodes,
        depth=depth,
        errors=errors,
    )


def run_fixture_suite(
    evaluator: Optional[Evaluator] = None,
    depth: int = 4,
    fixtures: Optional[List[FixturePosition]] = None,
    verbose: bool = False,
    progress: bool = False,
) -> Dict[str, Any]:
    """
    Run the regression fixture suite.

    Args:
        evaluator: Position evaluator (default: MaterialEvaluator)
        depth: Search depth (default: 4)
        fixtures: Fixtures to run (default: REGRESSION_POSITIONS)
        verbose: If True, print detailed results
        progress: If True, show a progress bar

    Returns:
        Dictionary with test results:
            - score: Number of correct fixtures
            - total: Total number of fixtures
            - percentage: Success percentage
            - results: List of FixtureResult objects
            - avg_time: Average time per fixture
            - total_time: Total search time
    """
    fixtures = REGRESSION_POSITIONS if fixtures is None else fixtures

    results = []
    correct_count = 0
    total_time = 0.0

    for fixture in tqdm(fixtures, desc=f"depth {depth}", disable=not progress):
        result = evaluate_fixture(fixture, depth, evaluator, verbose=verbose)
        results.append(result)

        if result.correct:
            correct_count += 1
        total_time += result.time_taken

    avg_time = total_time / len(fixtures) if fixtures else 0
    percentage = (correct_count / len(fixtures) * 100) if fixtures else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{len(fixtures)} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")

    return {
        'score': correct_count,
        'total': len(fixtures),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }


# ============================================================================
# Tensor Export
# ============================================================================


def export_fixture_tensors(
    path: Union[str, Path],
    fixtures: Optional[List[FixturePosition]] = None,
) -> int:
    """
    Save fixture positions as tensors in a compressed .npz archive.

    Arrays written:
        - positions: float32 array of shape (N, 3, 5, 5), see
          position_to_tensor_3()
        - ids: fixture identifiers
        - legal_move_counts: number of legal moves in each position

    Args:
        path: Output file (numpy appends .npz if missing)
        fixtures: Fixtures to export (default: REGRESSION_POSITIONS)

    Returns:
        Number of positions written
    """
    fixtures = REGRESSION_POSITIONS if fixtures is None else fixtures

    positions = np.zeros((len(fixtures), 3, 5, 5), dtype=np.float32)
    legal_move_counts = np.zeros(len(fixtures), dtype=np.int32)
    for i, fixture in enumerate(fixtures):
        position = fixture.position()
        positions[i] = position_to_tensor_3(position)
        legal_move_counts[i] = len(position.legal_moves())

    np.savez_compressed(
        path,
        positions=positions,
        ids=np.array([f.id for f in fixtures], dtype=str),
        legal_move_counts=legal_move_counts,
    )
    return len(fixtures)
