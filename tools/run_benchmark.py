#!/usr/bin/env python3
"""
Fixture Benchmark Runner

Runs the regression fixture suite at multiple depths and reports perft
node counts from the initial position, to establish baseline performance
metrics for the engine.

Usage:
    python tools/run_benchmark.py [--depths 2,4,6] [--perft 4] [--export fixtures.npz] [--verbose]

Without --depths, the fixture suite runs once at the configured search
depth (QIRKAT_SEARCH_DEPTH, default 8).
"""

import sys
import argparse
import logging
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from qirkat_engine.board.position import Position
from qirkat_engine.evaluation.material import MaterialEvaluator
from qirkat_engine.config import SearchConfig
from qirkat_engine.utils.testing import export_fixture_tensors, perft, run_fixture_suite


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def parse_depths(text: str) -> list[int]:
    """Parse a comma-separated list of depths, e.g. "2,4,6"."""
    depths = [int(d.strip()) for d in text.split(",")]
    if any(d < 1 for d in depths):
        raise ValueError("depths must be positive")
    return depths


def run_perft(depth: int) -> dict:
    """Count perft leaves from the initial position at each depth up to depth."""
    position = Position()
    rows = []
    for d in range(1, depth + 1):
        start_time = time.time()
        leaves = perft(position, d)
        elapsed = time.time() - start_time
        rows.append({'depth': d, 'leaves': leaves, 'time': elapsed})
        print(f"  perft({d}) = {leaves:,} ({format_time(elapsed)})")
    return {'rows': rows, 'restored': position == Position()}


def run_benchmark(depths: list[int], verbose: bool = False, progress: bool = True):
    """
    Run the fixture suite at multiple depths.

    Args:
        depths: List of depths to test
        verbose: If True, print detailed results for each fixture
        progress: If True, show a progress bar per depth
    """
    evaluator = MaterialEvaluator()

    print("=" * 80)
    print("FIXTURE BENCHMARK - Qirkat Engine")
    print("=" * 80)
    print(f"Evaluator: Material count")
    print(f"Search: Minimax with Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        result = run_fixture_suite(
            evaluator=evaluator,
            depth=depth,
            verbose=verbose,
            progress=progress,
        )

        total_nodes = sum(r.nodes_searched for r in result['results'])
        total_time = result['total_time']
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': result['score'],
            'total': result['total'],
            'percentage': result['percentage'],
            'avg_time': result['avg_time'],
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'results': result['results'],
        })

        failed = [r for r in result['results'] if not r.correct]
        if failed:
            print(f"\n  Failed fixtures at depth {depth}:")
            for r in failed:
                print(f"    {r.fixture.id}: {'; '.join(r.errors)}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<12} {'%':<8} {'Avg Time':<12} {'Nodes':<12} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['depth']:<8} {r['score']}/{r['total']:<10} {r['percentage']:<7.1f}% {format_time(r['avg_time']):<12} {r['total_nodes']:<12,} {r['nodes_per_sec']:>12,.0f}")

    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the Qirkat fixture benchmark at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default=None,
        help="Comma-separated list of depths to test (default: QIRKAT_SEARCH_DEPTH or 8)"
    )
    parser.add_argument(
        "--perft",
        type=int,
        default=0,
        help="Also run perft from the initial position up to this depth"
    )
    parser.add_argument(
        "--export",
        type=str,
        default=None,
        help="Save the fixture positions as tensors to this .npz file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each fixture and debug logs"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.depths is None:
            depths = [SearchConfig.from_env().max_depth]
        else:
            depths = parse_depths(args.depths)
    except ValueError:
        print("Error: depths must be comma-separated positive integers")
        sys.exit(1)

    if args.export:
        count = export_fixture_tensors(args.export)
        print(f"Exported {count} fixture positions to {args.export}")

    try:
        if args.perft > 0:
            print(f"\nPerft from the initial position:")
            run_perft(args.perft)
        run_benchmark(depths, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
