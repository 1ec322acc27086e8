#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the tactical test suite with every search algorithm at multiple depths
and compares node counts on the opening position, to check that the
algorithms agree and to measure how much the transposition table saves.

Requires the tools extra (pip install -e ".[tools]").

Usage:
    python tools/run_benchmark.py [--depths 3,4,5] [--algorithms alphabeta,mtdf] [--verbose]
"""

import sys
import argparse
import logging
import time
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4_engine.board.representation import Board, Cell
from connect4_engine.evaluation.window import WindowEvaluator
from connect4_engine.search.selector import Algorithm
from connect4_engine.search.transposition import TranspositionTable
from connect4_engine.utils.testing import (
    TACTICAL_POSITIONS,
    compare_algorithms,
    evaluate_position,
)

logger = logging.getLogger(__name__)


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


def run_suite(algorithm: Algorithm, depth: int, evaluator, verbose: bool = False) -> dict:
    """
    Run the tactical suite for one algorithm and depth.

    Returns:
        Dictionary with score, timing, node and table statistics
    """
    results = []
    tt_hits = 0
    tt_misses = 0

    start_time = time.time()
    for position in tqdm(
        TACTICAL_POSITIONS, desc=f"{algorithm.value} depth {depth}", leave=False
    ):
        table = TranspositionTable()
        results.append(
            evaluate_position(position, depth, algorithm, evaluator, table, verbose=verbose)
        )
        tt_hits += table.hits
        tt_misses += table.misses
    total_time = time.time() - start_time

    total_nodes = sum(r.nodes_searched for r in results)
    score = sum(1 for r in results if r.correct)

    return {
        'algorithm': algorithm,
        'depth': depth,
        'score': score,
        'total': len(results),
        'total_time': total_time,
        'avg_time': total_time / len(results) if results else 0,
        'total_nodes': total_nodes,
        'nodes_per_sec': total_nodes / total_time if total_time > 0 else 0,
        'tt_hits': tt_hits,
        'tt_misses': tt_misses,
        'results': results,
    }


def run_benchmark(depths: list[int], algorithms: list[Algorithm], verbose: bool = False):
    """
    Run the tactical suite for every algorithm at every depth.

    Args:
        depths: List of depths to test
        algorithms: Algorithms to compare
        verbose: If True, print detailed results for each position
    """
    evaluator = WindowEvaluator()

    print("=" * 80)
    print("TACTICAL BENCHMARK - connect4-engine")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print(f"Algorithms: {', '.join(a.value for a in algorithms)}")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []
    for depth in depths:
        for algorithm in algorithms:
            summary = run_suite(algorithm, depth, evaluator, verbose=verbose)
            all_results.append(summary)
            logger.info(
                f"{algorithm.value} depth {depth}: {summary['score']}/{summary['total']} "
                f"in {format_time(summary['total_time'])}"
            )

            failed = [r for r in summary['results'] if not r.correct]
            if failed and verbose:
                print(f"\n  Failed positions ({algorithm.value}, depth {depth}):")
                for r in failed:
                    print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Algorithm':<15} {'Depth':<8} {'Correct':<10} {'Avg Time':<12} {'Nodes':>12} {'TT Hit %':>10}")
    print("-" * 80)

    for r in all_results:
        lookups = r['tt_hits'] + r['tt_misses']
        tt_hit_rate = 100 * r['tt_hits'] / lookups if lookups > 0 else 0
        correct = f"{r['score']}/{r['total']}"
        print(
            f"{r['algorithm'].value:<15} {r['depth']:<8} {correct:<10} "
            f"{format_time(r['avg_time']):<12} {r['total_nodes']:>12,} {tt_hit_rate:>9.1f}%"
        )

    print("=" * 80)

    # Node counts on the opening position
    print("\nOPENING POSITION (X to move)")
    print("-" * 80)
    for depth in depths:
        comparison = compare_algorithms(Board(), Cell.PLAYER_A, depth, evaluator)
        columns = {result.column for result in comparison.values()}
        scores = {result.evaluation for result in comparison.values()}
        nodes = ", ".join(
            f"{algorithm.value}={result.nodes_visited:,}"
            for algorithm, result in comparison.items()
        )
        agreement = "agree" if len(columns) == 1 and len(scores) == 1 else "DISAGREE"
        print(f"  depth {depth}: {agreement} ({nodes})")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the tactical benchmark for each search algorithm"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="3,4,5",
        help="Comma-separated list of depths to test (default: 3,4,5)"
    )
    parser.add_argument(
        "--algorithms",
        type=str,
        default=",".join(a.value for a in Algorithm),
        help="Comma-separated list of algorithms (default: all)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
        algorithms = [Algorithm(a.strip().lower()) for a in args.algorithms.split(",")]
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        run_benchmark(depths, algorithms, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
