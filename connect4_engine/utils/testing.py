"""
Engine Testing and Benchmarking

This module provides a tactical test suite and comparison helpers for
evaluating the search strategies.

Tactical Suite:
    Short positions with a known best column: immediate wins in every
    direction, forced blocks, and taking a win instead of blocking. A
    correct engine solves all of them from depth 2 upwards, with every
    algorithm.

Evaluation Metrics:
    - Correct Moves: Number of positions where the engine found a best move
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes visited

Algorithm Comparison:
    compare_algorithms() searches one position with every strategy. The
    columns and evaluations must agree; only the node counts differ.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from connect4_engine.board.representation import Board, Cell
from connect4_engine.evaluation.base import Evaluator
from connect4_engine.search.selector import Algorithm, SearchResult, select_move
from connect4_engine.search.transposition import TranspositionTable

logger = logging.getLogger(__name__)


@dataclass
class TestPosition:
    """
    A test position with expected best column(s).

    Attributes:
        board: Position in text notation (rows top to bottom, '/' separated)
        subject: Player to move
        best_moves: List of acceptable best columns
        description: Human-readable description of the position
        id: Position identifier (e.g., "TAC.01")
    """
    board: str
    subject: Cell
    best_moves: List[int]
    description: str = ""
    id: str = ""

    __test__ = False  # not a pytest test class


@dataclass
class TestResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Column the engine chose (-1 if the search failed)
        score: Evaluation of the chosen column
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
        algorithm: Search strategy used
    """
    position: TestPosition
    found_move: int
    score: int
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0
    algorithm: Algorithm = Algorithm.ALPHA_BETA

    __test__ = False


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TestPosition(
        id="TAC.01",
        board="......./......./......./......./.OOO.../.XXX...",
        subject=Cell.PLAYER_A,
        best_moves=[0, 4],
        description="X completes the bottom row on either side"
    ),
    TestPosition(
        id="TAC.02",
        board="......./......./......./X....../XO...../XOO....",
        subject=Cell.PLAYER_A,
        best_moves=[0],
        description="X completes a vertical four"
    ),
    TestPosition(
        id="TAC.03",
        board="......./......./......./..XX.../.XOO.../XOXO..O",
        subject=Cell.PLAYER_A,
        best_moves=[3],
        description="X completes the rising diagonal"
    ),
    TestPosition(
        id="TAC.04",
        board="......./......./......./......./XX...../OOO...X",
        subject=Cell.PLAYER_A,
        best_moves=[3],
        description="X must block the bottom row"
    ),
    TestPosition(
        id="TAC.05",
        board="......./......./......./......O/......O/XX...XO",
        subject=Cell.PLAYER_A,
        best_moves=[6],
        description="X must block the vertical threat"
    ),
    TestPosition(
        id="TAC.06",
        board="......./......./......./......O/......O/.XXX..O",
        subject=Cell.PLAYER_A,
        best_moves=[0, 4],
        description="X wins instead of blocking"
    ),
    TestPosition(
        id="TAC.07",
        board="......./......./......./......./.XXX.../.OOO...",
        subject=Cell.PLAYER_B,
        best_moves=[0, 4],
        description="O wins on the bottom row instead of blocking"
    ),
]


def evaluate_position(
    position: TestPosition,
    depth: int,
    algorithm: Algorithm = Algorithm.ALPHA_BETA,
    evaluator: Optional[Evaluator] = None,
    transposition_table: Optional[TranspositionTable] = None,
    verbose: bool = False,
) -> TestResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        depth: Search depth
        algorithm: Search strategy
        evaluator: Position evaluator (default: WindowEvaluator)
        transposition_table: Optional TT (a fresh one is used if omitted)
        verbose: If True, print detailed output

    Returns:
        TestResult with engine's move and whether it was correct
    """
    board = Board.from_string(position.board)

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(board)
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()

    try:
        result = select_move(
            board,
            algorithm,
            depth,
            position.subject,
            evaluator=evaluator,
            transposition_table=transposition_table,
        )
    except ValueError as e:
        logger.error(f"Error evaluating position {position.id}: {e}")
        return TestResult(
            position=position,
            found_move=-1,
            score=0,
            correct=False,
            time_taken=time.time() - start_time,
            depth=depth,
            algorithm=algorithm,
        )

    time_taken = time.time() - start_time
    correct = result.column in position.best_moves

    if verbose:
        print(f"Engine found: {result.column} (score: {result.evaluation})")
        print(f"Nodes searched: {result.nodes_visited:,}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'✓ CORRECT' if correct else '✗ WRONG'}")

    return TestResult(
        position=position,
        found_move=result.column,
        score=result.evaluation,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=result.nodes_visited,
        depth=depth,
        algorithm=algorithm,
    )


def run_tactical_suite(
    algorithm: Algorithm = Algorithm.ALPHA_BETA,
    depth: int = 4,
    evaluator: Optional[Evaluator] = None,
    positions: Optional[List[TestPosition]] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run the tactical test suite.

    Each position is searched with a fresh transposition table.

    Args:
        algorithm: Search strategy
        depth: Search depth (default: 4)
        evaluator: Position evaluator (default: WindowEvaluator)
        positions: Positions to run (default: TACTICAL_POSITIONS)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Total time
            - total_nodes: Nodes visited across all positions
    """
    if positions is None:
        positions = TACTICAL_POSITIONS

    if verbose:
        print("=" * 70)
        print(f"TACTICAL TEST SUITE ({algorithm.value}, depth {depth})")
        print("=" * 70)

    results = []
    correct_count = 0
    total_time = 0.0
    total_nodes = 0

    for position in positions:
        result = evaluate_position(
            position,
            depth,
            algorithm,
            evaluator,
            TranspositionTable(),
            verbose=verbose
        )
        results.append(result)

        if result.correct:
            correct_count += 1

        total_time += result.time_taken
        total_nodes += result.nodes_searched

    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{len(positions)} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")
        print(f"Total nodes: {total_nodes:,}")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
        'total_nodes': total_nodes,
    }


def compare_algorithms(
    board: Board,
    subject: Cell,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Dict[Algorithm, SearchResult]:
    """
    Search one position with every algorithm.

    Each algorithm gets its own fresh transposition table, so node counts
    are comparable.

    Returns:
        Dictionary mapping each Algorithm to its SearchResult
    """
    return {
        algorithm: select_move(
            board,
            algorithm,
            depth,
            subject,
            evaluator=evaluator,
            transposition_table=TranspositionTable(),
        )
        for algorithm in Algorithm
    }
