"""
MTD(f) Search

MTD(f) finds the minimax value of a position through a series of null-window
(zero-width) alpha-beta searches. Each search only answers "is the value
below beta?", which prunes far more than a full-window search. The answers
narrow a [lower, upper] interval until it closes on the exact value.

This only pays off with a transposition table: successive null-window
searches revisit the same tree, and the stored bounds let them skip
everything already proven.

Key Components:
    - memory_enhanced_alpha_beta: alpha-beta with table probes, driven by
      the side to move rather than a maximizing flag
    - mtdf: null-window convergence loop for one depth
    - iterative_deepening_mtdf: runs mtdf at depth 1, 2, ..., seeding each
      depth with the previous depth's value

Convergence:
    Scores are integers. A fail-high raises the lower bound to at least beta
    and a fail-low drops the upper bound below beta, so the interval shrinks
    strictly on every iteration and the loop terminates.

References:
    - Plaat et al., "Best-First Fixed-Depth Minimax Algorithms" (1996)
    - MTD(f): https://www.chessprogramming.org/MTD(f)
"""

from typing import Optional

from connect4_engine.board.representation import Board, Cell, opponent
from connect4_engine.board.rules import apply_move, legal_moves
from connect4_engine.evaluation.base import Evaluator
from connect4_engine.search.minimax import (
    NodeCounter,
    classify_bound,
    leaf_score,
    probe,
)
from connect4_engine.search.transposition import TranspositionTable, position_key


def memory_enhanced_alpha_beta(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    to_move: Cell,
    subject: Cell,
    evaluator: Evaluator,
    transposition_table: TranspositionTable,
    nodes: Optional[NodeCounter] = None,
) -> int:
    """
    Alpha-beta with transposition table, parameterized by the side to move.

    The node maximizes iff to_move is the subject. Table discipline is the
    same as alpha_beta_tt(): probe first, store interior results with a
    bound flag from the entry window, never store leaves.

    Args:
        board: Current position
        depth: Remaining search depth
        alpha: Lower window bound
        beta: Upper window bound
        to_move: Player to move at this node
        subject: Player the search maximizes for
        evaluator: Position evaluation function
        transposition_table: Cache shared by every search of the game
        nodes: Optional counter incremented once per visited node

    Returns:
        int: Fail-soft score from subject's perspective
    """
    if nodes is not None:
        nodes.visit()

    original_alpha = alpha
    original_beta = beta

    key = position_key(board, to_move)
    entry = transposition_table.lookup(key, depth)
    cutoff, alpha, beta = probe(entry, alpha, beta)
    if cutoff is not None:
        return cutoff

    score = leaf_score(board, depth, subject, evaluator)
    if score is not None:
        return score

    maximizing = to_move == subject
    next_to_move = opponent(to_move)
    best = -float("inf") if maximizing else float("inf")

    for column in legal_moves(board):
        child = apply_move(board, column, to_move)
        eval_score = memory_enhanced_alpha_beta(
            child, depth - 1, alpha, beta, next_to_move, subject, evaluator,
            transposition_table, nodes,
        )
        if maximizing:
            best = max(best, eval_score)
            alpha = max(alpha, eval_score)
        else:
            best = min(best, eval_score)
            beta = min(beta, eval_score)
        if beta <= alpha:
            break

    transposition_table.store(
        key, depth, best, classify_bound(best, original_alpha, original_beta)
    )
    return best


def mtdf(
    board: Board,
    depth: int,
    first_guess: int,
    to_move: Cell,
    subject: Cell,
    evaluator: Evaluator,
    transposition_table: TranspositionTable,
    nodes: Optional[NodeCounter] = None,
) -> int:
    """
    Compute the minimax value of a position with null-window searches.

    Args:
        board: Position to search
        depth: Search depth
        first_guess: Starting estimate (closer guesses converge faster)
        to_move: Player to move at the root of this search
        subject: Player the search maximizes for
        evaluator: Position evaluation function
        transposition_table: Cache shared by every search of the game
        nodes: Optional counter incremented once per visited node

    Returns:
        int: Minimax value at the given depth from subject's perspective
    """
    g = first_guess
    lower = -float("inf")
    upper = float("inf")

    while lower < upper:
        beta = max(g, lower + 1)
        g = memory_enhanced_alpha_beta(
            board, depth, beta - 1, beta, to_move, subject, evaluator,
            transposition_table, nodes,
        )
        if g < beta:
            upper = g
        else:
            lower = g

    return g


def iterative_deepening_mtdf(
    board: Board,
    depth: int,
    to_move: Cell,
    subject: Cell,
    evaluator: Evaluator,
    transposition_table: TranspositionTable,
    nodes: Optional[NodeCounter] = None,
) -> int:
    """
    Run mtdf() at increasing depths up to depth.

    Each depth starts from the previous depth's value (0 for the first), and
    the entries stored by shallow passes speed up the deeper ones. A depth of
    0 runs a single mtdf() at depth 0.

    Returns:
        int: Value at the requested depth from subject's perspective
    """
    if depth == 0:
        return mtdf(
            board, 0, 0, to_move, subject, evaluator, transposition_table, nodes
        )

    guess = 0
    for d in range(1, depth + 1):
        guess = mtdf(
            board, d, guess, to_move, subject, evaluator, transposition_table, nodes
        )
    return guess
