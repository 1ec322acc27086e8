"""
Minimax Search with Alpha-Beta Pruning

This module implements the two fixed-depth search strategies of the engine.
Minimax explores the game tree assuming optimal play from both sides, and
alpha-beta pruning skips branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Fail-soft: The returned score may lie outside the [alpha, beta] window;
      it is then a bound on the true value, not the value itself
    - Move Ordering: Columns are searched in ascending order, so on equal
      scores the lowest column is kept

Scores are always from the search subject's perspective: the maximizing
side drops subject pieces, the minimizing side drops opponent pieces.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (7), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

from typing import Optional

from connect4_engine.board.representation import Board, Cell, opponent
from connect4_engine.board.rules import apply_move, is_full, legal_moves
from connect4_engine.evaluation.base import Evaluator
from connect4_engine.search.transposition import (
    NodeType,
    TranspositionTable,
    position_key,
)


class NodeCounter:
    """
    Accumulator for the number of nodes visited by a search.

    One counter is passed down the whole recursion of a move selection, so
    the root sees the total across every root move. Diagnostic only: the
    count never influences the search.
    """

    __slots__ = ("count",)

    def __init__(self):
        self.count = 0

    def visit(self):
        self.count += 1

    def __repr__(self) -> str:
        return f"NodeCounter(count={self.count})"


def leaf_score(board: Board, depth: int, subject: Cell, evaluator: Evaluator) -> Optional[int]:
    """
    Score a node that is not expanded further.

    Terminal checks take priority over the depth limit: a won position is
    scored as a win even at depth 0.

    Args:
        board: Current position
        depth: Remaining depth
        subject: Player the search maximizes for
        evaluator: Position evaluation function

    Returns:
        Win/loss score, static evaluation at depth 0 or on a full board,
        or None if the node must be expanded
    """
    terminal_score = evaluator.evaluate_terminal(board, subject, depth)
    if terminal_score is not None:
        return terminal_score

    if depth == 0 or is_full(board):
        return evaluator.evaluate(board, subject)

    return None


def alpha_beta(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    subject: Cell,
    evaluator: Evaluator,
    nodes: Optional[NodeCounter] = None,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Current position
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score the maximizer can already force
        beta: Best score the minimizer can already force
        maximizing: True if the subject is to move at this node
        subject: Player the search maximizes for
        evaluator: Position evaluation function
        nodes: Optional counter incremented once per visited node

    Returns:
        int: Fail-soft score of the position from subject's perspective

    Algorithm:
        1. Win for either side → ±(WIN_SCORE + depth)
        2. Depth 0 or full board → static evaluation
        3. For each legal column (ascending):
            a. Drop the mover's piece (new board)
            b. Recursively search (depth - 1, other side)
            c. Update alpha/beta
            d. Prune if beta <= alpha
        4. Return best score found
    """
    if nodes is not None:
        nodes.visit()

    score = leaf_score(board, depth, subject, evaluator)
    if score is not None:
        return score

    if maximizing:
        max_eval = -float("inf")
        for column in legal_moves(board):
            child = apply_move(board, column, subject)
            eval_score = alpha_beta(
                child, depth - 1, alpha, beta, False, subject, evaluator, nodes
            )
            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                break
        return max_eval

    else:
        other = opponent(subject)
        min_eval = float("inf")
        for column in legal_moves(board):
            child = apply_move(board, column, other)
            eval_score = alpha_beta(
                child, depth - 1, alpha, beta, True, subject, evaluator, nodes
            )
            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)

            # Alpha cutoff: Maximizing player won't allow this branch
            if beta <= alpha:
                break
        return min_eval


def classify_bound(score: int, original_alpha: float, original_beta: float) -> NodeType:
    """
    Bound flag for a fail-soft score searched with [original_alpha, original_beta].

    Returns:
        UPPER_BOUND if score <= original_alpha, LOWER_BOUND if
        score >= original_beta, EXACT otherwise
    """
    if score <= original_alpha:
        return NodeType.UPPER_BOUND
    if score >= original_beta:
        return NodeType.LOWER_BOUND
    return NodeType.EXACT


def probe(entry, alpha: float, beta: float):
    """
    Apply a usable table entry to the current window.

    Args:
        entry: TTEntry returned by TranspositionTable.lookup (or None)
        alpha: Current alpha
        beta: Current beta

    Returns:
        Tuple of (cutoff_value, alpha, beta). cutoff_value is the entry's
        value when it settles the node (exact entry or a bound that closes
        the window), None otherwise.
    """
    if entry is None:
        return None, alpha, beta

    if entry.node_type == NodeType.EXACT:
        return entry.value, alpha, beta
    if entry.node_type == NodeType.LOWER_BOUND:
        alpha = max(alpha, entry.value)
    elif entry.node_type == NodeType.UPPER_BOUND:
        beta = min(beta, entry.value)

    if alpha >= beta:
        return entry.value, alpha, beta
    return None, alpha, beta


def alpha_beta_tt(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    subject: Cell,
    evaluator: Evaluator,
    transposition_table: TranspositionTable,
    nodes: Optional[NodeCounter] = None,
) -> int:
    """
    Alpha-beta search backed by a transposition table.

    Same recursion as alpha_beta(). Before the terminal checks, the table is
    probed with the key of (board, side to move); entries searched at least
    as deep as the current node either settle it or tighten the window.
    Interior results are stored with a bound flag derived from the window
    the node was entered with. Terminal and leaf scores are never stored.

    Args:
        board: Current position
        depth: Remaining search depth
        alpha: Lower window bound
        beta: Upper window bound
        maximizing: True if the subject is to move at this node
        subject: Player the search maximizes for
        evaluator: Position evaluation function
        transposition_table: Cache shared by every search of the game
        nodes: Optional counter incremented once per visited node

    Returns:
        int: Fail-soft score of the position from subject's perspective
    """
    if nodes is not None:
        nodes.visit()

    original_alpha = alpha
    original_beta = beta

    to_move = subject if maximizing else opponent(subject)
    key = position_key(board, to_move)

    entry = transposition_table.lookup(key, depth)
    cutoff, alpha, beta = probe(entry, alpha, beta)
    if cutoff is not None:
        return cutoff

    score = leaf_score(board, depth, subject, evaluator)
    if score is not None:
        return score

    if maximizing:
        best = -float("inf")
        for column in legal_moves(board):
            child = apply_move(board, column, subject)
            eval_score = alpha_beta_tt(
                child, depth - 1, alpha, beta, False, subject, evaluator,
                transposition_table, nodes,
            )
            best = max(best, eval_score)
            alpha = max(alpha, eval_score)
            if beta <= alpha:
                break
    else:
        best = float("inf")
        for column in legal_moves(board):
            child = apply_move(board, column, to_move)
            eval_score = alpha_beta_tt(
                child, depth - 1, alpha, beta, True, subject, evaluator,
                transposition_table, nodes,
            )
            best = min(best, eval_score)
            beta = min(beta, eval_score)
            if beta <= alpha:
                break

    transposition_table.store(
        key, depth, best, classify_bound(best, original_alpha, original_beta)
    )
    return best
