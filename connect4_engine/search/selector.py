"""
Move Selection

Root-level search: score every legal column for the subject with the chosen
strategy and keep the best one.

Algorithms:
    - ALPHA_BETA: plain alpha-beta, full window per root move
    - TRANSPOSITION: alpha-beta with the transposition table
    - MTDF: iterative-deepening MTD(f), one independent pass per root move

All three return the same column and evaluation for the same position and
depth; they differ only in how many nodes they visit.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from connect4_engine.board.representation import Board, Cell, PLAYERS, opponent
from connect4_engine.board.rules import apply_move, legal_moves
from connect4_engine.evaluation.base import Evaluator
from connect4_engine.evaluation.window import WindowEvaluator
from connect4_engine.exceptions import InvalidDepthError
from connect4_engine.search.minimax import NodeCounter, alpha_beta, alpha_beta_tt
from connect4_engine.search.mtdf import iterative_deepening_mtdf
from connect4_engine.search.transposition import TranspositionTable

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Search strategy used by the move selector."""
    ALPHA_BETA = "alphabeta"
    TRANSPOSITION = "transposition"
    MTDF = "mtdf"


@dataclass
class SearchResult:
    """
    Outcome of a move selection.

    Attributes:
        column: Chosen column (0-6)
        evaluation: Score of that column from the subject's perspective
        nodes_visited: Nodes visited across all root moves
    """
    column: int
    evaluation: int
    nodes_visited: int


def validate_depth(depth) -> int:
    """
    Check a root search depth.

    Raises:
        InvalidDepthError: If depth is not an integer >= 1
    """
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise InvalidDepthError(depth)
    return depth


# Child scorers: (child board, remaining depth, subject, evaluator, table, nodes) -> score
ChildScorer = Callable[
    [Board, int, Cell, Evaluator, TranspositionTable, NodeCounter], int
]


def _score_alpha_beta(child, depth, subject, evaluator, table, nodes):
    return alpha_beta(
        child, depth, -float("inf"), float("inf"), False, subject, evaluator, nodes
    )


def _score_transposition(child, depth, subject, evaluator, table, nodes):
    return alpha_beta_tt(
        child, depth, -float("inf"), float("inf"), False, subject, evaluator,
        table, nodes,
    )


def _score_mtdf(child, depth, subject, evaluator, table, nodes):
    return iterative_deepening_mtdf(
        child, depth, opponent(subject), subject, evaluator, table, nodes
    )


CHILD_SCORERS: Dict[Algorithm, ChildScorer] = {
    Algorithm.ALPHA_BETA: _score_alpha_beta,
    Algorithm.TRANSPOSITION: _score_transposition,
    Algorithm.MTDF: _score_mtdf,
}


def select_move(
    board: Board,
    algorithm: Algorithm,
    depth: int,
    subject: Cell,
    evaluator: Optional[Evaluator] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> SearchResult:
    """
    Find the best column for subject.

    Args:
        board: Current position
        algorithm: Search strategy (Algorithm member or its string value)
        depth: Search depth in plies, counting the root move
        subject: Player to move and to maximize for
        evaluator: Position evaluator (default: WindowEvaluator)
        transposition_table: Cache to read and refine. Pass the session's
                             table to share work across a game; a fresh
                             table is used when omitted. Ignored by
                             ALPHA_BETA.

    Returns:
        SearchResult with the chosen column, its evaluation and the node
        count accumulated over every root move

    Raises:
        InvalidDepthError: If depth is not an integer >= 1
        ValueError: If subject is not a player or no legal moves are
                    available (game over)
    """
    validate_depth(depth)
    algorithm = Algorithm(algorithm)

    if subject not in PLAYERS:
        raise ValueError(f"Not a player: {subject!r}")

    moves = legal_moves(board)
    if not moves:
        raise ValueError("No legal moves available")

    if evaluator is None:
        evaluator = WindowEvaluator()
    if transposition_table is None:
        transposition_table = TranspositionTable()

    score_child = CHILD_SCORERS[algorithm]
    nodes = NodeCounter()

    best_column = moves[0]
    best_score = -float("inf")

    for column in moves:
        child = apply_move(board, column, subject)
        score = score_child(child, depth - 1, subject, evaluator, transposition_table, nodes)

        logger.debug(f"{algorithm.value}: column {column} scored {score}")

        if score > best_score:
            best_score = score
            best_column = column

    logger.debug(
        f"{algorithm.value} depth={depth}: best column {best_column}, "
        f"score={best_score}, nodes={nodes.count}"
    )

    return SearchResult(
        column=best_column,
        evaluation=int(best_score),
        nodes_visited=nodes.count,
    )


class SearchSession:
    """
    Search state for one game.

    Owns the evaluator and the transposition table. The table persists
    across every move selection of the game and is cleared by reset().

    Stored scores are relative to the subject of the search, while position
    keys only encode the side to move. The session remembers the subject its
    table was filled for and clears the table when asked to search for the
    other player.

    Attributes:
        evaluator: Position evaluator
        transposition_table: Cache shared by all searches of the game
        subject: Player the table currently holds scores for (None if empty)
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, tt_max_size: Optional[int] = None):
        self.evaluator = evaluator if evaluator else WindowEvaluator()
        self.transposition_table = TranspositionTable(max_size=tt_max_size)
        self.subject: Optional[Cell] = None

    def select_move(self, board: Board, algorithm: Algorithm, depth: int, subject: Cell) -> SearchResult:
        """Select a move using the session's evaluator and table."""
        if self.subject is not None and self.subject != subject:
            logger.debug(f"Subject changed from {self.subject!r} to {subject!r}")
            self.reset()

        result = select_move(
            board,
            algorithm,
            depth,
            subject,
            evaluator=self.evaluator,
            transposition_table=self.transposition_table,
        )
        self.subject = subject
        return result

    def reset(self):
        """Forget every cached result (start of a new game)."""
        logger.debug(f"Resetting search state: {self.transposition_table}")
        self.transposition_table.clear()
        self.subject = None

    def __repr__(self) -> str:
        return (
            f"SearchSession(evaluator={self.evaluator!r}, subject={self.subject!r}, "
            f"table={self.transposition_table!r})"
        )
