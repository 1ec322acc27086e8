"""
Window-Based Heuristic Evaluation

This module implements the static evaluation used at non-terminal search
leaves. The board is cut into every line of four cells (69 windows) and
each window is scored by how many pieces of each side it holds.

Window Scores (subject's perspective):
    4 subject                 +100
    3 subject + 1 empty         +5
    2 subject + 2 empty         +2
    3 opponent + 1 empty        -4
    2 opponent + 2 empty        -1
    anything else                0

Centre Column:
    +3 for every subject piece in column 3

The heuristic is not anti-symmetric: evaluate(board, A) is generally not
-evaluate(board, B), because the opponent weights are smaller than the
subject weights.
"""

import numpy as np

from connect4_engine.board.representation import (
    Board,
    Cell,
    CENTER_COLUMN,
    WINDOW_COLS,
    WINDOW_ROWS,
)
from connect4_engine.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Window score table
# ============================================================================
# Indexed by [subject pieces, empty cells]; the opponent holds the rest.
#
#                 empty: 0    1    2    3    4
WINDOW_SCORES = np.array([
    [                    0,  -4,  -1,   0,   0],  # 0 subject
    [                    0,   0,   0,   0,   0],  # 1 subject
    [                    0,   0,   2,   0,   0],  # 2 subject
    [                    0,   5,   0,   0,   0],  # 3 subject
    [                  100,   0,   0,   0,   0],  # 4 subject
], dtype=np.int64)
#fmt: on

CENTER_PIECE_BONUS = 3


class WindowEvaluator(Evaluator):
    """
    Heuristic evaluation from four-cell windows plus centre control.

    Attributes:
        window_scores: (5, 5) table indexed by [subject count, empty count]
        center_bonus: Score per subject piece in the centre column
    """

    def __init__(self):
        self.window_scores = WINDOW_SCORES
        self.center_bonus = CENTER_PIECE_BONUS

    def evaluate(self, board: Board, subject: Cell) -> int:
        """
        Score a position for subject.

        Args:
            board: Position to evaluate
            subject: Player whose score the search is maximizing

        Returns:
            int: Sum of window scores plus the centre column bonus
        """
        cells = board.cells
        lines = cells[WINDOW_ROWS, WINDOW_COLS]

        subject_counts = np.count_nonzero(lines == subject, axis=1)
        empty_counts = np.count_nonzero(lines == Cell.EMPTY, axis=1)

        score = int(self.window_scores[subject_counts, empty_counts].sum())

        center_pieces = int(np.count_nonzero(cells[:, CENTER_COLUMN] == subject))
        score += center_pieces * self.center_bonus

        return score
