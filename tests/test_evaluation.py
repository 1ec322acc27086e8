"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Window scoring weights for both sides
    - Centre column bonus
    - Asymmetry between the two perspectives
    - Terminal scoring (wins and losses, depth adjustment)
"""

import pytest

from connect4_engine.board import Board, Cell
from connect4_engine.evaluation import Evaluator, WindowEvaluator, WIN_SCORE


A = Cell.PLAYER_A
B = Cell.PLAYER_B


def bottom_row(text: str) -> Board:
    """Board with only the given bottom row filled."""
    return Board.from_string("......./......./......./......./......./" + text)


class TestWindowEvaluator:
    """Tests for WindowEvaluator."""

    @pytest.fixture
    def evaluator(self):
        """Create a WindowEvaluator instance."""
        return WindowEvaluator()

    def test_empty_board_is_zero(self, evaluator):
        """Test that an empty board scores 0 for both players."""
        board = Board()

        assert evaluator.evaluate(board, A) == 0
        assert evaluator.evaluate(board, B) == 0

    def test_centre_bonus(self, evaluator):
        """
        Test the centre column bonus.

        A lone piece fills no scoring window, so only the +3 centre bonus
        counts, and only for its owner.
        """
        board = bottom_row("...X...")

        assert evaluator.evaluate(board, A) == 3
        assert evaluator.evaluate(board, B) == 0

    def test_off_centre_piece_is_zero(self, evaluator):
        board = bottom_row("X......")
        assert evaluator.evaluate(board, A) == 0

    def test_two_in_a_row(self, evaluator):
        """
        Test two adjacent pieces.

        Three bottom-row windows hold both pieces and two empty cells:
        +2 each for the owner, -1 each for the opponent.
        """
        board = bottom_row("..XX...")

        assert evaluator.evaluate(board, A) == 3 * 2 + 3
        assert evaluator.evaluate(board, B) == -3

    def test_three_in_a_row(self, evaluator):
        """
        Test three adjacent pieces.

        Windows 0-3 and 1-4 hold three pieces (+5 / -4), window 2-5 holds
        two (+2 / -1).
        """
        board = bottom_row(".XXX...")

        assert evaluator.evaluate(board, A) == 5 + 5 + 2 + 3
        assert evaluator.evaluate(board, B) == -4 - 4 - 1

    def test_not_anti_symmetric(self, evaluator):
        """Test that one side's gain is not the other side's loss."""
        board = bottom_row(".XXX...")

        assert evaluator.evaluate(board, A) != -evaluator.evaluate(board, B)

    def test_opponent_three(self, evaluator):
        """Test that the opponent's three scores negatively for the subject."""
        board = bottom_row(".OOO...")
        assert evaluator.evaluate(board, A) == -9

    def test_four_in_a_row_window(self, evaluator):
        """Test that a complete window is worth +100."""
        board = bottom_row("XXXX...")
        assert evaluator.evaluate(board, A) == 100 + 5 + 2 + 3

    def test_mixed_window_scores_zero(self, evaluator):
        """Test that a window with both colours contributes nothing."""
        board = bottom_row("XXO....")

        # Windows 0-3 and 1-4 are mixed; window 2-5 holds a single O
        assert evaluator.evaluate(board, A) == 0
        assert evaluator.evaluate(board, B) == 0

    def test_evaluator_is_stateless(self, evaluator):
        """Test that repeated calls return the same score."""
        board = Board.from_string("......./......./......./...O.../..XX.../.OXXO..")
        first = evaluator.evaluate(board, A)

        assert evaluator.evaluate(board, A) == first

    def test_repr(self, evaluator):
        assert repr(evaluator) == "WindowEvaluator()"


class TestTerminalScoring:
    """Tests for Evaluator.evaluate_terminal."""

    @pytest.fixture
    def evaluator(self):
        return WindowEvaluator()

    @pytest.fixture
    def won_by_a(self):
        return bottom_row("XXXX...")

    def test_subject_win(self, evaluator, won_by_a):
        assert evaluator.evaluate_terminal(won_by_a, A, depth=0) == WIN_SCORE

    def test_win_includes_depth(self, evaluator, won_by_a):
        """Test that wins nearer the root score higher."""
        assert evaluator.evaluate_terminal(won_by_a, A, depth=3) == WIN_SCORE + 3

    def test_opponent_win(self, evaluator, won_by_a):
        assert evaluator.evaluate_terminal(won_by_a, B, depth=3) == -WIN_SCORE - 3

    def test_no_winner_returns_none(self, evaluator):
        board = bottom_row(".XXX...")
        assert evaluator.evaluate_terminal(board, A, depth=2) is None

    def test_evaluator_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Evaluator()
