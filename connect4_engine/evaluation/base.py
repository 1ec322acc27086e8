"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between evaluators without
modifying the search algorithms.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() returns an integer score from the subject's perspective
    3. Positive = good for the subject, Negative = good for the opponent
    4. Won/lost positions are scored by evaluate_terminal(), never by
       evaluate(); the search checks terminals first

Convention:
    - Wins are worth WIN_SCORE plus the remaining search depth, so a win
      found closer to the root outscores a distant one, and a distant loss
      outscores a near one
    - Heuristic scores stay far below WIN_SCORE
"""

from abc import ABC, abstractmethod
from typing import Optional

from connect4_engine.board.representation import Board, Cell, opponent
from connect4_engine.board.rules import winner, winning_outcome


# Evaluation constants
WIN_SCORE = 10000  # Base score for four in a row


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with every search
    strategy.
    """

    @abstractmethod
    def evaluate(self, board: Board, subject: Cell) -> int:
        """
        Score a non-terminal position for subject.

        Args:
            board: Position to evaluate
            subject: Player whose score the search is maximizing

        Returns:
            int: Heuristic score (higher is better for subject)
        """
        pass

    def evaluate_terminal(self, board: Board, subject: Cell, depth: int = 0) -> Optional[int]:
        """
        Score a won position.

        Args:
            board: Position to check
            subject: Player whose score the search is maximizing
            depth: Remaining search depth at this node

        Returns:
            WIN_SCORE + depth if subject has four in a row,
            -WIN_SCORE - depth if the opponent has,
            None if nobody has won
        """
        result = winner(board)

        if result == winning_outcome(subject):
            return WIN_SCORE + depth
        if result == winning_outcome(opponent(subject)):
            return -WIN_SCORE - depth

        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
