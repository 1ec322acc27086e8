"""
Evaluation Module

This module provides position evaluation functions for the search. The key
design principle is that evaluators are SWAPPABLE - every search strategy
works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - WindowEvaluator: Four-cell window scoring plus centre column bonus

Data Flow:
    Board + subject → evaluator.evaluate() → int
                                             Positive = subject advantage
                                             Negative = opponent advantage
"""

from connect4_engine.evaluation.base import Evaluator, WIN_SCORE
from connect4_engine.evaluation.window import WindowEvaluator

__all__ = ['Evaluator', 'WindowEvaluator', 'WIN_SCORE']
