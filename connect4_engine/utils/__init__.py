"""
Utilities Module

This module provides utility functions for testing and benchmarking the
engine.

Key Components:
    - Tactical test suite: positions with a known best column
    - compare_algorithms: run every search strategy on one position

Success Metrics:
    - Tactical suite: every position solved at depth 4, by every algorithm
"""

from connect4_engine.utils.testing import (
    TACTICAL_POSITIONS,
    compare_algorithms,
    evaluate_position,
    run_tactical_suite,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'compare_algorithms',
    'evaluate_position',
    'run_tactical_suite',
]
