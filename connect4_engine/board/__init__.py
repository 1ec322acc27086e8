"""
Board Module

This module provides the Connect Four position model and the game rules.

Key Components:
    - Board: Immutable 6x7 grid (numpy-backed), text notation parsing
    - Cell / Outcome: Cell contents and game results
    - Rules: legal_moves, apply_move, is_full, winner, outcome

Data Flow:
    Board + column → apply_move() → new Board → winner() / outcome()
"""

from connect4_engine.board.representation import (
    Board,
    Cell,
    Outcome,
    opponent,
    ROWS,
    COLS,
)
from connect4_engine.board.rules import (
    apply_move,
    is_full,
    is_terminal,
    legal_moves,
    outcome,
    winner,
)

__all__ = [
    'Board',
    'Cell',
    'Outcome',
    'opponent',
    'ROWS',
    'COLS',
    'apply_move',
    'is_full',
    'is_terminal',
    'legal_moves',
    'outcome',
    'winner',
]
