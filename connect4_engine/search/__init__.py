"""
Search Module

This module implements the Connect Four search strategies. All of them are
minimax with alpha-beta pruning at heart; they differ in how they reuse work
through the transposition table.

Key Components:
    - alpha_beta: Plain alpha-beta search
    - alpha_beta_tt: Alpha-beta with transposition table probes and stores
    - mtdf / iterative_deepening_mtdf: Null-window MTD(f) driver
    - select_move / SearchSession: Root-level move selection
    - TranspositionTable: Position cache with bound flags
"""

from connect4_engine.search.minimax import NodeCounter, alpha_beta, alpha_beta_tt
from connect4_engine.search.mtdf import (
    iterative_deepening_mtdf,
    memory_enhanced_alpha_beta,
    mtdf,
)
from connect4_engine.search.selector import (
    Algorithm,
    SearchResult,
    SearchSession,
    select_move,
)
from connect4_engine.search.transposition import (
    NodeType,
    TranspositionTable,
    position_key,
)

__all__ = [
    'NodeCounter',
    'alpha_beta',
    'alpha_beta_tt',
    'memory_enhanced_alpha_beta',
    'mtdf',
    'iterative_deepening_mtdf',
    'Algorithm',
    'SearchResult',
    'SearchSession',
    'select_move',
    'NodeType',
    'TranspositionTable',
    'position_key',
]
