"""
Transposition Table and Position Keys

This module implements a transposition table (TT) - a hash table that caches
search results so positions reached through different move orders are not
searched twice.

Position Keys:
    A key is the 42 raw cell bytes of the board followed by one byte naming
    the side to move. The encoding is exact (no collisions are possible),
    and the same grid with a different side to move gets a different key,
    because the value of a position depends on who plays next.

Bound Flags:
    Alpha-beta only proves the exact value of a node when its score lands
    strictly inside the search window. Otherwise the stored score is a bound:
        - EXACT: score is the true value at that depth
        - LOWER_BOUND: search failed high (true value >= score)
        - UPPER_BOUND: search failed low (true value <= score)

References:
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
"""

from enum import Enum
from typing import Dict, Optional

from connect4_engine.board.representation import Board, Cell


class NodeType(Enum):
    """
    Relationship between a cached score and the true minimax value.

    Determined from the alpha/beta window that was active when the entry
    was stored:
        - EXACT: alpha < score < beta
        - LOWER_BOUND: score >= beta (beta cutoff)
        - UPPER_BOUND: score <= alpha (no move raised alpha)
    """
    EXACT = 0
    LOWER_BOUND = 1
    UPPER_BOUND = 2


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        key: Position key the entry was stored under
        depth: Remaining search depth when the score was computed
        value: Score from the search subject's perspective
        node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
    """

    __slots__ = ("key", "depth", "value", "node_type")

    def __init__(self, key: bytes, depth: int, value: int, node_type: NodeType):
        self.key = key
        self.depth = depth
        self.value = value
        self.node_type = node_type

    def __repr__(self) -> str:
        return (
            f"TTEntry(depth={self.depth}, value={self.value}, "
            f"type={self.node_type.name})"
        )


def position_key(board: Board, to_move: Cell) -> bytes:
    """
    Compute the transposition key of a position.

    Args:
        board: Position
        to_move: Player whose turn it is

    Returns:
        43-byte key: one byte per cell (row-major, top row first) followed
        by the side to move
    """
    return board.cells.tobytes() + bytes((int(to_move),))


class TranspositionTable:
    """
    Transposition table for caching search results.

    The table lives for a whole game: every search of the session reads and
    refines it, and it must be cleared when a new game starts.

    Attributes:
        max_size: Maximum number of entries, or None for no limit
        table: Dictionary mapping position key → TTEntry
    """

    def __init__(self, max_size: Optional[int] = None):
        """
        Initialize transposition table.

        Args:
            max_size: Maximum number of entries. None (default) never
                      evicts; a positive value drops the oldest entry once
                      the limit is exceeded.
        """
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self.table: Dict[bytes, TTEntry] = {}
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def store(self, key: bytes, depth: int, value: int, node_type: NodeType):
        """
        Store a search result.

        Args:
            key: Position key (see position_key)
            depth: Remaining depth the result was searched to
            value: Score from the subject's perspective
            node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
        """
        existing = self.table.get(key)

        # Only replace if new depth >= old depth
        if existing is not None and depth < existing.depth:
            return

        self.table[key] = TTEntry(key, depth, value, node_type)

        if existing is None and self.max_size is not None and len(self.table) > self.max_size:
            oldest_key = next(iter(self.table))
            del self.table[oldest_key]
            self.evictions += 1

    def lookup(self, key: bytes, depth: int = 0) -> Optional[TTEntry]:
        """
        Look up a position.

        Args:
            key: Position key
            depth: Remaining depth of the current search (only entries
                   searched at least this deep are usable)

        Returns:
            TTEntry if found and usable, None otherwise
        """
        entry = self.table.get(key)

        if entry is not None and entry.depth >= depth:
            self.hits += 1
            return entry

        self.misses += 1
        return None

    def clear(self):
        """Clear all entries from the transposition table."""

        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get_stats(self) -> Dict[str, int | float]:
        """Get statistics about transposition table usage."""

        total_lookups = self.hits + self.misses
        hit_rate = (self.hits / total_lookups * 100) if total_lookups > 0 else 0

        return {
            'entries': len(self.table),
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
            'hit_rate': hit_rate,
        }

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: bytes) -> bool:
        return key in self.table

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"TranspositionTable(entries={stats['entries']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )
