"""
Engine Exceptions

Errors raised by the rules engine and the move selector. Both concrete
errors also derive from ValueError so callers that already guard against
bad input with ``except ValueError`` keep working.

Usage:
    from connect4_engine.exceptions import IllegalMoveError

    try:
        board = apply_move(board, column, Cell.PLAYER_A)
    except IllegalMoveError as e:
        logger.warning(f"Rejected move: {e}")
"""

__all__ = [
    "Connect4EngineError",
    "IllegalMoveError",
    "InvalidDepthError",
]


class Connect4EngineError(Exception):
    """Base exception for all engine errors."""


class IllegalMoveError(Connect4EngineError, ValueError):
    """
    A piece was dropped into a full or out-of-range column.

    Attributes:
        column: The rejected column index
    """

    def __init__(self, column: int, reason: str):
        self.column = column
        super().__init__(f"Illegal move in column {column}: {reason}")


class InvalidDepthError(Connect4EngineError, ValueError):
    """A search was requested with a depth below 1."""

    def __init__(self, depth):
        self.depth = depth
        super().__init__(f"Search depth must be an integer >= 1, got {depth!r}")
