"""
Connect Four Rules

Move legality, move application (with gravity), and win/draw detection.

All functions are pure: apply_move returns a new Board and leaves its
input untouched, so boards can be shared freely between search plies.

Validation policy:
    apply_move rejects illegal drops with IllegalMoveError. The search
    strategies only ever play columns returned by legal_moves(), so they
    never trigger it.
"""

from typing import List

import numpy as np

from connect4_engine.board.representation import (
    Board,
    Cell,
    COLS,
    Outcome,
    PLAYERS,
    WINDOW_COLS,
    WINDOW_ROWS,
)
from connect4_engine.exceptions import IllegalMoveError


def legal_moves(board: Board) -> List[int]:
    """
    Columns that can still receive a piece, in ascending order.

    The order matters: every search strategy iterates moves in this order,
    so on equal scores the lowest column wins.
    """
    top_row = board.cells[0]
    return [col for col in range(COLS) if top_row[col] == Cell.EMPTY]


def is_full(board: Board) -> bool:
    """True iff every cell of the top row is occupied."""
    return bool((board.cells[0] != Cell.EMPTY).all())


def apply_move(board: Board, column: int, player: Cell) -> Board:
    """
    Drop a piece for player into column.

    Args:
        board: Position to play from (not modified)
        column: Column index (0-6)
        player: Cell.PLAYER_A or Cell.PLAYER_B

    Returns:
        New Board with the piece in the lowest empty row of column

    Raises:
        IllegalMoveError: If column is out of range or full
        ValueError: If player is not a player cell
    """
    if player not in PLAYERS:
        raise ValueError(f"Not a player: {player!r}")

    if not 0 <= column < COLS:
        raise IllegalMoveError(column, "out of range")

    cells = board.cells
    if cells[0, column] != Cell.EMPTY:
        raise IllegalMoveError(column, "column is full")

    # Gravity: the lowest empty row is the last empty entry of the column
    row = int(np.flatnonzero(cells[:, column] == Cell.EMPTY)[-1])

    grid = cells.copy()
    grid[row, column] = player
    return Board._from_trusted(grid)


def winner(board: Board) -> Outcome:
    """
    Detect four in a row.

    Scans every horizontal, vertical and diagonal window of four cells.

    Returns:
        Outcome.WIN_A or Outcome.WIN_B for the player owning a complete
        window, Outcome.NONE otherwise
    """
    lines = board.cells[WINDOW_ROWS, WINDOW_COLS]

    if (lines == Cell.PLAYER_A).all(axis=1).any():
        return Outcome.WIN_A
    if (lines == Cell.PLAYER_B).all(axis=1).any():
        return Outcome.WIN_B
    return Outcome.NONE


def outcome(board: Board) -> Outcome:
    """
    Game result for a position.

    Returns:
        WIN_A / WIN_B if a player has four in a row, DRAW if the board is
        full without a winner, NONE while the game is still running
    """
    result = winner(board)
    if result is not Outcome.NONE:
        return result
    if is_full(board):
        return Outcome.DRAW
    return Outcome.NONE


def is_terminal(board: Board) -> bool:
    """True if the game is over (win or draw)."""
    return outcome(board) is not Outcome.NONE


def winning_outcome(player: Cell) -> Outcome:
    """Outcome reported when player completes four in a row."""
    return Outcome.WIN_A if player == Cell.PLAYER_A else Outcome.WIN_B
