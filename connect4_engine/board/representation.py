"""
Board Representation

This module defines the Connect Four grid and the values that can occupy
it. A Board wraps a read-only 6x7 numpy array, so every position is a value:
moves produce new boards (see rules.apply_move) and never modify an
existing one.

Grid Layout:
    - Row 0 = top of the board
    - Row 5 = bottom of the board (pieces land here first)
    - Column 0 = leftmost column
    - Column 6 = rightmost column

Text Notation:
    Six rows from top to bottom, separated by '/' or newlines.
        '.' = empty
        'X' = PLAYER_A
        'O' = PLAYER_B

    Example (PLAYER_A in the centre of the bottom row):
        ......./......./......./......./......./...X...

Windows:
    Every straight line of 4 cells (horizontal, vertical and both
    diagonals) is precomputed as numpy index arrays. There are 69 of them
    on a 6x7 board; the rules engine and the evaluator both read them.
"""

from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Tuple

import numpy as np

ROWS = 6
COLS = 7
CENTER_COLUMN = COLS // 2
WINDOW_LENGTH = 4


class Cell(IntEnum):
    """Contents of a single grid cell."""
    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2


class Outcome(Enum):
    """Game result for a position."""
    NONE = 0
    WIN_A = 1
    WIN_B = 2
    DRAW = 3


PLAYERS = (Cell.PLAYER_A, Cell.PLAYER_B)

CELL_TO_SYMBOL = {
    Cell.EMPTY: ".",
    Cell.PLAYER_A: "X",
    Cell.PLAYER_B: "O",
}
SYMBOL_TO_CELL = {symbol: cell for cell, symbol in CELL_TO_SYMBOL.items()}


def opponent(player: Cell) -> Cell:
    """
    Return the other player.

    Args:
        player: Cell.PLAYER_A or Cell.PLAYER_B

    Raises:
        ValueError: If player is Cell.EMPTY
    """
    if player == Cell.PLAYER_A:
        return Cell.PLAYER_B
    if player == Cell.PLAYER_B:
        return Cell.PLAYER_A
    raise ValueError(f"Not a player: {player!r}")


def _build_windows() -> Tuple[np.ndarray, np.ndarray]:
    """
    Enumerate every line of WINDOW_LENGTH cells on the grid.

    Returns:
        (rows, cols) index arrays of shape (n_windows, WINDOW_LENGTH),
        suitable for fancy indexing: cells[rows, cols]
    """
    # (row step, col step): horizontal, vertical, diagonal \, diagonal /
    directions = [(0, 1), (1, 0), (1, 1), (-1, 1)]
    rows: List[List[int]] = []
    cols: List[List[int]] = []

    for dr, dc in directions:
        for r in range(ROWS):
            for c in range(COLS):
                end_r = r + dr * (WINDOW_LENGTH - 1)
                end_c = c + dc * (WINDOW_LENGTH - 1)
                if 0 <= end_r < ROWS and 0 <= end_c < COLS:
                    rows.append([r + dr * i for i in range(WINDOW_LENGTH)])
                    cols.append([c + dc * i for i in range(WINDOW_LENGTH)])

    return np.array(rows, dtype=np.intp), np.array(cols, dtype=np.intp)


WINDOW_ROWS, WINDOW_COLS = _build_windows()


class Board:
    """
    Immutable Connect Four position.

    Attributes:
        cells: Read-only (ROWS, COLS) int8 array of Cell values

    Boards built from external data are validated (shape, cell values and
    gravity). Boards produced by the rules engine skip validation.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable] = None):
        """
        Create a board.

        Args:
            cells: Optional 6x7 array-like of Cell values (row 0 = top).
                   Defaults to an empty board.

        Raises:
            ValueError: If the grid is not numeric, has the wrong shape,
                contains unknown values (including fractions), or has a
                piece floating above an empty cell
        """
        if cells is None:
            grid = np.zeros((ROWS, COLS), dtype=np.int8)
        else:
            raw = np.asarray(cells)
            if raw.dtype.kind not in "iuf":
                raise ValueError(f"Board cells must be numeric, got dtype {raw.dtype}")
            # Values are checked before the int8 cast truncates them
            _validate_grid(raw)
            grid = raw.astype(np.int8)

        grid.flags.writeable = False
        self._cells = grid

    @classmethod
    def _from_trusted(cls, grid: np.ndarray) -> "Board":
        """Wrap a grid the rules engine already knows to be valid."""
        board = cls.__new__(cls)
        grid.flags.writeable = False
        board._cells = grid
        return board

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Parse a board from text notation.

        Args:
            text: Six rows of seven symbols, top row first, separated by
                  '/' or newlines

        Returns:
            Parsed Board

        Raises:
            ValueError: If the text is malformed or violates gravity
        """
        rows = [row.strip() for row in text.replace("/", "\n").split("\n")]
        rows = [row for row in rows if row]

        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        grid = []
        for row in rows:
            if len(row) != COLS:
                raise ValueError(f"Expected {COLS} cells per row, got {row!r}")
            try:
                grid.append([SYMBOL_TO_CELL[symbol.upper()] for symbol in row])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {row!r}")

        return cls(grid)

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def cell(self, row: int, col: int) -> Cell:
        return Cell(int(self._cells[row, col]))

    def count(self, player: Cell) -> int:
        """Number of pieces belonging to player."""
        return int(np.count_nonzero(self._cells == player))

    def to_string(self, separator: str = "/") -> str:
        """Render the board in text notation (inverse of from_string)."""
        return separator.join(
            "".join(CELL_TO_SYMBOL[Cell(int(value))] for value in row)
            for row in self._cells
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __str__(self) -> str:
        return self.to_string(separator="\n")

    def __repr__(self) -> str:
        return f"Board('{self.to_string()}')"


def _validate_grid(grid: np.ndarray):
    """Check shape, cell values and the gravity invariant."""
    if grid.shape != (ROWS, COLS):
        raise ValueError(f"Invalid board shape: {grid.shape}. Expected ({ROWS}, {COLS})")

    if not np.isin(grid, [cell.value for cell in Cell]).all():
        raise ValueError(f"Board contains values outside {[cell.value for cell in Cell]}")

    # A piece directly above an empty cell is floating
    floating = (grid[:-1] != Cell.EMPTY) & (grid[1:] == Cell.EMPTY)
    if floating.any():
        row, col = np.argwhere(floating)[0]
        raise ValueError(f"Floating piece at row {row}, column {col}")
