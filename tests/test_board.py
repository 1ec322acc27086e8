"""
Unit Tests for Board Module

Tests for the board model and rules, focusing on:
    - Move application: gravity, purity, illegal drops
    - Win detection in all four directions, blocked lines
    - Draw detection and terminal positions
    - Text notation parsing and validation
"""

import numpy as np
import pytest

from connect4_engine.board import (
    Board,
    Cell,
    Outcome,
    apply_move,
    is_full,
    is_terminal,
    legal_moves,
    opponent,
    outcome,
    winner,
)
from connect4_engine.board.representation import WINDOW_COLS, WINDOW_ROWS
from connect4_engine.exceptions import IllegalMoveError


A = Cell.PLAYER_A
B = Cell.PLAYER_B

# Full board without four in a row: rows P, P, Q, Q, P, P
P = "XOXOXOX"
Q = "OXOXOXO"
DRAWN_BOARD = "/".join([P, P, Q, Q, P, P])


def board_with(pieces):
    """Build a board from {(row, col): player}."""
    grid = np.zeros((6, 7), dtype=np.int8)
    for (row, col), player in pieces.items():
        grid[row, col] = player
    return Board(grid)


class TestBoardRepresentation:
    """Tests for Board construction and notation."""

    def test_empty_board(self):
        """Test that a new board is empty with every column legal."""
        board = Board()

        assert board.count(A) == 0
        assert board.count(B) == 0
        assert legal_moves(board) == [0, 1, 2, 3, 4, 5, 6]
        assert outcome(board) == Outcome.NONE

    def test_cells_are_read_only(self):
        """Test that the underlying array cannot be modified."""
        board = Board()

        assert not board.cells.flags.writeable
        with pytest.raises(ValueError):
            board.cells[5, 3] = A

    def test_string_round_trip(self):
        """Test that to_string is the inverse of from_string."""
        text = "......./......./......./...O.../..XX.../.OXXO.."
        board = Board.from_string(text)

        assert board.to_string() == text
        assert board.cell(5, 2) == A
        assert board.cell(3, 3) == B
        assert Board.from_string(str(board)) == board

    def test_lowercase_symbols_accepted(self):
        """Test that symbols are case-insensitive."""
        board = Board.from_string("......./......./......./......./......./...x...")
        assert board.cell(5, 3) == A

    def test_wrong_row_count_rejected(self):
        """Test that a board with five rows is rejected."""
        with pytest.raises(ValueError):
            Board.from_string("......./......./......./......./.......")

    def test_unknown_symbol_rejected(self):
        """Test that unknown cell symbols are rejected."""
        with pytest.raises(ValueError):
            Board.from_string("......./......./......./......./......./...Z...")

    def test_floating_piece_rejected(self):
        """Test that a piece above an empty cell violates gravity."""
        with pytest.raises(ValueError):
            Board.from_string("......./......./......./......./...X.../.......")

    def test_wrong_shape_rejected(self):
        """Test that a 7x6 grid is rejected."""
        with pytest.raises(ValueError):
            Board(np.zeros((7, 6), dtype=np.int8))

    @pytest.mark.parametrize("value", [1.7, 0.5, 257])
    def test_non_cell_value_rejected(self, value):
        """Test that values are checked before the grid is narrowed to int8."""
        grid = np.zeros((6, 7))
        grid[5, 3] = value

        with pytest.raises(ValueError):
            Board(grid)

    def test_text_grid_rejected(self):
        """Test that a grid of symbols must go through from_string."""
        with pytest.raises(ValueError):
            Board([["."] * 7] * 6)

    def test_caller_array_is_copied(self):
        """Test that the board does not alias the array it was built from."""
        grid = np.zeros((6, 7), dtype=np.int8)
        board = Board(grid)

        grid[5, 3] = A

        assert board.cell(5, 3) == Cell.EMPTY

    def test_equal_boards_hash_equal(self):
        """Test that boards with equal cells are interchangeable as keys."""
        first = apply_move(apply_move(Board(), 3, A), 2, B)
        second = apply_move(apply_move(Board(), 2, B), 3, A)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_opponent(self):
        """Test that opponent swaps players and rejects EMPTY."""
        assert opponent(A) == B
        assert opponent(B) == A
        with pytest.raises(ValueError):
            opponent(Cell.EMPTY)

    def test_window_count(self):
        """Test that every line of four on a 6x7 board is precomputed."""
        # 24 horizontal + 21 vertical + 12 + 12 diagonal
        assert WINDOW_ROWS.shape == (69, 4)
        assert WINDOW_COLS.shape == (69, 4)


class TestApplyMove:
    """Tests for move application."""

    def test_piece_falls_to_bottom(self):
        """Test that a dropped piece lands in the bottom row."""
        board = apply_move(Board(), 3, A)
        assert board.cell(5, 3) == A

    def test_pieces_stack(self):
        """Test that pieces stack upwards in a column."""
        board = apply_move(Board(), 3, A)
        board = apply_move(board, 3, B)

        assert board.cell(5, 3) == A
        assert board.cell(4, 3) == B

    def test_apply_move_is_pure(self):
        """Test that the input board is untouched and exactly one cell differs."""
        original = Board.from_string("......./......./......./......./..O..../..XX...")
        before = original.cells.copy()

        result = apply_move(original, 2, A)

        assert np.array_equal(original.cells, before), "Input board must not change"
        assert np.count_nonzero(result.cells != original.cells) == 1
        assert result.cell(3, 2) == A

    def test_full_column_rejected(self):
        """Test that dropping into a full column raises IllegalMoveError."""
        board = Board()
        for i in range(6):
            board = apply_move(board, 0, A if i % 2 == 0 else B)

        assert 0 not in legal_moves(board)
        with pytest.raises(IllegalMoveError) as exc_info:
            apply_move(board, 0, A)
        assert exc_info.value.column == 0

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range_column_rejected(self, column):
        """Test that columns outside 0-6 raise IllegalMoveError."""
        with pytest.raises(IllegalMoveError):
            apply_move(Board(), column, A)

    def test_illegal_move_is_value_error(self):
        """Test that IllegalMoveError can be caught as ValueError."""
        with pytest.raises(ValueError):
            apply_move(Board(), 9, A)

    def test_empty_player_rejected(self):
        """Test that EMPTY cannot be dropped."""
        with pytest.raises(ValueError):
            apply_move(Board(), 3, Cell.EMPTY)


class TestWinner:
    """Tests for four-in-a-row detection."""

    def test_horizontal_win(self):
        board = board_with({(5, c): A for c in range(2, 6)})
        assert winner(board) == Outcome.WIN_A

    def test_vertical_win(self):
        board = board_with({(r, 6): B for r in range(2, 6)})
        assert winner(board) == Outcome.WIN_B

    def test_rising_diagonal_win(self):
        """Test a / diagonal from the bottom-left."""
        board = Board.from_string(
            "......./......./...X.../..XO.../.XOO.../XOOX..."
        )
        assert winner(board) == Outcome.WIN_A

    def test_falling_diagonal_win(self):
        """Test a \\ diagonal ending bottom-right."""
        board = Board.from_string(
            "......./......./...O.../...XO../...XXO./...XOXO"
        )
        assert winner(board) == Outcome.WIN_B

    def test_three_in_a_row_is_not_a_win(self):
        board = board_with({(5, 0): A, (5, 1): A, (5, 2): A})
        assert winner(board) == Outcome.NONE

    def test_blocked_line_is_not_a_win(self):
        """Test that an opponent piece breaks the line."""
        board = Board.from_string("......./......./......./......./......./XXXOXXX")
        assert winner(board) == Outcome.NONE

    def test_lines_do_not_wrap_around(self):
        """Test that a row does not continue on the next row."""
        board = Board.from_string("......./......./......./......./.....XX/XX...XX")
        assert winner(board) == Outcome.NONE


class TestDraw:
    """Tests for draw and terminal detection."""

    @pytest.fixture
    def drawn_board(self):
        return Board.from_string(DRAWN_BOARD)

    def test_full_board_without_winner_is_draw(self, drawn_board):
        assert is_full(drawn_board)
        assert winner(drawn_board) == Outcome.NONE
        assert outcome(drawn_board) == Outcome.DRAW

    def test_drawn_board_has_no_legal_moves(self, drawn_board):
        assert legal_moves(drawn_board) == []
        assert is_terminal(drawn_board)

    def test_running_game_is_not_terminal(self):
        board = apply_move(Board(), 3, A)
        assert not is_full(board)
        assert not is_terminal(board)

    def test_win_is_terminal(self):
        board = board_with({(r, 0): A for r in range(2, 6)})
        assert outcome(board) == Outcome.WIN_A
        assert is_terminal(board)
