"""
Unit Tests for the Tactical Suite

Every algorithm must solve every tactical position, and all algorithms must
agree on column and evaluation for the same position.
"""

import pytest

from connect4_engine.board import Board, Cell
from connect4_engine.search import Algorithm
from connect4_engine.utils import testing


class TestTacticalSuite:
    """Tests for the tactical positions."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_suite_solved(self, algorithm):
        result = testing.run_tactical_suite(algorithm, depth=4, verbose=False)

        failed = [r.position.id for r in result['results'] if not r.correct]
        assert not failed, f"{algorithm.value} failed {failed}"
        assert result['score'] == result['total'] == len(testing.TACTICAL_POSITIONS)
        assert result['total_nodes'] > 0

    @pytest.mark.parametrize(
        "position", testing.TACTICAL_POSITIONS, ids=lambda p: p.id
    )
    def test_position_is_consistent(self, position):
        """Test that each position is a legal board with its side able to move."""
        board = Board.from_string(position.board)
        assert position.subject in (Cell.PLAYER_A, Cell.PLAYER_B)
        assert all(0 <= column < 7 for column in position.best_moves)
        assert board.cells[0].min() == 0, "Board should not be full"

    def test_evaluate_position_reports_wrong_move(self):
        """Test that a move outside best_moves is marked incorrect."""
        position = testing.TestPosition(
            board="......./......./......./......./......./.XXX...",
            subject=Cell.PLAYER_A,
            best_moves=[6],
            id="WRONG",
        )

        result = testing.evaluate_position(position, depth=2)

        assert result.found_move == 0
        assert not result.correct

    def test_evaluate_position_invalid_depth(self):
        result = testing.evaluate_position(testing.TACTICAL_POSITIONS[0], depth=0)

        assert result.found_move == -1
        assert not result.correct

    def test_verbose_output(self, capsys):
        testing.run_tactical_suite(
            Algorithm.ALPHA_BETA, depth=2, positions=testing.TACTICAL_POSITIONS[:1]
        )

        output = capsys.readouterr().out
        assert "TAC.01" in output
        assert "SUMMARY" in output


class TestCompareAlgorithms:
    """Tests for compare_algorithms."""

    def test_all_algorithms_agree(self):
        board = Board.from_string("......./......./......./...O.../..XX.../.OXXO..")

        results = testing.compare_algorithms(board, Cell.PLAYER_B, depth=4)

        assert set(results) == set(Algorithm)
        assert len({(r.column, r.evaluation) for r in results.values()}) == 1
        assert (
            results[Algorithm.TRANSPOSITION].nodes_visited
            <= results[Algorithm.ALPHA_BETA].nodes_visited
        )
