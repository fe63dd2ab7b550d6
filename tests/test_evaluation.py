"""
Unit Tests for Evaluation Module

Tests for position evaluation, focusing on:
    - Material counting accuracy
    - Symmetry (swapped colors = negated evaluation)
    - Terminal saturation (win, loss, draw)
    - The abstract interface
"""

import pytest

from ataxx_engine.board import BLUE, RED, BoardState, Move
from ataxx_engine.evaluation import INFINITY, WINNING_VALUE, Evaluator, MaterialEvaluator

LOPSIDED_LAYOUT = """
r r r - - - b
r r - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
b - - - - - r
"""


def swap_colors(text):
    return text.replace("r", "?").replace("b", "r").replace("?", "b")


class TestMaterialEvaluator:
    """Tests for MaterialEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    def test_starting_position_is_level(self, evaluator):
        assert evaluator.evaluate(BoardState()) == 0

    def test_material_difference(self, evaluator):
        board = BoardState.from_string(LOPSIDED_LAYOUT)
        assert board.red_pieces == 6
        assert board.blue_pieces == 2
        assert evaluator.evaluate(board) == 4

    def test_symmetry(self, evaluator):
        """Swapping the colors negates the score."""
        board = BoardState.from_string(LOPSIDED_LAYOUT)
        swapped = BoardState.from_string(swap_colors(LOPSIDED_LAYOUT))
        assert evaluator.evaluate(swapped) == -evaluator.evaluate(board)

    def test_ignores_side_to_move(self, evaluator):
        red_to_move = BoardState.from_string(LOPSIDED_LAYOUT, active_color=RED)
        blue_to_move = BoardState.from_string(LOPSIDED_LAYOUT, active_color=BLUE)
        assert evaluator.evaluate(red_to_move) == evaluator.evaluate(blue_to_move)

    def test_follows_moves(self, evaluator):
        board = BoardState()
        board.make_move(Move.move(0, 6, 1, 6))
        assert evaluator.evaluate(board) == 1
        board.undo()
        assert evaluator.evaluate(board) == 0

    def test_repr(self, evaluator):
        assert repr(evaluator) == "MaterialEvaluator()"


class TestTerminalScores:
    """Tests for evaluate_terminal() and terminal_score()."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    def test_game_in_progress(self, evaluator):
        assert evaluator.evaluate_terminal(BoardState()) is None

    def test_red_win_saturates(self, evaluator):
        board = BoardState.from_string("""
            r - - - - - -
            - - - - - - -
            - - - - - - -
            - - - - - - -
            - - - - - - -
            - - - - - - -
            - - - - - - -
        """)
        assert board.game_over()
        assert evaluator.evaluate(board) == 1
        assert evaluator.evaluate_terminal(board) == WINNING_VALUE

    def test_blue_win_saturates(self, evaluator):
        """Full board, Blue ahead by one."""
        rows = ["b r b r b r b"] * 3 + ["r b r b r b r"] * 3 + ["b r b r b r b"]
        board = BoardState.from_string("\n".join(rows))
        assert board.blue_pieces == 25
        assert board.red_pieces == 24
        assert evaluator.evaluate_terminal(board) == -WINNING_VALUE

    def test_draw_scores_zero(self, evaluator):
        rows = ["r b r b r b r"] * 3 + ["b r b r b r b"] * 3 + ["X X X X X X X"]
        board = BoardState.from_string("\n".join(rows))
        assert board.red_pieces == board.blue_pieces == 21
        assert board.game_over()
        assert evaluator.evaluate_terminal(board) == 0

    def test_winning_value_inside_window(self):
        assert WINNING_VALUE < INFINITY
        assert -INFINITY < -WINNING_VALUE


class TestEvaluatorInterface:
    """Tests for the abstract Evaluator base class."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_custom_evaluator(self):
        class CenterEvaluator(Evaluator):
            def evaluate(self, board):
                return 100 if board.get(3, 3) is RED else 0

        evaluator = CenterEvaluator()
        assert evaluator.evaluate(BoardState()) == 0
        assert evaluator.evaluate_terminal(BoardState()) is None
        assert repr(evaluator) == "CenterEvaluator()"
