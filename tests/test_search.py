"""
Unit Tests for Search Module

Tests for the alpha-beta search and the SearchEngine player.
"""

import random

import pytest

from ataxx_engine.board import BLUE, EMPTY, JUMP_LIMIT, PASS, RED, BoardState, Move, generate_moves
from ataxx_engine.evaluation import INFINITY, WINNING_VALUE, MaterialEvaluator
from ataxx_engine.search import SearchEngine, SearchStats, alpha_beta, find_best_move, sense_of
from ataxx_engine.utils.testing import full_minimax, perft

CAPTURE_LAYOUT = """
r - - - - - b
- b b - - - -
- - - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
b - - - - - r
"""

# Any Red move next to b6 captures Blue's last piece.
LAST_PIECE_LAYOUT = """
r - - - - - -
- b - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
- - - - - - -
"""

RED_STUCK_LAYOUT = """
- - - - - - b
- - - - - - -
- - - - - - -
- - - - - - -
b b b - - - -
b b b - - - -
r b b - - - -
"""


def random_position(seed, plies):
    rng = random.Random(seed)
    board = BoardState()
    for _ in range(plies):
        if board.game_over():
            break
        board.make_move(rng.choice(generate_moves(board.active_color, board)))
    return board


class TestAlphaBeta:
    """Tests for alpha_beta()."""

    @pytest.fixture
    def evaluator(self):
        return MaterialEvaluator()

    @pytest.mark.parametrize("depth", [0, 1, 2])
    def test_matches_full_minimax_from_start(self, evaluator, depth):
        """Pruning never changes the root score or the chosen move."""
        board = BoardState()
        expected = full_minimax(board.copy(), depth, 1, evaluator)
        result = alpha_beta(board.copy(), depth, 1, -INFINITY, INFINITY, evaluator)
        assert result == expected

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_matches_full_minimax_midgame(self, evaluator, seed):
        board = random_position(seed, 4 + seed)
        sense = sense_of(board.active_color)
        for depth in (0, 1):
            expected = full_minimax(board.copy(), depth, sense, evaluator)
            result = alpha_beta(board.copy(), depth, sense, -INFINITY, INFINITY, evaluator)
            assert result == expected

    def test_board_restored(self, evaluator):
        board = random_position(9, 8)
        before = board.copy()
        alpha_beta(board, 2, sense_of(board.active_color), -INFINITY, INFINITY, evaluator)
        assert board == before

    def test_depth_zero_scores_one_ply(self, evaluator):
        """At depth 0 the mover still picks the best static reply."""
        board = BoardState.from_string(CAPTURE_LAYOUT)
        score, move = alpha_beta(board, 0, 1, -INFINITY, INFINITY, evaluator)

        # b7 is the first move (in generation order) that takes both b6 and c6
        assert move == Move.move(0, 6, 1, 6)
        assert score == 3

    def test_terminal_position(self, evaluator):
        board = BoardState.from_string(LAST_PIECE_LAYOUT.replace("b", "-"))
        assert alpha_beta(board, 3, 1, -INFINITY, INFINITY, evaluator) == (WINNING_VALUE, None)

    def test_pruning_visits_fewer_leaves(self, evaluator):
        """A depth-2 search without cutoffs would score every 3-ply position."""
        board = BoardState()
        stats = SearchStats()
        alpha_beta(board, 2, 1, -INFINITY, INFINITY, evaluator, stats)

        assert stats.nodes > 0
        assert 0 < stats.leaves < perft(board, 3)

    def test_cutoff_when_window_closed(self, evaluator):
        """With beta <= alpha the first move already cuts off."""
        board = BoardState()
        stats = SearchStats()
        score, move = alpha_beta(board, 1, 1, 0, 0, evaluator, stats)

        assert move == generate_moves(RED, board)[0]
        assert stats.nodes == 2


class TestFindBestMove:
    """Tests for find_best_move()."""

    def test_returns_legal_move(self):
        board = BoardState()
        move, score, nodes = find_best_move(board, RED, depth=1)

        assert board.legal_move(move)
        assert not move.is_pass
        assert nodes > 0

    def test_caller_board_unchanged(self):
        board = random_position(3, 6)
        before = board.copy()
        find_best_move(board, board.active_color, depth=2)
        assert board == before

    def test_deterministic(self):
        board = random_position(5, 12)
        first = find_best_move(board, board.active_color, depth=2)
        second = find_best_move(board.copy(), board.active_color, depth=2)
        assert first == second

    def test_takes_material(self):
        board = BoardState.from_string(CAPTURE_LAYOUT)
        move, score, _ = find_best_move(board, RED, depth=0)
        assert move == Move.move(0, 6, 1, 6)
        assert score == 3

    def test_finds_immediate_win(self):
        board = BoardState.from_string(LAST_PIECE_LAYOUT)
        move, score, _ = find_best_move(board, RED, depth=1)

        assert score == WINNING_VALUE
        assert move == Move.move(0, 6, 0, 4)
        board.make_move(move)
        assert board.winner() is RED

    def test_blue_minimizes(self):
        board = BoardState.from_string(CAPTURE_LAYOUT, active_color=BLUE)
        move, score, _ = find_best_move(board, BLUE, depth=0)

        assert board.legal_move(move)
        assert score < 0

    def test_forced_pass(self):
        board = BoardState.from_string(RED_STUCK_LAYOUT)
        assert find_best_move(board, RED, depth=3) == (PASS, None, 0)

    def test_wrong_color(self):
        with pytest.raises(ValueError):
            find_best_move(BoardState(), BLUE, depth=1)

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            find_best_move(BoardState(), RED, depth=-1)

    def test_finished_position_falls_back_to_first_move(self):
        board = BoardState()
        cycle = [
            Move.move(0, 6, 2, 6),
            Move.move(6, 6, 4, 6),
            Move.move(2, 6, 0, 6),
            Move.move(4, 6, 6, 6),
        ]
        for i in range(JUMP_LIMIT):
            board.make_move(cycle[i % 4])
        assert board.game_over()
        assert board.winner() is EMPTY

        move, score, _ = find_best_move(board, BLUE, depth=2)
        assert move == generate_moves(BLUE, board)[0]
        assert score == 0


class TestSearchEngine:
    """Tests for the SearchEngine player."""

    def test_defaults(self):
        engine = SearchEngine()
        assert engine.max_depth == 4
        assert isinstance(engine.evaluator, MaterialEvaluator)
        assert engine.last_move is None

    def test_records_last_search(self):
        engine = SearchEngine(max_depth=1)
        board = BoardState()
        move = engine.find_best_move(board, RED)

        assert engine.last_move == move
        assert engine.last_score is not None
        assert engine.last_nodes > 0

    def test_forced_pass(self):
        engine = SearchEngine(max_depth=2)
        board = BoardState.from_string(RED_STUCK_LAYOUT)

        assert engine.find_best_move(board, RED) is PASS
        assert engine.last_score is None
        assert engine.last_nodes == 0

    def test_self_play_stays_legal(self):
        engine = SearchEngine(max_depth=1)
        board = BoardState.from_string("""
            r r r r r r r
            r r r r r r r
            r r r r r r r
            - - - - - - -
            b b b b b b b
            b b b b b b b
            b b b b b b b
        """)
        for _ in range(200):
            if board.game_over():
                break
            move = engine.find_best_move(board, board.active_color)
            assert board.legal_move(move)
            board.make_move(move)
        assert board.game_over()

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            SearchEngine(max_depth=-1)

    def test_repr(self):
        assert repr(SearchEngine(max_depth=2)) == (
            "SearchEngine(evaluator=MaterialEvaluator(), max_depth=2)"
        )
