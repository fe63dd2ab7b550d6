"""
Unit Tests for Testing Utilities and Players

Tests for perft, the unpruned reference search, self-play and the
Player implementations it drives.
"""

import pytest

from ataxx_engine.board import BLUE, EMPTY, RED, BoardState, Move
from ataxx_engine.evaluation import WINNING_VALUE, MaterialEvaluator
from ataxx_engine.players import AIPlayer, ManualPlayer
from ataxx_engine.search import SearchEngine
from ataxx_engine.utils.testing import GameRecord, full_minimax, perft, play_game

ENDGAME_LAYOUT = """
r r r r r r r
r r r r r r r
r r r r r r r
- - - - - - -
b b b b b b b
b b b b b b b
b b b b b b b
"""


class TestPerft:
    """Tests for perft()."""

    @pytest.mark.parametrize("depth,expected", [
        (0, 1),
        (1, 16),
        (2, 256),
    ])
    def test_starting_position(self, depth, expected):
        assert perft(BoardState(), depth) == expected

    def test_board_restored(self):
        board = BoardState()
        before = board.copy()
        perft(board, 3)
        assert board == before

    def test_blocks_reduce_moves(self):
        board = BoardState()
        board.set_block(1, 5)
        assert perft(board, 1) < 16


class TestFullMinimax:
    """Tests for full_minimax()."""

    def test_terminal(self):
        board = BoardState.from_string(ENDGAME_LAYOUT.replace("b", "-"))
        assert full_minimax(board, 2, 1, MaterialEvaluator()) == (WINNING_VALUE, None)

    def test_depth_zero_is_best_static_move(self):
        board = BoardState()
        score, move = full_minimax(board, 0, 1, MaterialEvaluator())

        # Every extend gains one piece; the first in generation order wins ties
        assert score == 1
        assert move == Move.move(0, 6, 0, 5)


class TestPlayGame:
    """Tests for play_game()."""

    def test_engines_finish_endgame(self):
        red = AIPlayer(RED, SearchEngine(max_depth=0))
        blue = AIPlayer(BLUE, SearchEngine(max_depth=0))
        board = BoardState.from_string(ENDGAME_LAYOUT)

        record = play_game(red, blue, board=board)

        assert isinstance(record, GameRecord)
        assert record.winner in (RED, BLUE, EMPTY)
        assert record.moves == board.all_moves()
        assert record.red_pieces == board.red_pieces
        assert record.blue_pieces == board.blue_pieces
        assert record.time_taken >= 0

    def test_move_limit(self):
        red = AIPlayer(RED, SearchEngine(max_depth=0))
        blue = AIPlayer(BLUE, SearchEngine(max_depth=0))

        record = play_game(red, blue, max_moves=2)

        assert len(record.moves) == 2
        assert record.winner is None

    def test_player_gives_up(self):
        red = ManualPlayer(RED, lambda board, color: None)
        blue = AIPlayer(BLUE, SearchEngine(max_depth=0))

        record = play_game(red, blue)

        assert record.moves == []
        assert record.winner is None
        assert record.red_pieces == 2


class TestPlayers:
    """Tests for the Player implementations."""

    def test_manual_player_uses_source(self):
        calls = []

        def source(board, color):
            calls.append(color)
            return Move.move(0, 6, 1, 6)

        player = ManualPlayer(RED, source)
        assert player.choose_move(BoardState()) == Move.move(0, 6, 1, 6)
        assert calls == [RED]

    def test_ai_player_default_engine(self):
        player = AIPlayer(BLUE)
        assert isinstance(player.engine, SearchEngine)
        assert repr(player) == "AIPlayer(Blue)"

    def test_player_needs_piece_color(self):
        with pytest.raises(ValueError):
            AIPlayer(EMPTY)
