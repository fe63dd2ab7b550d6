"""
Engine Testing and Benchmarking

This module provides verification and benchmarking tools for the engine.

Tools:
    1. Perft: Counts leaf positions of the move tree to a fixed depth.
       Any bug in move generation or make/undo shows up as a wrong count.

    2. Full minimax: The same search as alpha_beta() with pruning turned
       off. Pruning must never change the root score, so this is the
       reference the pruned search is checked against.

    3. Self-play: Plays two players against each other to the end and
       records the result.

References:
    - Perft: https://www.chessprogramming.org/Perft
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ataxx_engine.board.movegen import generate_moves
from ataxx_engine.board.pieces import BLUE, RED, Move, PieceColor
from ataxx_engine.board.state import BoardState
from ataxx_engine.evaluation.base import INFINITY, Evaluator
from ataxx_engine.players import Player

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 1000


# ============================================================================
# Perft
# ============================================================================

def perft(board: BoardState, depth: int) -> int:
    """
    Count the leaf positions DEPTH plies below BOARD.

    Forced passes count as moves. The board is restored before returning.

    Args:
        board: Starting position (mutated and restored)
        depth: Number of plies to expand

    Returns:
        Number of positions at exactly DEPTH plies
    """
    if depth == 0:
        return 1

    total = 0
    for move in generate_moves(board.active_color, board):
        board.make_move(move)
        total += perft(board, depth - 1)
        board.undo()
    return total


# ============================================================================
# Unpruned reference search
# ============================================================================

def full_minimax(
    board: BoardState,
    depth: int,
    sense: int,
    evaluator: Evaluator,
) -> Tuple[int, Optional[Move]]:
    """
    Minimax without pruning, using alpha_beta()'s leaf and tie-break rules.

    Args:
        board: Position to search (mutated and restored)
        depth: Remaining plies before the static one-ply scoring
        sense: +1 if Red moves, -1 if Blue moves
        evaluator: Static evaluator

    Returns:
        Tuple of (score, best_move) with the first best move in
        generation order
    """
    if board.game_over():
        return evaluator.terminal_score(board), None

    color = RED if sense == 1 else BLUE
    best_move = None
    best_score = -INFINITY if sense == 1 else INFINITY
    for move in generate_moves(color, board):
        board.make_move(move)
        if depth == 0:
            score = evaluator.evaluate(board)
        else:
            score, _ = full_minimax(board, depth - 1, -sense, evaluator)
        board.undo()

        if (sense == 1 and score > best_score) or (sense == -1 and score < best_score):
            best_score = score
            best_move = move

    return best_score, best_move


# ============================================================================
# Self-play
# ============================================================================

@dataclass
class GameRecord:
    """
    Result of one played game.

    Attributes:
        moves: Every move played, passes included
        winner: RED, BLUE, EMPTY for a draw, None if stopped early
        red_pieces: Final Red piece count
        blue_pieces: Final Blue piece count
        time_taken: Wall time for the whole game (seconds)
    """
    moves: List[Move] = field(default_factory=list)
    winner: Optional[PieceColor] = None
    red_pieces: int = 0
    blue_pieces: int = 0
    time_taken: float = 0.0


def play_game(
    red: Player,
    blue: Player,
    board: Optional[BoardState] = None,
    max_moves: int = DEFAULT_MAX_MOVES,
) -> GameRecord:
    """
    Play RED against BLUE until the game ends.

    Args:
        red: Player for Red
        blue: Player for Blue
        board: Starting position (default: fresh board); played on in place
        max_moves: Safety limit on moves before stopping

    Returns:
        GameRecord of the game. winner is None if a player gave up or
        max_moves was reached first.
    """
    board = board if board is not None else BoardState()
    players = {RED: red, BLUE: blue}
    start_time = time.time()

    played = 0
    while not board.game_over() and played < max_moves:
        player = players[board.active_color]
        move = player.choose_move(board)
        if move is None:
            logger.info(f"{player} stopped the game")
            break
        board.make_move(move)
        played += 1

    record = GameRecord(
        moves=board.all_moves(),
        winner=board.winner(),
        red_pieces=board.red_pieces,
        blue_pieces=board.blue_pieces,
        time_taken=time.time() - start_time,
    )
    logger.info(
        f"Game finished after {played} moves: winner={record.winner}, "
        f"red={record.red_pieces}, blue={record.blue_pieces}"
    )
    return record
