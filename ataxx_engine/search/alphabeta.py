"""
Minimax Search with Alpha-Beta Pruning

This module implements the search algorithm for the engine. Minimax
explores the game tree to find the best move, and alpha-beta pruning
skips branches that cannot change the result.

Key Concepts:
    - Sense: +1 on plies where Red moves (maximizer), -1 where Blue moves
      (minimizer). All scores are from Red's perspective.
    - Leaf plies: At depth 0 the side to move still tries every move and
      scores the resulting positions statically, so a depth-D search sees
      D + 1 plies.
    - Terminal positions: A finished game scores ±WINNING_VALUE (0 for a
      draw) regardless of the margin, so a forced win beats any heuristic.
    - Tie-break: Only a strictly better score replaces the best move, so
      the first of several equal moves in generation order is kept.

Make/Undo:
    The search copies the caller's board once at the root and then walks
    the whole tree with make_move()/undo() on that copy. Every child is
    undone right after it is scored, including when a cutoff follows.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from ataxx_engine.board.movegen import generate_moves
from ataxx_engine.board.pieces import BLUE, PASS, RED, Move, PieceColor
from ataxx_engine.board.state import BoardState
from ataxx_engine.evaluation.base import INFINITY, Evaluator
from ataxx_engine.evaluation.material import MaterialEvaluator

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 4


@dataclass
class SearchStats:
    """Counters collected during one search."""

    nodes: int = 0
    """Positions visited (interior nodes and leaf plies)"""

    leaves: int = 0
    """Positions scored with the static evaluator"""


def sense_of(color: PieceColor) -> int:
    """+1 for Red (maximizer), -1 for Blue (minimizer)."""
    if color is RED:
        return 1
    if color is BLUE:
        return -1
    raise ValueError(f"No search sense for {color}")


def _mover(sense: int) -> PieceColor:
    return RED if sense == 1 else BLUE


def alpha_beta(
    board: BoardState,
    depth: int,
    sense: int,
    alpha: int,
    beta: int,
    evaluator: Evaluator,
    stats: Optional[SearchStats] = None,
) -> Tuple[int, Optional[Move]]:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Position to search; mutated during the search and restored
            before returning
        depth: Remaining plies before the static one-ply scoring
        sense: +1 if Red moves at this node, -1 if Blue does
        alpha: Best score Red is already assured of
        beta: Best score Blue is already assured of
        evaluator: Static evaluator (Red's perspective)
        stats: Optional counters, updated in place

    Returns:
        Tuple of (score, best_move). best_move is None when the position
        is already over.

    Algorithm:
        1. If depth = 0 or the game is over → leaf rule
        2. For each generated move, in order:
            a. Make move
            b. Recursively search (depth - 1, -sense)
            c. Undo move
            d. Keep it if strictly better; tighten alpha/beta
            e. Stop if beta <= alpha
        3. Return best score and move found
    """
    if stats is not None:
        stats.nodes += 1

    if board.game_over():
        return evaluator.terminal_score(board), None
    if depth == 0:
        return _leaf_ply(board, sense, alpha, beta, evaluator, stats)

    best_move = None
    if sense == 1:
        best_score = -INFINITY
        for move in generate_moves(RED, board):
            board.make_move(move)
            score, _ = alpha_beta(board, depth - 1, -1, alpha, beta, evaluator, stats)
            board.undo()

            if score > best_score:
                best_score = score
                best_move = move
                alpha = max(alpha, score)

            # Beta cutoff: Blue won't allow this branch
            if beta <= alpha:
                break
    else:
        best_score = INFINITY
        for move in generate_moves(BLUE, board):
            board.make_move(move)
            score, _ = alpha_beta(board, depth - 1, 1, alpha, beta, evaluator, stats)
            board.undo()

            if score < best_score:
                best_score = score
                best_move = move
                beta = min(beta, score)

            # Alpha cutoff: Red won't allow this branch
            if beta <= alpha:
                break

    return best_score, best_move


def _leaf_ply(
    board: BoardState,
    sense: int,
    alpha: int,
    beta: int,
    evaluator: Evaluator,
    stats: Optional[SearchStats],
) -> Tuple[int, Optional[Move]]:
    """
    Score a frontier node that is not yet over.

    Every move of the side to move is tried and the resulting position
    scored statically, without recursing.
    """
    best_move = None
    best_score = -INFINITY if sense == 1 else INFINITY
    for move in generate_moves(_mover(sense), board):
        board.make_move(move)
        score = evaluator.evaluate(board)
        board.undo()
        if stats is not None:
            stats.leaves += 1

        if sense == 1:
            if score > best_score:
                best_score = score
                best_move = move
                alpha = max(alpha, score)
        elif score < best_score:
            best_score = score
            best_move = move
            beta = min(beta, score)

        if beta <= alpha:
            break

    return best_score, best_move


def find_best_move(
    board: BoardState,
    color: PieceColor,
    depth: int = DEFAULT_DEPTH,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Move, Optional[int], int]:
    """
    Find the best move for COLOR in the current position.

    The caller's board is never modified: the search runs on one private
    copy.

    Args:
        board: Current position
        color: Side to move; must be board.active_color
        depth: Search depth (higher = stronger but slower)
        evaluator: Static evaluator (default: MaterialEvaluator)

    Returns:
        Tuple of (best_move, score, nodes)
            - best_move: A legal move, PASS if COLOR cannot move
            - score: Search score from Red's perspective (None for a forced pass)
            - nodes: Number of positions visited

    Raises:
        ValueError: If COLOR is not the side to move or depth is negative
    """
    if color is not board.active_color:
        raise ValueError(f"{color} is not to move")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    if not board.can_move(color):
        logger.debug(f"{color} has no moves and passes")
        return PASS, None, 0

    evaluator = evaluator if evaluator else MaterialEvaluator()
    work = board.copy()
    stats = SearchStats()

    start_time = time.time()
    score, move = alpha_beta(work, depth, sense_of(color), -INFINITY, INFINITY, evaluator, stats)
    elapsed_ms = int((time.time() - start_time) * 1000)

    if move is None:
        # Position already over (e.g. jump limit reached) but a move was asked for
        move = generate_moves(color, work)[0]
        logger.warning(f"Search on a finished position; falling back to {move!r}")

    logger.debug(
        f"Search complete: color={color}, depth={depth}, move={move!r}, "
        f"score={score}, nodes={stats.nodes}, leaves={stats.leaves}, time={elapsed_ms}ms"
    )
    return move, score, stats.nodes


class SearchEngine:
    """
    Depth-limited alpha-beta player.

    Attributes:
        evaluator: Static evaluator used at the leaves
        max_depth: Search depth D (D + 1 plies are examined)
        last_move: Move returned by the latest find_best_move() call
        last_score: Its score from Red's perspective (None after a forced pass)
        last_nodes: Positions visited by the latest search
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, max_depth: int = DEFAULT_DEPTH):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.evaluator = evaluator if evaluator else MaterialEvaluator()
        self.max_depth = max_depth
        self.last_move: Optional[Move] = None
        self.last_score: Optional[int] = None
        self.last_nodes = 0

    def find_best_move(self, board: BoardState, color: PieceColor) -> Move:
        """
        Return one legal move for COLOR, or PASS if it cannot move.

        Raises:
            ValueError: If COLOR is not the side to move
        """
        move, score, nodes = find_best_move(board, color, self.max_depth, self.evaluator)
        self.last_move = move
        self.last_score = score
        self.last_nodes = nodes
        logger.info(f"{color} plays {move!r} (score={score}, nodes={nodes})")
        return move

    def __repr__(self) -> str:
        return f"SearchEngine(evaluator={self.evaluator!r}, max_depth={self.max_depth})"
