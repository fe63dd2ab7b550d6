"""
Material Evaluation

Ataxx is decided by piece count, so the baseline heuristic is simply the
difference between the two sides.
"""

from ataxx_engine.board.state import BoardState
from ataxx_engine.evaluation.base import Evaluator


class MaterialEvaluator(Evaluator):
    """Red pieces minus Blue pieces."""

    def evaluate(self, board: BoardState) -> int:
        return board.red_pieces - board.blue_pieces
