"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between evaluators without
modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns a score from Red's perspective
    3. Positive = Red advantage, Negative = Blue advantage
    4. Finished games score ±WINNING_VALUE (or 0 for a draw)

Terminal Scores:
    A decided game saturates to WINNING_VALUE regardless of the margin, so a
    win found at any depth outranks every heuristic value.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ataxx_engine.board.state import BoardState


# Evaluation constants
INFINITY = 2 ** 31 - 1  # Wider than any score; used for the initial window
WINNING_VALUE = INFINITY - 1  # Score of a won game for Red (negated for Blue)


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Methods:
        evaluate(board): Heuristic score from Red's perspective
        evaluate_terminal(board): Saturated score if the game is over
    """

    @abstractmethod
    def evaluate(self, board: BoardState) -> int:
        """
        Evaluate a position from Red's perspective.

        Args:
            board: Position to evaluate

        Returns:
            int: Heuristic score

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        pass

    def evaluate_terminal(self, board: BoardState) -> Optional[int]:
        """
        Score finished games.

        This is a helper method that search algorithms can call to
        know when they can stop searching.

        Args:
            board: Position to check

        Returns:
            int: WINNING_VALUE, -WINNING_VALUE or 0 if the game is over
            None: If the game is still in progress
        """
        if not board.game_over():
            return None
        return self.terminal_score(board)

    def terminal_score(self, board: BoardState) -> int:
        """
        Saturated score of a position already known to be over.

        Only the sign of evaluate() matters here: a Red lead is a Red win.
        """
        score = self.evaluate(board)
        if score > 0:
            return WINNING_VALUE
        if score < 0:
            return -WINNING_VALUE
        return 0

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
