"""
Players

A Player turns a position into one move for its color. The game loop only
talks to this interface, so engine and human sides are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ataxx_engine.board.pieces import Move, PieceColor
from ataxx_engine.board.state import BoardState
from ataxx_engine.search.alphabeta import SearchEngine

MoveSource = Callable[[BoardState, PieceColor], Optional[Move]]


class Player(ABC):
    """One side of a game."""

    def __init__(self, color: PieceColor):
        if not color.is_piece:
            raise ValueError(f"A player must be Red or Blue, got {color}")
        self.color = color

    @abstractmethod
    def choose_move(self, board: BoardState) -> Optional[Move]:
        """
        Pick a move for self.color on BOARD.

        Returns:
            A move, or None if the player gives up (e.g. input ended)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.color})"


class AIPlayer(Player):
    """A player that searches for its moves."""

    def __init__(self, color: PieceColor, engine: Optional[SearchEngine] = None):
        super().__init__(color)
        self.engine = engine if engine else SearchEngine()

    def choose_move(self, board: BoardState) -> Move:
        return self.engine.find_best_move(board, self.color)


class ManualPlayer(Player):
    """A player whose moves come from an outside source (keyboard, GUI, script)."""

    def __init__(self, color: PieceColor, source: MoveSource):
        super().__init__(color)
        self.source = source

    def choose_move(self, board: BoardState) -> Optional[Move]:
        return self.source(board, self.color)
