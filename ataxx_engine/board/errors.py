"""
Board Errors

All of these are precondition violations raised synchronously at the point
of misuse. The board is left unchanged when any of them is raised.
"""


class GameError(Exception):
    """Base class for rule violations reported by the board."""


class IllegalMoveError(GameError):
    """make_move() was given a move that fails legal_move()."""


class IllegalPassError(IllegalMoveError):
    """A pass was requested while the side to move has a legal move."""


class IllegalBlockError(GameError):
    """set_block() after moves were made, off the board, or onto a piece."""


class EmptyHistoryError(GameError):
    """undo() was called with no recorded move to take back."""
