"""
Board Module

This module holds the game rules: the position, its reversible mutation
log, and legal move enumeration.

Key Components:
    - BoardState: 11x11 bordered grid, piece counts, undo log, observers
    - Move / PieceColor: Value types for moves and cell contents
    - generate_moves: Legal move enumeration with a scan-direction pivot
    - board_to_tensor: Array encoding of a position

Data Flow:
    BoardState → generate_moves() → [Move] → make_move() / undo()
"""

from ataxx_engine.board.errors import (
    EmptyHistoryError,
    GameError,
    IllegalBlockError,
    IllegalMoveError,
    IllegalPassError,
)
from ataxx_engine.board.movegen import count_moves, generate_moves
from ataxx_engine.board.pieces import (
    BLOCKED,
    BLUE,
    EMPTY,
    JUMP_LIMIT,
    PASS,
    RED,
    SIDE,
    Move,
    PieceColor,
)
from ataxx_engine.board.representation import board_to_tensor
from ataxx_engine.board.state import BoardState

__all__ = [
    'BoardState',
    'Move',
    'PieceColor',
    'PASS',
    'EMPTY',
    'BLOCKED',
    'RED',
    'BLUE',
    'SIDE',
    'JUMP_LIMIT',
    'generate_moves',
    'count_moves',
    'board_to_tensor',
    'GameError',
    'IllegalMoveError',
    'IllegalPassError',
    'IllegalBlockError',
    'EmptyHistoryError',
]
