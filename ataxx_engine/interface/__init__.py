"""
Text Interface

This module implements the outer program around the engine: move
notation and a line-oriented command loop that plays the engine against
a user (or itself).

Protocol Flow:
    User → "block c3"
    User → "a7-b6"
    Engine → "Blue plays g7-f6."
    User → "go"
    Engine → "bestmove b6-c5 score 2 nodes 1234"
    User → "quit"
"""

from ataxx_engine.interface.notation import format_move, parse_move
from ataxx_engine.interface.protocol import TextInterface

__all__ = ['TextInterface', 'parse_move', 'format_move']
