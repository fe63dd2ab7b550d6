"""
Utilities Module

This module provides utility functions for testing and benchmarking the
engine.

Key Components:
    - perft: Move generation and make/undo verification
    - full_minimax: Unpruned reference search
    - play_game: Self-play harness
"""

from ataxx_engine.utils.testing import (
    GameRecord,
    full_minimax,
    perft,
    play_game,
)

__all__ = [
    'perft',
    'full_minimax',
    'play_game',
    'GameRecord',
]
