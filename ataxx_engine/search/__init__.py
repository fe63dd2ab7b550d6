"""
Search Module

This module implements the engine's search: depth-limited minimax with
alpha-beta pruning over a make/undo board.

Key Components:
    - alpha_beta: Core recursive search (score, best move)
    - find_best_move: Root-level search on a private board copy
    - SearchEngine: Player-facing wrapper remembering the last result
"""

from ataxx_engine.search.alphabeta import (
    DEFAULT_DEPTH,
    SearchEngine,
    SearchStats,
    alpha_beta,
    find_best_move,
    sense_of,
)

__all__ = ['alpha_beta', 'find_best_move', 'SearchEngine', 'SearchStats', 'DEFAULT_DEPTH', 'sense_of']
