"""
Evaluation Module

This module provides position evaluation functions for the engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Piece count difference

Data Flow:
    BoardState → evaluator.evaluate() → int
                                        Positive = Red advantage
                                        Negative = Blue advantage
"""

from ataxx_engine.evaluation.base import INFINITY, WINNING_VALUE, Evaluator
from ataxx_engine.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator', 'WINNING_VALUE', 'INFINITY']
