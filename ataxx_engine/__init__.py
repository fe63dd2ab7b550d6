"""
Ataxx Engine

A two-player Ataxx engine: a reversible board model and a depth-limited
minimax search with alpha-beta pruning over a material heuristic.

## Architecture

The engine is organized into several key modules:

1. **board**: Game rules
   - 11x11 bordered grid around the 7x7 playing area
   - Undo log so search mutates and restores one board
   - Legal move generation

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: Red pieces minus Blue pieces

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - SearchEngine: one legal move per call, on a private board copy

4. **interface**: Text command protocol
   - Move notation ("a7-b6", "-")
   - Command loop playing the engine against a user

5. **utils**: Testing and benchmarking utilities
   - Perft, unpruned reference search, self-play

## Quick Start

### As a Python Library

```python
from ataxx_engine.board import BoardState
from ataxx_engine.search import SearchEngine

board = BoardState()
engine = SearchEngine(max_depth=3)

move = engine.find_best_move(board, board.active_color)
board.make_move(move)
print(board.to_string(legend=True))
```

### From a Terminal

```bash
python -m ataxx_engine.interface
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from ataxx_engine.board import BoardState, Move, PieceColor, generate_moves
from ataxx_engine.evaluation import Evaluator, MaterialEvaluator
from ataxx_engine.search import SearchEngine, find_best_move

__all__ = [
    'BoardState',
    'Move',
    'PieceColor',
    'generate_moves',
    'Evaluator',
    'MaterialEvaluator',
    'SearchEngine',
    'find_best_move',
]
