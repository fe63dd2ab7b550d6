"""
Move Generation

Enumerates the legal moves of one color.

Two scan directions produce the same set of (source, dest) pairs:
    - From pieces: visit every COLOR piece and collect the empty squares
      in its 5x5 window as destinations.
    - From empties: visit every empty square and collect the COLOR pieces
      in its 5x5 window as sources.

Whichever side of the scan has fewer squares to visit is used, so crowded
late-game boards are scanned from the few remaining holes.

Order is deterministic: squares rank 7 to rank 1, file a to g; within a
window, files outer and ranks inner. Alpha-beta cutoffs depend on this
order, so identical positions always yield identical searches.
"""

from typing import List

from ataxx_engine.board.pieces import (
    EMPTY,
    NEIGHBORHOOD,
    PASS,
    PLAYABLE_SQUARES,
    Move,
    PieceColor,
)
from ataxx_engine.board.state import BoardState


def generate_moves(color: PieceColor, board: BoardState) -> List[Move]:
    """
    Return all moves for COLOR on BOARD.

    Args:
        color: Color to generate moves for (need not be the side to move)
        board: Position to scan

    Returns:
        [PASS] if COLOR cannot move, otherwise every (source, dest) pair
        at distance 1 or 2 from a COLOR piece onto an empty square
    """
    if not board.can_move(color):
        return [PASS]

    from_pieces = board.piece_count(color) < board.empty_count
    if from_pieces:
        subject, objective = color, EMPTY
    else:
        subject, objective = EMPTY, color

    cells = board.cells
    moves = []
    for col, row, sq in PLAYABLE_SQUARES:
        if cells[sq] is not subject:
            continue
        for dc, dr, offset in NEIGHBORHOOD:
            if cells[sq + offset] is objective:
                if from_pieces:
                    moves.append(Move.move(col, row, col + dc, row + dr))
                else:
                    moves.append(Move.move(col + dc, row + dr, col, row))
    return moves


def count_moves(color: PieceColor, board: BoardState) -> int:
    """Number of piece moves available to COLOR (0 when it must pass)."""
    moves = generate_moves(color, board)
    if moves == [PASS]:
        return 0
    return len(moves)
