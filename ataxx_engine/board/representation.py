"""
Board Representation as Arrays

Converts a BoardState into stacked binary planes, the usual input format
for a learned evaluator and handy for vectorized analysis.

3-Channel Representation:
    0: Red pieces
    1: Blue pieces
    2: Blocked squares

4-Channel Representation:
    0-2: Same as above
    3: Side to move (all 1s if Red, all 0s if Blue)

Each channel is a 7*7 binary mask.

Board Orientation:
    - Row 0 = Rank 7
    - Row 6 = Rank 1
    - Column 0 = File a
    - Column 6 = File g
"""

import numpy as np
from typing import Tuple

from ataxx_engine.board.pieces import BLOCKED, BLUE, RED, SIDE, PieceColor
from ataxx_engine.board.state import BoardState

COLOR_TO_CHANNEL = {
    RED: 0,
    BLUE: 1,
    BLOCKED: 2,
}


def square_to_coordinates(col: int, row: int) -> Tuple[int, int]:
    """
    Convert board (col, row) to array (row, column).

    Args:
        col: File index (0-6), 0 = file a
        row: Rank index (0-6), 0 = rank 1

    Returns:
        Tuple of (array_row, array_col) with array row 0 = rank 7
    """
    return SIDE - 1 - row, col


def coordinates_to_square(array_row: int, array_col: int) -> Tuple[int, int]:
    """Inverse of square_to_coordinates()."""
    return array_col, SIDE - 1 - array_row


def board_to_tensor(board: BoardState) -> np.ndarray:
    """
    Convert a board to a 3-channel array.

    Args:
        board: Position to encode

    Returns:
        numpy array of shape (3, 7, 7) with dtype float32
    """
    tensor = np.zeros((3, SIDE, SIDE), dtype=np.float32)

    for col in range(SIDE):
        for row in range(SIDE):
            channel = COLOR_TO_CHANNEL.get(board.get(col, row))
            if channel is not None:
                r, c = square_to_coordinates(col, row)
                tensor[channel, r, c] = 1.0

    return tensor


def board_to_tensor_with_turn(board: BoardState) -> np.ndarray:
    """
    Convert a board to a 4-channel array with a side-to-move plane.

    Returns:
        numpy array of shape (4, 7, 7) with dtype float32
    """
    turn = np.zeros((1, SIDE, SIDE), dtype=np.float32)
    if board.active_color is RED:
        turn[0, :, :] = 1.0
    return np.concatenate([board_to_tensor(board), turn], axis=0)


def tensor_to_board(tensor: np.ndarray, active_color: PieceColor = RED) -> BoardState:
    """
    Convert a 3-channel array back to a BoardState.

    This is the inverse of board_to_tensor(). The resulting board has no
    move history.

    Args:
        tensor: numpy array of shape (3, 7, 7)
        active_color: Side to move in the rebuilt position

    Raises:
        ValueError: If the array has the wrong shape or two planes claim
            the same square
    """
    if tensor.shape != (3, SIDE, SIDE):
        raise ValueError(f"Invalid tensor shape: {tensor.shape}. Expected (3, {SIDE}, {SIDE})")

    occupied = tensor > 0.5
    if np.any(occupied.sum(axis=0) > 1):
        raise ValueError("Multiple planes set on one square")

    channel_to_color = {v: k for k, v in COLOR_TO_CHANNEL.items()}
    grid = [["-"] * SIDE for _ in range(SIDE)]
    for channel, color in channel_to_color.items():
        for r, c in np.argwhere(occupied[channel]):
            grid[r][c] = color.symbol

    layout = "\n".join(" ".join(line) for line in grid)
    return BoardState.from_string(layout, active_color=active_color)
