"""
Move Notation

Squares are written file then rank ("a1" .. "g7"). A piece move is two
squares joined by a dash ("a7-b6"); a lone dash ("-") is a pass.
"""

from typing import Tuple

from ataxx_engine.board.pieces import PASS, SIDE, Move

FILES = "abcdefg"
RANKS = "1234567"


def parse_square(text: str) -> Tuple[int, int]:
    """
    Convert "c3" to (2, 2).

    Raises:
        ValueError: If TEXT is not a square on the board
    """
    text = text.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"Invalid square: {text!r}")
    return FILES.index(text[0]), RANKS.index(text[1])


def format_square(col: int, row: int) -> str:
    if not (0 <= col < SIDE and 0 <= row < SIDE):
        raise ValueError(f"Square off the board: {(col, row)}")
    return FILES[col] + RANKS[row]


def parse_move(text: str) -> Move:
    """
    Convert "a7-b6" or "-" to a Move.

    Raises:
        ValueError: If TEXT is not a well-formed move
    """
    text = text.strip()
    if text == "-":
        return PASS
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid move: {text!r}")
    return Move(parse_square(parts[0]), parse_square(parts[1]))


def format_move(move: Move) -> str:
    if move.is_pass:
        return "-"
    return f"{format_square(*move.source)}-{format_square(*move.dest)}"


def looks_like_move(text: str) -> bool:
    """True if TEXT is a pass or has the square-dash-square shape."""
    text = text.strip()
    return text == "-" or (len(text) == 5 and text[2] == "-")
