"""
Pieces, Squares and Moves

Value types shared by every part of the engine.

Square Layout:
    The playable 7x7 area is embedded in an 11x11 grid whose outer two
    rings are permanently BLOCKED. Any 5x5 window centred on a playable
    square therefore stays inside the grid, and neighborhood scans need no
    edge checks: the border simply looks blocked.

    Linearized index of (col, row), both 0-based on the playable board:
        index = (row + 2) * 11 + (col + 2)

    Column 0 is file 'a', row 0 is rank '1'.
"""

from enum import Enum
from typing import Optional, Tuple

SIDE = 7
"""Number of playable squares on a side."""

EXTENDED_SIDE = SIDE + 4
"""Side length including the 2-deep blocked border."""

BOARD_CELLS = EXTENDED_SIDE * EXTENDED_SIDE

JUMP_LIMIT = 25
"""Consecutive jumps (no intervening extend) that end the game."""


class PieceColor(Enum):
    """Contents of one cell."""

    EMPTY = "-"
    BLOCKED = "X"
    RED = "r"
    BLUE = "b"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    def opposite(self) -> "PieceColor":
        """RED <-> BLUE; EMPTY and BLOCKED are their own opposites."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def __str__(self) -> str:
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
RED = PieceColor.RED
BLUE = PieceColor.BLUE


def index(col: int, row: int) -> int:
    """Return the linearized index of square (col, row)."""
    return (row + 2) * EXTENDED_SIDE + (col + 2)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


# Scan order used everywhere moves are enumerated: rank 7 down to rank 1,
# file a to g within a rank. Entries are (col, row, index).
PLAYABLE_SQUARES = tuple(
    (col, row, index(col, row))
    for row in range(SIDE - 1, -1, -1)
    for col in range(SIDE)
)

# 5x5 window around a square (minus the square itself), columns outer and
# rows inner. Entries are (dc, dr, index offset).
NEIGHBORHOOD = tuple(
    (dc, dr, neighbor(0, dc, dr))
    for dc in range(-2, 3)
    for dr in range(-2, 3)
    if (dc, dr) != (0, 0)
)

# Index offsets of the 8 squares at distance 1.
ADJACENT = tuple(
    neighbor(0, dc, dr)
    for dc in range(-1, 2)
    for dr in range(-1, 2)
    if (dc, dr) != (0, 0)
)


def on_grid(col: int, row: int) -> bool:
    """True if (col, row) lies inside the 11x11 backing grid."""
    return -2 <= col < SIDE + 2 and -2 <= row < SIDE + 2


def on_board(col: int, row: int) -> bool:
    """True if (col, row) is a playable square."""
    return 0 <= col < SIDE and 0 <= row < SIDE


class Move:
    """
    A single Ataxx move: a pass, or a piece moving from source to dest.

    Moves are immutable values. A piece move one square away (Chebyshev
    distance 1) is an extend, two squares away a jump. Moves at any other
    distance can be constructed but are never legal.

    Attributes:
        source: (col, row) of the moving piece, None for a pass
        dest: (col, row) of the landing square, None for a pass
    """

    __slots__ = ("_source", "_dest")

    def __init__(self, source: Optional[Tuple[int, int]] = None,
                 dest: Optional[Tuple[int, int]] = None):
        if (source is None) != (dest is None):
            raise ValueError("A move needs both a source and a destination")
        self._source = tuple(source) if source is not None else None
        self._dest = tuple(dest) if dest is not None else None

    @classmethod
    def move(cls, col0: int, row0: int, col1: int, row1: int) -> "Move":
        """Return the move (col0, row0) -> (col1, row1)."""
        return cls((col0, row0), (col1, row1))

    @classmethod
    def pass_move(cls) -> "Move":
        """Return the pass move."""
        return PASS

    @property
    def source(self) -> Optional[Tuple[int, int]]:
        return self._source

    @property
    def dest(self) -> Optional[Tuple[int, int]]:
        return self._dest

    @property
    def is_pass(self) -> bool:
        return self._source is None

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and dest (0 for a pass)."""
        if self.is_pass:
            return 0
        return max(abs(self._dest[0] - self._source[0]),
                   abs(self._dest[1] - self._source[1]))

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._source == other._source and self._dest == other._dest

    def __hash__(self) -> int:
        return hash((self._source, self._dest))

    def __repr__(self) -> str:
        if self.is_pass:
            return "Move(PASS)"
        return f"Move({self._source} -> {self._dest})"


PASS = Move()
