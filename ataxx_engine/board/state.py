"""
Board State

The canonical Ataxx position: cells, piece counts, side to move, and the
reversible change log that lets search walk the game tree on a single board.

Representation:
    Cells live in one flat list of 121 entries (an 11x11 grid). The outer
    two rings are BLOCKED forever, so every 5x5 neighborhood of a playable
    square stays in bounds and looks blocked past the edge.

Undo Log:
    Every recorded cell write appends a BoardChange(index, old, new,
    jump_streak). Each move opens a segment with a SegmentMarker holding
    the jump streak from before the move. undo() pops records back to the
    most recent marker, so taking back a move costs O(cells changed)
    instead of a copy of the whole board.

Observers:
    Callables registered with add_listener() are invoked with the board
    after every successful clear, make_move, pass_turn, undo and set_block.
"""

from collections import namedtuple
from typing import Callable, Iterable, List, Optional

from ataxx_engine.board.errors import (
    EmptyHistoryError,
    IllegalBlockError,
    IllegalMoveError,
    IllegalPassError,
)
from ataxx_engine.board.pieces import (
    ADJACENT,
    BLOCKED,
    BLUE,
    BOARD_CELLS,
    EMPTY,
    JUMP_LIMIT,
    NEIGHBORHOOD,
    PLAYABLE_SQUARES,
    RED,
    SIDE,
    Move,
    PieceColor,
    index,
    on_board,
    on_grid,
)

BoardChange = namedtuple("BoardChange", ["index", "old_color", "new_color", "jump_streak"])
"""One recorded cell write."""

SegmentMarker = namedtuple("SegmentMarker", ["jump_streak"])
"""Start of one move's records; holds the jump streak before that move."""

Listener = Callable[["BoardState"], None]

_SYMBOLS = {color.symbol: color for color in PieceColor}


class BoardState:
    """
    An Ataxx board.

    Attributes:
        active_color: Color of the side to move
        move_count: Moves and passes since the last clear
        jump_streak: Consecutive jumps since the last extend

    Methods:
        get / get_index: Read a cell (off-grid reads are BLOCKED)
        legal_move / can_move: Rule queries
        make_move / pass_turn / undo: The only ways to change a position
        set_block: Place a symmetric block group before the first move
        game_over / winner: End-of-game detection
    """

    def __init__(self):
        self._cells: List[PieceColor] = [BLOCKED] * BOARD_CELLS
        self._counts = {RED: 0, BLUE: 0}
        self._num_blocked = 0
        self._active = RED
        self._move_count = 0
        self._jump_streak = 0
        self._change_log: list = []
        self._move_history: List[Move] = []
        self._listeners: List[Listener] = []
        self.clear()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Reset to the starting position with no blocks."""
        self._reset_cells()
        self._put(0, 6, RED)
        self._put(6, 0, RED)
        self._put(0, 0, BLUE)
        self._put(6, 6, BLUE)
        self._notify()

    def _reset_cells(self) -> None:
        cells = self._cells
        for i in range(BOARD_CELLS):
            cells[i] = BLOCKED
        for _, _, sq in PLAYABLE_SQUARES:
            cells[sq] = EMPTY
        self._counts = {RED: 0, BLUE: 0}
        self._num_blocked = 0
        self._active = RED
        self._move_count = 0
        self._jump_streak = 0
        self._change_log = []
        self._move_history = []

    def _put(self, col: int, row: int, color: PieceColor) -> None:
        """Unrecorded write used while setting up a position."""
        sq = index(col, row)
        old = self._cells[sq]
        if old.is_piece:
            self._counts[old] -= 1
        elif old is BLOCKED:
            self._num_blocked -= 1
        if color.is_piece:
            self._counts[color] += 1
        elif color is BLOCKED:
            self._num_blocked += 1
        self._cells[sq] = color

    @classmethod
    def from_string(cls, text: str, active_color: PieceColor = RED) -> "BoardState":
        """
        Build a position from the layout printed by to_string().

        Rows are listed from rank 7 down to rank 1. Optional rank labels
        at the start of a row and a trailing file legend are ignored.

        Args:
            text: Seven rows of seven symbols each ('r', 'b', '-', 'X')
            active_color: Side to move in the new position

        Returns:
            A BoardState with an empty move history

        Raises:
            ValueError: If the layout is malformed
        """
        if not active_color.is_piece:
            raise ValueError(f"Side to move must be Red or Blue, got {active_color}")

        rows = []
        for line in text.strip().splitlines():
            tokens = line.split()
            if not tokens:
                continue
            if tokens == list("abcdefg"):
                continue
            if tokens[0].isdigit():
                tokens = tokens[1:]
            rows.append(tokens)

        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise ValueError(f"Expected {SIDE} rows of {SIDE} squares")

        board = cls()
        board._reset_cells()
        for i, tokens in enumerate(rows):
            row = SIDE - 1 - i
            for col, token in enumerate(tokens):
                if token not in _SYMBOLS:
                    raise ValueError(f"Unknown square symbol: {token!r}")
                board._put(col, row, _SYMBOLS[token])
        board._active = active_color
        return board

    def copy(self) -> "BoardState":
        """Return an independent copy. Listeners are not carried over."""
        other = BoardState.__new__(BoardState)
        other._cells = list(self._cells)
        other._counts = dict(self._counts)
        other._num_blocked = self._num_blocked
        other._active = self._active
        other._move_count = self._move_count
        other._jump_streak = self._jump_streak
        other._change_log = list(self._change_log)
        other._move_history = list(self._move_history)
        other._listeners = []
        return other

    __copy__ = copy

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Call LISTENER with this board after every successful mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, col: int, row: int) -> PieceColor:
        """Contents of square (col, row). Anything off the grid is BLOCKED."""
        if not on_grid(col, row):
            return BLOCKED
        return self._cells[index(col, row)]

    def get_index(self, sq: int) -> PieceColor:
        """Contents of the square with linearized index SQ."""
        if 0 <= sq < BOARD_CELLS:
            return self._cells[sq]
        return BLOCKED

    @property
    def cells(self) -> tuple:
        """Snapshot of all 121 cells in index order."""
        return tuple(self._cells)

    @property
    def active_color(self) -> PieceColor:
        return self._active

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def jump_streak(self) -> int:
        return self._jump_streak

    def piece_count(self, color: PieceColor) -> int:
        """Number of COLOR pieces on the board (0 for non-piece colors)."""
        return self._counts.get(color, 0)

    @property
    def red_pieces(self) -> int:
        return self._counts[RED]

    @property
    def blue_pieces(self) -> int:
        return self._counts[BLUE]

    @property
    def empty_count(self) -> int:
        """Number of empty playable squares."""
        return SIDE * SIDE - self._counts[RED] - self._counts[BLUE] - self._num_blocked

    def all_moves(self) -> List[Move]:
        """All moves (including passes) made since the last clear."""
        return list(self._move_history)

    def legal_move(self, move: Move) -> bool:
        """
        Return True iff MOVE is legal for the side to move.

        A pass is always legal here; whether passing is actually allowed is
        checked by pass_turn(). A piece move needs an empty destination, a
        source holding the side to move, and a distance of 1 or 2.
        """
        if move.is_pass:
            return True
        return (
            self.get(*move.dest) is EMPTY
            and self.get(*move.source) is self._active
            and move.distance in (1, 2)
        )

    def can_move(self, color: PieceColor) -> bool:
        """
        Return True iff COLOR has any piece move, ignoring whose turn it is.

        True when some empty square has a COLOR piece within two rows and
        two columns of it.
        """
        if self.piece_count(color) == 0:
            return False
        cells = self._cells
        for _, _, sq in PLAYABLE_SQUARES:
            if cells[sq] is EMPTY:
                for _, _, offset in NEIGHBORHOOD:
                    if cells[sq + offset] is color:
                        return True
        return False

    def game_over(self) -> bool:
        """
        True iff the jump limit is reached, a side has no pieces, or
        neither side can move.
        """
        return (
            self._jump_streak == JUMP_LIMIT
            or self._counts[RED] == 0
            or self._counts[BLUE] == 0
            or not (self.can_move(RED) or self.can_move(BLUE))
        )

    def winner(self) -> Optional[PieceColor]:
        """
        Return the winning color once the game is over.

        Returns:
            RED or BLUE for a decided game, EMPTY for a draw,
            None if the game is still in progress
        """
        if not self.game_over():
            return None
        if self._counts[RED] > self._counts[BLUE]:
            return RED
        if self._counts[BLUE] > self._counts[RED]:
            return BLUE
        return EMPTY

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def make_move(self, move: Move) -> None:
        """
        Play MOVE for the side to move.

        The move is validated before anything changes; a rejected move
        leaves the board untouched.

        Raises:
            IllegalMoveError: If not legal_move(move)
            IllegalPassError: If MOVE is a pass and a piece move exists
        """
        if not self.legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move!r}")

        if move.is_pass:
            self._pass()
            self._change_log.append(SegmentMarker(self._jump_streak))
            self._move_history.append(move)
            self._notify()
            return

        color = self._active
        opponent = color.opposite()
        self._change_log.append(SegmentMarker(self._jump_streak))
        self._move_history.append(move)

        if move.is_jump:
            self._jump_streak += 1
            self._set(index(*move.source), EMPTY)
        else:
            self._jump_streak = 0

        dest = index(*move.dest)
        self._set(dest, color)
        cells = self._cells
        for offset in ADJACENT:
            target = dest + offset
            if cells[target] is opponent:
                self._set(target, color)

        self._move_count += 1
        self._active = opponent
        self._notify()

    def pass_turn(self) -> None:
        """
        Pass for the side to move. Only allowed when it has no piece move.

        This does not record an undo segment; make_move(PASS) is the
        undoable way to pass.

        Raises:
            IllegalPassError: If the side to move can move
        """
        self._pass()
        self._notify()

    def _pass(self) -> None:
        if self.can_move(self._active):
            raise IllegalPassError("Pass not allowed: a legal move exists")
        self._active = self._active.opposite()
        self._move_count += 1

    def undo(self) -> None:
        """
        Take back the most recent move or recorded pass.

        Raises:
            EmptyHistoryError: If there is no move to take back. Callers must
                pair every undo() with an earlier make_move().
        """
        if not self._move_history:
            raise EmptyHistoryError("No move to undo")

        cells = self._cells
        counts = self._counts
        log = self._change_log
        entry = log.pop()
        while type(entry) is BoardChange:
            cells[entry.index] = entry.old_color
            if entry.new_color.is_piece:
                counts[entry.new_color] -= 1
            if entry.old_color.is_piece:
                counts[entry.old_color] += 1
            entry = log.pop()

        self._jump_streak = entry.jump_streak
        self._move_history.pop()
        self._active = self._active.opposite()
        self._move_count -= 1
        self._notify()

    def _set(self, sq: int, color: PieceColor) -> None:
        """Recorded write of COLOR to square SQ, keeping counts current."""
        old = self._cells[sq]
        self._change_log.append(BoardChange(sq, old, color, self._jump_streak))
        if old.is_piece:
            self._counts[old] -= 1
        if color.is_piece:
            self._counts[color] += 1
        self._cells[sq] = color

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    @staticmethod
    def _reflections(col: int, row: int) -> Iterable:
        mirror_col = SIDE - 1 - col
        mirror_row = SIDE - 1 - row
        return {(col, row), (col, mirror_row), (mirror_col, row), (mirror_col, mirror_row)}

    def legal_block(self, col: int, row: int) -> bool:
        """True iff a block group may be placed at (col, row) right now."""
        if not on_board(col, row):
            return False
        return all(
            self.get(c, r) in (EMPTY, BLOCKED)
            for c, r in self._reflections(col, row)
        )

    def set_block(self, col: int, row: int) -> None:
        """
        Block (col, row) and its reflections across the middle column,
        the middle row, and both.

        Raises:
            IllegalBlockError: If any move has been made, or if any of the
                four squares is off the board or holds a piece
        """
        if self._move_history:
            raise IllegalBlockError("Blocks can only be added before the first move")
        if not self.legal_block(col, row):
            raise IllegalBlockError(f"Illegal block placement at {(col, row)}")
        for c, r in self._reflections(col, row):
            self._put(c, r, BLOCKED)
        self._notify()

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._counts == other._counts
            and self._move_count == other._move_count
            and self._jump_streak == other._jump_streak
            and self._active is other._active
            and self._move_history == other._move_history
        )

    def __hash__(self) -> int:
        return hash(tuple(self._cells))

    def to_string(self, legend: bool = False) -> str:
        """
        Text depiction of the board, rank 7 at the top.

        Args:
            legend: If True, label ranks on the left and files underneath
        """
        lines = []
        for row in range(SIDE - 1, -1, -1):
            squares = " ".join(self.get(col, row).symbol for col in range(SIDE))
            prefix = str(row + 1) if legend else ""
            lines.append(f"{prefix}  {squares}")
        if legend:
            lines.append("   " + " ".join("abcdefg"))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"BoardState(active={self._active}, red={self._counts[RED]}, "
            f"blue={self._counts[BLUE]}, moves={self._move_count})"
        )
