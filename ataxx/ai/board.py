#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Board module for Ataxx AI.

This module provides the game state and game mechanics for Ataxx: legal
moves, moves and undo, captures, blocks and end-of-game detection.

Squares are named by column ('a'..'g') and row ('1'..'7').  Internally the
7x7 grid sits inside an 11x11 flat numpy array whose outer two rings are
permanently BLOCKED, so every square within two rows and columns of a
playable square is a valid index and looks blocked when it is off the board.
Those border squares never appear through the public coordinate API.
"""
import numpy as np

from .constants import (
    BOARD_TOTAL_CELLS, CENTER_COLUMN, CENTER_ROW, COLUMNS, EXTENDED_SIDE,
    JUMP_LIMIT, MAX_MOVE_DISTANCE, ROWS,
)
from .exceptions import GameError, error
from .move import Move, index
from .pieces import PieceColor

EMPTY = PieceColor.EMPTY
RED = PieceColor.RED
BLUE = PieceColor.BLUE
BLOCKED = PieceColor.BLOCKED


def _offsets(distance):
    """All (dc, dr) within DISTANCE, by increasing column then row, without (0, 0)."""
    return [(dc, dr)
            for dc in range(-distance, distance + 1)
            for dr in range(-distance, distance + 1)
            if dc or dr]


def _build_tables():
    playable = []
    coords = {}
    for col in COLUMNS:
        for row in ROWS:
            sq = index(col, row)
            playable.append(sq)
            coords[sq] = (col, row)

    cells = EXTENDED_SIDE * EXTENDED_SIDE
    reach = np.zeros((cells, len(_offsets(MAX_MOVE_DISTANCE))), dtype=np.intp)
    adjacent = np.zeros((cells, len(_offsets(1))), dtype=np.intp)
    for sq in playable:
        reach[sq] = [Board.neighbor(sq, dc, dr) for dc, dr in _offsets(MAX_MOVE_DISTANCE)]
        adjacent[sq] = [Board.neighbor(sq, dc, dr) for dc, dr in _offsets(1)]
    return np.array(playable, dtype=np.intp), coords, reach, adjacent


def _on_board(col, row):
    return "a" <= col <= "g" and "1" <= row <= "7"


def _noop(board):
    pass


class Board:
    """An Ataxx board.

    The board owns the piece layout, whose turn it is, the move and jump
    counters, the winner and the undo history.  Every applied move (or pass)
    opens a frame in the undo log, so ``undo`` can restore the exact
    previous position.
    """

    def __init__(self, board0=None):
        """Initialize a board.

        Args:
            board0: Optional board to copy.  Only its layout and counters are
                copied; the new board has an empty move and undo history and
                a notifier that does nothing.
        """
        self._notifier = _noop
        self._all_moves = []
        self._undo_log = []
        self._frames = []
        self._winner = None
        if board0 is None:
            self._board = np.full(EXTENDED_SIDE * EXTENDED_SIDE, BLOCKED, dtype=np.int8)
            self.clear()
        else:
            self._board = board0._board.copy()
            self._counts = list(board0._counts)
            self._whose_move = board0._whose_move
            self._num_moves = board0._num_moves
            self._num_jumps = board0._num_jumps
            self._winner = self._compute_winner()

    @staticmethod
    def index(col, row):
        """Return the linearized index of square COL ROW."""
        return index(col, row)

    @staticmethod
    def neighbor(sq, dc, dr):
        """Return the index of the square DC columns and DR rows away from SQ."""
        return sq + dc + dr * EXTENDED_SIDE

    def clear(self):
        """Reset to the starting position: red on a7 and g1, blue on a1 and g7."""
        self._board[:] = BLOCKED
        self._board[_PLAYABLE] = EMPTY
        self._counts = [0] * len(PieceColor)
        self._counts[EMPTY] = BOARD_TOTAL_CELLS
        self._all_moves = []
        self._undo_log = []
        self._frames = []
        self._whose_move = RED
        self._num_moves = 0
        self._num_jumps = 0

        self._unrecorded_set(index("a", "7"), RED)
        self._unrecorded_set(index("g", "1"), RED)
        self._unrecorded_set(index("a", "1"), BLUE)
        self._unrecorded_set(index("g", "7"), BLUE)

        self._update_winner()
        self._announce()

    # Queries

    @property
    def whose_move(self):
        """Color of the player who moves next; arbitrary once the game is over."""
        return self._whose_move

    @property
    def num_moves(self):
        """Moves and passes since the last clear."""
        return self._num_moves

    @property
    def num_jumps(self):
        """Consecutive jumps since the last extend (or clear)."""
        return self._num_jumps

    @property
    def winner(self):
        """The winner, EMPTY for a draw, or None while the game is undecided."""
        return self._winner

    @property
    def all_moves(self):
        """Moves made since the last clear, oldest first."""
        return list(self._all_moves)

    @property
    def red_pieces(self):
        return self._counts[RED]

    @property
    def blue_pieces(self):
        return self._counts[BLUE]

    def num_pieces(self, color):
        """Return the number of COLOR pieces on the board."""
        return self._counts[color]

    def blocked_count(self):
        return self._counts[BLOCKED]

    def empty_count(self):
        return self._counts[EMPTY]

    def total_open(self):
        """Return the number of playable squares that are not blocked."""
        return BOARD_TOTAL_CELLS - self._counts[BLOCKED]

    def get(self, col, row):
        """Return the contents of square COL ROW.

        Squares up to two columns or rows outside a1-g7 read as BLOCKED.
        """
        return PieceColor(int(self._board[index(col, row)]))

    def get_index(self, sq):
        """Return the contents of the square with linearized index SQ."""
        return PieceColor(int(self._board[sq]))

    def squares(self, color):
        """Return the (col, row) of every COLOR square, by column then row."""
        found = _PLAYABLE[self._board[_PLAYABLE] == color]
        return [_COORDS[sq] for sq in found]

    def can_move(self, color):
        """Return True iff COLOR has a piece with an empty square within reach.

        Whose turn it is, and whether the game is over, are ignored.
        """
        sources = _PLAYABLE[self._board[_PLAYABLE] == color]
        if sources.size == 0:
            return False
        return bool(np.any(self._board[_REACH[sources]] == EMPTY))

    # Moves

    def legal_move(self, move):
        """Return True iff MOVE is legal on the current board.

        Args:
            move: A Move, its text form, or None (never legal)

        Returns:
            bool: Whether the player to move may make MOVE now
        """
        if isinstance(move, str):
            try:
                move = Move.parse(move)
            except GameError:
                return False
        if move is None or self.winner is not None:
            return False
        mover = self._whose_move
        if move.is_pass():
            return self._counts[mover] > 0 and not self.can_move(mover)
        if not (_on_board(move.col0, move.row0) and _on_board(move.col1, move.row1)):
            return False
        if not (move.is_extend() or move.is_jump()):
            return False
        return bool(self._board[move.from_index] == mover
                    and self._board[move.to_index] == EMPTY)

    def legal_move_at(self, col0, row0, col1, row1):
        """Return True iff col0 row0 - col1 row1 is legal on the current board."""
        return self.legal_move(Move.move(col0, row0, col1, row1))

    def make_move(self, move):
        """Make MOVE for the player to move.

        Args:
            move: A Move, or its text form ("a7-a6", or "-" to pass)

        Raises:
            GameError: If the move is not legal
        """
        if isinstance(move, str):
            move = Move.parse(move)
        if not self.legal_move(move):
            raise error("Illegal move: %s", move)
        if move.is_pass():
            self.pass_turn()
            return

        mover = self._whose_move
        opponent = mover.opposite()
        self._all_moves.append(move)
        self._start_undo()
        if move.is_extend():
            self._set(move.to_index, mover)
            self._num_jumps = 0
        else:
            self._set(move.from_index, EMPTY)
            self._set(move.to_index, mover)
            self._num_jumps += 1

        neighbors = _ADJACENT[move.to_index]
        for sq in neighbors[self._board[neighbors] == opponent]:
            self._set(int(sq), mover)

        self._num_moves += 1
        self._whose_move = opponent
        self._update_winner()
        self._announce()

    def pass_turn(self):
        """Pass for the player to move.  Passing is undoable.

        Raises:
            GameError: If the player to move has a legal move or no pieces,
                or the game is over
        """
        if not self.legal_move(Move.PASS):
            raise error("%s may not pass now", self._whose_move)
        self._all_moves.append(Move.PASS)
        self._start_undo()
        self._num_moves += 1
        self._whose_move = self._whose_move.opposite()
        self._update_winner()
        self._announce()

    def undo(self):
        """Undo the last move or pass.

        Raises:
            GameError: If there is nothing to undo, or the undo log is corrupt
        """
        if not self._all_moves:
            raise error("No move to undo")
        if len(self._frames) != len(self._all_moves):
            raise error("Mismatched undo log: %d frames for %d moves",
                        len(self._frames), len(self._all_moves))

        self._num_jumps, self._winner = self._frames.pop()
        self._num_moves -= 1
        self._whose_move = self._whose_move.opposite()
        self._all_moves.pop()
        while True:
            record = self._undo_log.pop()
            if record is None:
                break
            sq, prior = record
            self._unrecorded_set(sq, prior)
        self._announce()

    # Blocks

    def legal_block(self, col, row):
        """Return True iff a block may be placed at COL ROW.

        Blocks go down only before the first move, onto a square that is not
        already blocked, and never onto a piece (including at the mirrored
        squares).
        """
        if not _on_board(col, row) or self._all_moves:
            return False
        if self._board[index(col, row)] == BLOCKED:
            return False
        return not any(self.get_index(sq).is_piece() for sq in _mirrors(col, row))

    def legal_block_at(self, square):
        """Return True iff a block may be placed at SQUARE, e.g. "c4"."""
        return len(square) == 2 and self.legal_block(square[0], square[1])

    def set_block(self, col, row):
        """Block COL ROW and its reflections across the middle row and column.

        Raises:
            GameError: If the placement is not legal
        """
        if not self.legal_block(col, row):
            raise error("Illegal block placement: %s%s", col, row)
        for sq in _mirrors(col, row):
            if self._board[sq] != BLOCKED:
                self._unrecorded_set(sq, BLOCKED)
        self._update_winner()
        self._announce()

    def set_block_at(self, square):
        """Place a block at SQUARE, e.g. "c4"."""
        if len(square) != 2:
            raise error("Bad block square: %r", square)
        self.set_block(square[0], square[1])

    # Notification

    def set_notifier(self, notify):
        """Call NOTIFY(board) after every change to this board, starting now."""
        self._notifier = notify if notify is not None else _noop
        self._announce()

    def _announce(self):
        self._notifier(self)

    # Internals

    def _set(self, sq, value):
        """Set square SQ to VALUE, recording its prior contents for undo."""
        self._undo_log.append((sq, int(self._board[sq])))
        self._unrecorded_set(sq, value)

    def _unrecorded_set(self, sq, value):
        """Set square SQ to VALUE without touching the undo log."""
        self._counts[self._board[sq]] -= 1
        self._counts[value] += 1
        self._board[sq] = value

    def _start_undo(self):
        self._undo_log.append(None)
        self._frames.append((self._num_jumps, self._winner))

    def _update_winner(self):
        self._winner = self._compute_winner()

    def _compute_winner(self):
        red, blue = self._counts[RED], self._counts[BLUE]
        over = (red == 0 or blue == 0
                or self._num_jumps >= JUMP_LIMIT
                or red + blue == self.total_open()
                or (not self.can_move(RED) and not self.can_move(BLUE)))
        if not over:
            return None
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return EMPTY

    # Rendering

    def render(self, legend=False):
        """Return a text picture of the board.

        Args:
            legend: Label the rows and columns

        Returns:
            str: One line per row from 7 down to 1
        """
        lines = []
        for row in reversed(ROWS):
            cells = "".join(" " + self.get(col, row).symbol for col in COLUMNS)
            lines.append(f"{row if legend else ''} {cells}\n")
        if legend:
            lines.append("   " + " ".join(COLUMNS))
        return "".join(lines)

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._whose_move == other._whose_move
                and np.array_equal(self._board, other._board))

    def __hash__(self):
        return hash((self._board.tobytes(), int(self._whose_move)))


def _mirrors(col, row):
    """Return the indices of COL ROW and its reflections across the center lines."""
    mirror_col = chr(2 * ord(CENTER_COLUMN) - ord(col))
    mirror_row = chr(2 * ord(CENTER_ROW) - ord(row))
    return {index(c, r) for c in (col, mirror_col) for r in (row, mirror_row)}


_PLAYABLE, _COORDS, _REACH, _ADJACENT = _build_tables()


