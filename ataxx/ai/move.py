#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Move values for Ataxx.

Every possible move on the 7x7 board is created once when this module is
imported; ``Move.move`` hands out those shared instances, so two equal moves
are always the same object.
"""
import re

from .constants import BORDER, COLUMNS, EXTENDED_SIDE, MAX_MOVE_DISTANCE, PASS_TEXT, ROWS
from .exceptions import error

_MOVE_PATTERN = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")


def index(col, row):
    """Return the linearized index of square COL ROW on the padded board.

    Args:
        col: Column letter, 'a' - 2 through 'g' + 2
        row: Row digit, '1' - 2 through '7' + 2

    Returns:
        int: Row-major position in the flat board array
    """
    return (ord(row) - ord("1") + BORDER) * EXTENDED_SIDE + (ord(col) - ord("a") + BORDER)


class Move:
    """A pass, or a move of a piece from (col0, row0) to (col1, row1).

    Moves are immutable. Use ``Move.move``, ``Move.parse`` or ``Move.PASS``
    rather than the constructor.
    """
    __slots__ = ("_col0", "_row0", "_col1", "_row1", "_distance", "_from_index", "_to_index")

    PASS = None

    def __init__(self, col0=None, row0=None, col1=None, row1=None):
        self._col0 = col0
        self._row0 = row0
        self._col1 = col1
        self._row1 = row1
        if col0 is None:
            self._distance = 0
            self._from_index = self._to_index = None
        else:
            self._distance = max(abs(ord(col0) - ord(col1)), abs(ord(row0) - ord(row1)))
            self._from_index = index(col0, row0)
            self._to_index = index(col1, row1)

    @staticmethod
    def move(col0, row0, col1, row1):
        """Return the move col0 row0 - col1 row1, or None if there is no such move.

        A move exists when both squares lie on the board, differ, and are at
        most two rows and two columns apart.
        """
        return _MOVES.get((col0, row0, col1, row1))

    @staticmethod
    def pass_move():
        return Move.PASS

    @staticmethod
    def parse(text):
        """Return the move denoted by TEXT, either "-" or "c0r0-c1r1".

        Raises:
            GameError: If TEXT does not denote a move
        """
        text = text.strip()
        if text == PASS_TEXT:
            return Move.PASS
        match = _MOVE_PATTERN.match(text)
        if match is None:
            raise error("Bad move text: %r", text)
        move = Move.move(*match.groups())
        if move is None:
            raise error("Not a possible move: %s", text)
        return move

    @property
    def col0(self):
        return self._col0

    @property
    def row0(self):
        return self._row0

    @property
    def col1(self):
        return self._col1

    @property
    def row1(self):
        return self._row1

    @property
    def from_index(self):
        return self._from_index

    @property
    def to_index(self):
        return self._to_index

    def is_pass(self):
        return self._col0 is None

    def is_extend(self):
        """True for a move to an adjacent square, which adds a piece."""
        return self._distance == 1

    def is_jump(self):
        """True for a move two squares away, which relocates a piece."""
        return self._distance == MAX_MOVE_DISTANCE

    def __setattr__(self, name, value):
        if hasattr(self, "_to_index"):
            raise AttributeError("Move is immutable")
        object.__setattr__(self, name, value)

    def __str__(self):
        if self.is_pass():
            return PASS_TEXT
        return f"{self._col0}{self._row0}-{self._col1}{self._row1}"

    def __repr__(self):
        return f"Move({str(self)!r})"

    def __reduce__(self):
        return (Move.parse, (str(self),))


def _build_moves():
    moves = {}
    for c0 in COLUMNS:
        for r0 in ROWS:
            for c1 in COLUMNS:
                for r1 in ROWS:
                    distance = max(abs(ord(c0) - ord(c1)), abs(ord(r0) - ord(r1)))
                    if 1 <= distance <= MAX_MOVE_DISTANCE:
                        moves[(c0, r0, c1, r1)] = Move(c0, r0, c1, r1)
    return moves


_MOVES = _build_moves()
Move.PASS = Move()
