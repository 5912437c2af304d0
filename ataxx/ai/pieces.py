#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Square contents for the Ataxx board.
"""
from enum import IntEnum


class PieceColor(IntEnum):
    """Contents of a board square.

    RED and BLUE are the two sides; EMPTY squares may be moved into and
    BLOCKED squares never change once placed.
    """
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self):
        """Return the other side for RED or BLUE, otherwise this color."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self):
        return self is PieceColor.RED or self is PieceColor.BLUE

    @property
    def symbol(self):
        return _SYMBOLS[self]

    def __str__(self):
        return self.name.lower()


_SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}
