"""Shared positions and checks for the board tests."""
from collections import Counter

from ataxx.ai.constants import COLUMNS, ROWS
from ataxx.ai.pieces import PieceColor

# Blocks that leave only columns a, d and g open (b, c, e, f are mirrored shut).
COLUMN_BLOCKS = ["b1", "b2", "b3", "b4", "c1", "c2", "c3", "c4"]

# On the column board: red captures blue's g-column piece, blue fills column a
# and is then left without a move while red can still move in column g.
BLUE_STUCK_MOVES = ["g1-g3", "g7-g5", "g3-g4", "a1-a2", "a7-a6",
                    "a2-a3", "a6-a5", "a3-a4", "g5-g6"]

# Red takes every blue piece.
RED_WIPEOUT_MOVES = ["g1-g3", "g7-g5", "g3-g4", "a1-c1", "a7-a6", "c1-e1", "g3-f2"]


def play(board, moves):
    for move in moves:
        board.make_move(move)
    return board


def assert_conserved(board):
    """Incremental counts agree with the squares and cover all 49 of them."""
    counts = Counter(board.get(col, row) for col in COLUMNS for row in ROWS)
    assert counts[PieceColor.RED] == board.red_pieces
    assert counts[PieceColor.BLUE] == board.blue_pieces
    assert counts[PieceColor.BLOCKED] == board.blocked_count()
    assert counts[PieceColor.EMPTY] == board.empty_count()
    assert (board.red_pieces + board.blue_pieces
            + board.blocked_count() + board.empty_count()) == 49
