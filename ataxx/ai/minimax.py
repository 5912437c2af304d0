#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Alpha-Beta Minimax search for Ataxx.

The search works on a private copy of the caller's board and walks the game
tree by making a move, recursing and undoing it again, so a single board is
shared by the whole recursion.
"""
import logging
import random
import time
from contextlib import contextmanager

from .board import Board
from .constants import COLUMNS, DEFAULT_MINIMAX_DEPTH, INFTY, MAX_MOVE_DISTANCE, ROWS, WINNING_VALUE
from .move import Move
from .pieces import PieceColor

logger = logging.getLogger(__name__)

MAX_DEPTH = DEFAULT_MINIMAX_DEPTH


@contextmanager
def trial_move(board, move):
    """Make MOVE on BOARD for the duration of the block, then undo it."""
    board.make_move(move)
    try:
        yield board
    finally:
        board.undo()


class SearchEngine:
    """Fixed-depth minimax with alpha-beta pruning and a material evaluator.

    Sense is +1 when the side being searched for is RED (scores are
    maximized) and -1 for BLUE (scores are minimized).  Ties between moves
    are broken in favour of the move enumerated first.
    """

    def __init__(self, depth=MAX_DEPTH, seed=None):
        """
        Initialize the search engine.

        Args:
            depth: Search depth in plies (default: 4)
            seed: Seed for the random-number generator.  Identical seeds
                produce identical behaviour; move selection does not
                currently draw from it.
        """
        if depth < 1:
            raise ValueError("Depth must be at least 1")
        self.depth = depth
        self.random = random.Random(seed)
        self.last_found_move = None
        self.nodes = 0

    def find_move(self, board, color=None):
        """Return the best move for COLOR (default: the side to move) on BOARD.

        BOARD itself is never modified.  Returns None only if BOARD is
        already decided.
        """
        if color is None:
            color = board.whose_move
        sense = 1 if color == PieceColor.RED else -1
        scratch = Board(board)
        self.last_found_move = None
        self.nodes = 0

        start_time = time.time()
        score = self.search(scratch, self.depth, True, sense, -INFTY, INFTY)
        logger.debug("%s: %s (score %d, %d nodes, %.3fs)", color, self.last_found_move,
                     score, self.nodes, time.time() - start_time)
        return self.last_found_move

    def enumerate_moves(self, board):
        """Return all legal moves for the side to move on BOARD.

        Moves are ordered by source column, source row, destination column
        and destination row.  If there is no legal move the result is
        [Move.PASS].
        """
        moves = []
        for col0, row0 in board.squares(board.whose_move):
            c, r = COLUMNS.index(col0), ROWS.index(row0)
            for col1 in COLUMNS[max(0, c - MAX_MOVE_DISTANCE):c + MAX_MOVE_DISTANCE + 1]:
                for row1 in ROWS[max(0, r - MAX_MOVE_DISTANCE):r + MAX_MOVE_DISTANCE + 1]:
                    move = Move.move(col0, row0, col1, row1)
                    if board.legal_move(move):
                        moves.append(move)
        if not moves:
            moves.append(Move.PASS)
        return moves

    def search(self, board, depth, save_move, sense, alpha, beta):
        """Find a move from position BOARD and return its value.

        The move found is recorded in ``last_found_move`` iff SAVE_MOVE.  The
        move has maximal value, or value > BETA, if SENSE == 1, and minimal
        value, or value < ALPHA, if SENSE == -1.  At depth 0, or when the game
        is over, the static score is returned and no move is recorded.

        Args:
            board: Scratch board, restored before this returns
            depth: Remaining plies
            save_move: Record the best move (top-level call only)
            sense: 1 to maximize, -1 to minimize
            alpha: Lower bound of the window
            beta: Upper bound of the window

        Returns:
            int: Value of the position
        """
        self.nodes += 1
        if depth == 0 or board.winner is not None:
            return self.static_score(board, WINNING_VALUE + depth)

        best = None
        best_score = -INFTY if sense == 1 else INFTY
        for move in self.enumerate_moves(board):
            with trial_move(board, move):
                response = self.search(board, depth - 1, False, -sense, alpha, beta)

            if sense == 1:
                improved = response > best_score
            else:
                improved = response < best_score
            if not improved:
                continue

            best_score = response
            best = move
            if sense == 1:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if alpha >= beta:
                break

        if save_move:
            self.last_found_move = best
        return best_score

    @staticmethod
    def static_score(board, winning_value):
        """Return a heuristic value for BOARD.

        This is +WINNING_VALUE when red has won, -WINNING_VALUE when blue has
        won and 0 for a draw.  Otherwise it is the material difference, red
        minus blue.
        """
        winner = board.winner
        if winner == PieceColor.RED:
            return winning_value
        if winner == PieceColor.BLUE:
            return -winning_value
        if winner == PieceColor.EMPTY:
            return 0
        return board.red_pieces - board.blue_pieces
