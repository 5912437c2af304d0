#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Players for Ataxx.

This module provides the Player interface used by the game driver, the
Minimax player that computes its own moves, and a scripted player that
replays a fixed list of moves.
"""
import logging
import time

from .constants import DEFAULT_MINIMAX_DEPTH
from .exceptions import error
from .minimax import SearchEngine
from .move import Move

logger = logging.getLogger(__name__)


class Player:
    """A player of one color on a shared board.

    Subclasses implement ``get_move``.  Players only read the board; the
    game driver applies the moves they return.
    """
    is_auto = False

    def __init__(self, board, color):
        self.board = board
        self.color = color

    def get_move(self):
        """Return the next move for this player."""
        raise NotImplementedError


class MinimaxPlayer(Player):
    """
    Minimax player with Alpha-Beta pruning.

    The search runs on a private copy of the board, so the shared board is
    untouched until the driver applies the returned move.
    """
    is_auto = True

    def __init__(self, board, color, depth=DEFAULT_MINIMAX_DEPTH, seed=None):
        """
        Initialize the Minimax player.

        Args:
            board: Shared game board
            color: Color this player moves for
            depth: Maximum search depth (default: 4)
            seed: Seed for the search engine's random-number generator
        """
        super().__init__(board, color)
        self.engine = SearchEngine(depth=depth, seed=seed)

    def get_move(self):
        """
        Get the best move for this player.

        Returns:
            Move.PASS if this player cannot move, else the best move found
        """
        if not self.board.can_move(self.color):
            logger.info("%s passes", self.color)
            return Move.PASS

        start_time = time.time()
        move = self.engine.find_move(self.board, self.color)
        logger.info("%s plays %s (%.2fs)", self.color, move, time.time() - start_time)
        return move


class ScriptedPlayer(Player):
    """Player that makes a fixed sequence of moves, given as text."""

    def __init__(self, board, color, moves):
        super().__init__(board, color)
        self._moves = [Move.parse(text) for text in moves]
        self._next = 0

    def get_move(self):
        if self._next >= len(self._moves):
            raise error("%s has no moves left to play", self.color)
        move = self._moves[self._next]
        self._next += 1
        return move
