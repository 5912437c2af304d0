#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Self-play driver for Ataxx.

Two players alternate on one authoritative board until the game is decided
(or a move limit is reached).  Run as a script, or through the ``ataxx-sim``
command, to play a series of Minimax-vs-Minimax games.
"""
import argparse
import logging
import sys

from ataxx.config import LOG_LEVELS, get_settings
from ataxx.models.game import GameResult

from .board import Board
from .exceptions import GameError, error
from .minimax_player import MinimaxPlayer
from .pieces import PieceColor

logger = logging.getLogger(__name__)


def play_game(red, blue, board=None, max_moves=None):
    """Play RED against BLUE until the game ends.

    Args:
        red: Player for red; its board must be BOARD
        blue: Player for blue; its board must be BOARD
        board: Authoritative board (default: red's board)
        max_moves: Stop after this many moves and passes, even if undecided

    Returns:
        GameResult: Winner, counts and move list of the game

    Raises:
        GameError: If a player reports an illegal move
    """
    if board is None:
        board = red.board
    players = {PieceColor.RED: red, PieceColor.BLUE: blue}

    while board.winner is None:
        if max_moves is not None and board.num_moves >= max_moves:
            logger.info("Stopping after %d moves", board.num_moves)
            break
        player = players[board.whose_move]
        move = player.get_move()
        if not board.legal_move(move):
            logger.error("%s reported an illegal move: %s", player.color, move)
            raise error("Illegal move from %s: %s", player.color, move)
        board.make_move(move)

    return GameResult.from_board(board)


def main(argv=None):
    """Run a series of Minimax games between engines A and B.

    Engine A plays red in the first game and the colors alternate after
    every game.

    Returns:
        int: Process exit status
    """
    settings = get_settings()
    parser = argparse.ArgumentParser(description='Run Ataxx game simulation')
    parser.add_argument('--number-games', type=int, default=1,
                        help='Number of games to play')
    parser.add_argument('--depth-a', type=int, default=settings.search_depth,
                        help='Search depth for engine A')
    parser.add_argument('--depth-b', type=int, default=settings.search_depth,
                        help='Search depth for engine B')
    parser.add_argument('--max-moves', type=int, default=None,
                        help='Maximum number of moves and passes per game')
    parser.add_argument('--blocks', default='',
                        help='Comma-separated block squares, e.g. c4,b2')
    parser.add_argument('--seed', type=int, default=settings.seed,
                        help='Seed for the engines')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=settings.log_level, help='Logging level')
    parser.add_argument('--json', action='store_true',
                        help='Print each game result as JSON')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s %(message)s')

    standings = {"A": 0, "B": 0, "draw": 0, "undecided": 0}
    a_is_red = True
    try:
        for i in range(args.number_games):
            board = Board()
            for square in filter(None, (s.strip() for s in args.blocks.split(','))):
                board.set_block_at(square)

            depth_red, depth_blue = (args.depth_a, args.depth_b) if a_is_red else (args.depth_b, args.depth_a)
            red = MinimaxPlayer(board, PieceColor.RED, depth=depth_red, seed=args.seed)
            blue = MinimaxPlayer(board, PieceColor.BLUE, depth=depth_blue, seed=args.seed)

            print(f"\nGame {i + 1}/{args.number_games}")
            print("=" * 30)
            print(f"Engine A (depth {args.depth_a}) is playing {'red' if a_is_red else 'blue'}")
            result = play_game(red, blue, board, max_moves=args.max_moves)

            if args.json:
                print(result.model_dump_json(indent=2))
            else:
                print(result.final_board)
                print(f"Game {i + 1} finished in {result.num_moves} moves: "
                      f"red {result.red_pieces}, blue {result.blue_pieces}")

            if result.winner is None:
                standings["undecided"] += 1
            elif result.winner == "draw":
                standings["draw"] += 1
            elif (result.winner == "red") == a_is_red:
                standings["A"] += 1
            else:
                standings["B"] += 1

            # Switch colors for next game
            a_is_red = not a_is_red
    except GameError as exc:
        logger.error("Game aborted: %s", exc)
        return 1

    print("\n=== Final Results ===")
    print(f"Total games played: {args.number_games}")
    print(f"Engine A wins: {standings['A']}")
    print(f"Engine B wins: {standings['B']}")
    print(f"Draws: {standings['draw']}")
    if standings["undecided"]:
        print(f"Undecided: {standings['undecided']}")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
