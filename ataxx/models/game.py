from pydantic import BaseModel
from typing import List, Optional


class GameResult(BaseModel):
    """Summary of a finished (or abandoned) game."""
    winner: Optional[str] = None  # "red", "blue", "draw", or None if undecided
    num_moves: int
    red_pieces: int
    blue_pieces: int
    moves: List[str]
    final_board: str

    @classmethod
    def from_board(cls, board):
        winner = board.winner
        if winner is None:
            outcome = None
        elif winner.is_piece():
            outcome = str(winner)
        else:
            outcome = "draw"
        return cls(
            winner=outcome,
            num_moves=board.num_moves,
            red_pieces=board.red_pieces,
            blue_pieces=board.blue_pieces,
            moves=[str(move) for move in board.all_moves],
            final_board=board.render(legend=True),
        )
