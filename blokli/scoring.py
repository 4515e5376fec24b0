"""
End-of-game scoring. A player's score is the number of squares left in their
unplaced pieces, so lower is better and 0 is a perfect game.
"""

from enum import Enum
from typing import Iterable

from .pieces import get_piece


class GameResult(str, Enum):
    BLUE = "blue"
    ORANGE = "orange"
    DRAW = "draw"


def calculate_score(remaining_piece_ids: Iterable[int]) -> int:
    """Calculate score (total squares in remaining pieces)."""
    return sum(get_piece(piece_id).size for piece_id in remaining_piece_ids)


def determine_winner(blue_remaining: Iterable[int], orange_remaining: Iterable[int]) -> GameResult:
    """Determine the winner based on remaining pieces; equal scores draw."""
    blue_score = calculate_score(blue_remaining)
    orange_score = calculate_score(orange_remaining)

    if blue_score < orange_score:
        return GameResult.BLUE
    if orange_score < blue_score:
        return GameResult.ORANGE
    return GameResult.DRAW
