"""
Placement legality for Blokli.

A placement is legal when:
1. Every cell is on the board and empty
2. No cell shares an edge with a cell of the same player
3. First move: some cell is the player's starting cell
4. Later moves: some cell touches a cell of the same player at a corner
"""

from enum import Enum
from typing import Optional, Sequence, Union

from .board import (
    BoardLike,
    PlayerColor,
    as_grid,
    diagonal_neighbors,
    in_bounds,
    orthogonal_neighbors,
    owner_value,
    starting_position,
)
from .pieces import Cell


class PlacementViolation(str, Enum):
    """First rule a rejected placement breaks."""
    EMPTY_PLACEMENT = "placement has no cells"
    OUT_OF_BOUNDS = "cell is off the board"
    CELL_OCCUPIED = "cell is already occupied"
    EDGE_CONTACT = "piece touches your own piece along an edge"
    MISSING_START_CELL = "first piece must cover your starting cell"
    NO_CORNER_CONTACT = "piece must touch a corner of one of your pieces"


def find_placement_violation(
    board: BoardLike,
    cells: Sequence[Cell],
    player: Union[PlayerColor, str],
) -> Optional[PlacementViolation]:
    """
    Check a placement against the rules, in order.

    Args:
        board: Current board state
        cells: Board cells the piece would cover
        player: Player making the placement

    Returns:
        The first violated rule, or None if the placement is legal
    """
    if not cells:
        return PlacementViolation.EMPTY_PLACEMENT

    grid = as_grid(board)
    value = owner_value(player)

    for r, c in cells:
        if not in_bounds(r, c):
            return PlacementViolation.OUT_OF_BOUNDS
        if grid[r, c] != 0:
            return PlacementViolation.CELL_OCCUPIED

    for r, c in cells:
        for nr, nc in orthogonal_neighbors(r, c):
            if in_bounds(nr, nc) and grid[nr, nc] == value:
                return PlacementViolation.EDGE_CONTACT

    if not (grid == value).any():
        start = starting_position(player)
        if any((r, c) == start for r, c in cells):
            return None
        return PlacementViolation.MISSING_START_CELL

    for r, c in cells:
        for nr, nc in diagonal_neighbors(r, c):
            if in_bounds(nr, nc) and grid[nr, nc] == value:
                return None

    return PlacementViolation.NO_CORNER_CONTACT


def is_valid_placement(
    board: BoardLike,
    cells: Sequence[Cell],
    player: Union[PlayerColor, str],
) -> bool:
    """Check if a piece placement is legal for the player."""
    return find_placement_violation(board, cells, player) is None
