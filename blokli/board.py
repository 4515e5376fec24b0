"""
Blokli board primitives for the 14x14 two-player grid.

The board itself is a plain 2D grid of owner values:
- 0 represents empty space
- 1 represents the blue player
- 2 represents the orange player

Functions accept either a numpy array or the nested-list form used by the
persistence layer.
"""

from enum import Enum
from typing import Dict, List, Sequence, Union

import numpy as np

from .pieces import Cell

BOARD_SIZE = 14

BoardLike = Union[np.ndarray, Sequence[Sequence[int]]]


class PlayerColor(str, Enum):
    """Player enumeration."""
    BLUE = "blue"
    ORANGE = "orange"

    @property
    def opponent(self) -> "PlayerColor":
        return PlayerColor.ORANGE if self is PlayerColor.BLUE else PlayerColor.BLUE


STARTING_POSITIONS: Dict[PlayerColor, Cell] = {
    PlayerColor.BLUE: (4, 4),
    PlayerColor.ORANGE: (9, 9),
}

_OWNER_VALUES = {
    PlayerColor.BLUE: 1,
    PlayerColor.ORANGE: 2,
}

_ORTHOGONAL_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def create_empty_board() -> np.ndarray:
    """Create an empty 14x14 board."""
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)


def as_grid(board: BoardLike) -> np.ndarray:
    """View a board as an integer numpy grid (no copy for int arrays)."""
    grid = np.asarray(board, dtype=int)
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {grid.shape}")
    return grid


def owner_value(player: Union[PlayerColor, str]) -> int:
    """Get the board value for a player (1 for blue, 2 for orange)."""
    return _OWNER_VALUES[PlayerColor(player)]


def starting_position(player: Union[PlayerColor, str]) -> Cell:
    """Get the fixed starting cell for a player."""
    return STARTING_POSITIONS[PlayerColor(player)]


def in_bounds(row: int, col: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_empty_cell(board: BoardLike, row: int, col: int) -> bool:
    """Check if a cell is on the board and empty. Off-board is never empty."""
    return in_bounds(row, col) and board[row][col] == 0


def orthogonal_neighbors(row: int, col: int) -> List[Cell]:
    """Get the 4 positions that share an edge, without bounds filtering."""
    return [(row + dr, col + dc) for dr, dc in _ORTHOGONAL_OFFSETS]


def diagonal_neighbors(row: int, col: int) -> List[Cell]:
    """Get the 4 positions that share only a corner, without bounds filtering."""
    return [(row + dr, col + dc) for dr, dc in _DIAGONAL_OFFSETS]


def player_has_any_piece_on_board(board: BoardLike, player: Union[PlayerColor, str]) -> bool:
    """True iff at least one cell belongs to the player."""
    return bool(np.any(as_grid(board) == owner_value(player)))


def apply_placement(board: BoardLike, cells: Sequence[Cell], player: Union[PlayerColor, str]) -> None:
    """
    Stamp a placement onto the board.

    Mutates ``board`` in place. Callers are expected to have validated the
    placement first.
    """
    value = owner_value(player)
    for r, c in cells:
        board[r][c] = value


def format_board(board: BoardLike) -> str:
    """String representation of the board ('.' empty, 'B' blue, 'O' orange)."""
    symbols = {0: ".", 1: "B", 2: "O"}
    return "\n".join(
        "".join(symbols.get(int(value), "?") for value in row)
        for row in as_grid(board)
    )
