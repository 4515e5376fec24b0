"""
Orientation navigation for interactive placement previews.

Rotating or flipping a previewed piece should keep it where the player was
working: the new placement must be legal, close to the old one, and keep at
least one of the cells that connected the old placement to the player's
territory (the starting cell on a first move, otherwise its corner contacts).
Every call is a fresh search; nothing is remembered between calls.
"""

import math
from enum import Enum
from typing import List, Optional, Sequence, Union

from .board import (
    BoardLike,
    PlayerColor,
    as_grid,
    diagonal_neighbors,
    in_bounds,
    owner_value,
    starting_position,
)
from .move_generator import Placement
from .pieces import (
    Cell,
    cells_equal,
    get_cells_center,
    get_piece_orientations,
    normalize,
    reflect,
    rotate_ccw,
    rotate_cw,
    translate_cells,
)
from .placement import is_valid_placement

# Largest ring (Chebyshev distance from the current center) searched for a new position
MAX_SEARCH_RADIUS = 3


class RotationDirection(str, Enum):
    CW = "cw"
    CCW = "ccw"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_anchor_cells_for_placement(
    board: BoardLike,
    cells: Sequence[Cell],
    player: Union[PlayerColor, str],
) -> List[Cell]:
    """
    Find the cells of a placement that connect it to the player's territory.

    On the first move that is the starting cell; afterwards it is every cell
    diagonally touching one of the player's pieces.
    """
    grid = as_grid(board)
    value = owner_value(player)

    if not (grid == value).any():
        start = starting_position(player)
        return [(r, c) for r, c in cells if (r, c) == start]

    anchor_cells = []
    for r, c in cells:
        if any(in_bounds(nr, nc) and grid[nr, nc] == value for nr, nc in diagonal_neighbors(r, c)):
            anchor_cells.append((r, c))
    return anchor_cells


def shares_anchor_cell(cells: Sequence[Cell], anchor_cells: Sequence[Cell]) -> bool:
    """True if the placement covers one of the anchor cells, or there are none to keep."""
    if not anchor_cells:
        return True
    placed = {(r, c) for r, c in cells}
    return any((r, c) in placed for r, c in anchor_cells)


def _find_orientation_index(piece_id: int, cells: Sequence[Cell]) -> Optional[int]:
    normalized = normalize(cells)
    for index, orientation in enumerate(get_piece_orientations(piece_id)):
        if cells_equal(orientation, normalized):
            return index
    return None


def find_nearby_valid_position(
    board: BoardLike,
    shape: Sequence[Cell],
    current_cells: Sequence[Cell],
    player: Union[PlayerColor, str],
    anchor_cells: Optional[Sequence[Cell]] = None,
) -> Optional[List[Cell]]:
    """
    Find a legal position for ``shape`` close to ``current_cells``.

    Rings of growing distance around the rounded center of the current cells
    are scanned row by row; at each ring position every cell of the shape is
    pinned there in turn. The first legal placement that keeps one of the
    anchor cells wins.
    """
    grid = as_grid(board)
    center_row, center_col = get_cells_center(current_cells)
    center_row = _round_half_up(center_row)
    center_col = _round_half_up(center_col)

    for dist in range(MAX_SEARCH_RADIUS + 1):
        for dr in range(-dist, dist + 1):
            for dc in range(-dist, dist + 1):
                if abs(dr) != dist and abs(dc) != dist:
                    continue  # interior of the ring, already searched

                for cell_r, cell_c in shape:
                    cells = translate_cells(shape, center_row + dr - cell_r, center_col + dc - cell_c)
                    if is_valid_placement(grid, cells, player) and shares_anchor_cell(cells, anchor_cells or []):
                        return cells

    return None


def get_next_valid_orientation(
    board: BoardLike,
    piece_id: int,
    current_cells: Sequence[Cell],
    player: Union[PlayerColor, str],
    direction: Union[RotationDirection, str],
) -> Optional[Placement]:
    """
    Rotate a previewed placement to the next orientation that fits nearby.

    Orientations are walked forward ("cw") or backward ("ccw") from the one
    the current cells match, wrapping around. If the current cells match no
    orientation of the piece, a single raw rotation step is tried instead.

    Returns:
        The new placement, or None if no orientation fits near the current spot
    """
    grid = as_grid(board)
    direction = RotationDirection(direction)
    orientations = get_piece_orientations(piece_id)
    anchor_cells = get_anchor_cells_for_placement(grid, current_cells, player)

    current_index = _find_orientation_index(piece_id, current_cells)

    if current_index is None:
        rotated = rotate_cw(current_cells) if direction is RotationDirection.CW else rotate_ccw(current_cells)
        cells = find_nearby_valid_position(grid, rotated, current_cells, player, anchor_cells)
        if cells is None:
            return None
        index = _find_orientation_index(piece_id, cells)
        return Placement(cells, index if index is not None else 0)

    count = len(orientations)
    step = 1 if direction is RotationDirection.CW else -1
    for i in range(1, count + 1):
        next_index = (current_index + step * i) % count
        cells = find_nearby_valid_position(grid, orientations[next_index], current_cells, player, anchor_cells)
        if cells is not None:
            return Placement(cells, next_index)

    return None


def get_flipped_orientation(
    board: BoardLike,
    piece_id: int,
    current_cells: Sequence[Cell],
    player: Union[PlayerColor, str],
) -> Optional[Placement]:
    """
    Mirror a previewed placement horizontally, keeping it centered in place.

    The mirrored shape is first re-centered on the current placement's
    center. If that spot is not legal, the nearby ring search is used.

    Returns:
        The flipped placement, or None if the mirror image fits nowhere nearby
    """
    grid = as_grid(board)
    anchor_cells = get_anchor_cells_for_placement(grid, current_cells, player)

    current_row, current_col = get_cells_center(current_cells)
    flipped = reflect(current_cells)
    flipped_row, flipped_col = get_cells_center(flipped)

    centered = translate_cells(
        flipped,
        _round_half_up(current_row - flipped_row),
        _round_half_up(current_col - flipped_col),
    )

    if is_valid_placement(grid, centered, player) and shares_anchor_cell(centered, anchor_cells):
        cells = centered
    else:
        cells = find_nearby_valid_position(grid, flipped, current_cells, player, anchor_cells)

    if cells is None:
        return None

    index = _find_orientation_index(piece_id, cells)
    return Placement(cells, index if index is not None else 0)
