"""
Anchor discovery and placement enumeration for Blokli.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .board import (
    BoardLike,
    PlayerColor,
    as_grid,
    owner_value,
    starting_position,
)
from .pieces import Cell, get_cells_center, get_piece_orientations, translate_cells
from .placement import is_valid_placement

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOKLI_MOVEGEN_DEBUG", ""))


@dataclass
class Placement:
    """Cells a piece would cover, with the orientation that produced them."""
    cells: List[Cell]
    orientation_index: int
    anchor: Optional[Cell] = None

    def __str__(self):
        return f"Placement(orientation={self.orientation_index}, anchor={self.anchor}, cells={self.cells})"


def _neighbor_mask(mask: np.ndarray, offsets: Iterable[Cell]) -> np.ndarray:
    """Cells that have a True cell of ``mask`` at any of the given offsets."""
    padded = np.pad(mask, 1)
    rows, cols = mask.shape
    result = np.zeros_like(mask)
    for dr, dc in offsets:
        result |= padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    return result


def find_corner_anchors(board: BoardLike, player: Union[PlayerColor, str]) -> List[Cell]:
    """
    Find all corner anchors for a player.

    A corner anchor is an empty cell that touches one of the player's cells
    diagonally and none of them orthogonally. Before the player's first move
    the only anchor is their starting cell.

    Args:
        board: Current board state
        player: Player to find anchors for

    Returns:
        Anchor cells in row-major order
    """
    grid = as_grid(board)
    own = grid == owner_value(player)

    if not own.any():
        return [starting_position(player)]

    diagonal = _neighbor_mask(own, ((-1, -1), (-1, 1), (1, -1), (1, 1)))
    orthogonal = _neighbor_mask(own, ((-1, 0), (1, 0), (0, -1), (0, 1)))
    anchors = (grid == 0) & diagonal & ~orthogonal

    return [(int(r), int(c)) for r, c in np.argwhere(anchors)]


def find_valid_placements_at_anchor(
    board: BoardLike,
    piece_id: int,
    anchor_row: int,
    anchor_col: int,
    player: Union[PlayerColor, str],
) -> List[Placement]:
    """
    Find every legal placement of a piece that covers an anchor cell.

    Each orientation is tried with each of its cells pinned to the anchor.
    Placements are not deduplicated: the same cells reached through different
    orientations are kept as separate entries.
    """
    grid = as_grid(board)
    placements = []

    for orientation_index, orientation in enumerate(get_piece_orientations(piece_id)):
        for cell_r, cell_c in orientation:
            cells = translate_cells(orientation, anchor_row - cell_r, anchor_col - cell_c)
            if is_valid_placement(grid, cells, player):
                placements.append(Placement(cells, orientation_index, (anchor_row, anchor_col)))

    return placements


def can_place_piece(board: BoardLike, piece_id: int, player: Union[PlayerColor, str]) -> bool:
    """Check if a piece can be placed anywhere on the board."""
    grid = as_grid(board)
    for anchor_row, anchor_col in find_corner_anchors(grid, player):
        if find_valid_placements_at_anchor(grid, piece_id, anchor_row, anchor_col, player):
            return True
    return False


def has_valid_moves(
    board: BoardLike,
    remaining_piece_ids: Iterable[int],
    player: Union[PlayerColor, str],
) -> bool:
    """
    Check if a player has any legal move.

    Args:
        board: Current board state
        remaining_piece_ids: Pieces the player has not placed yet
        player: Player to check

    Returns:
        False when the player must pass
    """
    start = time.perf_counter()
    grid = as_grid(board)
    pieces_checked = 0
    found = False

    for piece_id in remaining_piece_ids:
        pieces_checked += 1
        if can_place_piece(grid, piece_id, player):
            found = True
            break

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    if MOVEGEN_DEBUG:
        logger.info(f"MoveGen[has_valid_moves]: player={PlayerColor(player).value}, found={found}, "
                    f"pieces_checked={pieces_checked}, elapsed_ms={elapsed_ms:.2f}")
    logger.debug(f"has_valid_moves: player={PlayerColor(player).value} found={found} in {elapsed_ms:.2f}ms")

    return found


def get_valid_anchors_for_piece(
    board: BoardLike,
    piece_id: int,
    player: Union[PlayerColor, str],
) -> List[Cell]:
    """Get the corner anchors at which this specific piece has a legal placement."""
    grid = as_grid(board)
    return [
        (anchor_row, anchor_col)
        for anchor_row, anchor_col in find_corner_anchors(grid, player)
        if find_valid_placements_at_anchor(grid, piece_id, anchor_row, anchor_col, player)
    ]


def get_all_valid_placements(
    board: BoardLike,
    piece_id: int,
    player: Union[PlayerColor, str],
) -> List[Placement]:
    """
    Get every distinct legal placement of a piece.

    Anchors are visited in row-major order and placements in their per-anchor
    enumeration order. A placement covering several anchors is kept only at
    the first one, so each physical placement appears once.
    """
    start = time.perf_counter()
    grid = as_grid(board)
    seen = set()
    placements = []

    for anchor_row, anchor_col in find_corner_anchors(grid, player):
        for placement in find_valid_placements_at_anchor(grid, piece_id, anchor_row, anchor_col, player):
            key = frozenset(placement.cells)
            if key in seen:
                continue
            seen.add(key)
            placements.append(placement)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    if MOVEGEN_DEBUG:
        logger.info(f"MoveGen[all_placements]: piece_id={piece_id}, placements={len(placements)}, "
                    f"elapsed_ms={elapsed_ms:.2f}")

    return placements


def find_nearest_valid_anchor(row: int, col: int, valid_anchors: Sequence[Cell]) -> Optional[Cell]:
    """
    Find the anchor closest to a board position (for drag-and-drop snapping).

    Ties keep the earliest anchor in ``valid_anchors``.
    """
    nearest = None
    min_dist = None

    for r, c in valid_anchors:
        dist = (r - row) ** 2 + (c - col) ** 2
        if min_dist is None or dist < min_dist:
            min_dist = dist
            nearest = (r, c)

    return nearest


def find_best_placement_for_cursor(
    cursor_row: float,
    cursor_col: float,
    placements: Sequence[Placement],
    preferred_orientation_index: Optional[int] = None,
) -> Optional[Placement]:
    """
    Pick the placement whose center is closest to the cursor.

    When ``preferred_orientation_index`` is given, only placements with that
    orientation are considered, unless none of them has it.
    """
    if not placements:
        return None

    candidates = placements
    if preferred_orientation_index is not None:
        matching = [p for p in placements if p.orientation_index == preferred_orientation_index]
        if matching:
            candidates = matching

    best = candidates[0]
    min_dist = None
    for placement in candidates:
        center_row, center_col = get_cells_center(placement.cells)
        dist = (center_row - cursor_row) ** 2 + (center_col - cursor_col) ** 2
        if min_dist is None or dist < min_dist:
            min_dist = dist
            best = placement

    return best
