"""
Blokli rules engine package.

This package contains the core game logic for Blokli, including:
- Piece definitions and orientations
- Board primitives
- Placement validation
- Anchor and placement enumeration
- Orientation navigation for interactive previews
- Scoring system
- Turn flow for a single game
"""

from .board import (
    BOARD_SIZE, STARTING_POSITIONS, PlayerColor,
    apply_placement, create_empty_board, diagonal_neighbors, format_board,
    in_bounds, is_empty_cell, orthogonal_neighbors, owner_value,
    player_has_any_piece_on_board,
)
from .game import BlokliGame, MoveError
from .move_generator import (
    Placement, can_place_piece, find_best_placement_for_cursor,
    find_corner_anchors, find_nearest_valid_anchor,
    find_valid_placements_at_anchor, get_all_valid_placements,
    get_valid_anchors_for_piece, has_valid_moves,
)
from .navigation import RotationDirection, get_flipped_orientation, get_next_valid_orientation
from .pieces import (
    PIECES, Piece, all_orientations, bounding_box, cells_equal,
    get_cells_center, get_piece, get_piece_orientations, normalize,
    reflect, rotate_ccw, rotate_cw, translate_cells,
)
from .placement import PlacementViolation, find_placement_violation, is_valid_placement
from .scoring import GameResult, calculate_score, determine_winner

__all__ = [
    'BOARD_SIZE', 'STARTING_POSITIONS', 'PlayerColor',
    'apply_placement', 'create_empty_board', 'diagonal_neighbors', 'format_board',
    'in_bounds', 'is_empty_cell', 'orthogonal_neighbors', 'owner_value',
    'player_has_any_piece_on_board',
    'BlokliGame', 'MoveError',
    'Placement', 'can_place_piece', 'find_best_placement_for_cursor',
    'find_corner_anchors', 'find_nearest_valid_anchor',
    'find_valid_placements_at_anchor', 'get_all_valid_placements',
    'get_valid_anchors_for_piece', 'has_valid_moves',
    'RotationDirection', 'get_flipped_orientation', 'get_next_valid_orientation',
    'PIECES', 'Piece', 'all_orientations', 'bounding_box', 'cells_equal',
    'get_cells_center', 'get_piece', 'get_piece_orientations', 'normalize',
    'reflect', 'rotate_ccw', 'rotate_cw', 'translate_cells',
    'PlacementViolation', 'find_placement_violation', 'is_valid_placement',
    'GameResult', 'calculate_score', 'determine_winner',
]
