"""
Blokli piece definitions with all 21 polyominoes and their rotations/reflections.

Shapes are authored as 0/1 numpy matrices and converted to (row, col) offsets.
Every geometry helper works on plain offset lists so the same functions serve
piece templates and placed cells alike.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]


@dataclass
class Piece:
    """Represents a Blokli piece."""
    id: int
    name: str
    shape: np.ndarray  # 2D array representing the piece
    size: int  # Number of squares in the piece
    cells: Tuple[Cell, ...] = field(init=False)

    def __post_init__(self):
        """Validate piece after initialization."""
        if self.shape.ndim != 2:
            raise ValueError("Piece shape must be 2D")
        if np.sum(self.shape) != self.size:
            raise ValueError("Piece shape sum must equal size")
        self.shape.flags.writeable = False
        self.cells = tuple(shape_to_offsets(self.shape))


def shape_to_offsets(shape: np.ndarray) -> List[Cell]:
    """
    Convert a numpy shape array to a list of (row, col) offsets.

    Args:
        shape: 2D numpy array with 1s where cells are occupied

    Returns:
        List of (row, col) tuples for occupied cells, in row-major order
    """
    return [(int(r), int(c)) for r, c in np.argwhere(shape == 1)]


def normalize(cells: Sequence[Cell]) -> List[Cell]:
    """
    Normalize offsets so that min_row = 0 and min_col = 0.

    Args:
        cells: Sequence of (row, col) tuples

    Returns:
        Normalized list of offsets, sorted for canonical ordering
    """
    if not cells:
        return []

    min_row = min(r for r, c in cells)
    min_col = min(c for r, c in cells)

    return sorted((r - min_row, c - min_col) for r, c in cells)


def rotate_cw(cells: Sequence[Cell]) -> List[Cell]:
    """Rotate 90 degrees clockwise: (r, c) -> (c, -r)."""
    return normalize([(c, -r) for r, c in cells])


def rotate_ccw(cells: Sequence[Cell]) -> List[Cell]:
    """Rotate 90 degrees counter-clockwise: (r, c) -> (-c, r)."""
    return normalize([(-c, r) for r, c in cells])


def reflect(cells: Sequence[Cell]) -> List[Cell]:
    """Mirror horizontally: (r, c) -> (r, -c)."""
    return normalize([(r, -c) for r, c in cells])


def all_orientations(cells: Sequence[Cell]) -> List[List[Cell]]:
    """
    Get all unique orientations of a shape.

    The order is fixed: the four clockwise rotations of the shape, then the
    four clockwise rotations of its mirror image. Duplicates keep their first
    position, so orientation indices are stable for a given shape.
    """
    orientations = []
    seen = set()

    for start in (normalize(cells), reflect(cells)):
        current = start
        for _ in range(4):
            key = tuple(current)
            if key not in seen:
                seen.add(key)
                orientations.append(current)
            current = rotate_cw(current)

    return orientations


def bounding_box(cells: Sequence[Cell]) -> Tuple[int, int]:
    """Return (rows, cols) of the smallest rectangle enclosing the normalized cells."""
    normalized = normalize(cells)
    return (
        max(r for r, c in normalized) + 1,
        max(c for r, c in normalized) + 1,
    )


def translate_cells(cells: Sequence[Cell], d_row: int, d_col: int) -> List[Cell]:
    """Shift every cell by (d_row, d_col), keeping the input order."""
    return [(r + d_row, c + d_col) for r, c in cells]


def cells_equal(a: Sequence[Cell], b: Sequence[Cell]) -> bool:
    """True iff both sequences hold the same cells, ignoring order."""
    if len(a) != len(b):
        return False
    return set(map(tuple, a)) == set(map(tuple, b))


def get_cells_center(cells: Sequence[Cell]) -> Tuple[float, float]:
    """Centroid of a set of cells as floating-point (row, col)."""
    return (
        math.fsum(r for r, c in cells) / len(cells),
        math.fsum(c for r, c in cells) / len(cells),
    )


class PieceGenerator:
    """Builds the fixed set of 21 Blokli pieces."""

    @staticmethod
    def get_all_pieces() -> List[Piece]:
        """Get all 21 pieces, indexed by id."""
        return [
            Piece(0, "I1", np.array([[1]]), 1),
            Piece(1, "I2", np.array([[1, 1]]), 2),
            Piece(2, "I3", np.array([[1, 1, 1]]), 3),
            Piece(3, "V3", np.array([[1, 0], [1, 1]]), 3),
            Piece(4, "I4", np.array([[1, 1, 1, 1]]), 4),
            Piece(5, "L4", np.array([[1, 0], [1, 0], [1, 1]]), 4),
            Piece(6, "T4", np.array([[1, 1, 1], [0, 1, 0]]), 4),
            Piece(7, "O4", np.array([[1, 1], [1, 1]]), 4),
            Piece(8, "S4", np.array([[0, 1, 1], [1, 1, 0]]), 4),
            Piece(9, "I5", np.array([[1, 1, 1, 1, 1]]), 5),
            Piece(10, "L5", np.array([[1, 0], [1, 0], [1, 0], [1, 1]]), 5),
            Piece(11, "Y5", np.array([[0, 1], [1, 1], [0, 1], [0, 1]]), 5),
            Piece(12, "N5", np.array([[1, 0], [1, 1], [0, 1], [0, 1]]), 5),
            Piece(13, "P5", np.array([[1, 1], [1, 1], [1, 0]]), 5),
            Piece(14, "U5", np.array([[1, 0, 1], [1, 1, 1]]), 5),
            Piece(15, "T5", np.array([[1, 1, 1], [0, 1, 0], [0, 1, 0]]), 5),
            Piece(16, "V5", np.array([[1, 0, 0], [1, 0, 0], [1, 1, 1]]), 5),
            Piece(17, "W5", np.array([[1, 0, 0], [1, 1, 0], [0, 1, 1]]), 5),
            Piece(18, "Z5", np.array([[1, 1, 0], [0, 1, 0], [0, 1, 1]]), 5),
            Piece(19, "F5", np.array([[0, 1, 1], [1, 1, 0], [0, 1, 0]]), 5),
            Piece(20, "X5", np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]]), 5),
        ]


PIECES: Tuple[Piece, ...] = tuple(PieceGenerator.get_all_pieces())

# Precomputed orientation registry, never mutated after import
PIECE_ORIENTATIONS: Dict[int, Tuple[Tuple[Cell, ...], ...]] = {
    piece.id: tuple(tuple(o) for o in all_orientations(piece.cells))
    for piece in PIECES
}


def get_piece(piece_id: int) -> Piece:
    """Get a piece by its ID."""
    if not 0 <= piece_id < len(PIECES):
        raise ValueError(f"Unknown piece id: {piece_id}")
    return PIECES[piece_id]


def get_piece_orientations(piece_id: int) -> Tuple[Tuple[Cell, ...], ...]:
    """Get the unique orientations of a piece in their stable index order."""
    return PIECE_ORIENTATIONS[get_piece(piece_id).id]
