"""
Utility functions for generating test game states.
"""

import random
from typing import Optional, Tuple

import numpy as np

from blokli.board import BOARD_SIZE, PlayerColor
from blokli.game import BlokliGame
from blokli.move_generator import Placement, get_all_valid_placements


def random_legal_move(game: BlokliGame, player: PlayerColor) -> Optional[Tuple[int, Placement]]:
    """
    Pick a random legal move: the first piece, in shuffled order, that fits
    somewhere, placed at one of its placements chosen at random.
    """
    piece_ids = list(game.remaining_pieces[player])
    random.shuffle(piece_ids)
    for piece_id in piece_ids:
        placements = get_all_valid_placements(game.board, piece_id, player)
        if placements:
            return piece_id, random.choice(placements)
    return None


def generate_random_valid_state(num_moves: int, seed: int = 0) -> Tuple[BlokliGame, PlayerColor]:
    """
    Generate a random but valid game state by playing random legal moves.

    A player without moves passes, so the game may end before ``num_moves``
    placements have been made.

    Args:
        num_moves: Number of placements to make
        seed: Random seed for reproducibility

    Returns:
        Tuple of (game, current_player) representing the final state
    """
    random.seed(seed)

    game = BlokliGame()
    moves_made = 0

    while moves_made < num_moves and not game.game_over:
        player = game.current_turn
        move = random_legal_move(game, player)

        if move is None:
            game.pass_turn(player)
            continue

        piece_id, placement = move
        game.make_move(player, piece_id, placement.cells)
        moves_made += 1

    return game, game.current_turn


def corner_pocket_board() -> np.ndarray:
    """
    Board filled with orange except the four corners, with blue just inside
    each corner so every corner is an isolated single-cell pocket for blue.
    """
    board = np.full((BOARD_SIZE, BOARD_SIZE), 2, dtype=int)
    last = BOARD_SIZE - 1
    for r, c in [(0, 0), (0, last), (last, 0), (last, last)]:
        board[r, c] = 0
    for r, c in [(1, 1), (1, last - 1), (last - 1, 1), (last - 1, last - 1)]:
        board[r, c] = 1
    return board
