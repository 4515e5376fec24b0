"""
Turn flow for a single Blokli game.

BlokliGame is the reference implementation of the authoritative mutation
path: every placement is validated by the rules engine before it touches the
board, turns alternate, a player with no legal move passes, and the game ends
when neither player can move or both pass in a row.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union

import numpy as np

from .board import BoardLike, PlayerColor, apply_placement, as_grid, create_empty_board
from .move_generator import has_valid_moves
from .pieces import PIECES, Cell, get_piece, get_piece_orientations, normalize
from .placement import find_placement_violation
from .scoring import GameResult, calculate_score, determine_winner

logger = logging.getLogger(__name__)


class MoveError(ValueError):
    """A move or pass rejected by the game rules."""


class BlokliGame:
    """State and turn handling for one two-player game."""

    def __init__(
        self,
        board: Optional[BoardLike] = None,
        remaining_pieces: Optional[Dict[PlayerColor, Iterable[int]]] = None,
        current_turn: Union[PlayerColor, str] = PlayerColor.BLUE,
        last_passed_by: Optional[Union[PlayerColor, str]] = None,
    ):
        self.board: np.ndarray = create_empty_board() if board is None else as_grid(board).copy()
        if remaining_pieces is None:
            remaining_pieces = {player: [piece.id for piece in PIECES] for player in PlayerColor}
        self.remaining_pieces: Dict[PlayerColor, List[int]] = {
            PlayerColor(player): list(pieces) for player, pieces in remaining_pieces.items()
        }
        self.current_turn = PlayerColor(current_turn)
        self.last_passed_by = PlayerColor(last_passed_by) if last_passed_by is not None else None
        self.game_over = False
        self.winner: Optional[GameResult] = None
        self.move_count = 0

    def get_current_player(self) -> PlayerColor:
        return self.current_turn

    def get_score(self, player: Union[PlayerColor, str]) -> int:
        return calculate_score(self.remaining_pieces[PlayerColor(player)])

    def can_move(self, player: Union[PlayerColor, str]) -> bool:
        player = PlayerColor(player)
        return has_valid_moves(self.board, self.remaining_pieces[player], player)

    def can_pass(self, player: Union[PlayerColor, str]) -> bool:
        """A player may only pass when they have no legal move."""
        return not self.can_move(player)

    def _check_turn(self, player: PlayerColor) -> None:
        if self.game_over:
            raise MoveError("Game is over")
        if player is not self.current_turn:
            raise MoveError("Not your turn")

    def make_move(self, player: Union[PlayerColor, str], piece_id: int, cells: Sequence[Cell]) -> None:
        """
        Place a piece for a player.

        Args:
            player: Player making the move
            piece_id: ID of the piece to place
            cells: Board cells the piece covers

        Raises:
            MoveError: if the move breaks a rule; the game is left unchanged
        """
        player = PlayerColor(player)
        self._check_turn(player)

        remaining = self.remaining_pieces[player]
        if piece_id not in remaining:
            raise MoveError("Piece not available")

        cells = [(int(r), int(c)) for r, c in cells]
        if len(cells) != get_piece(piece_id).size:
            raise MoveError("Invalid cell count for piece")

        if len(set(cells)) != len(cells) or tuple(normalize(cells)) not in get_piece_orientations(piece_id):
            raise MoveError("Invalid placement: cells do not form the piece")

        violation = find_placement_violation(self.board, cells, player)
        if violation is not None:
            raise MoveError(f"Invalid placement: {violation.value}")

        apply_placement(self.board, cells, player)
        remaining.remove(piece_id)
        self.move_count += 1
        self.last_passed_by = None
        self.current_turn = player.opponent

        logger.info(f"Move {self.move_count}: {player.value} placed piece {piece_id} at {cells}")

        if not self.can_move(PlayerColor.BLUE) and not self.can_move(PlayerColor.ORANGE):
            self._finish()

    def pass_turn(self, player: Union[PlayerColor, str]) -> None:
        """
        Pass the turn. Only allowed when the player has no legal move.

        Raises:
            MoveError: if it is not the player's turn or they can still move
        """
        player = PlayerColor(player)
        self._check_turn(player)

        if self.can_move(player):
            raise MoveError("You have valid moves available")

        logger.info(f"{player.value} passed")

        if self.last_passed_by is player.opponent:
            self.current_turn = player.opponent
            self._finish()
            return

        self.last_passed_by = player
        self.current_turn = player.opponent

    def _finish(self) -> None:
        self.game_over = True
        self.winner = determine_winner(
            self.remaining_pieces[PlayerColor.BLUE],
            self.remaining_pieces[PlayerColor.ORANGE],
        )
        logger.info(
            f"Game over: winner={self.winner.value}, "
            f"blue={self.get_score(PlayerColor.BLUE)}, orange={self.get_score(PlayerColor.ORANGE)}"
        )

    def copy(self) -> "BlokliGame":
        """Create a deep copy of the game."""
        new_game = BlokliGame(self.board, self.remaining_pieces, self.current_turn, self.last_passed_by)
        new_game.game_over = self.game_over
        new_game.winner = self.winner
        new_game.move_count = self.move_count
        return new_game
