"""
Tests for move error messages returned by the game service.
"""

import unittest

import pydantic

from blokli.board import PlayerColor
from schemas.game_state import GameStatus
from schemas.move import PlacePieceRequest
from service.game_manager import GameManager


class TestMoveErrorMessages(unittest.TestCase):
    """Test that move errors return descriptive messages."""

    def setUp(self):
        """Set up a started game between two players."""
        self.game_manager = GameManager()
        self.code = self.game_manager.create_game("alice").code
        self.game_manager.join_game(self.code, "bob")

    def _place(self, player_id, piece_id, cells):
        return self.game_manager.place_piece(
            PlacePieceRequest(code=self.code, player_id=player_id, piece_id=piece_id, cells=cells)
        )

    def test_successful_move(self):
        response = self._place("alice", 1, [(4, 4), (4, 5)])

        self.assertTrue(response.success)
        self.assertEqual(response.message, "Move successful")
        self.assertIsNone(response.error)
        state = response.game_state
        self.assertEqual(state.board[4][4], 1)
        self.assertEqual(state.board[4][5], 1)
        self.assertNotIn(1, state.pieces[PlayerColor.BLUE])
        self.assertEqual(state.current_turn, PlayerColor.ORANGE)
        self.assertEqual(state.scores[PlayerColor.BLUE], 87)
        self.assertEqual(state.move_count, 1)

    def test_wrong_turn_error_message(self):
        """
        Verify that attempting a move on the wrong turn returns "Not your turn".
        """
        response = self._place("bob", 0, [(9, 9)])

        self.assertFalse(response.success)
        self.assertEqual(response.message, "Move rejected")
        self.assertEqual(response.error, "Not your turn")

    def test_piece_not_available_error_message(self):
        self._place("alice", 0, [(4, 4)])
        self._place("bob", 0, [(9, 9)])

        response = self._place("alice", 0, [(3, 3)])
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Piece not available")

    def test_cell_count_error_message(self):
        response = self._place("alice", 2, [(4, 4), (4, 5)])
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Invalid cell count for piece")

    def test_invalid_placement_error_messages(self):
        """
        Verify that each broken placement rule is named in the error.
        """
        response = self._place("alice", 0, [(5, 5)])
        self.assertEqual(response.error, "Invalid placement: first piece must cover your starting cell")

        response = self._place("alice", 1, [(4, 13), (4, 14)])
        self.assertEqual(response.error, "Invalid placement: cell is off the board")

        self._place("alice", 0, [(4, 4)])
        response = self._place("bob", 0, [(4, 4)])
        self.assertEqual(response.error, "Invalid placement: cell is already occupied")

        self._place("bob", 0, [(9, 9)])
        response = self._place("alice", 1, [(4, 5), (4, 6)])
        self.assertEqual(response.error, "Invalid placement: piece touches your own piece along an edge")

        response = self._place("alice", 1, [(7, 7), (7, 8)])
        self.assertEqual(response.error, "Invalid placement: piece must touch a corner of one of your pieces")

    def test_cells_not_forming_piece_error_message(self):
        response = self._place("alice", 9, [(4, 4)] * 5)
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Invalid placement: cells do not form the piece")

        response = self._place("alice", 1, [(4, 4), (0, 13)])
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Invalid placement: cells do not form the piece")

        state = self.game_manager.get_game_state(self.code)
        self.assertEqual(state.board[0][13], 0)
        self.assertEqual(state.board[4][4], 0)
        self.assertEqual(state.scores[PlayerColor.BLUE], 89)
        self.assertEqual(state.current_turn, PlayerColor.BLUE)

    def test_rejected_move_does_not_change_state(self):
        before = self.game_manager.get_game_state(self.code)
        self._place("alice", 0, [(5, 5)])
        after = self.game_manager.get_game_state(self.code)

        self.assertEqual(before.board, after.board)
        self.assertEqual(before.pieces, after.pieces)
        self.assertEqual(before.current_turn, after.current_turn)

    def test_first_validated_move_wins(self):
        """
        Verify that two clients submitting the same turn only land one move.
        """
        first = self._place("alice", 0, [(4, 4)])
        second = self._place("alice", 1, [(4, 4), (4, 5)])

        self.assertTrue(first.success)
        self.assertFalse(second.success)
        self.assertEqual(second.error, "Not your turn")

    def test_unknown_game_error_message(self):
        response = self.game_manager.place_piece(
            PlacePieceRequest(code="NOPE42", player_id="alice", piece_id=0, cells=[(4, 4)])
        )
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Game not found")

    def test_not_a_player_error_message(self):
        response = self._place("mallory", 0, [(4, 4)])
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Not a player in this game")

    def test_game_not_started_error_message(self):
        code = self.game_manager.create_game("carol").code
        response = self.game_manager.place_piece(
            PlacePieceRequest(code=code, player_id="carol", piece_id=0, cells=[(4, 4)])
        )
        self.assertFalse(response.success)
        self.assertEqual(response.error, "Game is not in progress")
        self.assertEqual(self.game_manager.get_game(code).status, GameStatus.WAITING)

    def test_request_schema_rejects_bad_input(self):
        with self.assertRaises(pydantic.ValidationError):
            PlacePieceRequest(code=self.code, player_id="alice", piece_id=21, cells=[(4, 4)])
        with self.assertRaises(pydantic.ValidationError):
            PlacePieceRequest(code=self.code, player_id="alice", piece_id=0, cells=[])
        with self.assertRaises(pydantic.ValidationError):
            PlacePieceRequest(code=self.code, player_id="alice", piece_id=9, cells=[(0, i) for i in range(6)])


if __name__ == "__main__":
    unittest.main()
