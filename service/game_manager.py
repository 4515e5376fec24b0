"""
Game manager for handling multiple concurrent Blokli games in memory.

This is the authoritative mutation path: every placement goes through the
rules engine before it is committed, and mutations of a single game are
serialized so the first validated placement wins.
"""

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from blokli.board import PlayerColor
from blokli.game import BlokliGame, MoveError
from schemas.game_state import GameState, GameStatus, PlayerSeats
from schemas.move import (
    CreateGameResponse,
    JoinGameResponse,
    MoveResponse,
    PassTurnRequest,
    PlacePieceRequest,
)

from .config import ServiceConfig

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Represents a game and its seats."""
    code: str
    game: BlokliGame
    players: PlayerSeats
    created_at: datetime
    status: GameStatus = GameStatus.WAITING
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class GameManager:
    """Manages multiple concurrent Blokli games."""

    def __init__(self, config: Optional[ServiceConfig] = None):
        """Initialize game manager."""
        self.config = config or ServiceConfig()
        self.games: Dict[str, GameSession] = {}
        self._registry_lock = threading.Lock()

    def _generate_code(self) -> str:
        alphabet = self.config.code_alphabet
        return "".join(secrets.choice(alphabet) for _ in range(self.config.code_length))

    def create_game(self, player_id: str) -> CreateGameResponse:
        """
        Create a new game with the creator seated as blue.

        Args:
            player_id: Identifier of the creating player

        Returns:
            The join code of the new game
        """
        with self._registry_lock:
            code = self._generate_code()
            while code in self.games:
                code = self._generate_code()

            self.games[code] = GameSession(
                code=code,
                game=BlokliGame(),
                players=PlayerSeats(blue=player_id),
                created_at=datetime.now(),
            )

        logger.info(f"Created game {code} for {player_id}")
        return CreateGameResponse(code=code, color=PlayerColor.BLUE)

    def join_game(self, code: str, player_id: str) -> JoinGameResponse:
        """Seat a second player as orange and start the game."""
        session = self.get_game(code)
        if not session:
            return JoinGameResponse(success=False, error="Game not found")

        with session.lock:
            if session.status != GameStatus.WAITING:
                return JoinGameResponse(success=False, error="Game already started")

            if session.players.blue == player_id:
                return JoinGameResponse(success=True, color=PlayerColor.BLUE)

            if session.players.orange:
                return JoinGameResponse(success=False, error="Game is full")

            session.players = PlayerSeats(blue=session.players.blue, orange=player_id)
            session.status = GameStatus.PLAYING

        logger.info(f"{player_id} joined game {code} as orange")
        return JoinGameResponse(success=True, color=PlayerColor.ORANGE)

    def get_game(self, code: str) -> Optional[GameSession]:
        """Get game session by code."""
        return self.games.get(code)

    def get_game_state(self, code: str) -> Optional[GameState]:
        """
        Get current game state.

        Args:
            code: Join code of the game

        Returns:
            Game state or None if game not found
        """
        session = self.get_game(code)
        if not session:
            return None

        with session.lock:
            return self._create_game_state(session)

    def _seat_color(self, session: GameSession, player_id: str) -> Optional[PlayerColor]:
        return session.players.color_for(player_id)

    def _rejected(self, error: str) -> MoveResponse:
        return MoveResponse(success=False, message="Move rejected", error=error)

    def place_piece(self, request: PlacePieceRequest) -> MoveResponse:
        """
        Validate and commit a placement.

        Args:
            request: Placement request

        Returns:
            Move response with the updated state on success
        """
        session = self.get_game(request.code)
        if not session:
            return self._rejected("Game not found")

        with session.lock:
            if session.status != GameStatus.PLAYING:
                return self._rejected("Game is not in progress")

            color = self._seat_color(session, request.player_id)
            if color is None:
                return self._rejected("Not a player in this game")

            try:
                session.game.make_move(color, request.piece_id, request.cells)
            except MoveError as e:
                logger.warning(f"Game {session.code}: rejected move from {color.value}: {e}")
                return self._rejected(str(e))

            if session.game.game_over:
                session.status = GameStatus.FINISHED

            return MoveResponse(
                success=True,
                message="Move successful",
                game_state=self._create_game_state(session),
            )

    def pass_turn(self, request: PassTurnRequest) -> MoveResponse:
        """Pass the turn for a player who has no legal move."""
        session = self.get_game(request.code)
        if not session:
            return self._rejected("Game not found")

        with session.lock:
            if session.status != GameStatus.PLAYING:
                return self._rejected("Game is not in progress")

            color = self._seat_color(session, request.player_id)
            if color is None:
                return self._rejected("Not a player in this game")

            try:
                session.game.pass_turn(color)
            except MoveError as e:
                logger.warning(f"Game {session.code}: rejected pass from {color.value}: {e}")
                return self._rejected(str(e))

            if session.game.game_over:
                session.status = GameStatus.FINISHED

            return MoveResponse(
                success=True,
                message="Turn passed successfully",
                game_state=self._create_game_state(session),
            )

    def _create_game_state(self, session: GameSession) -> GameState:
        """Create a game state snapshot from a session."""
        game = session.game
        return GameState(
            code=session.code,
            board=game.board.tolist(),
            players=session.players.model_copy(),
            pieces={color: list(pieces) for color, pieces in game.remaining_pieces.items()},
            current_turn=game.current_turn,
            status=session.status,
            winner=game.winner,
            last_passed_by=game.last_passed_by,
            scores={color: game.get_score(color) for color in PlayerColor},
            move_count=game.move_count,
            created_at=session.created_at,
        )
