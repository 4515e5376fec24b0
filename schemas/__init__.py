"""
Pydantic schemas for the Blokli game service boundary.
"""

from .game_state import GameState, GameStatus, PlayerSeats
from .move import (
    CreateGameResponse, JoinGameResponse, MoveResponse,
    PassTurnRequest, PlacePieceRequest,
)

__all__ = [
    "GameState",
    "GameStatus",
    "PlayerSeats",
    "CreateGameResponse",
    "JoinGameResponse",
    "MoveResponse",
    "PassTurnRequest",
    "PlacePieceRequest",
]
