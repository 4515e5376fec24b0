"""
Pydantic schemas for game moves.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from blokli.board import PlayerColor

from .game_state import GameState


class PlacePieceRequest(BaseModel):
    """Request to place a piece."""
    code: str = Field(..., min_length=1, description="Join code of the game")
    player_id: str = Field(..., min_length=1)
    piece_id: int = Field(..., ge=0, le=20, description="ID of the piece to place")
    cells: List[Tuple[int, int]] = Field(
        ..., min_length=1, max_length=5, description="Board cells the piece covers"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "K7QX2M",
                "player_id": "player-1",
                "piece_id": 1,
                "cells": [[4, 4], [4, 5]]
            }
        }


class PassTurnRequest(BaseModel):
    """Request to pass the turn."""
    code: str = Field(..., min_length=1)
    player_id: str = Field(..., min_length=1)


class MoveResponse(BaseModel):
    """Response after a move or pass."""
    success: bool
    message: str
    error: Optional[str] = None
    game_state: Optional[GameState] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Move rejected",
                "error": "Not your turn",
                "game_state": None
            }
        }


class CreateGameResponse(BaseModel):
    """Response after creating a game."""
    code: str
    color: PlayerColor = PlayerColor.BLUE


class JoinGameResponse(BaseModel):
    """Response after joining a game."""
    success: bool
    color: Optional[PlayerColor] = None
    error: Optional[str] = None
