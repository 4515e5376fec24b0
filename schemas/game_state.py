"""
Game state schemas
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from blokli.board import BOARD_SIZE, PlayerColor
from blokli.scoring import GameResult


class GameStatus(str, Enum):
    """Game status enumeration."""
    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


class PlayerSeats(BaseModel):
    """Player identifiers seated at each color. Empty seats are None."""
    blue: Optional[str] = None
    orange: Optional[str] = None

    def color_for(self, player_id: str) -> Optional[PlayerColor]:
        """Get the color a player is seated at, if any."""
        if self.blue == player_id:
            return PlayerColor.BLUE
        if self.orange == player_id:
            return PlayerColor.ORANGE
        return None


class GameState(BaseModel):
    """Current state of the game."""
    code: str
    board: List[List[int]] = Field(
        description=f"{BOARD_SIZE}x{BOARD_SIZE} board, 0 = empty, 1 = blue, 2 = orange",
        min_length=BOARD_SIZE,
        max_length=BOARD_SIZE,
    )
    players: PlayerSeats
    pieces: Dict[PlayerColor, List[int]] = Field(description="Remaining piece ids for each color")
    current_turn: PlayerColor
    status: GameStatus
    winner: Optional[GameResult] = None
    last_passed_by: Optional[PlayerColor] = None
    scores: Dict[PlayerColor, int] = Field(description="Squares left in each color's remaining pieces")
    move_count: int = 0
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "code": "K7QX2M",
                "board": [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)],
                "players": {"blue": "player-1", "orange": None},
                "pieces": {"blue": list(range(21)), "orange": list(range(21))},
                "current_turn": "blue",
                "status": "waiting",
                "winner": None,
                "last_passed_by": None,
                "scores": {"blue": 89, "orange": 89},
                "move_count": 0,
                "created_at": "2026-01-01T00:00:00",
            }
        }
