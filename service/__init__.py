"""
In-memory game service built on the Blokli rules engine.
"""

from .config import ServiceConfig
from .game_manager import GameManager, GameSession

__all__ = ["GameManager", "GameSession", "ServiceConfig"]
