"""
Snake & Ladder Database Layer.

Supabase integration for games, players, and board element persistence.
"""

from snakeladder.database.board_element import BoardElementManager
from snakeladder.database.client import get_supabase_client
from snakeladder.database.game import GameManager
from snakeladder.database.models import BoardElementRecord, GameRecord, PlayerRecord
from snakeladder.database.player import PlayerManager

__all__ = [
    "get_supabase_client",
    "BoardElementManager",
    "BoardElementRecord",
    "GameManager",
    "GameRecord",
    "PlayerManager",
    "PlayerRecord",
]
