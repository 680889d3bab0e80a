"""
Snake & Ladder - Player Manager

CRUD operations for the `players` table.
"""

from typing import Sequence

from supabase import Client

from snakeladder.database.models import PlayerRecord
from snakeladder.engine.base import START_CELL, Player


class PlayerManager:
    """Manages player records in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("players")

    def create_many(self, game_id: str, players: Sequence[Player]) -> list[PlayerRecord]:
        """Insert the roster of a game; list order becomes turn order."""
        if not players:
            return []
        data = (
            self.table
            .insert([
                {
                    "id": player.id,
                    "game_id": game_id,
                    "name": player.name,
                    "color": player.color,
                    "position": player.position,
                    "turn_order": order,
                }
                for order, player in enumerate(players)
            ])
            .execute()
        )
        return [PlayerRecord.model_validate(row) for row in data.data]

    def get(self, player_id: str) -> PlayerRecord | None:
        """Get a single player by ID."""
        data = (
            self.table
            .select("*")
            .eq("id", player_id)
            .execute()
        )
        if data.data:
            return PlayerRecord.model_validate(data.data[0])
        return None

    def list_by_game(self, game_id: str) -> list[PlayerRecord]:
        """Get all players in a game, ordered by turn."""
        data = (
            self.table
            .select("*")
            .eq("game_id", game_id)
            .order("turn_order")
            .execute()
        )
        return [PlayerRecord.model_validate(row) for row in data.data]

    def update_position(self, player_id: str, position: int) -> PlayerRecord:
        """Update a player's cell."""
        data = (
            self.table
            .update({"position": position})
            .eq("id", player_id)
            .execute()
        )
        return PlayerRecord.model_validate(data.data[0])

    def reset_positions(self, game_id: str) -> list[PlayerRecord]:
        """Put every player of a game back on the first cell."""
        data = (
            self.table
            .update({"position": START_CELL})
            .eq("game_id", game_id)
            .execute()
        )
        return [PlayerRecord.model_validate(row) for row in data.data]

    def delete_by_game(self, game_id: str) -> None:
        """Delete all players of a game."""
        self.table.delete().eq("game_id", game_id).execute()
