"""
Snake & Ladder - Game Manager

CRUD operations for the `games` table.
"""

import logging

from supabase import Client

from snakeladder.database.models import GameRecord

logger = logging.getLogger(__name__)


class GameManager:
    """Manages game records in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("games")

    def create(
        self,
        name: str,
        game_mode: str,
        board_size: int,
        status: str = "in_progress",
    ) -> GameRecord:
        """Insert a new game row."""
        data = (
            self.table
            .insert({
                "name": name,
                "game_mode": game_mode,
                "board_size": board_size,
                "status": status,
            })
            .execute()
        )
        game = GameRecord.model_validate(data.data[0])
        logger.info("Created game %s (%s, %dx%d)", game.id, game_mode, board_size, board_size)
        return game

    def get(self, game_id: str) -> GameRecord | None:
        """Get a single game by ID."""
        data = (
            self.table
            .select("*")
            .eq("id", game_id)
            .execute()
        )
        if data.data:
            return GameRecord.model_validate(data.data[0])
        return None

    def list_recent(self, limit: int | None = None) -> list[GameRecord]:
        """All games, most recently updated first."""
        query = (
            self.table
            .select("*")
            .order("updated_at", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        data = query.execute()
        return [GameRecord.model_validate(row) for row in data.data]

    def update_status(
        self, game_id: str, status: str, winner_id: str | None = None
    ) -> GameRecord:
        """Set the game status; winner_id is written even when None."""
        data = (
            self.table
            .update({"status": status, "winner_id": winner_id})
            .eq("id", game_id)
            .execute()
        )
        return GameRecord.model_validate(data.data[0])

    def update_turn(self, game_id: str, current_player_index: int) -> GameRecord:
        """Move the turn cursor."""
        data = (
            self.table
            .update({"current_player_index": current_player_index})
            .eq("id", game_id)
            .execute()
        )
        return GameRecord.model_validate(data.data[0])

    def delete(self, game_id: str) -> None:
        """Delete a game row."""
        self.table.delete().eq("id", game_id).execute()
        logger.info("Deleted game %s", game_id)
