"""
Snake & Ladder - Board Element Manager

CRUD operations for the `board_elements` table.
"""

from typing import Sequence

from supabase import Client

from snakeladder.database.models import BoardElementRecord
from snakeladder.engine.base import BoardElement


def element_label(element: BoardElement) -> str:
    """Human-readable name stored with an element, e.g. "Ladder 3"."""
    kind, _, number = element.id.partition("-")
    return f"{kind.capitalize()} {number}" if number else element.id


class BoardElementManager:
    """Manages snakes and ladders in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("board_elements")

    def create_many(
        self, game_id: str, elements: Sequence[BoardElement]
    ) -> list[BoardElementRecord]:
        """Insert the generated elements of a game."""
        if not elements:
            return []
        data = (
            self.table
            .insert([
                {
                    "game_id": game_id,
                    "name": element_label(element),
                    "type": element.kind.value,
                    "start_position": element.start_cell,
                    "end_position": element.end_cell,
                }
                for element in elements
            ])
            .execute()
        )
        return [BoardElementRecord.model_validate(row) for row in data.data]

    def get(self, element_id: str) -> BoardElementRecord | None:
        """Get a single element by ID."""
        data = (
            self.table
            .select("*")
            .eq("id", element_id)
            .execute()
        )
        if data.data:
            return BoardElementRecord.model_validate(data.data[0])
        return None

    def list_by_game(self, game_id: str) -> list[BoardElementRecord]:
        """Get all elements of a game, ordered by start cell."""
        data = (
            self.table
            .select("*")
            .eq("game_id", game_id)
            .order("start_position")
            .execute()
        )
        return [BoardElementRecord.model_validate(row) for row in data.data]

    def delete_by_game(self, game_id: str) -> None:
        """Delete all elements of a game."""
        self.table.delete().eq("game_id", game_id).execute()
