"""
Snake & Ladder - Database Models

Pydantic models that mirror the Supabase table schemas, with converters
to the engine's frozen types.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from snakeladder.engine.base import BoardElement, ElementKind, Player


class GameRecord(BaseModel):
    """Mirrors the `games` table."""

    id: UUID
    name: str = Field(max_length=100)
    game_mode: str = "classic"
    board_size: int = Field(default=10, ge=2)
    status: str = "in_progress"
    winner_id: UUID | None = None
    current_player_index: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PlayerRecord(BaseModel):
    """Mirrors the `players` table."""

    id: UUID
    game_id: UUID
    name: str = Field(max_length=30)
    color: str
    position: int = Field(default=1, ge=1)
    turn_order: int
    created_at: datetime

    model_config = {"from_attributes": True}

    def to_player(self) -> Player:
        return Player(
            id=str(self.id),
            name=self.name,
            color=self.color,
            position=self.position,
        )


class BoardElementRecord(BaseModel):
    """Mirrors the `board_elements` table."""

    id: UUID
    game_id: UUID
    name: str
    type: str
    start_position: int
    end_position: int

    model_config = {"from_attributes": True}

    def to_element(self) -> BoardElement:
        return BoardElement(
            id=str(self.id),
            kind=ElementKind(self.type),
            start_cell=self.start_position,
            end_cell=self.end_position,
        )
