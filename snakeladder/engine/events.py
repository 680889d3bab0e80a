"""
Snake & Ladder - Game Event Definitions

Event types and payloads emitted after each engine transition, plus the
short messages a front end shows for them.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from snakeladder.engine.base import MoveOutcome, TurnResult


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_CREATED = auto()
    GAME_RESET = auto()
    PLAYER_MOVED = auto()
    LADDER_CLIMBED = auto()
    SNAKE_BITTEN = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    game_id: str
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


_OUTCOME_EVENT_MAP: dict[MoveOutcome, GameEvent] = {
    MoveOutcome.NORMAL: GameEvent.PLAYER_MOVED,
    MoveOutcome.LADDER_CLIMB: GameEvent.LADDER_CLIMBED,
    MoveOutcome.SNAKE_BITE: GameEvent.SNAKE_BITTEN,
    MoveOutcome.WIN: GameEvent.GAME_WON,
}


def classify_turn(result: TurnResult) -> GameEvent:
    """Determine the game event for a resolved turn."""
    return _OUTCOME_EVENT_MAP[result.outcome]


def turn_payload(game_id: str, result: TurnResult) -> EventPayload:
    """Build the payload describing a resolved turn."""
    return EventPayload(
        event=classify_turn(result),
        game_id=game_id,
        player_id=result.player_id,
        data={
            "roll": result.roll,
            "from_position": result.from_position,
            "to_position": result.to_position,
            "element_id": result.element.id if result.element else None,
        },
    )


def describe_turn(result: TurnResult, player_name: str) -> str:
    """One-line message for a resolved turn."""
    if result.outcome == MoveOutcome.WIN:
        return f"{player_name} wins the game!"
    if result.outcome == MoveOutcome.SNAKE_BITE:
        return (
            f"Oops! {player_name} got bitten by a snake! "
            f"Moving down to {result.to_position}."
        )
    if result.outcome == MoveOutcome.LADDER_CLIMB:
        return (
            f"Wow! {player_name} found a ladder! "
            f"Climbing up to {result.to_position}."
        )
    return f"{player_name} rolled {result.roll} and moved to {result.to_position}."
