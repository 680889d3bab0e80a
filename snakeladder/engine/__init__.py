"""
Snake & Ladder Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles board generation, dice, movement resolution and turn order.
"""

from snakeladder.engine.base import (
    BoardElement,
    ElementKind,
    GameMode,
    GameSession,
    GameStatus,
    MoveOutcome,
    Player,
    TurnResult,
)
from snakeladder.engine.dice import roll_die
from snakeladder.engine.errors import (
    CapacityError,
    GameRuleError,
    InsufficientPlayersError,
    InvalidStateError,
    MinimumPlayersError,
    ValidationError,
)
from snakeladder.engine.generator import BoardElementGenerator
from snakeladder.engine.movement import Movement, MovementResolver
from snakeladder.engine.turn import TurnEngine

__all__ = [
    # Data Classes
    "BoardElement",
    "GameSession",
    "Movement",
    "Player",
    "TurnResult",
    # Enums
    "ElementKind",
    "GameMode",
    "GameStatus",
    "MoveOutcome",
    # Errors
    "CapacityError",
    "GameRuleError",
    "InsufficientPlayersError",
    "InvalidStateError",
    "MinimumPlayersError",
    "ValidationError",
    # Engines
    "BoardElementGenerator",
    "MovementResolver",
    "TurnEngine",
    "roll_die",
]
