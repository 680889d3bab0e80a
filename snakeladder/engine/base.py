"""
Snake & Ladder - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses); the turn
engine swaps whole snapshots instead of mutating them in place.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


MIN_PLAYERS = 2
MAX_PLAYERS = 4
START_CELL = 1

# Token colors, assigned in join order
PLAYER_COLORS: tuple[str, ...] = ("#4f46e5", "#10b981", "#f97316", "#8b5cf6")


class ElementKind(Enum):
    """Kind of board element."""
    SNAKE = "snake"
    LADDER = "ladder"


class GameMode(Enum):
    """Available game modes. Only the board generator reads this."""
    CLASSIC = "classic"
    SPEED = "speed"          # more ladders
    CHALLENGE = "challenge"  # more snakes


class GameStatus(Enum):
    """Lifecycle of a game session."""
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class MoveOutcome(Enum):
    """What happened when a player moved."""
    NORMAL = auto()
    LADDER_CLIMB = auto()
    SNAKE_BITE = auto()
    WIN = auto()


@dataclass(frozen=True)
class BoardElement:
    """
    A snake or a ladder.

    Attributes:
        id: Identifier, unique within a board
        kind: Snake or ladder
        start_cell: Cell that triggers the element
        end_cell: Cell the player ends up on
    """
    id: str
    kind: ElementKind
    start_cell: int
    end_cell: int

    def __post_init__(self) -> None:
        """Ladders go up, snakes go down."""
        if self.kind == ElementKind.LADDER and self.end_cell <= self.start_cell:
            raise ValueError(
                f"Ladder {self.id} must go up, got {self.start_cell} -> {self.end_cell}."
            )
        if self.kind == ElementKind.SNAKE and self.end_cell >= self.start_cell:
            raise ValueError(
                f"Snake {self.id} must go down, got {self.start_cell} -> {self.end_cell}."
            )

    @property
    def is_ladder(self) -> bool:
        return self.kind == ElementKind.LADDER

    @property
    def is_snake(self) -> bool:
        return self.kind == ElementKind.SNAKE

    @property
    def length(self) -> int:
        """Number of cells jumped, always positive."""
        return abs(self.end_cell - self.start_cell)


@dataclass(frozen=True)
class Player:
    """
    A participant in one game.

    Attributes:
        id: Opaque identifier
        name: Display name
        color: Token color (presentation only)
        position: Current cell, starts at 1
    """
    id: str
    name: str
    color: str
    position: int = START_CELL


@dataclass(frozen=True)
class GameSession:
    """
    Complete state of one playthrough.

    Attributes:
        board_size: Side length; the track has board_size ** 2 cells
        mode: Mode used to generate the elements
        elements: Snakes and ladders, fixed at creation
        players: Roster in turn order
        current_player_index: Whose turn it is
        status: Setup, in progress or completed
        winner_id: Set only once the game is completed
    """
    board_size: int
    mode: GameMode = GameMode.CLASSIC
    elements: tuple[BoardElement, ...] = field(default_factory=tuple)
    players: tuple[Player, ...] = field(default_factory=tuple)
    current_player_index: int = 0
    status: GameStatus = GameStatus.SETUP
    winner_id: str | None = None

    @property
    def total_cells(self) -> int:
        """The final (winning) cell."""
        return self.board_size * self.board_size

    @property
    def current_player(self) -> Player | None:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def winner(self) -> Player | None:
        if self.winner_id is None:
            return None
        return self.get_player(self.winner_id)

    @property
    def snakes(self) -> tuple[BoardElement, ...]:
        return tuple(e for e in self.elements if e.is_snake)

    @property
    def ladders(self) -> tuple[BoardElement, ...]:
        return tuple(e for e in self.elements if e.is_ladder)

    def get_player(self, player_id: str) -> Player | None:
        for player in self.players:
            if player.id == player_id:
                return player
        return None


@dataclass(frozen=True)
class TurnResult:
    """
    What one call to take_turn did, for presentation and persistence.

    Attributes:
        player_id: Who moved
        roll: Die value used
        from_position: Cell before the roll
        to_position: Cell after resolving the move
        outcome: Category of the move
        element: Snake or ladder that fired, if any
    """
    player_id: str
    roll: int
    from_position: int
    to_position: int
    outcome: MoveOutcome
    element: BoardElement | None = None

    @property
    def is_win(self) -> bool:
        return self.outcome == MoveOutcome.WIN
