"""
Snake & Ladder - Turn Engine

Owns one GameSession and drives it through SETUP -> IN_PROGRESS ->
COMPLETED. Every operation validates first and then swaps in a new frozen
snapshot, so a rejected call leaves the session exactly as it was.
"""

import random
import uuid
from dataclasses import replace
from typing import Iterable

from snakeladder.engine.base import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    PLAYER_COLORS,
    START_CELL,
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
    InsufficientPlayersError,
    InvalidStateError,
    MinimumPlayersError,
    ValidationError,
)
from snakeladder.engine.generator import BoardElementGenerator
from snakeladder.engine.movement import MovementResolver
from snakeladder.engine.validators import (
    validate_board_size,
    validate_game_mode,
    validate_player_name,
    validate_roll,
)


class TurnEngine:
    """
    Rules for a single game session.

    The engine performs no I/O. Callers read `session` after each call to
    render or persist the new state.
    """

    def __init__(self, session: GameSession, rng: random.Random | None = None) -> None:
        self._session = session
        self._rng = rng

    @classmethod
    def new_game(
        cls,
        board_size: int = 10,
        mode: GameMode | str = GameMode.CLASSIC,
        rng: random.Random | None = None,
        player_names: Iterable[str] = (),
    ) -> "TurnEngine":
        """Create an engine in SETUP with a freshly generated board.

        Args:
            board_size: Side length of the board
            mode: Snake/ladder ratio used by the generator
            rng: Random source for the board and for unsupplied rolls
            player_names: Players to add straight away, in turn order
        """
        board_size = validate_board_size(board_size)
        mode = validate_game_mode(mode)
        elements = BoardElementGenerator.generate(board_size, mode, rng)
        engine = cls(
            GameSession(board_size=board_size, mode=mode, elements=elements),
            rng=rng,
        )
        for name in player_names:
            engine.add_player(name)
        return engine

    @property
    def session(self) -> GameSession:
        """Read-only snapshot of the current state."""
        return self._session

    # === Setup ===

    def add_player(self, name: str, player_id: str | None = None) -> Player:
        """Append a player to the roster.

        Raises:
            CapacityError: Roster already holds four players
            InvalidStateError: Game has already started
            ValidationError: Name is blank or too long
        """
        session = self._session
        if len(session.players) >= MAX_PLAYERS:
            raise CapacityError(f"A game holds at most {MAX_PLAYERS} players.")
        self._require(GameStatus.SETUP, "add a player")
        cleaned = validate_player_name(name)

        player = Player(
            id=player_id or str(uuid.uuid4()),
            name=cleaned,
            color=PLAYER_COLORS[len(session.players) % len(PLAYER_COLORS)],
        )
        self._session = replace(session, players=session.players + (player,))
        return player

    def remove_player(self, player_id: str) -> Player:
        """Drop a player from the roster.

        Raises:
            MinimumPlayersError: Only two players left
            InvalidStateError: Game has already started
            ValidationError: No player with that id
        """
        session = self._session
        if len(session.players) <= MIN_PLAYERS:
            raise MinimumPlayersError(f"A game needs at least {MIN_PLAYERS} players.")
        self._require(GameStatus.SETUP, "remove a player")

        player = session.get_player(player_id)
        if player is None:
            raise ValidationError(f"No player with id {player_id!r}.")

        remaining = tuple(p for p in session.players if p.id != player_id)
        self._session = replace(session, players=remaining)
        return player

    def start(self) -> GameSession:
        """Leave SETUP; the first player in the roster moves first."""
        self._require(GameStatus.SETUP, "start the game")
        if len(self._session.players) < MIN_PLAYERS:
            raise InsufficientPlayersError(
                f"At least {MIN_PLAYERS} players are required to start."
            )

        self._session = replace(
            self._session,
            status=GameStatus.IN_PROGRESS,
            current_player_index=0,
        )
        return self._session

    # === Play ===

    def take_turn(self, roll: int | None = None) -> TurnResult:
        """Move the current player by *roll*.

        A winning move completes the game and keeps the turn cursor on the
        winner; any other move passes the turn on.

        Args:
            roll: Die value; rolled from the engine's random source when None

        Raises:
            InvalidStateError: Game is not in progress
            ValidationError: Roll is not 1-6
        """
        self._require(GameStatus.IN_PROGRESS, "take a turn")
        roll = roll_die(self._rng) if roll is None else validate_roll(roll)

        session = self._session
        index = session.current_player_index
        player = session.players[index]
        movement = MovementResolver.resolve(
            player.position, session.board_size, roll, session.elements
        )

        players = list(session.players)
        players[index] = replace(player, position=movement.new_position)

        if movement.outcome == MoveOutcome.WIN:
            self._session = replace(
                session,
                players=tuple(players),
                status=GameStatus.COMPLETED,
                winner_id=player.id,
            )
        else:
            self._session = replace(
                session,
                players=tuple(players),
                current_player_index=(index + 1) % len(players),
            )

        return TurnResult(
            player_id=player.id,
            roll=roll,
            from_position=player.position,
            to_position=movement.new_position,
            outcome=movement.outcome,
            element=movement.element,
        )

    def reset(self) -> GameSession:
        """Put everyone back on cell 1 and replay the same board.

        Callers wanting a new board should create a new engine.
        """
        session = self._session
        if len(session.players) < MIN_PLAYERS:
            raise InsufficientPlayersError(
                f"At least {MIN_PLAYERS} players are required to play."
            )

        self._session = replace(
            session,
            players=tuple(replace(p, position=START_CELL) for p in session.players),
            current_player_index=0,
            status=GameStatus.IN_PROGRESS,
            winner_id=None,
        )
        return self._session

    def _require(self, status: GameStatus, action: str) -> None:
        if self._session.status != status:
            raise InvalidStateError(
                f"Cannot {action} while the game is {self._session.status.value}."
            )
