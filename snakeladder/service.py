"""
Snake & Ladder - Game Service

Thin adapter between the pure TurnEngine and the Supabase managers. Each
method applies an engine transition first and only then writes the
matching records, so the engine never waits on storage mid-move.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable

from supabase import Client

from snakeladder.config.settings import Settings, get_settings
from snakeladder.database.board_element import BoardElementManager
from snakeladder.database.client import get_supabase_client
from snakeladder.database.game import GameManager
from snakeladder.database.models import GameRecord
from snakeladder.database.player import PlayerManager
from snakeladder.engine.base import MIN_PLAYERS, GameMode, GameSession, GameStatus, TurnResult
from snakeladder.engine.errors import ValidationError
from snakeladder.engine.events import (
    EventPayload,
    GameEvent,
    describe_turn,
    turn_payload,
)
from snakeladder.engine.turn import TurnEngine
from snakeladder.engine.validators import validate_game_mode

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 10
DEFAULT_GAME_MODE = GameMode.CLASSIC


@dataclass
class TurnReport:
    """Outcome of GameService.play_turn."""

    result: TurnResult
    event: EventPayload
    message: str
    persisted: bool = True


class GameService:
    """Creates, loads and plays stored games.

    A save that fails after a turn has resolved is logged and reported via
    `TurnReport.persisted`; the move still stands in the engine.
    """

    def __init__(
        self,
        client: Client,
        settings: Settings | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> None:
        self._games = GameManager(client)
        self._players = PlayerManager(client)
        self._elements = BoardElementManager(client)
        self._on_event = on_event
        if settings is not None:
            self._default_board_size = settings.default_board_size
            self._default_mode = validate_game_mode(settings.default_game_mode)
        else:
            self._default_board_size = DEFAULT_BOARD_SIZE
            self._default_mode = DEFAULT_GAME_MODE

    @classmethod
    def from_settings(
        cls, on_event: Callable[[EventPayload], None] | None = None
    ) -> GameService:
        """Service bound to the cached Supabase client and environment settings."""
        return cls(get_supabase_client(), settings=get_settings(), on_event=on_event)

    # === Lifecycle ===

    def create_game(
        self,
        name: str,
        player_names: Iterable[str],
        board_size: int | None = None,
        mode: GameMode | str | None = None,
        rng: random.Random | None = None,
    ) -> tuple[str, TurnEngine]:
        """Build, start and store a new game.

        Engine validation runs before anything is written, so invalid
        rosters never reach the database.

        Returns:
            (game_id, engine) with the engine already IN_PROGRESS
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Game name cannot be empty.")

        engine = TurnEngine.new_game(
            board_size=self._default_board_size if board_size is None else board_size,
            mode=self._default_mode if mode is None else mode,
            rng=rng,
            player_names=player_names,
        )
        engine.start()
        session = engine.session

        game = self._games.create(
            name=name.strip(),
            game_mode=session.mode.value,
            board_size=session.board_size,
            status=session.status.value,
        )
        game_id = str(game.id)
        try:
            self._players.create_many(game_id, session.players)
            self._elements.create_many(game_id, session.elements)
        except Exception:
            logger.exception("Failed to store roster or board for game %s", game_id)
            try:
                self.delete_game(game_id)
            except Exception:
                logger.exception("Failed to remove partial game %s", game_id)
            raise

        self._emit(EventPayload(
            event=GameEvent.GAME_CREATED,
            game_id=game_id,
            data={"elements": len(session.elements), "players": len(session.players)},
        ))
        return game_id, engine

    def load_game(
        self, game_id: str, rng: random.Random | None = None
    ) -> TurnEngine | None:
        """Rebuild an engine from stored records.

        Returns None if the game is gone or its roster is incomplete.
        """
        game = self._games.get(game_id)
        if game is None:
            return None

        players = tuple(record.to_player() for record in self._players.list_by_game(game_id))
        if len(players) < MIN_PLAYERS:
            logger.warning(
                "Game %s has %d stored players, need %d", game_id, len(players), MIN_PLAYERS
            )
            return None
        elements = tuple(record.to_element() for record in self._elements.list_by_game(game_id))
        index = game.current_player_index
        if not 0 <= index < len(players):
            logger.warning("Game %s has turn index %d out of range, using 0", game_id, index)
            index = 0

        session = GameSession(
            board_size=game.board_size,
            mode=validate_game_mode(game.game_mode),
            elements=elements,
            players=players,
            current_player_index=index,
            status=GameStatus(game.status),
            winner_id=str(game.winner_id) if game.winner_id else None,
        )
        return TurnEngine(session, rng=rng)

    def list_games(self, limit: int | None = None) -> list[GameRecord]:
        """Games for the dashboard, most recent first."""
        return self._games.list_recent(limit)

    def delete_game(self, game_id: str) -> None:
        """Remove a game with its board and roster."""
        self._elements.delete_by_game(game_id)
        self._players.delete_by_game(game_id)
        self._games.delete(game_id)

    # === Play ===

    def play_turn(
        self, game_id: str, engine: TurnEngine, roll: int | None = None
    ) -> TurnReport:
        """Resolve the current player's turn, then store it.

        Engine errors propagate untouched and nothing is written.
        """
        result = engine.take_turn(roll)
        session = engine.session
        persisted = self._save_turn(game_id, result, session)

        payload = turn_payload(game_id, result)
        player = session.get_player(result.player_id)
        message = describe_turn(result, player.name if player else result.player_id)
        logger.info("Game %s: %s", game_id, message)
        self._emit(payload)

        return TurnReport(result=result, event=payload, message=message, persisted=persisted)

    def reset_game(self, game_id: str, engine: TurnEngine) -> bool:
        """Restart a game on the same board.

        Returns:
            True if the reset was stored
        """
        engine.reset()
        try:
            self._games.update_status(game_id, GameStatus.IN_PROGRESS.value, None)
            self._games.update_turn(game_id, 0)
            self._players.reset_positions(game_id)
        except Exception:
            logger.exception("Failed to save reset for game %s", game_id)
            persisted = False
        else:
            persisted = True

        self._emit(EventPayload(event=GameEvent.GAME_RESET, game_id=game_id))
        return persisted

    def _save_turn(self, game_id: str, result: TurnResult, session: GameSession) -> bool:
        try:
            self._players.update_position(result.player_id, result.to_position)
            if result.is_win:
                self._games.update_status(
                    game_id, GameStatus.COMPLETED.value, result.player_id
                )
            else:
                self._games.update_turn(game_id, session.current_player_index)
        except Exception:
            logger.exception("Failed to save turn for game %s", game_id)
            return False
        return True

    def _emit(self, payload: EventPayload) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(payload)
        except Exception:
            logger.exception("Error handling event %s", payload.event.name)
