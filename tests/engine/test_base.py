"""
Snake & Ladder - Base Classes Tests

Tests for dataclasses, enums, dice, and validation utilities.
"""

import random

import pytest

from snakeladder.engine.base import (
    PLAYER_COLORS,
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
from snakeladder.engine.errors import GameRuleError, ValidationError
from snakeladder.engine.validators import (
    validate_board_size,
    validate_game_mode,
    validate_player_name,
    validate_roll,
)


class TestEnums:
    """Stored enum values."""

    def test_element_kind_values(self):
        assert ElementKind.SNAKE.value == "snake"
        assert ElementKind.LADDER.value == "ladder"

    def test_game_mode_values(self):
        assert GameMode.CLASSIC.value == "classic"
        assert GameMode.SPEED.value == "speed"
        assert GameMode.CHALLENGE.value == "challenge"

    def test_game_status_values(self):
        assert GameStatus.IN_PROGRESS.value == "in_progress"
        assert GameStatus.COMPLETED.value == "completed"

    def test_palette_has_four_colors(self):
        assert len(PLAYER_COLORS) == 4
        assert len(set(PLAYER_COLORS)) == 4


class TestBoardElement:
    """Tests for BoardElement dataclass."""

    def test_valid_ladder(self):
        ladder = BoardElement(id="l", kind=ElementKind.LADDER, start_cell=4, end_cell=14)
        assert ladder.is_ladder
        assert not ladder.is_snake
        assert ladder.length == 10

    def test_valid_snake(self):
        snake = BoardElement(id="s", kind=ElementKind.SNAKE, start_cell=40, end_cell=20)
        assert snake.is_snake
        assert snake.length == 20

    def test_ladder_going_down_rejected(self):
        with pytest.raises(ValueError, match="must go up"):
            BoardElement(id="l", kind=ElementKind.LADDER, start_cell=14, end_cell=4)

    def test_snake_going_up_rejected(self):
        with pytest.raises(ValueError, match="must go down"):
            BoardElement(id="s", kind=ElementKind.SNAKE, start_cell=20, end_cell=40)

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            BoardElement(id="l", kind=ElementKind.LADDER, start_cell=10, end_cell=10)

    def test_immutable(self):
        ladder = BoardElement(id="l", kind=ElementKind.LADDER, start_cell=4, end_cell=14)
        with pytest.raises(AttributeError):
            ladder.end_cell = 99


class TestGameSession:
    """Tests for GameSession helpers."""

    def test_total_cells(self):
        assert GameSession(board_size=10).total_cells == 100
        assert GameSession(board_size=8).total_cells == 64

    def test_defaults(self):
        session = GameSession(board_size=10)
        assert session.status == GameStatus.SETUP
        assert session.players == ()
        assert session.winner_id is None
        assert session.current_player is None
        assert session.winner is None

    def test_snakes_and_ladders_split(self, sample_session):
        assert {e.id for e in sample_session.ladders} == {"ladder-1", "ladder-2"}
        assert {e.id for e in sample_session.snakes} == {"snake-1", "snake-2"}

    def test_get_player(self, players_at):
        session = GameSession(board_size=10, players=players_at(1, 5))
        assert session.get_player("p2").position == 5
        assert session.get_player("nope") is None

    def test_winner_lookup(self, players_at):
        session = GameSession(
            board_size=10,
            players=players_at(100, 5),
            status=GameStatus.COMPLETED,
            winner_id="p1",
        )
        assert session.winner.name == "Player 1"

    def test_player_starts_on_cell_one(self):
        assert Player(id="x", name="X", color="#fff").position == 1


class TestTurnResult:
    def test_is_win(self):
        result = TurnResult("p1", 5, 97, 100, MoveOutcome.WIN)
        assert result.is_win

    def test_normal_is_not_win(self):
        result = TurnResult("p1", 3, 5, 8, MoveOutcome.NORMAL)
        assert not result.is_win
        assert result.element is None


class TestRollDie:
    """Tests for roll_die()."""

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        for _ in range(200):
            assert 1 <= roll_die() <= 6

    def test_all_faces_appear(self, rng):
        faces = {roll_die(rng) for _ in range(500)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_seeded_is_reproducible(self):
        first, second = random.Random(42), random.Random(42)
        assert [roll_die(first) for _ in range(20)] == [roll_die(second) for _ in range(20)]


class TestValidators:
    """Tests for validation utilities."""

    @pytest.mark.parametrize("roll", [1, 2, 3, 4, 5, 6])
    def test_valid_rolls(self, roll):
        assert validate_roll(roll) == roll

    @pytest.mark.parametrize("roll", [0, 7, -1, 12])
    def test_out_of_range_rolls(self, roll):
        with pytest.raises(ValidationError, match="between 1 and 6"):
            validate_roll(roll)

    @pytest.mark.parametrize("roll", [3.0, "3", None, True])
    def test_non_integer_rolls(self, roll):
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_roll(roll)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_roll(9)
        assert issubclass(ValidationError, GameRuleError)

    def test_board_size(self):
        assert validate_board_size(2) == 2
        assert validate_board_size(12) == 12

    @pytest.mark.parametrize("size", [1, 0, -3])
    def test_board_size_too_small(self, size):
        with pytest.raises(ValidationError, match="at least 2"):
            validate_board_size(size)

    def test_board_size_not_int(self):
        with pytest.raises(ValidationError):
            validate_board_size("10")

    def test_player_name_stripped(self):
        assert validate_player_name("  Alice ") == "Alice"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_player_name(self, name):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_player_name(name)

    def test_long_player_name(self):
        with pytest.raises(ValidationError, match="at most 30"):
            validate_player_name("x" * 31)

    def test_game_mode_from_string(self):
        assert validate_game_mode("speed") == GameMode.SPEED
        assert validate_game_mode(GameMode.CHALLENGE) == GameMode.CHALLENGE

    def test_unknown_game_mode(self):
        with pytest.raises(ValidationError, match="Game mode must be one of"):
            validate_game_mode("turbo")
