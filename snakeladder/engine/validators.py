"""
Snake & Ladder - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise a descriptive ValidationError.
"""

from snakeladder.engine.base import GameMode
from snakeladder.engine.errors import ValidationError

MIN_BOARD_SIZE = 2
MAX_NAME_LENGTH = 30
DIE_FACES = 6


def validate_roll(roll: int) -> int:
    """
    Validate a die value.

    Args:
        roll: Value of a single D6

    Returns:
        Validated roll

    Raises:
        ValidationError: If the roll is not an integer between 1 and 6
    """
    # bool is an int subclass but never a die value
    if not isinstance(roll, int) or isinstance(roll, bool):
        raise ValidationError(f"Roll must be an integer, got {type(roll).__name__}.")

    if not (1 <= roll <= DIE_FACES):
        raise ValidationError(f"Roll must be between 1 and {DIE_FACES}, got {roll}.")

    return roll


def validate_board_size(board_size: int) -> int:
    """
    Validate the board side length.

    Args:
        board_size: Number of cells per row

    Returns:
        Validated size

    Raises:
        ValidationError: If size is not an integer of at least 2
    """
    if not isinstance(board_size, int) or isinstance(board_size, bool):
        raise ValidationError(
            f"Board size must be an integer, got {type(board_size).__name__}."
        )

    if board_size < MIN_BOARD_SIZE:
        raise ValidationError(
            f"Board size must be at least {MIN_BOARD_SIZE}, got {board_size}."
        )

    return board_size


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a player's display name.

    Returns:
        The name with surrounding whitespace stripped

    Raises:
        ValidationError: If the name is blank or too long
    """
    if not isinstance(name, str):
        raise ValidationError(f"Player name must be a string, got {type(name).__name__}.")

    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("Player name cannot be empty.")

    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Player name must be at most {MAX_NAME_LENGTH} characters, got {len(cleaned)}."
        )

    return cleaned


def validate_game_mode(mode: GameMode | str) -> GameMode:
    """Accept a GameMode or its stored string value."""
    if isinstance(mode, GameMode):
        return mode
    try:
        return GameMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in GameMode)
        raise ValidationError(f"Game mode must be one of {valid}, got {mode!r}.") from None
