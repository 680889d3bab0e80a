"""
Snake & Ladder - Movement Resolver

Pure movement rules: add the roll, cap at the final cell, fire at most one
snake or ladder. The roll is always supplied by the caller.
"""

from dataclasses import dataclass
from typing import Iterable

from snakeladder.engine.base import BoardElement, MoveOutcome
from snakeladder.engine.validators import validate_roll


@dataclass(frozen=True)
class Movement:
    """Resolved destination of a single roll."""
    new_position: int
    outcome: MoveOutcome
    element: BoardElement | None = None


class MovementResolver:
    """
    Stateless resolver for one player's move.

    All methods are class methods; nothing is stored between calls.
    """

    @classmethod
    def resolve(
        cls,
        position: int,
        board_size: int,
        roll: int,
        elements: Iterable[BoardElement],
    ) -> Movement:
        """Compute where a player ends up after rolling *roll*.

        Reaching or passing the final cell wins immediately and is capped
        at that cell. Otherwise the landing cell is looked up once; a snake
        or ladder there moves the player to its end cell and resolution
        stops, even if that end cell starts another element.

        Args:
            position: Current cell
            board_size: Side length of the board
            roll: Die value (1-6)
            elements: Snakes and ladders on the board

        Returns:
            Movement with the new cell and the outcome category
        """
        roll = validate_roll(roll)
        final_cell = board_size * board_size
        candidate = position + roll

        if candidate >= final_cell:
            return Movement(new_position=final_cell, outcome=MoveOutcome.WIN)

        element = cls.find_element(candidate, elements)
        if element is None:
            return Movement(new_position=candidate, outcome=MoveOutcome.NORMAL)

        outcome = MoveOutcome.LADDER_CLIMB if element.is_ladder else MoveOutcome.SNAKE_BITE
        return Movement(new_position=element.end_cell, outcome=outcome, element=element)

    @staticmethod
    def find_element(
        cell: int, elements: Iterable[BoardElement]
    ) -> BoardElement | None:
        """First element whose start cell is *cell*."""
        for element in elements:
            if element.start_cell == cell:
                return element
        return None
