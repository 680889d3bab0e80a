"""
Snake & Ladder - Board Element Generator

Procedurally places snakes and ladders for a board. Placement is lossy:
elements that collide with an earlier one are dropped, not redrawn, so a
board can end up with fewer elements than its mode asks for.

All methods are stateless class methods; randomness comes from the
injected source.
"""

import logging
import random

from snakeladder.engine.base import BoardElement, ElementKind, GameMode
from snakeladder.engine.validators import validate_board_size, validate_game_mode

logger = logging.getLogger(__name__)


class BoardElementGenerator:
    """
    Stateless generator for the snakes and ladders of a board.

    Counts come from MODE_COUNTS as (snakes, ladders).
    """

    MODE_COUNTS: dict[GameMode, tuple[int, int]] = {
        GameMode.CLASSIC: (8, 8),
        GameMode.SPEED: (5, 12),
        GameMode.CHALLENGE: (12, 5),
    }

    MIN_JUMP = 5
    MAX_JUMP = 20
    # Ladders start below this many cells from the end, snakes at or above it
    ZONE = 20
    LOWEST_CELL = 2

    @classmethod
    def generate(
        cls,
        board_size: int,
        mode: GameMode | str = GameMode.CLASSIC,
        rng: random.Random | None = None,
    ) -> tuple[BoardElement, ...]:
        """Generate the element set for a board.

        Ladders are drawn first, then snakes, and the combined list is
        filtered so that no kept element starts where an earlier kept
        element starts or ends.

        Args:
            board_size: Side length of the board
            mode: Decides how many snakes and ladders are requested
            rng: Random source (seed it for reproducible boards)

        Returns:
            Kept elements in generation order
        """
        board_size = validate_board_size(board_size)
        source = rng if rng is not None else random
        mode = validate_game_mode(mode)
        snake_count, ladder_count = cls.MODE_COUNTS[mode]
        total_cells = board_size * board_size

        candidates: list[BoardElement] = []
        for n in range(1, ladder_count + 1):
            ladder = cls._draw_ladder(n, total_cells, source)
            if ladder is not None:
                candidates.append(ladder)
        for n in range(1, snake_count + 1):
            snake = cls._draw_snake(n, total_cells, source)
            if snake is not None:
                candidates.append(snake)

        kept = cls.remove_overlaps(candidates)
        logger.debug(
            "Generated %d of %d requested elements for %dx%d %s board",
            len(kept), snake_count + ladder_count, board_size, board_size, mode.value,
        )
        return kept

    @staticmethod
    def remove_overlaps(candidates: list[BoardElement]) -> tuple[BoardElement, ...]:
        """Keep elements whose start cell is not an endpoint of an earlier kept one."""
        used: set[int] = set()
        kept: list[BoardElement] = []
        for element in candidates:
            if element.start_cell in used:
                continue
            kept.append(element)
            used.add(element.start_cell)
            used.add(element.end_cell)
        return tuple(kept)

    @classmethod
    def _draw_ladder(cls, n: int, total_cells: int, source) -> BoardElement | None:
        low, high = cls.LOWEST_CELL, total_cells - cls.ZONE
        if high <= low:
            # Small board: anywhere short of the final cell
            high = total_cells - 1
        if high <= low:
            return None

        start = source.randrange(low, high)
        max_jump = min(cls.MAX_JUMP, total_cells - start - 1)
        if max_jump < cls.MIN_JUMP:
            return None

        jump = source.randint(cls.MIN_JUMP, max_jump)
        return BoardElement(
            id=f"ladder-{n}",
            kind=ElementKind.LADDER,
            start_cell=start,
            end_cell=start + jump,
        )

    @classmethod
    def _draw_snake(cls, n: int, total_cells: int, source) -> BoardElement | None:
        low, high = cls.ZONE, total_cells
        if high <= low:
            return None

        start = source.randrange(low, high)
        max_jump = min(cls.MAX_JUMP, start - cls.LOWEST_CELL)
        if max_jump < cls.MIN_JUMP:
            return None

        jump = source.randint(cls.MIN_JUMP, max_jump)
        return BoardElement(
            id=f"snake-{n}",
            kind=ElementKind.SNAKE,
            start_cell=start,
            end_cell=start - jump,
        )
