"""
Snake & Ladder - Dice

The single D6 used for movement. Kept apart from the resolver so tests can
inject a seeded or scripted random source.
"""

import random

from snakeladder.engine.validators import DIE_FACES


def roll_die(rng: random.Random | None = None) -> int:
    """Roll one D6.

    Args:
        rng: Random source; the module-level generator when None

    Returns:
        Uniform value 1-6
    """
    source = rng if rng is not None else random
    return source.randint(1, DIE_FACES)
