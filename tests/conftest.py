"""
Snake & Ladder - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from snakeladder.engine.base import BoardElement, ElementKind, GameSession, Player
from snakeladder.engine.turn import TurnEngine


class ScriptedRandom:
    """Random source that always picks the lowest (or highest) allowed value."""

    def __init__(self, highest: bool = False) -> None:
        self.highest = highest

    def randrange(self, start: int, stop: int) -> int:
        return stop - 1 if self.highest else start

    def randint(self, a: int, b: int) -> int:
        return b if self.highest else a


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


# =============================================================================
# BOARD FIXTURES
# =============================================================================

@pytest.fixture
def sample_elements() -> tuple[BoardElement, ...]:
    """
    A fixed 10x10 board.

    Ladders: 4 -> 14, 30 -> 50
    Snakes:  40 -> 20, 98 -> 78
    """
    return (
        BoardElement(id="ladder-1", kind=ElementKind.LADDER, start_cell=4, end_cell=14),
        BoardElement(id="ladder-2", kind=ElementKind.LADDER, start_cell=30, end_cell=50),
        BoardElement(id="snake-1", kind=ElementKind.SNAKE, start_cell=40, end_cell=20),
        BoardElement(id="snake-2", kind=ElementKind.SNAKE, start_cell=98, end_cell=78),
    )


@pytest.fixture
def sample_session(sample_elements) -> GameSession:
    """SETUP session on the fixed board with no players."""
    return GameSession(board_size=10, elements=sample_elements)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def setup_engine(sample_session) -> TurnEngine:
    """Engine in SETUP with Alice (p1) and Bob (p2)."""
    engine = TurnEngine(sample_session, rng=random.Random(7))
    engine.add_player("Alice", player_id="p1")
    engine.add_player("Bob", player_id="p2")
    return engine


@pytest.fixture
def started_engine(setup_engine) -> TurnEngine:
    """Two-player engine already IN_PROGRESS."""
    setup_engine.start()
    return setup_engine


def make_players(*positions: int) -> tuple[Player, ...]:
    """Players p1..pN standing on the given cells."""
    return tuple(
        Player(id=f"p{i}", name=f"Player {i}", color="#4f46e5", position=pos)
        for i, pos in enumerate(positions, start=1)
    )


@pytest.fixture
def players_at():
    """Factory building players p1..pN on the given cells."""
    return make_players


@pytest.fixture
def lowest_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def highest_rng() -> ScriptedRandom:
    return ScriptedRandom(highest=True)
