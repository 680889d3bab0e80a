"""
Snake & Ladder - Engine Errors

Every rule violation raises one of these. They are all recoverable: the
engine leaves its session untouched and the caller picks the message.
"""


class GameRuleError(Exception):
    """Base class for rejected engine operations."""


class ValidationError(GameRuleError, ValueError):
    """Bad input, e.g. an empty player name or a roll outside 1-6."""


class CapacityError(GameRuleError):
    """The roster is already full."""


class MinimumPlayersError(GameRuleError):
    """Removing a player would leave fewer than two."""


class InsufficientPlayersError(GameRuleError):
    """The game cannot start with fewer than two players."""


class InvalidStateError(GameRuleError):
    """Operation is not allowed in the session's current status."""
