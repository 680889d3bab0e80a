"""
Snake & Ladder Configuration.

Environment variables, settings, and logging configuration.
"""

from snakeladder.config.logging_config import configure_logging
from snakeladder.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
