"""
Snake & Ladder - Logging Configuration
"""

import logging

from snakeladder.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None, level: str | None = None) -> None:
    """Configure root logging once, from settings or an explicit level.

    DEBUG in settings forces the DEBUG level.
    """
    if level is None:
        if settings is None:
            level = "INFO"
        elif settings.debug:
            level = "DEBUG"
        else:
            level = settings.log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
