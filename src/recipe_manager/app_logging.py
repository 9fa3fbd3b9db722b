"""Logging setup for the recipe manager service."""

import logging

APP_LOGGER_NAME = "recipe_manager"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the application logger and set its level.

    Calling this again only updates the level; handlers are never duplicated.
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.getLevelName(level.upper()))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
