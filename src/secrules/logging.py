"""Logging configuration for the secrules package."""

import logging
import os

# Configuration from environment
LOG_LEVEL = os.environ.get("SECRULES_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("SECRULES_LOG_FILE")

LOGGER_NAME = "secrules"


def init_logging(level: str | None = None) -> logging.Logger:
    """Initialize the package logger. Returns it.

    Logs go to SECRULES_LOG_FILE when set, stderr otherwise.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or LOG_LEVEL)
    logger.propagate = False
    logger.handlers.clear()

    if LOG_FILE:
        handler = logging.FileHandler(LOG_FILE)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter('%(asctime)s %(name)s %(levelname)s %(message)s')
    )
    logger.addHandler(handler)
    return logger
