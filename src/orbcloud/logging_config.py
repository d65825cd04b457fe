"""
Logging for command-line runs.

Library modules only create ``logging.getLogger(__name__)`` loggers under the
``orbcloud`` namespace; ``setup_logging`` is what attaches handlers to them.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'orbcloud' log records to stderr, and to ``log_file`` when given.

    Calling this again replaces the previous handlers.
    """
    logger = logging.getLogger("orbcloud")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at level {logging.getLevelName(level)}.")
    return logger
