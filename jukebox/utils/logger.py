import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str,
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Named logger with a single stderr handler.

    Records do not propagate, so a root handler installed by
    basicConfig never prints them a second time. Without an explicit
    level the logger follows the root level.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is not None:
        logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
