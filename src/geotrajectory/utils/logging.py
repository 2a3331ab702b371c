"""Simple logging utility.

Provides a lightweight wrapper around Python's standard logging
module to produce consistent log messages across the trajectory
helpers.
"""

import logging
from typing import Optional, Union


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a configured logger with a preset format.

    ``level`` overrides the default INFO level when given, either as a
    number or as a level name such as ``"DEBUG"``.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='[%(asctime)s] [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
