"""Configure application logging using the Python standard library.

The CLI calls ``configure_logging`` once. Messages go to stderr so they
never mix with the menu output on stdout.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the ``shopcart`` logger.

    Args:
        level: Threshold for the package logger. Calling this again
            replaces the previous handler instead of adding another.
    """
    logger = logging.getLogger("shopcart")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
