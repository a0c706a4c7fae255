"""Logging utilities.

Library modules log through children of the ``fenced_matter`` logger and
never install handlers; the command-line front end calls setup_logger().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "fenced_matter"


def setup_logger(
    level: int = logging.WARNING,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Send package log records to a Rich handler.

    Calling it again replaces the previous Rich handler instead of stacking
    a second one.

    Args:
        level: Logging level
        console: Rich console instance (a stderr console if None)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package namespace.

    Args:
        name: Module name; names outside ``fenced_matter`` are nested under it

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
