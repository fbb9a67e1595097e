"""Logging setup for the command-line shell."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "outlay"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> logging.Logger:
    """Route outlay's log records to stderr through rich.

    Args:
        level: Log level name from configuration.
        verbose: Force DEBUG regardless of ``level``.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
