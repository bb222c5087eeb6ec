"""Logging setup for btca-tools."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "btca_tools"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        verbose: Log at DEBUG instead of WARNING
        console: Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Clear existing handlers so repeated calls don't duplicate output
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=True,
        )
    )
    logger.propagate = False
    return logger
