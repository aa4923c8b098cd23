"""
Logging configuration with Rich formatting.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Route the package's log records to a Rich console handler.

    Args:
        verbose: Show DEBUG records (estimation details) instead of INFO and up
        console: Console to write to (default: a new stderr console)

    Returns:
        The package logger
    """
    logger = logging.getLogger('smoothed_ngrams')

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False
    )
    level = logging.DEBUG if verbose else logging.INFO
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
