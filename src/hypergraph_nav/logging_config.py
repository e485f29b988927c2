"""Logging configuration for hypergraph-nav."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    Rejected intents and transitions are logged at DEBUG, so ``verbose``
    shows every step of a navigation session. ``quiet`` keeps only warnings
    and errors.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{level.icon} {name}: {message}")
    else:
        level = "WARNING" if quiet else "INFO"
        logger.add(sys.stderr, level=level, format="{level.icon} {message}")
