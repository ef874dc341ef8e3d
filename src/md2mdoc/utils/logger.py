"""Minimal logging utilities for md2mdoc.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from md2mdoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Converting document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "md2mdoc." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'md2mdoc.mymodule'
    """
    if not (name == "md2mdoc" or name.startswith("md2mdoc.")):
        name = f"md2mdoc.{name}"
    return logging.getLogger(name)


def configure_logging(verbosity: int = 0) -> None:
    """Configure root logging for command-line use.

    Args:
        verbosity: 0 = WARNING, 1 = INFO, 2+ = DEBUG
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(levelname)s: %(message)s",
    )
