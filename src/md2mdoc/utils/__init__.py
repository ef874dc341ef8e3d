"""Utility modules for md2mdoc.

Provides:
- logger: get_logger, configure_logging
"""

from md2mdoc.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
