"""Minimal logging utilities for sqlbatch.

Provides a simple get_logger function that wraps the standard library logging.
The package never installs handlers; applications decide where records go.

Example:
    >>> from sqlbatch.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Included %s", "setup.sql")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sqlbatch." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'sqlbatch.mymodule'
    """
    if not (name == "sqlbatch" or name.startswith("sqlbatch.")):
        name = f"sqlbatch.{name}"
    return logging.getLogger(name)
