"""Logging helper for pullxml.

Every module logs through a logger namespaced under ``pullxml.`` so a
caller can tune the whole package with one ``logging.getLogger("pullxml")``.
The reader emits DEBUG records per classified event and on truncated
input, and a WARNING when an accessor is called under the wrong event.
No handlers are installed.

Example:
    >>> from pullxml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("ELEMENT_BEGIN at offset %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance under the "pullxml" hierarchy

    Example:
        >>> get_logger("reader").name
        'pullxml.reader'
    """
    # Ensure pullxml prefix so records propagate to the package logger
    if not (name == "pullxml" or name.startswith("pullxml.")):
        name = f"pullxml.{name}"
    return logging.getLogger(name)
