"""Logging helpers for admonish.

Wraps the standard library ``logging`` module so every logger in the package
lives under the ``admonish`` namespace. The library never installs handlers;
hosts decide where records go.

Example:
    >>> from admonish.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering admonition %s", "admonition-note")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``admonish``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'admonish.scanner'
    """
    if not (name == "admonish" or name.startswith("admonish.")):
        name = f"admonish.{name}"
    return logging.getLogger(name)
