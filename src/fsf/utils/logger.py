"""Logging helpers for fsf.

Wraps the standard library logging so every logger lives under the
"fsf." namespace.

Example:
    >>> from fsf.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Serving static assets")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger named "fsf.<name>" unless already namespaced

    Example:
        >>> get_logger("pages").name
        'fsf.pages'
    """
    if not (name == "fsf" or name.startswith("fsf.")):
        name = f"fsf.{name}"
    return logging.getLogger(name)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for command line use.

    Args:
        debug: Log at DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
