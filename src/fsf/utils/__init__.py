"""Utility modules for fsf.

Provides:
- logger: get_logger and configure_logging
"""

from fsf.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
