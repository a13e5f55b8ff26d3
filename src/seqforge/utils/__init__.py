"""Utility functions for seqforge.

Example:
    >>> from seqforge.utils import setup_logging
    >>> setup_logging(verbosity=0)
"""

from seqforge.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
