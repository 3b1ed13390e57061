"""
Utility functions for apifilter.
"""

from .logging import setup_logger, get_logger, resolve_level

__all__ = [
    "setup_logger",
    "get_logger",
    "resolve_level",
]
