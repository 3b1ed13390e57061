"""
Storage helpers for apifilter.
"""

from .serialization import serialize_filters, deserialize_filters

__all__ = [
    "serialize_filters",
    "deserialize_filters",
]
