"""
Serialization of parsed filters.

Filters are packed with msgpack as a list of filter dictionaries, so they
can be cached or handed to another process that builds the query.
"""

from __future__ import annotations

from typing import Iterable

import msgpack

from ..core.exceptions import SerializationError
from ..query.filters import Filter, Filters


def serialize_filters(filters: Iterable[Filter]) -> bytes:
    """Serialize filters to msgpack bytes."""
    return msgpack.packb(
        [f.to_dict() for f in filters],
        use_bin_type=True,
    )


def deserialize_filters(data: bytes) -> Filters:
    """
    Deserialize filters from msgpack bytes.

    Raises:
        SerializationError: If the data is not a packed list of filters
    """
    if not data:
        return Filters()

    try:
        items = msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError) as e:
        raise SerializationError(f"Invalid filters payload: {e}") from e

    if not isinstance(items, list):
        raise SerializationError(
            f"Filters payload must be a list, got {type(items).__name__}"
        )

    try:
        return Filters.from_list_of_dicts(items)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Invalid filter in payload: {e}") from e
