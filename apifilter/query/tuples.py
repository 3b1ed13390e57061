"""
Tuple decomposition.

A tuple groups several columns in one parameter key and the matching
values in one parameter value:

    (zone, bucket)=(lmc, all)   ->   zone=lmc, bucket=all

The grammar is a single level of parentheses around comma-separated
tokens. Commas and parentheses cannot be escaped inside values. A string
with only an opening or only a closing parenthesis is never a tuple.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from ..core.exceptions import TupleSizeMismatchError, TupleTooShortError


def _unwrap(raw: str) -> Optional[str]:
    """Strip one layer of parentheses, or return None if they are unbalanced."""
    raw = raw.strip()
    opened = raw.startswith("(")
    closed = raw.endswith(")")
    if opened != closed:
        return None
    return raw[1:-1] if opened else raw


def _tokens(raw: str) -> List[str]:
    raw = _unwrap(raw)
    if raw is None:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def split_tuple(raw: str) -> List[str]:
    """
    Split a tuple value into its trimmed values.

    Args:
        raw: Tuple string, e.g. "(0, a)"

    Returns:
        List of values, e.g. ["0", "a"]

    Raises:
        TupleTooShortError: If fewer than two values are found
    """
    values = _tokens(raw)
    if len(values) < 2:
        raise TupleTooShortError()
    return values


def parse_tuple_key(key: str) -> Optional[List[str]]:
    """
    Get the columns of a tuple key.

    Returns:
        Column names, or None if the key is a plain column name
    """
    columns = _tokens(key)
    if len(columns) < 2:
        return None
    return columns


def is_tuple_value(value: Any) -> bool:
    """Check whether a parameter value is meant to be a tuple."""
    if not isinstance(value, str):
        return False
    stripped = value.strip()
    inner = _unwrap(stripped)
    if inner is None:
        return False
    return inner != stripped or "," in stripped


def zip_tuple(columns: Sequence[str], raw: str) -> List[Tuple[str, str]]:
    """
    Pair tuple columns with the values of a tuple string.

    Raises:
        TupleTooShortError: If the value has fewer than two items
        TupleSizeMismatchError: If columns and values differ in count
    """
    values = split_tuple(raw)
    if len(values) != len(columns):
        raise TupleSizeMismatchError(len(columns), len(values))
    return list(zip(columns, values))
