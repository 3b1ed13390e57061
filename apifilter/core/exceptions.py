"""
Custom exceptions for apifilter.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of invalid query parameters."""

    UNKNOWN_FILTER = "unknown_filter"
    INVALID_COMBINATION = "invalid_combination"
    TUPLE_SIZE_MISMATCH = "tuple_size_mismatch"
    TUPLE_IN_MEMBERSHIP = "tuple_in_membership"
    TUPLE_TOO_SHORT = "tuple_too_short"
    MEMBERSHIP_REQUIRES_LIST = "membership_requires_list"
    INVALID_VALUE = "invalid_value"


def format_value(value: Any) -> str:
    """Render a raw parameter value the way it appears in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)


class ApiFilterError(Exception):
    """Base exception for apifilter."""
    pass


class InvalidArgumentError(ApiFilterError, ValueError):
    """Query parameters could not be turned into filters."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownFilterError(InvalidArgumentError):
    """Operator name is not known to the operator registry."""

    kind = ErrorKind.UNKNOWN_FILTER

    def __init__(self, name: str, column: str, value: Any):
        self.name = name
        self.column = column
        self.value = value
        super().__init__(
            f'Filter "{name}" is not implemented. '
            f'For column "{column}" with value "{format_value(value)}".'
        )


class InvalidCombinationError(InvalidArgumentError):
    """Tuple of columns paired with a plain scalar value."""

    kind = ErrorKind.INVALID_COMBINATION

    def __init__(self, column: str, value: Any):
        self.column = column
        self.value = value
        super().__init__(
            "Invalid combination of a tuple and a scalar. "
            f"Column {column} and value {format_value(value)}."
        )


class MembershipValueError(InvalidArgumentError):
    """IN filter given something other than a list."""

    kind = ErrorKind.MEMBERSHIP_REQUIRES_LIST

    def __init__(self, column: str, value: Any):
        self.column = column
        self.value = value
        super().__init__(
            "IN filter requires a list of values. "
            f'For column "{column}" with value "{format_value(value)}".'
        )


class InvalidValueError(InvalidArgumentError):
    """Value of a shape the filter cannot take, e.g. a nested mapping."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, column: str, value: Any, expected: str = "a scalar"):
        self.column = column
        self.value = value
        super().__init__(
            f'Unsupported value for column "{column}". '
            f"Expected {expected}, got {type(value).__name__}."
        )


class TupleError(InvalidArgumentError):
    """Error related to tuple columns or values."""
    pass


class TupleSizeMismatchError(TupleError):
    """Tuple columns and tuple values differ in count."""

    kind = ErrorKind.TUPLE_SIZE_MISMATCH

    def __init__(self, columns_count: int, values_count: int):
        self.columns_count = columns_count
        self.values_count = values_count
        super().__init__(
            f"Number of given columns ({columns_count}) and values "
            f"({values_count}) in tuple are not same."
        )


class TupleNotAllowedInMembershipError(TupleError):
    """Tuple of columns used with the IN filter."""

    kind = ErrorKind.TUPLE_IN_MEMBERSHIP

    def __init__(self):
        super().__init__("Tuples are not allowed in IN filter.")


class TupleTooShortError(TupleError):
    """Tuple value decomposes to fewer than two values."""

    kind = ErrorKind.TUPLE_TOO_SHORT

    def __init__(self):
        super().__init__("Tuple must have at least two values.")


class SerializationError(ApiFilterError):
    """Error during serialization/deserialization of filters."""
    pass


class ConfigError(ApiFilterError):
    """Configuration file could not be loaded."""
    pass
