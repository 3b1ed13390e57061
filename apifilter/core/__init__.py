"""
Core components for apifilter.
"""

from .value import Value, Scalar
from .exceptions import (
    ErrorKind,
    ApiFilterError,
    InvalidArgumentError,
    UnknownFilterError,
    InvalidCombinationError,
    MembershipValueError,
    InvalidValueError,
    TupleError,
    TupleSizeMismatchError,
    TupleNotAllowedInMembershipError,
    TupleTooShortError,
    SerializationError,
    ConfigError,
    format_value,
)

__all__ = [
    # Value
    "Value",
    "Scalar",
    # Exceptions
    "ErrorKind",
    "ApiFilterError",
    "InvalidArgumentError",
    "UnknownFilterError",
    "InvalidCombinationError",
    "MembershipValueError",
    "InvalidValueError",
    "TupleError",
    "TupleSizeMismatchError",
    "TupleNotAllowedInMembershipError",
    "TupleTooShortError",
    "SerializationError",
    "ConfigError",
    "format_value",
]
