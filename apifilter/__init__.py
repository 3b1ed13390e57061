"""
apifilter - Parse HTTP query parameters into filters.

Example:
    >>> from apifilter import ApiFilter
    >>>
    >>> api_filter = ApiFilter()
    >>> filters = api_filter.parse_parameters({
    ...     "(zone,bucket)": "(lmc,all)",
    ...     "id": {"in": [1, 2, 3]},
    ... })
    >>> filters.get_prepared_values()
    {'zone_eq': 'lmc', 'bucket_eq': 'all', 'id_in_0': 1, 'id_in_1': 2, 'id_in_2': 3}
"""

from .core import (
    # Values
    Value,
    # Exceptions
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
    ErrorKind,
)

from .query import (
    # Filters
    Filter,
    FilterKind,
    ComparisonFilter,
    MembershipFilter,
    Filters,
    # Operators
    OperatorRegistry,
    OperatorInfo,
    OperatorKind,
    # Parser
    QueryParametersParser,
    parse_parameters,
)

from .api import ApiFilter

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "ApiFilter",
    # Values
    "Value",
    # Filters
    "Filter",
    "FilterKind",
    "ComparisonFilter",
    "MembershipFilter",
    "Filters",
    # Operators
    "OperatorRegistry",
    "OperatorInfo",
    "OperatorKind",
    # Parser
    "QueryParametersParser",
    "parse_parameters",
    # Exceptions
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
    "ErrorKind",
]
