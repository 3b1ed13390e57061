"""
Query parameter processing for apifilter.

This module provides:
- Operator registry (name -> symbol)
- Tuple decomposition of grouped columns and values
- Filter descriptors and the ordered Filters collection
- The query parameter parser

Example:
    >>> from apifilter.query import QueryParametersParser
    >>>
    >>> parser = QueryParametersParser()
    >>> filters = parser.parse({"name": "Jon", "age": {"gt": 20}})
    >>> filters.get_prepared_values()
    {'name_eq': 'Jon', 'age_gt': 20}
"""

from .operators import (
    OperatorRegistry,
    OperatorInfo,
    OperatorKind,
    BUILTIN_OPERATORS,
)

from .tuples import (
    split_tuple,
    parse_tuple_key,
    is_tuple_value,
    zip_tuple,
)

from .filters import (
    Filter,
    FilterKind,
    ComparisonFilter,
    MembershipFilter,
    Filters,
    filter_from_dict,
)

from .parser import (
    QueryParametersParser,
    parse_parameters,
)

__all__ = [
    # Operators
    "OperatorRegistry",
    "OperatorInfo",
    "OperatorKind",
    "BUILTIN_OPERATORS",
    # Tuples
    "split_tuple",
    "parse_tuple_key",
    "is_tuple_value",
    "zip_tuple",
    # Filters
    "Filter",
    "FilterKind",
    "ComparisonFilter",
    "MembershipFilter",
    "Filters",
    "filter_from_dict",
    # Parser
    "QueryParametersParser",
    "parse_parameters",
]
