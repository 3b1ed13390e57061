"""
Query parameter parsing for apifilter.

Turns decoded query parameters into an ordered collection of filters.

Supports:
- Implicit equality:        {"title": "foo"}
- Explicit operators:       {"age": {"gt": 18, "lt": 30}}
- Membership:               {"id": {"in": [1, 2, 3]}}
- Tuples of columns/values: {"(zone, bucket)": "(lmc, all)"}

Bracket notation (``age[gt]=18``) is expected to be decoded into nested
mappings before parsing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from ..core.exceptions import (
    InvalidCombinationError,
    InvalidValueError,
    MembershipValueError,
    TupleNotAllowedInMembershipError,
    UnknownFilterError,
)
from ..core.value import SCALAR_TYPES, Value
from ..utils.logging import get_logger
from .filters import ComparisonFilter, Filter, Filters, MembershipFilter
from .operators import MEMBERSHIP_OPERATOR, OperatorInfo, OperatorRegistry
from .tuples import is_tuple_value, parse_tuple_key, zip_tuple

logger = get_logger(__name__)

IMPLICIT_OPERATOR = "eq"


class QueryParametersParser:
    """
    Parser for query parameters.

    The operator registry is the only state a parser holds and it is only
    read while parsing, so one parser can be shared between threads.

    Example:
        >>> parser = QueryParametersParser()
        >>> filters = parser.parse({
        ...     "(zone,bucket)": "(lmc,all)",
        ...     "id": {"in": [1, 2, 3]},
        ... })
        >>> [f.column for f in filters]
        ['zone', 'bucket', 'id']
    """

    def __init__(self, registry: Optional[OperatorRegistry] = None):
        self.registry = registry if registry is not None else OperatorRegistry()

    def parse(self, parameters: Mapping) -> Filters:
        """
        Parse query parameters into filters.

        Args:
            parameters: Insertion-ordered mapping of column (or tuple of
                columns) to a scalar value or to a mapping of operator name
                to operand

        Returns:
            Filters in parameter order, then operator order, then tuple
            column order

        Raises:
            InvalidArgumentError: If any parameter is invalid. Nothing is
                returned for the parameters parsed before it.
        """
        filters = Filters(
            f
            for key, value in parameters.items()
            for f in self._parse_parameter(key, value)
        )

        logger.debug(
            "Parsed %d filters from %d query parameters",
            len(filters),
            len(parameters),
        )
        return filters

    def _parse_parameter(self, key: str, value: Any) -> List[Filter]:
        columns = parse_tuple_key(key)

        if isinstance(value, Mapping):
            filters: List[Filter] = []
            for name, operand in value.items():
                filters.extend(self._parse_operator(key, columns, name, operand))
            return filters

        if isinstance(value, (list, tuple)):
            # Repeated parameters (?id=1&id=2) decode to a list
            return self._parse_operator(key, columns, MEMBERSHIP_OPERATOR, value)

        return self._parse_operator(key, columns, IMPLICIT_OPERATOR, value)

    def _parse_operator(
        self,
        key: str,
        columns: Optional[List[str]],
        name: Any,
        operand: Any,
    ) -> List[Filter]:
        info = self.registry.resolve(name) if isinstance(name, str) else None
        if info is None:
            raise UnknownFilterError(str(name), key, operand)

        if name == MEMBERSHIP_OPERATOR:
            return [self._membership(key, columns, operand)]

        if columns is None:
            return [self._comparison(key, operand, info)]

        if not is_tuple_value(operand):
            raise InvalidCombinationError(key, operand)

        return [
            self._comparison(column, item, info)
            for column, item in zip_tuple(columns, operand)
        ]

    def _comparison(self, column: str, operand: Any, info: OperatorInfo) -> ComparisonFilter:
        if not isinstance(operand, SCALAR_TYPES):
            raise InvalidValueError(column, operand)
        return ComparisonFilter(column, Value(operand), info.symbol, info.name)

    def _membership(
        self,
        key: str,
        columns: Optional[List[str]],
        operand: Any,
    ) -> MembershipFilter:
        if columns is not None:
            raise TupleNotAllowedInMembershipError()
        if not isinstance(operand, (list, tuple)):
            if isinstance(operand, SCALAR_TYPES):
                raise MembershipValueError(key, operand)
            raise InvalidValueError(key, operand, "a list of scalars")
        if not all(isinstance(item, SCALAR_TYPES) for item in operand):
            raise InvalidValueError(key, operand, "a list of scalars")
        return MembershipFilter(key, Value(list(operand)))


def parse_parameters(
    parameters: Mapping,
    registry: Optional[OperatorRegistry] = None,
) -> Filters:
    """
    Parse query parameters with a one-off parser.

    Args:
        parameters: Decoded query parameters
        registry: Operator registry (builtin operators if omitted)

    Returns:
        Filters
    """
    return QueryParametersParser(registry).parse(parameters)
