"""
Pytest fixtures for apifilter tests.
"""

import pytest

from apifilter.core.value import Value
from apifilter.query.filters import ComparisonFilter, MembershipFilter
from apifilter.query.operators import OperatorRegistry
from apifilter.query.parser import QueryParametersParser


@pytest.fixture
def registry() -> OperatorRegistry:
    """Registry with the builtin operators."""
    return OperatorRegistry()


@pytest.fixture
def parser(registry: OperatorRegistry) -> QueryParametersParser:
    """Parser using the builtin operators."""
    return QueryParametersParser(registry)


@pytest.fixture
def eq():
    """Build an equality filter."""
    def make(column, value):
        return ComparisonFilter(column, Value(value), "=", "eq")
    return make


@pytest.fixture
def membership():
    """Build an IN filter."""
    def make(column, values):
        return MembershipFilter(column, Value(values))
    return make
