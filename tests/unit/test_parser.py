"""
Unit tests for QueryParametersParser.
"""

import pytest

from apifilter.core.exceptions import (
    ErrorKind,
    InvalidArgumentError,
    InvalidCombinationError,
    InvalidValueError,
    MembershipValueError,
    TupleNotAllowedInMembershipError,
    TupleSizeMismatchError,
    TupleTooShortError,
    UnknownFilterError,
)
from apifilter.core.value import Value
from apifilter.query.filters import ComparisonFilter, Filters, MembershipFilter
from apifilter.query.operators import OperatorRegistry
from apifilter.query.parser import QueryParametersParser, parse_parameters


def op(column, value, symbol, name):
    return ComparisonFilter(column, Value(value), symbol, name)


def eq(column, value):
    return op(column, value, "=", "eq")


def in_(column, values):
    return MembershipFilter(column, Value(values))


VALID_PARAMETERS = {
    "empty": ({}, []),
    "simple - implicit eq": (
        {"title": "foo"},
        [eq("title", "foo")],
    ),
    "two cols - implicit eq": (
        {"title": "foo", "value": "bar"},
        [eq("title", "foo"), eq("value", "bar")],
    ),
    "implicit eq + explicit filter": (
        {"name": "Jon", "age": {"gt": 20}},
        [eq("name", "Jon"), op("age", 20, ">", "gt")],
    ),
    "explicit eq": (
        {"title": {"eq": "foo"}},
        [eq("title", "foo")],
    ),
    "one col more filters - explicit": (
        {"title": {"eq": "foo", "gt": "abc"}},
        [eq("title", "foo"), op("title", "abc", ">", "gt")],
    ),
    "one col more filters + other col": (
        {"title": {"gt": "0", "lt": "10"}, "value": "foo"},
        [
            op("title", "0", ">", "gt"),
            op("title", "10", "<", "lt"),
            eq("value", "foo"),
        ],
    ),
    "one col - between - explicit": (
        {"title": {"gte": "0", "lte": "10"}},
        [op("title", "0", ">=", "gte"), op("title", "10", "<=", "lte")],
    ),
    "explicit in": (
        {"color": {"in": ["red", "green", "blue"]}},
        [in_("color", ["red", "green", "blue"])],
    ),
    "implicit eq + explicit in": (
        {"allowed": True, "id": {"in": [1, 2, 3]}},
        [eq("allowed", True), in_("id", [1, 2, 3])],
    ),
    "tuple - implicit eq + explicit in": (
        {"(zone,bucket)": "(lmc,all)", "id": {"in": [1, 2, 3]}},
        [eq("zone", "lmc"), eq("bucket", "all"), in_("id", [1, 2, 3])],
    ),
    "tuple - between - explicit in values": (
        {"(number,alpha)": {"gte": "(0, a)", "lt": "(10, z)"}},
        [
            op("number", "0", ">=", "gte"),
            op("alpha", "a", ">=", "gte"),
            op("number", "10", "<", "lt"),
            op("alpha", "z", "<", "lt"),
        ],
    ),
    "ints - between - explicit": (
        {"age": {"gt": 18, "lt": 30}},
        [op("age", 18, ">", "gt"), op("age", 30, "<", "lt")],
    ),
    "explicit between + explicit in": (
        {"age": {"gt": 18, "lt": 30}, "size": {"in": ["DD", "D"]}},
        [
            op("age", 18, ">", "gt"),
            op("age", 30, "<", "lt"),
            in_("size", ["DD", "D"]),
        ],
    ),
    "tuple with spaces": (
        {"( first , last )": " ( Jon , Snow ) "},
        [eq("first", "Jon"), eq("last", "Snow")],
    ),
    "repeated parameter - implicit in": (
        {"id": [4, 5]},
        [in_("id", [4, 5])],
    ),
}


INVALID_PARAMETERS = {
    "empty filter": (
        {"column": {"": "value"}},
        UnknownFilterError,
        'Filter "" is not implemented. For column "column" with value "value".',
    ),
    "unknown filter": (
        {"column": {"unknown": "value"}},
        UnknownFilterError,
        'Filter "unknown" is not implemented. For column "column" with value "value".',
    ),
    "tuple columns and a single value": (
        {"(col1, col2)": "value"},
        InvalidCombinationError,
        "Invalid combination of a tuple and a scalar. Column (col1, col2) and value value.",
    ),
    "more columns than values": (
        {"(col1, col2, col3)": "(val1, val2)"},
        TupleSizeMismatchError,
        "Number of given columns (3) and values (2) in tuple are not same.",
    ),
    "more values than columns": (
        {"(col1, col2)": "(val1, val2, val3)"},
        TupleSizeMismatchError,
        "Number of given columns (2) and values (3) in tuple are not same.",
    ),
    "invalid tuple - explicit filters": (
        {"(id,name)": {"eq": "(42,foo,bar)"}},
        TupleSizeMismatchError,
        "Number of given columns (2) and values (3) in tuple are not same.",
    ),
    "tuples in IN filter": (
        {"(id, name)": {"in": ["(1,one)", "(2,two)"]}},
        TupleNotAllowedInMembershipError,
        "Tuples are not allowed in IN filter.",
    ),
    "invalid tuple": (
        {"(id, name)": "(foo)"},
        TupleTooShortError,
        "Tuple must have at least two values.",
    ),
    "invalid tuple - more columns expected": (
        {"(a, b, c)": "(foo)"},
        TupleTooShortError,
        "Tuple must have at least two values.",
    ),
    "scalar in IN filter": (
        {"id": {"in": "1,2"}},
        MembershipValueError,
        'IN filter requires a list of values. For column "id" with value "1,2".',
    ),
    "nested operator mapping": (
        {"age": {"gt": {"lt": 3}}},
        InvalidValueError,
        'Unsupported value for column "age". Expected a scalar, got dict.',
    ),
}


class TestParseValid:
    """Tests for parameters that produce filters."""

    @pytest.mark.parametrize(
        "parameters,expected",
        list(VALID_PARAMETERS.values()),
        ids=list(VALID_PARAMETERS.keys()),
    )
    def test_parse(self, parser, parameters, expected):
        """Parsed filters match expected filters, in order."""
        result = parser.parse(parameters)

        assert isinstance(result, Filters)
        assert result == Filters.from_list(expected)

    def test_empty_input(self, parser):
        """Empty parameters give an empty collection."""
        result = parser.parse({})

        assert len(result) == 0
        assert not result

    def test_operator_order_preserved(self, parser):
        """Operators are emitted in mapping order, never sorted."""
        result = parser.parse({"c": {"lt": 1, "gt": 2}})

        assert [f.operator for f in result] == ["lt", "gt"]

    def test_tuple_interleaving(self, parser):
        """Tuples expand operator-outer, column-inner."""
        result = parser.parse({"(n,a)": {"gte": "(0,x)", "lt": "(10,y)"}})

        assert [(f.column, f.operator, f.value.get()) for f in result] == [
            ("n", "gte", "0"),
            ("a", "gte", "x"),
            ("n", "lt", "10"),
            ("a", "lt", "y"),
        ]

    def test_in_not_expanded(self, parser):
        """IN produces a single filter holding the whole list."""
        result = parser.parse({"id": {"in": [1, 2, 3]}})

        assert len(result) == 1
        assert result[0].value == Value([1, 2, 3])

    def test_single_parenthesized_key_is_plain_column(self, parser):
        """A one-column parenthesized key is not a tuple."""
        result = parser.parse({"(id)": "5"})

        assert result == [eq("(id)", "5")]

    def test_tuple_value_for_plain_column_is_kept(self, parser):
        """Tuple-looking values are not split for plain columns."""
        result = parser.parse({"name": "(a, b)"})

        assert result == [eq("name", "(a, b)")]

    @pytest.mark.parametrize("key,value", [("(a, b", "(1, 2"), ("a, b)", "1, 2)")])
    def test_unbalanced_parentheses_are_plain(self, parser, key, value):
        """Keys with one parenthesis are plain column names."""
        result = parser.parse({key: value})

        assert result == [eq(key, value)]

    def test_bool_and_int_values_differ(self, parser):
        """True and 1 give different filters."""
        assert parser.parse({"allowed": True}) != parser.parse({"allowed": 1})
        assert parser.parse({"id": {"in": [True]}}) != parser.parse({"id": {"in": [1]}})

    def test_parse_is_pure(self, parser):
        """Same input gives structurally equal output."""
        parameters = {"(zone,bucket)": "(lmc,all)", "id": {"in": [1, 2, 3]}}

        first = parser.parse(parameters)
        second = parser.parse(parameters)

        assert first == second
        assert first is not second

    def test_parameters_not_modified(self, parser):
        """Input mapping is left untouched."""
        parameters = {"age": {"gt": 18}, "id": {"in": [1, 2]}}
        snapshot = {"age": {"gt": 18}, "id": {"in": [1, 2]}}

        parser.parse(parameters)

        assert parameters == snapshot

    def test_custom_operator(self):
        """Operators registered on the registry are resolved."""
        registry = OperatorRegistry()
        registry.register_operator("ne", "!=")
        parser = QueryParametersParser(registry)

        result = parser.parse({"status": {"ne": "archived"}})

        assert result == [op("status", "archived", "!=", "ne")]

    def test_registries_isolated(self, parser):
        """Operators registered elsewhere do not leak into other parsers."""
        other = OperatorRegistry()
        other.register_operator("ne", "!=")

        with pytest.raises(UnknownFilterError):
            parser.parse({"status": {"ne": "archived"}})

    def test_parse_parameters_shortcut(self):
        """Module-level shortcut uses builtin operators."""
        result = parse_parameters({"title": "foo"})

        assert result == [eq("title", "foo")]


class TestParseInvalid:
    """Tests for parameters that are rejected."""

    @pytest.mark.parametrize(
        "parameters,error,message",
        list(INVALID_PARAMETERS.values()),
        ids=list(INVALID_PARAMETERS.keys()),
    )
    def test_invalid(self, parser, parameters, error, message):
        """Invalid parameters raise with the exact message."""
        with pytest.raises(error) as exc_info:
            parser.parse(parameters)

        assert isinstance(exc_info.value, InvalidArgumentError)
        assert str(exc_info.value) == message

    def test_error_aborts_whole_call(self, parser):
        """No partial result when a later parameter fails."""
        with pytest.raises(UnknownFilterError) as exc_info:
            parser.parse({"title": "foo", "age": {"between": "1"}})

        assert exc_info.value.kind == ErrorKind.UNKNOWN_FILTER
        assert exc_info.value.column == "age"

    def test_error_is_value_error(self, parser):
        """Callers catching ValueError also see parse errors."""
        with pytest.raises(ValueError):
            parser.parse({"(a, b)": "(1, 2, 3)"})

    def test_size_mismatch_counts(self, parser):
        """Size mismatch exposes both counts."""
        with pytest.raises(TupleSizeMismatchError) as exc_info:
            parser.parse({"(a, b, c)": "(1, 2)"})

        assert exc_info.value.columns_count == 3
        assert exc_info.value.values_count == 2

    def test_unknown_filter_formats_list(self, parser):
        """List operands are rendered in the message."""
        with pytest.raises(UnknownFilterError, match=r'with value "\[1, 2\]"'):
            parser.parse({"id": {"nin": [1, 2]}})

    def test_unbalanced_tuple_value(self, parser):
        """A tuple key needs a balanced tuple value."""
        with pytest.raises(InvalidCombinationError):
            parser.parse({"(a, b)": "(1, 2"})

    def test_in_always_membership(self):
        """The in operator cannot be replaced by a comparison."""
        registry = OperatorRegistry()
        with pytest.raises(ValueError):
            registry.register_operator("in", "=")
        parser = QueryParametersParser(registry)

        with pytest.raises(MembershipValueError):
            parser.parse({"id": {"in": "x"}})

    def test_tuple_key_with_repeated_parameter(self, parser):
        """Repeated tuple parameters count as an IN filter on a tuple."""
        with pytest.raises(TupleNotAllowedInMembershipError):
            parser.parse({"(a, b)": ["(1, 2)", "(3, 4)"]})
