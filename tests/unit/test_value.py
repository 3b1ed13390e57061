"""
Unit tests for Value.
"""

import dataclasses

import pytest

from apifilter.core.value import Value


class TestValue:
    """Tests for Value class."""

    @pytest.mark.parametrize("payload", ["foo", 20, 1.5, True, None])
    def test_scalar(self, payload):
        """Scalars are kept as they are."""
        value = Value(payload)

        assert value.get() == payload
        assert not value.is_list

    def test_list(self):
        """Lists are stored immutably and returned as new lists."""
        items = [1, 2, 3]
        value = Value(items)

        assert value.is_list
        assert value.payload == (1, 2, 3)
        assert value.get() == [1, 2, 3]
        assert value.get() is not items

    def test_source_list_changes_ignored(self):
        """Mutating the source list does not affect the value."""
        items = ["red", "green"]
        value = Value(items)
        items.append("blue")

        assert value.get() == ["red", "green"]

    def test_structural_equality(self):
        assert Value("foo") == Value("foo")
        assert Value([1, 2]) == Value([1, 2])
        assert Value([1, 2]) == Value((1, 2))
        assert Value("foo") != Value("bar")
        assert Value("1") != Value(1)

    @pytest.mark.parametrize(
        "left,right",
        [(True, 1), (False, 0), (1, 1.0), ([True, 2], [1, 2]), ([0], [0.0])],
    )
    def test_equality_is_typed(self, left, right):
        """Equal-comparing scalars of different types are different values."""
        assert Value(left) != Value(right)
        assert len({Value(left), Value(right)}) == 2

    def test_scalar_differs_from_list(self):
        assert Value(1) != Value([1])

    def test_hashable(self):
        assert len({Value("a"), Value("a"), Value([1, 2])}) == 2

    def test_immutable(self):
        value = Value("foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.payload = "bar"

    @pytest.mark.parametrize("payload", [{"a": 1}, {1, 2}, object()])
    def test_invalid_payload(self, payload):
        with pytest.raises(TypeError, match="scalar or a list"):
            Value(payload)

    def test_nested_list_rejected(self):
        with pytest.raises(TypeError, match="must be scalars"):
            Value([[1, 2], [3]])

    def test_to_dict_and_back(self):
        value = Value(["DD", "D"])

        assert Value.from_dict(value.to_dict()) == value

    def test_repr(self):
        assert repr(Value("foo")) == "Value('foo')"
        assert repr(Value([1])) == "Value([1])"
