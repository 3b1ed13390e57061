"""
Filter descriptors produced by the query parameter parser.

Two shapes exist:
- ComparisonFilter: ``column <symbol> value`` (eq, gt, lt, gte, lte, ...)
- MembershipFilter: ``column IN (values)``

Consumers branch on ``filter.kind`` (or ``isinstance``) to build the
predicate for their data source.

Example:
    >>> filters = Filters.from_list([
    ...     ComparisonFilter("age", Value(18), ">", "gt"),
    ...     MembershipFilter("id", Value([1, 2])),
    ... ])
    >>> filters.get_prepared_values()
    {'age_gt': 18, 'id_in_0': 1, 'id_in_1': 2}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Tuple, Union

from ..core.value import Value


class FilterKind(str, Enum):
    """Tag of a filter descriptor."""

    COMPARISON = "comparison"
    MEMBERSHIP = "membership"


@dataclass(frozen=True)
class ComparisonFilter:
    """Filter comparing a column to a single value."""

    column: str
    value: Value
    symbol: str
    operator: str

    kind: ClassVar[FilterKind] = FilterKind.COMPARISON

    def __post_init__(self):
        if self.value.is_list:
            raise ValueError(
                f"Comparison filter on '{self.column}' requires a scalar value"
            )

    @property
    def title(self) -> str:
        return f"{self.column}_{self.operator}"

    def prepared_values(self) -> Dict[str, Any]:
        """Placeholder name to raw value, for binding in a query builder."""
        return {self.title: self.value.get()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "column": self.column,
            "value": self.value.get(),
            "symbol": self.symbol,
            "operator": self.operator,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ComparisonFilter:
        return cls(
            column=data["column"],
            value=Value(data["value"]),
            symbol=data["symbol"],
            operator=data["operator"],
        )

    def __repr__(self) -> str:
        return f"ComparisonFilter({self.column} {self.symbol} {self.value.get()!r})"


@dataclass(frozen=True)
class MembershipFilter:
    """Filter matching a column against a list of values."""

    column: str
    value: Value

    kind: ClassVar[FilterKind] = FilterKind.MEMBERSHIP
    operator: ClassVar[str] = "in"

    def __post_init__(self):
        if not self.value.is_list:
            raise ValueError(
                f"Membership filter on '{self.column}' requires a list value"
            )

    @property
    def title(self) -> str:
        return f"{self.column}_{self.operator}"

    def prepared_values(self) -> Dict[str, Any]:
        """One placeholder per listed value: ``id_in_0``, ``id_in_1``, ..."""
        return {
            f"{self.title}_{i}": item
            for i, item in enumerate(self.value.get())
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "column": self.column,
            "value": self.value.get(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MembershipFilter:
        return cls(column=data["column"], value=Value(data["value"]))

    def __repr__(self) -> str:
        return f"MembershipFilter({self.column} IN {self.value.get()!r})"


Filter = Union[ComparisonFilter, MembershipFilter]


def filter_from_dict(data: Dict[str, Any]) -> Filter:
    """Create a filter from dictionary representation."""
    filter_type = data.get("type", FilterKind.COMPARISON.value)

    if filter_type == FilterKind.COMPARISON.value:
        return ComparisonFilter.from_dict(data)
    elif filter_type == FilterKind.MEMBERSHIP.value:
        return MembershipFilter.from_dict(data)
    else:
        raise ValueError(f"Unknown filter type: {filter_type}")


class Filters:
    """
    Ordered, immutable collection of filters.

    Order is the order in which filters were derived from the query
    parameters and is kept by every operation on the collection.
    """

    def __init__(self, filters: Iterable[Filter] = ()):
        self._filters: Tuple[Filter, ...] = tuple(filters)

    @classmethod
    def from_list(cls, filters: Iterable[Filter]) -> Filters:
        return cls(filters)

    @classmethod
    def from_list_of_dicts(cls, data: Iterable[Dict[str, Any]]) -> Filters:
        return cls(filter_from_dict(item) for item in data)

    def columns(self) -> List[str]:
        """Distinct filtered columns, in first-seen order."""
        return list(dict.fromkeys(f.column for f in self._filters))

    def filter_by_columns(self, columns: Iterable[str]) -> Filters:
        """Return a new collection with only the filters on given columns."""
        wanted = set(columns)
        return Filters(f for f in self._filters if f.column in wanted)

    def get_prepared_values(self) -> Dict[str, Any]:
        """Merge the prepared values of all filters."""
        prepared: Dict[str, Any] = {}
        for f in self._filters:
            prepared.update(f.prepared_values())
        return prepared

    def to_list(self) -> List[Dict[str, Any]]:
        return [f.to_dict() for f in self._filters]

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __getitem__(self, index: int) -> Filter:
        return self._filters[index]

    def __bool__(self) -> bool:
        return bool(self._filters)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Filters):
            return self._filters == other._filters
        if isinstance(other, list):
            return list(self._filters) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Filters({list(self._filters)})"
