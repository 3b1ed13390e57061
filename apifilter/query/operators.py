"""
Operator registry.

Maps operator names used in query parameters (``age[gt]=18``) to the
symbol a query builder should use and to the kind of filter they produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class OperatorKind(str, Enum):
    """Structural kind of an operator."""

    COMPARISON = "comparison"   # column <symbol> scalar
    MEMBERSHIP = "membership"   # column IN (list)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OperatorInfo:
    """Information about a filter operator."""

    name: str
    symbol: str
    kind: OperatorKind = OperatorKind.COMPARISON
    description: str = ""

    @property
    def is_membership(self) -> bool:
        return self.kind == OperatorKind.MEMBERSHIP

    def __repr__(self) -> str:
        return f"OperatorInfo(name='{self.name}', symbol='{self.symbol}')"


MEMBERSHIP_OPERATOR = "in"

BUILTIN_OPERATORS = (
    OperatorInfo("eq", "=", description="Equal to"),
    OperatorInfo("gt", ">", description="Greater than"),
    OperatorInfo("lt", "<", description="Less than"),
    OperatorInfo("gte", ">=", description="Greater than or equal to"),
    OperatorInfo("lte", "<=", description="Less than or equal to"),
    OperatorInfo(MEMBERSHIP_OPERATOR, "IN", OperatorKind.MEMBERSHIP, "One of the listed values"),
)


class OperatorRegistry:
    """
    Registry for filter operators.

    Every registry starts with the builtin operators (eq, gt, lt, gte,
    lte, in). Parsers receive a registry at construction time, so each
    one can carry its own set of operators.

    Example:
        >>> registry = OperatorRegistry()
        >>> registry.resolve("gte").symbol
        '>='
        >>> registry.register_operator("ne", "!=")
        >>> "ne" in registry
        True
    """

    def __init__(self, include_builtins: bool = True):
        self._operators: Dict[str, OperatorInfo] = {}
        if include_builtins:
            for info in BUILTIN_OPERATORS:
                self.register(info)

    def register(self, info: OperatorInfo) -> None:
        """
        Register an operator.

        Only "in" is a membership operator; every other operator compares
        a column to a single value.

        Raises:
            ValueError: If the name is empty or already registered, or if
                the kind does not match the name
        """
        if not info.name:
            raise ValueError("Operator name cannot be empty")
        if info.name in self._operators:
            raise ValueError(f"Operator '{info.name}' is already registered")
        if (info.name == MEMBERSHIP_OPERATOR) != info.is_membership:
            raise ValueError(
                f"Operator '{info.name}' cannot be a {info.kind.value} operator"
            )
        self._operators[info.name] = info

    def register_operator(
        self,
        name: str,
        symbol: str,
        description: str = "",
    ) -> None:
        """Register a comparison operator by name and symbol."""
        self.register(
            OperatorInfo(
                name=name,
                symbol=symbol,
                description=description or f"Custom operator: {name}",
            )
        )

    def resolve(self, name: str) -> Optional[OperatorInfo]:
        """
        Look up an operator.

        Args:
            name: Operator name as written in the query parameters

        Returns:
            OperatorInfo, or None if the operator is not registered
        """
        return self._operators.get(name)

    def get(self, name: str) -> OperatorInfo:
        """
        Get operator info by name.

        Raises:
            KeyError: If operator not found
        """
        info = self.resolve(name)
        if info is None:
            available = self.list_operators()
            raise KeyError(f"Unknown operator: '{name}'. Available: {available}")
        return info

    def list_operators(self) -> List[str]:
        """List all registered operator names."""
        return list(self._operators.keys())

    def copy(self) -> OperatorRegistry:
        registry = OperatorRegistry(include_builtins=False)
        registry._operators = self._operators.copy()
        return registry

    def __contains__(self, name: object) -> bool:
        return name in self._operators

    def __getitem__(self, name: str) -> OperatorInfo:
        return self.get(name)

    def __len__(self) -> int:
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry(operators={self.list_operators()})"
