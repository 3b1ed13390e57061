"""
Typed wrapper for parsed parameter values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

Scalar = Union[str, int, float, bool, None]
Payload = Union[Scalar, Tuple[Scalar, ...]]

SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True, eq=False)
class Value:
    """
    An immutable parsed value: a single scalar or an ordered list of scalars.

    Lists are stored as tuples so that a Value can be hashed and compared
    structurally. Comparison also takes the type of every scalar into
    account, so ``True`` and ``1`` are different values.

    Example:
        >>> Value("foo").get()
        'foo'
        >>> Value([1, 2, 3]).get()
        [1, 2, 3]
        >>> Value([1, 2]) == Value((1, 2))
        True
        >>> Value(True) == Value(1)
        False
    """

    payload: Payload

    def __post_init__(self):
        payload = self.payload

        if isinstance(payload, (list, tuple)):
            for item in payload:
                if not isinstance(item, SCALAR_TYPES):
                    raise TypeError(
                        f"List values must be scalars, got {type(item).__name__}"
                    )
            object.__setattr__(self, "payload", tuple(payload))
        elif not isinstance(payload, SCALAR_TYPES):
            raise TypeError(
                f"Value must be a scalar or a list, got {type(payload).__name__}"
            )

    @property
    def is_list(self) -> bool:
        """True if the value wraps a list of scalars."""
        return isinstance(self.payload, tuple)

    def get(self) -> Union[Scalar, List[Scalar]]:
        """Return the raw payload (a new list for list values)."""
        if self.is_list:
            return list(self.payload)
        return self.payload

    def _key(self) -> Any:
        if self.is_list:
            return tuple((type(item), item) for item in self.payload)
        return (type(self.payload), self.payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.is_list == other.is_list and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.is_list, self._key()))

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.get()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Value:
        return cls(data["value"])

    def __repr__(self) -> str:
        return f"Value({self.get()!r})"
