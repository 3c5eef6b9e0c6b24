"""Custom scalar types and the protocol for unmarshalling them."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

__all__ = ["Unmarshaler", "ID", "Map"]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@runtime_checkable
class Unmarshaler(Protocol):
    """A Python type mapped to a custom GraphQL scalar type."""

    @classmethod
    def implements_graphql_type(cls, name: str) -> bool:
        """Return True if this type implements the named scalar."""
        ...

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> Any:
        """Convert an input value into an instance; raise on bad input."""
        ...


class ID(str):
    """GraphQL's ``ID`` scalar."""

    @classmethod
    def implements_graphql_type(cls, name: str) -> bool:
        return name == "ID"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> ID:
        if isinstance(value, str):
            return cls(value)
        if (
            isinstance(value, int)
            and not isinstance(value, bool)
            and _INT32_MIN <= value <= _INT32_MAX
        ):
            return cls(str(value))
        raise TypeError(f"wrong type for ID: {type(value).__name__}")

    def to_json(self) -> str:
        """Return the ID as a quoted JSON string."""
        return json.dumps(str(self), ensure_ascii=False)


class Map(dict):
    """A free-form ``Map`` scalar holding a JSON object."""

    @classmethod
    def implements_graphql_type(cls, name: str) -> bool:
        return name == "Map"

    @classmethod
    def unmarshal_graphql(cls, value: Any) -> Map:
        if not isinstance(value, dict):
            raise TypeError("wrong type")
        return cls(value)