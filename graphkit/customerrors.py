"""Example schema whose resolver reports errors carrying extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from graphkit.scalars import ID

__all__ = ["SCHEMA", "DroidNotFoundError", "DroidResolver", "Resolver"]

SCHEMA = """
	schema {
		query: Query
	}
	type Query {
		droid(id: ID!): Droid!
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
	}
"""


@dataclass(frozen=True)
class _Droid:
    id: ID
    name: str


_DROIDS = {
    droid.id: droid
    for droid in (
        _Droid(ID("2000"), "C-3PO"),
        _Droid(ID("2001"), "R2-D2"),
    )
}


class DroidNotFoundError(Exception):
    """Raised when no droid has the requested ID."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"error [{self.code}]: {self.message}"

    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class DroidResolver:
    """Resolves the fields of a droid."""

    def __init__(self, droid: _Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name


class Resolver:
    """Root resolver of the custom-errors example."""

    def droid(self, id: str) -> DroidResolver:
        found = _DROIDS.get(ID(id))
        if found is None:
            raise DroidNotFoundError(
                "NotFound", "This is not the droid you are looking for"
            )
        return DroidResolver(found)