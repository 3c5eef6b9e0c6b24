"""Example schema whose resolvers attach cache hints."""

from __future__ import annotations

from datetime import timedelta

from graphkit.cache import Hint, Scope, add_hint

__all__ = ["SCHEMA", "UserProfile", "Resolver"]

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		hello(name: String!): String!
		me: UserProfile!
	}

	type UserProfile {
		name: String!
	}
"""


class UserProfile:
    """The profile of the current user."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def name(self) -> str:
        return self._name


class Resolver:
    """Root resolver of the caching example."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
        return UserProfile("World")