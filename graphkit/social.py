"""Example schema and resolvers for a small social network."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from graphkit.scalars import ID

__all__ = [
    "SCHEMA",
    "Page",
    "Contact",
    "User",
    "AdminResolver",
    "SearchResult",
    "Resolver",
]

SCHEMA = """
	schema {
		query: Query
	}
	
	type Query {
		admin(id: ID!, role: Role = ADMIN): Admin!
		user(id: ID!): User!
		search(text: String!): [SearchResult]!
	}
	
	interface Admin {
		id: ID!
		name: String!
		role: Role!
	}

	interface Person {
		name: String!
	}

	scalar Time	

	type User implements Admin & Person {
		id: ID!
		name: String!
		email: String!
		role: Role!
		phone: String!
		address: [String!]
		friends(page: Pagination): [User]
		createdAt: Time!
	}

	input Pagination {
	  	first: Int
	  	last: Int
	}
	
	enum Role {
		ADMIN
		USER
	}

	union SearchResult = User
"""


@dataclass(frozen=True)
class Page:
    """Pagination arguments for a user's friends."""

    first: float | None = None
    last: float | None = None


@dataclass(frozen=True)
class Contact:
    """How to reach a user."""

    email: str
    phone: str


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class User:
    """A member of the network."""

    id_field: str
    name_field: str
    role_field: str
    contact: Contact
    address: list[str] | None = None
    friends_field: list[User] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)

    def id(self) -> ID:
        return ID(self.id_field)

    def name(self) -> str:
        return self.name_field

    def role(self) -> str:
        return self.role_field

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone(self) -> str:
        return self.contact.phone

    def friends(self, page: Page | None = None) -> list[User]:
        """Return a slice of the friends, selected by ``page``."""
        count = len(self.friends_field)
        start, stop = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                stop = int(page.last)
                if stop == 0 or stop > count:
                    stop = count
        if start < 0 or stop < start:
            raise ValueError(f"slice bounds out of range [{start}:{stop}]")
        return self.friends_field[start:stop]


class AdminResolver:
    """Resolves the Admin interface."""

    def __init__(self, admin: User) -> None:
        self._admin = admin

    def id(self) -> ID:
        return self._admin.id()

    def name(self) -> str:
        return self._admin.name()

    def role(self) -> str:
        return self._admin.role()

    def to_user(self) -> User | None:
        admin = self._admin
        return admin if isinstance(admin, User) else None


class SearchResult:
    """Resolves the SearchResult union."""

    def __init__(self, result: object) -> None:
        self._result = result

    def to_user(self) -> User | None:
        result = self._result
        return result if isinstance(result, User) else None


def _build_users() -> list[User]:
    albus = User(
        "0x01", "Albus Dumbledore", "ADMIN", Contact("[email]", "[phone]"),
        ["Office @ Hogwarts", "where Horcruxes are"],
    )
    harry = User(
        "0x02", "Harry Potter", "USER", Contact("[email]", "[phone]"),
        ["123 dorm room @ Hogwarts", "456 random place"],
    )
    hermione = User(
        "0x03", "Hermione Granger", "USER", Contact("[email]", "[phone]"),
        ["233 dorm room @ Hogwarts", "786 @ random place"],
    )
    ron = User(
        "0x04", "Ronald Weasley", "USER", Contact("[email]", "[phone]"),
        ["411 dorm room @ Hogwarts", "981 @ random place"],
    )
    albus.friends_field = [harry]
    harry.friends_field = [albus, hermione, ron]
    hermione.friends_field = [harry, ron]
    ron.friends_field = [harry, hermione]
    return [albus, harry, hermione, ron]


_USERS = _build_users()
_USERS_BY_ID = {u.id_field: u for u in _USERS}


class Resolver:
    """Root resolver of the social example."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        found = _USERS_BY_ID.get(id)
        if found is not None and found.role_field == role:
            return AdminResolver(found)
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        found = _USERS_BY_ID.get(id)
        if found is None:
            raise LookupError(f"user with id={id} does not exist")
        return found

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(u) for u in _USERS if text in u.name_field]