"""Example schema and resolvers built around Star Wars characters."""

from __future__ import annotations

import base64
import binascii
import re
from collections import defaultdict
from dataclasses import dataclass, field

from graphkit.scalars import ID

__all__ = [
    "SCHEMA",
    "Human",
    "Droid",
    "Starship",
    "Review",
    "ReviewInput",
    "HumanResolver",
    "DroidResolver",
    "StarshipResolver",
    "CharacterResolver",
    "SearchResultResolver",
    "ReviewResolver",
    "FriendsConnectionResolver",
    "FriendsEdgeResolver",
    "PageInfoResolver",
    "Resolver",
    "convert_length",
    "encode_cursor",
    "resolve_character",
    "resolve_characters",
]

SCHEMA = """
	schema {
		query: Query
		mutation: Mutation
	}
	# The query type, represents all of the entry points into our object graph
	type Query {
		hero(episode: Episode = NEWHOPE): Character
		reviews(episode: Episode!): [Review]!
		search(text: String!): [SearchResult]!
		character(id: ID!): Character
		droid(id: ID!): Droid
		human(id: ID!): Human
		starship(id: ID!): Starship
	}
	# The mutation type, represents all updates we can make to our data
	type Mutation {
		createReview(episode: Episode!, review: ReviewInput!): Review
	}
	# The episodes in the Star Wars trilogy
	enum Episode {
		# Star Wars Episode IV: A New Hope, released in 1977.
		NEWHOPE
		# Star Wars Episode V: The Empire Strikes Back, released in 1980.
		EMPIRE
		# Star Wars Episode VI: Return of the Jedi, released in 1983.
		JEDI
	}
	# A character from the Star Wars universe
	interface Character {
		# The ID of the character
		id: ID!
		# The name of the character
		name: String!
		# The friends of the character, or an empty list if they have none
		friends: [Character]
		# The friends of the character exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this character appears in
		appearsIn: [Episode!]!
	}
	# Units of height
	enum LengthUnit {
		# The standard unit around the world
		METER
		# Primarily used in the United States
		FOOT
	}
	# A humanoid creature from the Star Wars universe
	type Human implements Character {
		# The ID of the human
		id: ID!
		# What this human calls themselves
		name: String!
		# Height in the preferred unit, default is meters
		height(unit: LengthUnit = METER): Float!
		# Mass in kilograms, or null if unknown
		mass: Float
		# This human's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the human exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this human appears in
		appearsIn: [Episode!]!
		# A list of starships this person has piloted, or an empty list if none
		starships: [Starship]
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid implements Character {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
		# This droid's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the droid exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this droid appears in
		appearsIn: [Episode!]!
		# This droid's primary function
		primaryFunction: String
	}
	# A connection object for a character's friends
	type FriendsConnection {
		# The total number of friends
		totalCount: Int!
		# The edges for each of the character's friends.
		edges: [FriendsEdge]
		# A list of the friends, as a convenience when edges are not needed.
		friends: [Character]
		# Information for paginating this connection
		pageInfo: PageInfo!
	}
	# An edge object for a character's friends
	type FriendsEdge {
		# A cursor used for pagination
		cursor: ID!
		# The character represented by this friendship edge
		node: Character
	}
	# Information for paginating this connection
	type PageInfo {
		startCursor: ID
		endCursor: ID
		hasNextPage: Boolean!
	}
	# Represents a review for a movie
	type Review {
		# The number of stars this review gave, 1-5
		stars: Int!
		# Comment about the movie
		commentary: String
	}
	# The input object sent when someone is creating a new review
	input ReviewInput {
		# 0-5 stars
		stars: Int!
		# Comment about the movie, optional
		commentary: String
	}
	type Starship {
		# The ID of the starship
		id: ID!
		# The name of the starship
		name: String!
		# Length of the starship, along the longest axis
		length(unit: LengthUnit = METER): Float!
	}
	union SearchResult = Human | Droid | Starship
"""

_FEET_PER_METER = 3.28084
_CURSOR_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Human:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class Droid:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    id: ID
    name: str
    length: float


@dataclass(frozen=True)
class Review:
    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class ReviewInput:
    stars: int
    commentary: str | None = None


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(v) for v in values)


_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")

_HUMANS = (
    Human(ID("1000"), "Luke Skywalker", _ids("1002", "1003", "2000", "2001"),
          _ALL_EPISODES, 1.72, 77, _ids("3001", "3003")),
    Human(ID("1001"), "Darth Vader", _ids("1004"),
          _ALL_EPISODES, 2.02, 136, _ids("3002")),
    Human(ID("1002"), "Han Solo", _ids("1000", "1003", "2001"),
          _ALL_EPISODES, 1.8, 80, _ids("3000", "3003")),
    Human(ID("1003"), "Leia Organa", _ids("1000", "1002", "2000", "2001"),
          _ALL_EPISODES, 1.5, 49),
    Human(ID("1004"), "Wilhuff Tarkin", _ids("1001"),
          ("NEWHOPE",), 1.8, 0),
)

_DROIDS = (
    Droid(ID("2000"), "C-3PO", _ids("1000", "1002", "1003", "2001"),
          _ALL_EPISODES, "Protocol"),
    Droid(ID("2001"), "R2-D2", _ids("1000", "1002", "1003"),
          _ALL_EPISODES, "Astromech"),
)

_STARSHIPS = (
    Starship(ID("3000"), "Millennium Falcon", 34.37),
    Starship(ID("3001"), "X-Wing", 12.5),
    Starship(ID("3002"), "TIE Advanced x1", 9.2),
    Starship(ID("3003"), "Imperial shuttle", 20.0),
)

_HUMAN_DATA = {h.id: h for h in _HUMANS}
_DROID_DATA = {d.id: d for d in _DROIDS}
_STARSHIP_DATA = {s.id: s for s in _STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to the given unit."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * _FEET_PER_METER
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the pagination cursor for the item at ``index``."""
    return ID(base64.b64encode(f"cursor{index + 1}".encode()).decode("ascii"))


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor, validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"illegal cursor {cursor!r}") from exc
    number = raw[len("cursor"):] if raw.startswith("cursor") else raw
    if not _CURSOR_NUMBER.fullmatch(number):
        raise ValueError(f"invalid cursor number {number!r}")
    return int(number)


def resolve_character(id: str) -> CharacterResolver | None:
    """Look up a human or droid by ID."""
    key = ID(id)
    human = _HUMAN_DATA.get(key)
    if human is not None:
        return CharacterResolver(HumanResolver(human))
    droid = _DROID_DATA.get(key)
    if droid is not None:
        return CharacterResolver(DroidResolver(droid))
    return None


def resolve_characters(ids) -> list[CharacterResolver]:
    """Resolve each known ID, skipping unknown ones."""
    return [c for c in map(resolve_character, ids) if c is not None]


class HumanResolver:
    """Resolves the fields of a human."""

    def __init__(self, human: Human) -> None:
        self._human = human

    def id(self) -> ID:
        return self._human.id

    def name(self) -> str:
        return self._human.name

    def height(self, unit: str = "METER") -> float:
        return convert_length(self._human.height, unit)

    def mass(self) -> float | None:
        return float(self._human.mass) if self._human.mass else None

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self._human.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._human.appears_in)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIP_DATA[s]) for s in self._human.starships]


class DroidResolver:
    """Resolves the fields of a droid."""

    def __init__(self, droid: Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self._droid.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._droid.appears_in)

    def primary_function(self) -> str | None:
        return self._droid.primary_function or None


class StarshipResolver:
    """Resolves the fields of a starship."""

    def __init__(self, starship: Starship) -> None:
        self._starship = starship

    def id(self) -> ID:
        return self._starship.id

    def name(self) -> str:
        return self._starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self._starship.length, unit)


class CharacterResolver:
    """Resolves the Character interface over a human or a droid."""

    def __init__(self, character: HumanResolver | DroidResolver) -> None:
        self._character = character

    def id(self) -> ID:
        return self._character.id()

    def name(self) -> str:
        return self._character.name()

    def friends(self) -> list[CharacterResolver]:
        return self._character.friends()

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return self._character.friends_connection(first, after)

    def appears_in(self) -> list[str]:
        return self._character.appears_in()

    def to_human(self) -> HumanResolver | None:
        c = self._character
        return c if isinstance(c, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        c = self._character
        return c if isinstance(c, DroidResolver) else None


class SearchResultResolver:
    """Resolves the SearchResult union."""

    def __init__(self, result: HumanResolver | DroidResolver | StarshipResolver) -> None:
        self._result = result

    def to_human(self) -> HumanResolver | None:
        r = self._result
        return r if isinstance(r, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        r = self._result
        return r if isinstance(r, DroidResolver) else None

    def to_starship(self) -> StarshipResolver | None:
        r = self._result
        return r if isinstance(r, StarshipResolver) else None


class ReviewResolver:
    """Resolves the fields of a review."""

    def __init__(self, review: Review) -> None:
        self._review = review

    def stars(self) -> int:
        return self._review.stars

    def commentary(self) -> str | None:
        return self._review.commentary


class FriendsEdgeResolver:
    """Resolves one edge of a friends connection."""

    def __init__(self, cursor: ID, id: ID) -> None:
        self._cursor = cursor
        self._id = id

    def cursor(self) -> ID:
        return self._cursor

    def node(self) -> CharacterResolver | None:
        return resolve_character(self._id)


class PageInfoResolver:
    """Resolves the pagination information of a connection."""

    def __init__(self, start_cursor: ID, end_cursor: ID, has_next_page: bool) -> None:
        self._start_cursor = start_cursor
        self._end_cursor = end_cursor
        self._has_next_page = has_next_page

    def start_cursor(self) -> ID:
        return self._start_cursor

    def end_cursor(self) -> ID:
        return self._end_cursor

    def has_next_page(self) -> bool:
        return self._has_next_page


@dataclass(frozen=True)
class FriendsConnectionResolver:
    """A page of a character's friends."""

    ids: tuple[ID, ...]
    start: int
    stop: int

    @classmethod
    def create(
        cls, ids, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        """Build a page from an optional size and an optional cursor."""
        ids = tuple(ids)
        start = _decode_cursor(after) if after is not None else 0
        stop = len(ids)
        if first is not None:
            stop = min(start + first, len(ids))
        if not 0 <= start <= stop:
            raise ValueError(f"page [{start}:{stop}] out of range")
        return cls(ids, start, stop)

    def total_count(self) -> int:
        return len(self.ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [
            FriendsEdgeResolver(encode_cursor(i), self.ids[i])
            for i in range(self.start, self.stop)
        ]

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self.ids[self.start:self.stop])

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            encode_cursor(self.start),
            encode_cursor(self.stop - 1),
            self.stop < len(self.ids),
        )


@dataclass
class Resolver:
    """Root resolver of the Star Wars example."""

    _reviews: dict[str, list[Review]] = field(
        default_factory=lambda: defaultdict(list), init=False, repr=False
    )

    def __init__(self) -> None:
        self._reviews = defaultdict(list)

    def hero(self, episode: str = "NEWHOPE") -> CharacterResolver:
        if episode == "EMPIRE":
            return CharacterResolver(HumanResolver(_HUMAN_DATA[ID("1000")]))
        return CharacterResolver(DroidResolver(_DROID_DATA[ID("2001")]))

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return [ReviewResolver(r) for r in self._reviews.get(episode, ())]

    def search(self, text: str) -> list[SearchResultResolver]:
        results = [
            SearchResultResolver(HumanResolver(h)) for h in _HUMANS if text in h.name
        ]
        results += [
            SearchResultResolver(DroidResolver(d)) for d in _DROIDS if text in d.name
        ]
        results += [
            SearchResultResolver(StarshipResolver(s))
            for s in _STARSHIPS
            if text in s.name
        ]
        return results

    def character(self, id: str) -> CharacterResolver | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        found = _HUMAN_DATA.get(ID(id))
        return HumanResolver(found) if found is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        found = _DROID_DATA.get(ID(id))
        return DroidResolver(found) if found is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        found = _STARSHIP_DATA.get(ID(id))
        return StarshipResolver(found) if found is not None else None

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        stored = Review(stars=review.stars, commentary=review.commentary)
        self._reviews[episode].append(stored)
        return ReviewResolver(stored)