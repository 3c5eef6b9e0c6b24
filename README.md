# graphkit

Building blocks for GraphQL servers written in Python, and sample resolvers
that use them.

- `graphkit.errors`: `QueryError` and `Location` for reporting query
  problems; `errorf`, which builds a `QueryError` from a printf-style format
  string and keeps a trailing exception argument as the cause; the
  `PanicHandler` base class and `DefaultPanicHandler`, which turns an
  unexpected failure inside a resolver into a `QueryError` with the message
  `panic occurred: <value>`.
- `graphkit.scalars`: the `ID` scalar (a `str` subclass), the `Map` scalar
  (a `dict` subclass) and the `Unmarshaler` protocol that custom scalars
  follow.
- `graphkit.cache`: cache-control hints. Resolvers call `add_hint`; inside a
  `hintable()` block the hints go to a `HintCollector`, and `resolve_hints`
  combines them into one `Hint`.
- Sample resolvers:
  - `graphkit.caching`: a `Resolver` whose `hello` and `me` fields add
    cache hints.
  - `graphkit.customerrors`: a `Resolver` whose `droid` field raises
    `DroidNotFoundError`, an error that carries extensions.
  - `graphkit.starwars`: resolvers over Star Wars humans, droids and
    starships, with reviews and paged friend connections.
  - `graphkit.social`: resolvers for users, admins and search.

Each sample module also holds its schema text as `SCHEMA`.

## Installation

```
pip install graphkit
```

To run the tests:

```
pip install "graphkit[test]"
pytest
```

## Errors

```python
from graphkit.errors import DefaultPanicHandler, Location, QueryError, errorf

err = QueryError("unknown field", locations=[Location(line=3, column=5)])
str(err)       # 'graphql: unknown field (line 3, column 5)'
err.to_dict()  # {'message': 'unknown field', 'locations': [{'line': 3, 'column': 5}]}

Location(1, 2).before(Location(2, 1))  # True

try:
    raise EOFError()
except EOFError as cause:
    wrapped = errorf("boom: %v", cause)
    wrapped.err is cause  # True

DefaultPanicHandler().make_panic_error(None, "foo").message  # 'panic occurred: foo'
```

`QueryError.to_dict()` leaves out `locations`, `path` and `extensions` when
they are empty.

## Scalars

```python
from graphkit.scalars import ID, Map

ID.implements_graphql_type("ID")  # True
ID.unmarshal_graphql(1234) == "1234"  # True
ID("2001").to_json()              # '"2001"'

Map.unmarshal_graphql({"a": 1})   # Map({'a': 1})
```

`ID.unmarshal_graphql` accepts a string or a 32-bit integer and raises
`TypeError` for anything else; `Map.unmarshal_graphql` raises `TypeError`
for anything but a `dict`.

## Cache hints

```python
from datetime import timedelta
from graphkit.cache import Hint, Scope, add_hint, hintable

with hintable() as collector:
    add_hint(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))

str(collector.resolve())  # 'private, max-age=60'
```

The resolved hint takes the shortest maximum age among the hints (zero when
none gives one), and its scope is private if any hint was private. Outside a
`hintable()` block `add_hint` does nothing; adding to a collector after its
block has ended raises `RuntimeError`.

## Star Wars resolvers

```python
from graphkit.starwars import Resolver

resolver = Resolver()
resolver.hero("EMPIRE").name()                       # 'Luke Skywalker'
[f.name() for f in resolver.hero().friends()]        # ['Luke Skywalker', 'Han Solo', 'Leia Organa']

page = resolver.hero().friends_connection(first=1, after="Y3Vyc29yMQ==")
[e.node().name() for e in page.edges()]              # ['Han Solo']
page.page_info().has_next_page()                     # True
```

## What this package does not do

graphkit does not parse schemas or queries, validate them or execute them
against resolvers, and it has no HTTP server or command-line tool. The
resolvers in the sample modules are plain Python objects; wiring them to a
schema and serving requests is left to the application.