"""Cache hints that resolvers can attach to the request being served."""

from __future__ import annotations

import contextvars
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

__all__ = [
    "Scope",
    "Hint",
    "HintCollector",
    "add_hint",
    "hintable",
    "resolve_hints",
]


class Scope(Enum):
    """Cache-control scopes."""

    PUBLIC = 0
    PRIVATE = 1


@dataclass(frozen=True)
class Hint:
    """How long, and for whom, a result may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """Return the HTTP Cache-Control value of the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        name = "private" if self.scope is Scope.PRIVATE else "public"
        return f"{name}, max-age={int(self.max_age.total_seconds())}"


def resolve_hints(hints: Iterable[Hint]) -> Hint:
    """Combine hints: the shortest max age and the most restrictive scope."""
    min_age: timedelta | None = None
    scope = Scope.PUBLIC
    for hint in hints:
        if hint.scope is Scope.PRIVATE:
            scope = Scope.PRIVATE
        if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
            min_age = hint.max_age
    return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


class HintCollector:
    """Gathers the hints added while a request is being executed."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self.closed = False

    def add(self, hint: Hint) -> None:
        if self.closed:
            raise RuntimeError("hint collector is closed")
        self._hints.append(hint)

    def resolve(self) -> Hint:
        return resolve_hints(self._hints)


_current: contextvars.ContextVar[HintCollector | None] = contextvars.ContextVar(
    "graphkit_cache_hints", default=None
)


def add_hint(hint: Hint) -> None:
    """Add a hint to the active collector; do nothing when none is active."""
    collector = _current.get()
    if collector is not None:
        collector.add(hint)


@contextmanager
def hintable() -> Iterator[HintCollector]:
    """Make hints added inside the block go to a fresh collector."""
    collector = HintCollector()
    token = _current.set(collector)
    try:
        yield collector
    finally:
        _current.reset(token)
        collector.closed = True