from datetime import timedelta

import pytest

from graphkit.cache import (
    Hint,
    HintCollector,
    Scope,
    add_hint,
    hintable,
    resolve_hints,
)


def test_hint_string_public():
    assert str(Hint(timedelta(hours=1), Scope.PUBLIC)) == "public, max-age=3600"


def test_hint_string_private_scope_prefix():
    text = str(Hint(timedelta(minutes=1), Scope.PRIVATE))
    assert text.startswith("private, max-age=")
    assert int(text.split("=")[1]) == int(timedelta(minutes=1).total_seconds())


def test_hint_string_requires_max_age():
    with pytest.raises(ValueError):
        str(Hint())


def test_resolve_empty_is_public_no_cache():
    assert resolve_hints([]) == Hint(timedelta(0), Scope.PUBLIC)


def test_resolve_takes_min_age_and_private_scope():
    hints = [
        Hint(timedelta(hours=1), Scope.PUBLIC),
        Hint(timedelta(minutes=1), Scope.PRIVATE),
        Hint(None, Scope.PUBLIC),
    ]
    assert resolve_hints(hints) == Hint(timedelta(minutes=1), Scope.PRIVATE)


def test_resolve_ignores_missing_ages():
    result = resolve_hints([Hint(None, Scope.PUBLIC), Hint(timedelta(seconds=5))])
    assert result.max_age == timedelta(seconds=5)
    assert result.scope is Scope.PUBLIC


def test_hintable_collects_added_hints():
    with hintable() as collector:
        add_hint(Hint(timedelta(hours=1), Scope.PUBLIC))
        add_hint(Hint(timedelta(minutes=1), Scope.PRIVATE))
    assert collector.resolve() == Hint(timedelta(minutes=1), Scope.PRIVATE)


def test_add_hint_outside_hintable_is_ignored():
    add_hint(Hint(timedelta(hours=1)))
    with hintable() as collector:
        pass
    assert collector.resolve() == Hint(timedelta(0), Scope.PUBLIC)


def test_nested_hintable_is_isolated():
    with hintable() as outer:
        add_hint(Hint(timedelta(hours=1)))
        with hintable() as inner:
            add_hint(Hint(timedelta(seconds=1), Scope.PRIVATE))
        add_hint(Hint(timedelta(minutes=30)))
    assert inner.resolve() == Hint(timedelta(seconds=1), Scope.PRIVATE)
    assert outer.resolve() == Hint(timedelta(minutes=30), Scope.PUBLIC)


def test_closed_collector_rejects_hints():
    with hintable() as collector:
        pass
    with pytest.raises(RuntimeError):
        collector.add(Hint(timedelta(hours=1)))


def test_collector_add_directly():
    collector = HintCollector()
    collector.add(Hint(timedelta(seconds=10), Scope.PRIVATE))
    assert collector.resolve().scope is Scope.PRIVATE