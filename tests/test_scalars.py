import json

import pytest

from graphkit.scalars import ID, Map, Unmarshaler


def test_id_implements_only_id():
    assert ID.implements_graphql_type("ID")
    assert not ID.implements_graphql_type("String")


def test_id_from_string():
    value = ID.unmarshal_graphql("1234")
    assert value == "1234"
    assert isinstance(value, ID)


def test_id_from_int():
    assert ID.unmarshal_graphql(1234) == "1234"


@pytest.mark.parametrize("bad", [1.5, True, None, [1], 2**40])
def test_id_rejects_other_types(bad):
    with pytest.raises(TypeError, match="wrong type for ID"):
        ID.unmarshal_graphql(bad)


@pytest.mark.parametrize("text", ["2001", 'quo"te', "back\\slash", "ünïcode"])
def test_id_json_round_trip(text):
    encoded = ID(text).to_json()
    assert encoded.startswith('"') and encoded.endswith('"')
    assert json.loads(encoded) == text


def test_map_implements_only_map():
    assert Map.implements_graphql_type("Map")
    assert not Map.implements_graphql_type("ID")


def test_map_from_dict():
    source = {"a": 1, "b": {"c": [1, 2]}}
    value = Map.unmarshal_graphql(source)
    assert isinstance(value, Map)
    assert value == source


@pytest.mark.parametrize("bad", ["text", 3, [("a", 1)], None])
def test_map_rejects_non_dict(bad):
    with pytest.raises(TypeError, match="wrong type"):
        Map.unmarshal_graphql(bad)


@pytest.mark.parametrize(
    ("cls", "type_name", "raw"),
    [(ID, "ID", "7"), (Map, "Map", {"k": "v"})],
)
def test_types_satisfy_protocol(cls, type_name, raw):
    value = cls.unmarshal_graphql(raw)
    assert isinstance(value, Unmarshaler)
    assert value.implements_graphql_type(type_name)
    assert not value.implements_graphql_type("Other")
    assert value == raw


def test_unmarshalled_id_behaves_as_id():
    value = ID.unmarshal_graphql("plain")
    assert value == "plain"
    assert value.implements_graphql_type("ID")
    assert not value.implements_graphql_type("Map")
    assert value.to_json() == '"plain"'
    assert not isinstance("plain", Unmarshaler)