import pytest

from graphkit.customerrors import DroidNotFoundError, Resolver


@pytest.mark.parametrize(
    ("droid_id", "name"),
    [("2000", "C-3PO"), ("2001", "R2-D2")],
)
def test_known_droids(droid_id, name):
    droid = Resolver().droid(droid_id)
    assert droid.id() == droid_id
    assert droid.name() == name


def test_unknown_droid_raises():
    with pytest.raises(DroidNotFoundError) as info:
        Resolver().droid("9999")
    assert info.value.code == "NotFound"
    assert info.value.message == "This is not the droid you are looking for"


def test_error_string_format():
    err = DroidNotFoundError("NotFound", "This is not the droid you are looking for")
    assert str(err) == "error [NotFound]: This is not the droid you are looking for"


def test_error_extensions():
    err = DroidNotFoundError("NotFound", "This is not the droid you are looking for")
    assert err.extensions() == {
        "code": "NotFound",
        "message": "This is not the droid you are looking for",
    }


def test_extensions_reflect_fields():
    err = DroidNotFoundError("Gone", "away")
    assert err.extensions() == {"code": err.code, "message": err.message}