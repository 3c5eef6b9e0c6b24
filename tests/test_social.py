import pytest

from graphkit.social import (
    AdminResolver,
    Contact,
    Page,
    Resolver,
    SearchResult,
    User,
)


@pytest.fixture
def resolver():
    return Resolver()


def names(users):
    return [u.name() for u in users]


def test_admin_inline_fragments(resolver):
    admin = resolver.admin("0x01")
    user = admin.to_user()
    assert user.email == "[email]"
    assert admin.name() == "Albus Dumbledore"
    assert admin.role() == "ADMIN"
    assert admin.id() == "0x01"


def test_admin_wrong_role_raises(resolver):
    with pytest.raises(LookupError) as info:
        resolver.admin("0x02")
    assert str(info.value) == "user with id=0x02 and role=ADMIN does not exist"


def test_admin_explicit_role(resolver):
    assert resolver.admin("0x02", "USER").name() == "Harry Potter"


def test_admin_unknown_id(resolver):
    with pytest.raises(LookupError, match="id=0x09 and role=ADMIN"):
        resolver.admin("0x09")


def test_user_lookup(resolver):
    user = resolver.user("0x03")
    assert user.name() == "Hermione Granger"
    assert user.role() == "USER"
    assert user.phone == "[phone]"
    assert user.address == ["233 dorm room @ Hogwarts", "786 @ random place"]


def test_user_unknown(resolver):
    with pytest.raises(LookupError) as info:
        resolver.user("nope")
    assert str(info.value) == "user with id=nope does not exist"


def test_search_result_to_user_non_user():
    assert SearchResult("other").to_user() is None


def test_friends_without_page(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends()) == [
        "Albus Dumbledore",
        "Hermione Granger",
        "Ronald Weasley",
    ]


def test_friends_first(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends(Page(first=1))) == ["Hermione Granger", "Ronald Weasley"]


def test_friends_last(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends(Page(last=2))) == ["Albus Dumbledore", "Hermione Granger"]


@pytest.mark.parametrize("last", [0, 10])
def test_friends_last_clamped(resolver, last):
    harry = resolver.user("0x02")
    assert len(harry.friends(Page(last=last))) == 3


def test_friends_first_too_large(resolver):
    harry = resolver.user("0x02")
    with pytest.raises(ValueError, match="not enough users"):
        harry.friends(Page(first=4))


def test_friends_first_equal_count_is_empty(resolver):
    assert resolver.user("0x02").friends(Page(first=3)) == []


def test_friends_inverted_bounds(resolver):
    with pytest.raises(ValueError):
        resolver.user("0x02").friends(Page(first=2, last=1))


def test_friendships_link_users(resolver):
    albus = resolver.user("0x01")
    assert albus.friends()[0] is resolver.user("0x02")


def test_admin_resolver_to_user_identity():
    user = User("x", "Name", "ADMIN", Contact("a@example.com", "none"))
    assert AdminResolver(user).to_user() is user