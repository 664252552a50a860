from __future__ import annotations

from kgeditor.domain.enrichment import normalize_alternatives
from kgeditor.domain.model import Alternative, InstanceFull, UserSummary
from tests.helpers.lookups import FakeKGCore


def _user(identifier: str | None) -> UserSummary:
    return UserSummary(id=identifier)


def test_normalize_alternatives_batches_picture_lookup() -> None:
    lookup = FakeKGCore(pictures={"u1": "data:image/png;base64,AAA"})
    instance = InstanceFull(
        id="1",
        alternatives={
            "name": [
                Alternative(value="Ada", users=[_user("http://kg/users/u1")]),
                Alternative(value="Augusta", users=[_user("http://kg/users/u2")]),
            ],
            "family": [Alternative(value="Lovelace", users=[_user("http://kg/users/u1")])],
        },
    )

    normalize_alternatives(instance, lookup=lookup)

    assert lookup.picture_calls == [["u1", "u2"]]
    users = [
        user
        for entries in instance.alternatives.values()
        for alternative in entries
        for user in alternative.users
    ]
    assert [user.id for user in users] == ["u1", "u2", "u1"]
    assert [user.picture for user in users] == [
        "data:image/png;base64,AAA",
        None,
        "data:image/png;base64,AAA",
    ]


def test_normalize_alternatives_simplifies_nested_values() -> None:
    lookup = FakeKGCore()
    value = [{"@id": "http://kg/a"}, {"@id": "http://kg/b"}]
    instance = InstanceFull(id="1", alternatives={"link": [Alternative(value=value)]})

    normalize_alternatives(instance, lookup=lookup)

    assert instance.alternatives["link"][0].value == [{"@id": "a"}, {"@id": "b"}]


def test_normalize_alternatives_skips_lookup_without_users() -> None:
    lookup = FakeKGCore()
    instance = InstanceFull(
        id="1",
        alternatives={"name": [Alternative(value="Ada", users=[_user(None)])]},
    )

    normalize_alternatives(instance, lookup=lookup)

    assert lookup.picture_calls == []
    assert instance.alternatives["name"][0].users[0].picture is None
