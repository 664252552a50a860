from __future__ import annotations

from typing import Any

import pytest

from kgeditor import app
from kgeditor.app import InstanceView
from kgeditor.domain.model import InstanceFull, InstanceLabel, InstanceSummary, UserProfile
from tests.helpers.lookups import FakeKGCore, make_type

PERSON = "https://openminds.ebrains.eu/core/Person"
NAME = "http://schema.org/name"
FAMILY = "http://schema.org/familyName"
AFFILIATION = "http://schema.org/affiliation"


@pytest.fixture
def lookups() -> FakeKGCore:
    return FakeKGCore(
        types={
            PERSON: make_type(
                PERSON,
                label="Person",
                color="#f4a261",
                label_field=NAME,
                fields=[NAME, FAMILY, AFFILIATION],
                promoted=[NAME, FAMILY],
            )
        },
        pictures={"ab12cd34": "data:image/png;base64,AAA"},
    )


def test_enrich_instance_payload(raw_instance: dict[str, Any], lookups: FakeKGCore) -> None:
    instance = app.enrich_instance_payload(raw_instance, lookups=lookups)

    assert instance.id == "9a4f0b6e-3c1f-4a41-8c2a-2d1b5c2f7e10"
    assert instance.types[0].label == "Person"
    assert instance.fields[NAME].value == "Ada"
    assert instance.fields[AFFILIATION].value == [
        {"@id": "0d7c1f2a-1111-4b5e-9a77-3f6d4c1e2a90"},
        {"@id": "6e3b9d10-2222-4c8a-b1f0-7a2e5d9c4b31"},
    ]
    assert instance.label_field == NAME
    users = [user for alt in instance.alternatives[FAMILY] for user in alt.users]
    assert [user.id for user in users] == ["ab12cd34", "ef56ab78"]
    assert [user.picture for user in users] == ["data:image/png;base64,AAA", None]
    assert lookups.picture_calls == [["ab12cd34", "ef56ab78"]]


@pytest.mark.parametrize(
    ("view", "expected"),
    [
        (InstanceView.FULL, InstanceFull),
        (InstanceView.SUMMARY, InstanceSummary),
        (InstanceView.LABEL, InstanceLabel),
    ],
)
def test_enrich_instance_payloads_views(
    raw_instance: dict[str, Any],
    lookups: FakeKGCore,
    view: InstanceView,
    expected: type[InstanceLabel],
) -> None:
    second = {**raw_instance, "@id": "https://kg.ebrains.eu/api/instances/other", NAME: "Grace"}

    result = app.enrich_instance_payloads([raw_instance, second], view=view, lookups=lookups)

    assert set(result) == {"9a4f0b6e-3c1f-4a41-8c2a-2d1b5c2f7e10", "other"}
    assert all(type(instance) is expected for instance in result.values())
    assert lookups.type_calls == [[PERSON]]
    if view is not InstanceView.FULL:
        assert result["other"].name == "Grace"


def test_enrich_neighbor_payload(lookups: FakeKGCore) -> None:
    neighbor = app.enrich_neighbor_payload(
        {"id": "root", "types": [PERSON], "outbound": [{"id": "child", "types": [PERSON]}]},
        lookups=lookups,
    )

    assert neighbor.types is not None
    assert neighbor.types[0].color == "#f4a261"
    assert neighbor.outbound is not None
    assert neighbor.outbound[0].types is not None
    assert neighbor.outbound[0].types[0].label == "Person"


def test_enrich_scope_payload() -> None:
    lookups = FakeKGCore(statuses={"B": "RELEASED"})

    scope = app.enrich_scope_payload({"id": "A", "children": [{"id": "B"}]}, lookups=lookups)

    assert scope.status is None
    assert scope.children is not None
    assert scope.children[0].status == "RELEASED"


def test_fetch_user_profile_returns_none_without_profile() -> None:
    lookups = FakeKGCore()

    assert app.fetch_user_profile(lookups=lookups) is None
    assert lookups.space_calls == 0


def test_fetch_user_profile_enriches_profile() -> None:
    lookups = FakeKGCore(
        profile=UserProfile(id="https://kg.ebrains.eu/api/users/ab12cd34", username="ada"),
        pictures={"https://kg.ebrains.eu/api/users/ab12cd34": "data:image/png;base64,AAA"},
    )

    profile = app.fetch_user_profile(lookups=lookups)

    assert profile is not None
    # non-uuid ids are not shortened
    assert profile.id == "https://kg.ebrains.eu/api/users/ab12cd34"
    assert profile.picture == "data:image/png;base64,AAA"
    assert lookups.space_calls == 1
