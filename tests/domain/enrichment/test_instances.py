from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kgeditor.domain.enrichment import InstanceEnrichment
from kgeditor.domain.model import (
    InstanceFull,
    InstanceLabel,
    InstanceSummary,
    ResultWithOriginalMap,
    SimpleType,
)
from tests.helpers.lookups import FakeKGCore, make_type

if TYPE_CHECKING:
    import pytest

NAME = "http://schema/name"
FAMILY = "http://schema/familyName"
EMAIL = "http://schema/email"
AFFILIATION = "http://schema/affiliation"


def _types(*names: str) -> list[SimpleType]:
    return [SimpleType(name=name) for name in names]


def _full(
    identifier: str | None, raw: dict[str, Any], *types: str
) -> ResultWithOriginalMap[InstanceFull]:
    instance = InstanceFull(id=identifier, types=_types(*types))
    return ResultWithOriginalMap(result=instance, original_map=raw)


def _enrichment(lookup: FakeKGCore) -> InstanceEnrichment:
    return InstanceEnrichment(types=lookup, users=lookup)


def test_label_example_person_ada() -> None:
    lookup = FakeKGCore(
        types={"Person": make_type("Person", label_field=NAME, fields=[NAME])},
    )
    raw = {"@id": "http://kg/123", NAME: "Ada"}
    label = ResultWithOriginalMap(
        result=InstanceLabel(id="http://kg/123", types=_types("Person")), original_map=raw
    )

    result = _enrichment(lookup).enrich_instances_label({"http://kg/123": label})

    assert list(result) == ["123"]
    enriched = result["123"]
    assert enriched.id == "123"
    assert [simple_type.name for simple_type in enriched.types] == ["Person"]
    assert enriched.name == "Ada"


def test_enrich_instance_merges_fields_of_all_types() -> None:
    lookup = FakeKGCore(
        types={
            "Person": make_type(
                "Person",
                label="Person",
                color="#123456",
                fields=[NAME, FAMILY],
                promoted=[FAMILY],
            ),
            "Contact": make_type(
                "Contact", label_field=EMAIL, fields=[EMAIL, NAME], promoted=[EMAIL, FAMILY]
            ),
        }
    )
    raw = {
        NAME: "Ada",
        FAMILY: "Lovelace",
        AFFILIATION: {"@id": "http://kg/org"},
    }

    instance = _enrichment(lookup).enrich_instance(
        _full("https://kg.ebrains.eu/api/instances/42", raw, "Person", "Contact")
    )

    assert instance.id == "42"
    assert set(instance.fields) == {NAME, FAMILY, EMAIL}
    assert instance.fields[NAME].value == "Ada"
    assert instance.fields[FAMILY].value == "Lovelace"
    assert instance.fields[EMAIL].value is None
    assert instance.promoted_fields == [FAMILY, EMAIL]
    assert instance.label_field == EMAIL
    assert instance.name is None
    assert (instance.types[0].label, instance.types[0].color) == ("Person", "#123456")
    assert lookup.type_calls == [["Person", "Contact"]]


def test_enrich_instance_without_resolved_types_is_noop() -> None:
    lookup = FakeKGCore(types={"Person": None})
    raw = {NAME: "Ada"}

    instance = _enrichment(lookup).enrich_instance(_full("http://kg/1", raw, "Person", "Ghost"))

    assert instance.id == "1"
    assert instance.fields == {}
    assert instance.promoted_fields == []
    assert instance.label_field is None
    assert instance.types[0].label is None


def test_enrich_instance_without_types_makes_no_type_lookup() -> None:
    lookup = FakeKGCore()

    instance = _enrichment(lookup).enrich_instance(_full("http://kg/1", {}))

    assert instance.id == "1"
    assert lookup.type_calls == []


def test_batch_of_fifty_instances_resolves_types_once() -> None:
    lookup = FakeKGCore(types={name: make_type(name, fields=[NAME]) for name in ("A", "B", "C")})
    batch = {
        str(index): _full(f"http://kg/{index}", {NAME: f"n{index}"}, ("A", "B", "C")[index % 3])
        for index in range(50)
    }

    result = _enrichment(lookup).enrich_instances(batch)

    assert len(result) == 50
    assert len(lookup.type_calls) == 1
    assert sorted(lookup.type_calls[0]) == ["A", "B", "C"]


def test_batch_merge_does_not_share_field_values_between_instances() -> None:
    lookup = FakeKGCore(types={"Person": make_type("Person", fields=[NAME])})
    batch = {
        "a": _full("http://kg/a", {NAME: "Ada"}, "Person"),
        "b": _full("http://kg/b", {NAME: "Grace"}, "Person"),
    }

    result = _enrichment(lookup).enrich_instances(batch)

    assert result["a"].fields[NAME].value == "Ada"
    assert result["b"].fields[NAME].value == "Grace"
    assert result["a"].fields[NAME] is not result["b"].fields[NAME]


def test_batch_narrows_types_per_instance() -> None:
    lookup = FakeKGCore(
        types={
            "Person": make_type("Person", fields=[NAME], label_field=NAME),
            "Org": make_type("Org", fields=[EMAIL]),
        }
    )
    batch = {
        "p": _full("http://kg/p", {NAME: "Ada"}, "Person"),
        "o": _full("http://kg/o", {EMAIL: "info@example.org"}, "Org"),
    }

    result = _enrichment(lookup).enrich_instances(batch)

    assert set(result["p"].fields) == {NAME}
    assert set(result["o"].fields) == {EMAIL}
    assert result["o"].label_field is None


def test_summary_keeps_only_promoted_fields_and_names_instance() -> None:
    lookup = FakeKGCore(
        types={
            "Person": make_type(
                "Person", label_field=NAME, fields=[NAME, FAMILY, EMAIL], promoted=[NAME, EMAIL]
            )
        }
    )
    raw = {NAME: "Ada", FAMILY: "Lovelace", EMAIL: "ada@example.org"}
    summary = ResultWithOriginalMap(
        result=InstanceSummary(id="http://kg/1", types=_types("Person")), original_map=raw
    )

    result = _enrichment(lookup).enrich_instances_summary({"1": summary})

    assert set(result["1"].fields) == {NAME, EMAIL}
    assert result["1"].fields[EMAIL].value == "ada@example.org"
    assert result["1"].name == "Ada"


def test_label_name_uses_first_label_field_in_type_order() -> None:
    lookup = FakeKGCore(
        types={
            "Plain": make_type("Plain"),
            "Person": make_type("Person", label_field=FAMILY),
            "Named": make_type("Named", label_field=NAME),
        }
    )
    raw = {NAME: "Ada", FAMILY: "Lovelace"}
    label = ResultWithOriginalMap(
        result=InstanceLabel(id="http://kg/1", types=_types("Plain", "Named", "Person")),
        original_map=raw,
    )

    result = _enrichment(lookup).enrich_instances_label({"1": label})

    assert result["1"].name == "Ada"


def test_label_name_stays_absent_without_label_field() -> None:
    lookup = FakeKGCore(types={"Plain": make_type("Plain")})
    label = ResultWithOriginalMap(
        result=InstanceLabel(id="http://kg/1", types=_types("Plain")), original_map={NAME: "x"}
    )

    result = _enrichment(lookup).enrich_instances_label({"1": label})

    assert result["1"].name is None


def test_label_name_passes_unexpected_shapes_through() -> None:
    lookup = FakeKGCore(types={"Person": make_type("Person", label_field=NAME)})
    label = ResultWithOriginalMap(
        result=InstanceLabel(id="http://kg/1", types=_types("Person")),
        original_map={NAME: ["Ada", "Augusta"]},
    )

    result = _enrichment(lookup).enrich_instances_label({"1": label})

    assert result["1"].name == ["Ada", "Augusta"]


def test_batch_keeps_instance_without_id_under_its_key(caplog: pytest.LogCaptureFixture) -> None:
    lookup = FakeKGCore(types={"Person": make_type("Person", label_field=NAME, fields=[NAME])})
    batch = {
        "0": _full("http://kg/ada", {NAME: "Ada"}, "Person"),
        "1": _full(None, {NAME: "Anonymous"}, "Person"),
    }

    with caplog.at_level("WARNING"):
        result = _enrichment(lookup).enrich_instances(batch)

    assert set(result) == {"ada", "1"}
    assert result["1"].id is None
    assert result["1"].fields[NAME].value == "Anonymous"
    assert "batch key '1' has no id" in caplog.text
