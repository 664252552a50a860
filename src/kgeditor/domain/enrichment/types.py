"""Type structure resolution and type display attributes."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from kgeditor.domain.model import InstanceLabel, KGCoreResult, SimpleType, StructureOfType
    from kgeditor.domain.ports import TypeStructureLookup

log = getLogger(__name__)

type TypesByName = Mapping[str, KGCoreResult[StructureOfType]]


def collect_type_names(instances: Iterable[InstanceLabel]) -> list[str]:
    """Return the de-duplicated type names of all instances, in first-seen order."""

    names: dict[str, None] = {}
    for instance in instances:
        for simple_type in instance.types:
            names.setdefault(simple_type.name, None)
    return list(names)


def resolve_types(names: Iterable[str], *, lookup: TypeStructureLookup) -> TypesByName:
    """Fetch the structures of all given types in a single lookup."""

    unique = list(dict.fromkeys(names))
    if not unique:
        return {}
    log.debug("Resolving %d type structures", len(unique))
    return lookup.get_types_by_name(unique, with_fields=True)


def narrow_types(types_by_name: TypesByName, instance: InstanceLabel) -> dict[str, StructureOfType]:
    """Resolved structures of the instance's own types, in the instance's type order."""

    narrowed: dict[str, StructureOfType] = {}
    for simple_type in instance.types:
        result = types_by_name.get(simple_type.name)
        if result is None or result.data is None:
            log.debug("No type structure for %s on instance %s", simple_type.name, instance.id)
            continue
        narrowed.setdefault(simple_type.name, result.data)
    return narrowed


def enrich_simple_type(simple_type: SimpleType, types_by_name: TypesByName) -> None:
    result = types_by_name.get(simple_type.name)
    if result is None or result.data is None:
        return
    simple_type.color = result.data.color
    simple_type.label = result.data.label
    simple_type.label_field = result.data.label_field


def enrich_simple_types(types: Iterable[SimpleType] | None, types_by_name: TypesByName) -> None:
    for simple_type in types or ():
        enrich_simple_type(simple_type, types_by_name)


def first_label_field(structures: Iterable[StructureOfType]) -> str | None:
    """First label field declared, in the order the structures are given."""

    return next(
        (structure.label_field for structure in structures if structure.label_field is not None),
        None,
    )
