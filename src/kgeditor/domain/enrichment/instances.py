"""Combine raw instances with their type structures into UI payloads.

The editor UI expects one combined payload per instance: the instance values
merged into the field templates of its types, plus the type display metadata.
Three projections exist (full, summary, label). Batch operations resolve the
type structures of all instances with a single lookup, then narrow that shared
result to each instance's own types.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from kgeditor.domain.ids import simplify_entity_id

from .alternatives import normalize_alternatives
from .fields import merge_fields, union_fields, union_promoted_fields
from .types import (
    collect_type_names,
    enrich_simple_types,
    first_label_field,
    narrow_types,
    resolve_types,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from kgeditor.domain.model import (
        InstanceFull,
        InstanceLabel,
        InstanceSummary,
        ResultWithOriginalMap,
        StructureOfType,
    )
    from kgeditor.domain.ports import TypeStructureLookup, UserPictureLookup

    from .types import TypesByName

log = getLogger(__name__)


@dataclass(slots=True)
class InstanceEnrichment:
    """Enrichment entry points for single instances and batches."""

    types: TypeStructureLookup
    users: UserPictureLookup

    def enrich_instance(self, instance_with_map: ResultWithOriginalMap[InstanceFull]) -> InstanceFull:
        instance = simplify_entity_id(instance_with_map.result)
        types_by_name = resolve_types(collect_type_names([instance]), lookup=self.types)
        enrich_types_and_fields(instance, instance_with_map.original_map, types_by_name)
        normalize_alternatives(instance, lookup=self.users)
        return instance

    def enrich_instances(
        self,
        instances_with_map: Mapping[str, ResultWithOriginalMap[InstanceFull]],
    ) -> dict[str, InstanceFull]:
        results = _simplify_ids(instances_with_map)
        types_by_name = self._resolve_batch(results.values())
        for entry in results.values():
            enrich_types_and_fields(entry.result, entry.original_map, types_by_name)
            normalize_alternatives(entry.result, lookup=self.users)
        return _by_id(results)

    def enrich_instances_label(
        self,
        instances_with_map: Mapping[str, ResultWithOriginalMap[InstanceLabel]],
    ) -> dict[str, InstanceLabel]:
        results = _simplify_ids(instances_with_map)
        types_by_name = self._resolve_batch(results.values())
        for entry in results.values():
            enrich_name(entry.result, entry.original_map, types_by_name)
        return _by_id(results)

    def enrich_instances_summary(
        self,
        instances_with_map: Mapping[str, ResultWithOriginalMap[InstanceSummary]],
    ) -> dict[str, InstanceSummary]:
        results = _simplify_ids(instances_with_map)
        types_by_name = self._resolve_batch(results.values())
        for entry in results.values():
            enrich_types_and_searchable_fields(entry.result, entry.original_map, types_by_name)
        return _by_id(results)

    def _resolve_batch[T: InstanceLabel](
        self,
        results: Collection[ResultWithOriginalMap[T]],
    ) -> TypesByName:
        names = collect_type_names(entry.result for entry in results)
        log.debug("Enriching %d instances sharing %d types", len(results), len(names))
        return resolve_types(names, lookup=self.types)


def enrich_types_and_fields(
    instance: InstanceFull,
    original_map: Mapping[str, Any],
    types_by_name: TypesByName,
) -> InstanceFull:
    structures = narrow_types(types_by_name, instance)
    if not structures:
        return instance
    enrich_simple_types(instance.types, types_by_name)
    ordered = list(structures.values())
    instance.fields = merge_fields(union_fields(ordered), original_map)
    instance.promoted_fields = union_promoted_fields(ordered)
    instance.label_field = first_label_field(ordered)
    return instance


def enrich_types_and_searchable_fields(
    instance: InstanceSummary,
    original_map: Mapping[str, Any],
    types_by_name: TypesByName,
) -> InstanceSummary:
    structures = narrow_types(types_by_name, instance)
    if not structures:
        return instance
    enrich_simple_types(instance.types, types_by_name)
    ordered = list(structures.values())
    promoted = set(union_promoted_fields(ordered))
    searchable = [
        template for template in union_fields(ordered) if template.fully_qualified_name in promoted
    ]
    instance.fields = merge_fields(searchable, original_map)
    _assign_name(instance, original_map, ordered)
    return instance


def enrich_name(
    instance: InstanceLabel,
    original_map: Mapping[str, Any],
    types_by_name: TypesByName,
) -> InstanceLabel:
    structures = narrow_types(types_by_name, instance)
    if not structures:
        return instance
    enrich_simple_types(instance.types, types_by_name)
    _assign_name(instance, original_map, list(structures.values()))
    return instance


def _assign_name(
    instance: InstanceLabel,
    original_map: Mapping[str, Any],
    structures: list[StructureOfType],
) -> None:
    label_field = first_label_field(structures)
    if label_field is None:
        return
    # unexpected shapes are handed to the UI as they are
    instance.name = cast("str | None", original_map.get(label_field))


def _simplify_ids[T: InstanceLabel](
    instances_with_map: Mapping[str, ResultWithOriginalMap[T]],
) -> dict[str, ResultWithOriginalMap[T]]:
    results = dict(instances_with_map)
    for entry in results.values():
        simplify_entity_id(entry.result)
    return results


def _by_id[T: InstanceLabel](results: Mapping[str, ResultWithOriginalMap[T]]) -> dict[str, T]:
    """Key results by short id; an instance without one keeps its batch key."""

    by_id: dict[str, T] = {}
    for key, entry in results.items():
        if entry.result.id is None:
            log.warning("Instance under batch key %r has no id", key)
        by_id[entry.result.id or key] = entry.result
    return by_id
