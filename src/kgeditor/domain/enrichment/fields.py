"""Merge type field templates with the raw values of one instance."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from kgeditor.domain.ids import simplify_id_if_map

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from kgeditor.domain.model import StructureOfField, StructureOfType


def union_fields(structures: Iterable[StructureOfType]) -> list[StructureOfField]:
    """Field templates of all structures; the first type declaring a name wins."""

    fields: dict[str, StructureOfField] = {}
    for structure in structures:
        for template in structure.fields.values():
            fields.setdefault(template.fully_qualified_name, template)
    return list(fields.values())


def union_promoted_fields(structures: Iterable[StructureOfType]) -> list[str]:
    promoted: dict[str, None] = {}
    for structure in structures:
        for name in structure.promoted_fields:
            promoted.setdefault(name, None)
    return list(promoted)


def merge_field(template: StructureOfField, original_map: Mapping[str, Any]) -> StructureOfField:
    """Return a private copy of ``template`` carrying the instance's value."""

    field = copy.deepcopy(template)
    raw = original_map.get(field.fully_qualified_name)
    if isinstance(raw, (list, tuple)):
        field.value = [simplify_id_if_map(item) for item in raw]
    elif raw is not None:
        field.value = simplify_id_if_map(raw)
    return field


def merge_fields(
    templates: Iterable[StructureOfField],
    original_map: Mapping[str, Any],
) -> dict[str, StructureOfField]:
    merged: dict[str, StructureOfField] = {}
    for template in templates:
        field = merge_field(template, original_map)
        merged[field.fully_qualified_name] = field
    return merged
