"""Translate KG core payloads into domain objects."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from kgeditor.domain.model import (
    Alternative,
    InstanceFull,
    InstanceLabel,
    InstanceSummary,
    KGCoreResult,
    Neighbor,
    ResultWithOriginalMap,
    Scope,
    SimpleType,
    Space,
    SpacePermission,
    SpacePermissions,
    StructureOfField,
    StructureOfType,
    UserProfile,
    UserSummary,
)

from .schema import (
    InstancePayload,
    NeighborPayload,
    PropertyPayload,
    ReleaseStatusResponse,
    ScopePayload,
    SpacePayload,
    TypePayload,
    TypesByNameResponse,
    UserProfilePayload,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_structure_of_field(payload: PropertyPayload) -> StructureOfField:
    return StructureOfField(
        fully_qualified_name=payload.identifier,
        label=payload.name,
        widget=payload.widget,
        searchable=payload.searchable,
        target_types=[target.name for target in payload.target_types],
    )


def parse_structure_of_type(payload: TypePayload | Mapping[str, Any]) -> StructureOfType:
    """Build a type structure; searchable properties become the promoted fields."""

    model = payload if isinstance(payload, TypePayload) else TypePayload.model_validate(payload)
    fields = [parse_structure_of_field(prop) for prop in model.properties]
    return StructureOfType(
        name=model.identifier,
        label=model.name,
        color=model.color,
        label_field=model.label_property,
        fields={field.fully_qualified_name: field for field in fields},
        promoted_fields=[field.fully_qualified_name for field in fields if field.searchable],
    )


def parse_types_by_name(payload: object) -> dict[str, KGCoreResult[StructureOfType]]:
    response = TypesByNameResponse.model_validate(payload)
    results: dict[str, KGCoreResult[StructureOfType]] = {}
    for name, entry in (response.data or {}).items():
        data = parse_structure_of_type(entry.data) if entry.data is not None else None
        results[name] = KGCoreResult(data=data)
    return results


def parse_release_status(payload: object) -> dict[str, KGCoreResult[str]]:
    response = ReleaseStatusResponse.model_validate(payload)
    return {
        instance_id: KGCoreResult(data=entry.data)
        for instance_id, entry in (response.data or {}).items()
    }


def _simple_types(names: list[str] | None) -> list[SimpleType]:
    return [SimpleType(name=name) for name in names or ()]


def _alternatives(model: InstancePayload) -> dict[str, list[Alternative]]:
    return {
        field_name: [
            Alternative(
                # alternative values are simplified in place later on
                value=copy.deepcopy(entry.value),
                selected=entry.selected,
                users=[
                    UserSummary(id=user.id, name=user.name, username=user.username)
                    for user in entry.users
                ],
            )
            for entry in entries
        ]
        for field_name, entries in model.alternatives.items()
    }


def parse_instance(payload: Mapping[str, Any]) -> ResultWithOriginalMap[InstanceFull]:
    model = InstancePayload.model_validate(payload)
    instance = InstanceFull(
        id=model.id,
        types=_simple_types(model.types),
        space=model.space,
        alternatives=_alternatives(model),
    )
    return ResultWithOriginalMap(result=instance, original_map=dict(payload))


def parse_instance_summary(payload: Mapping[str, Any]) -> ResultWithOriginalMap[InstanceSummary]:
    model = InstancePayload.model_validate(payload)
    instance = InstanceSummary(id=model.id, types=_simple_types(model.types), space=model.space)
    return ResultWithOriginalMap(result=instance, original_map=dict(payload))


def parse_instance_label(payload: Mapping[str, Any]) -> ResultWithOriginalMap[InstanceLabel]:
    model = InstancePayload.model_validate(payload)
    instance = InstanceLabel(id=model.id, types=_simple_types(model.types), space=model.space)
    return ResultWithOriginalMap(result=instance, original_map=dict(payload))


def parse_neighbor(payload: NeighborPayload | Mapping[str, Any]) -> Neighbor:
    model = (
        payload if isinstance(payload, NeighborPayload) else NeighborPayload.model_validate(payload)
    )
    return Neighbor(
        id=model.id,
        name=model.name,
        space=model.space,
        types=_simple_types(model.types) if model.types is not None else None,
        inbound=[parse_neighbor(child) for child in model.inbound]
        if model.inbound is not None
        else None,
        outbound=[parse_neighbor(child) for child in model.outbound]
        if model.outbound is not None
        else None,
    )


def parse_scope(payload: ScopePayload | Mapping[str, Any]) -> Scope:
    model = payload if isinstance(payload, ScopePayload) else ScopePayload.model_validate(payload)
    return Scope(
        id=model.id,
        label=model.label,
        space=model.space,
        types=_simple_types(model.types),
        children=[parse_scope(child) for child in model.children]
        if model.children is not None
        else None,
    )


def parse_space_permissions(permissions: list[str]) -> SpacePermissions:
    granted = set(permissions)
    return SpacePermissions(
        can_read=SpacePermission.READ in granted,
        can_create=SpacePermission.CREATE in granted,
        can_delete=SpacePermission.DELETE in granted,
        can_release=SpacePermission.RELEASE in granted,
        can_suggest=SpacePermission.SUGGEST in granted,
        can_invite_for_review=SpacePermission.INVITE_FOR_REVIEW in granted,
        can_invite_for_suggestion=SpacePermission.INVITE_FOR_SUGGESTION in granted,
    )


def parse_space(payload: SpacePayload | Mapping[str, Any]) -> Space:
    model = payload if isinstance(payload, SpacePayload) else SpacePayload.model_validate(payload)
    return Space(
        name=model.name,
        client_space=model.client_space,
        internal_space=model.internal_space,
        permissions=parse_space_permissions(model.permissions)
        if model.permissions is not None
        else None,
    )


def parse_user_profile(payload: UserProfilePayload | Mapping[str, Any]) -> UserProfile:
    model = (
        payload
        if isinstance(payload, UserProfilePayload)
        else UserProfilePayload.model_validate(payload)
    )
    return UserProfile(
        id=model.id,
        username=model.username,
        name=model.name,
        given_name=model.given_name,
        family_name=model.family_name,
        email=model.email,
    )
