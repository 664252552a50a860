"""JSON shapes consumed by the editor UI.

Keys are camelCase; display attributes that were never resolved are left out
rather than sent as ``null``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kgeditor.domain.model import InstanceFull, InstanceSummary

if TYPE_CHECKING:
    from kgeditor.domain.model import (
        Alternative,
        InstanceLabel,
        Neighbor,
        Scope,
        SimpleType,
        Space,
        StructureOfField,
        UserProfile,
        UserSummary,
    )

type Payload = dict[str, Any]


def _compact(payload: Payload) -> Payload:
    return {key: value for key, value in payload.items() if value is not None}


def simple_type_payload(simple_type: SimpleType) -> Payload:
    return _compact(
        {
            "name": simple_type.name,
            "label": simple_type.label,
            "color": simple_type.color,
            "labelField": simple_type.label_field,
        }
    )


def field_payload(field: StructureOfField) -> Payload:
    return _compact(
        {
            "fullyQualifiedName": field.fully_qualified_name,
            "label": field.label,
            "widget": field.widget,
            "searchable": field.searchable,
            "targetTypes": field.target_types or None,
            "value": field.value,
        }
    )


def user_summary_payload(user: UserSummary) -> Payload:
    return _compact(
        {"id": user.id, "name": user.name, "username": user.username, "picture": user.picture}
    )


def alternative_payload(alternative: Alternative) -> Payload:
    return {
        "value": alternative.value,
        "selected": alternative.selected,
        "users": [user_summary_payload(user) for user in alternative.users],
    }


def instance_payload(instance: InstanceLabel) -> Payload:
    """Serialize any instance projection; the concrete class decides which keys exist."""

    payload: Payload = _compact(
        {
            "id": instance.id,
            "space": instance.space,
            "name": instance.name,
        }
    )
    payload["types"] = [simple_type_payload(t) for t in instance.types]
    if isinstance(instance, (InstanceFull, InstanceSummary)):
        payload["fields"] = {name: field_payload(f) for name, f in instance.fields.items()}
    if isinstance(instance, InstanceFull):
        payload["promotedFields"] = list(instance.promoted_fields)
        if instance.label_field is not None:
            payload["labelField"] = instance.label_field
        payload["alternatives"] = {
            name: [alternative_payload(a) for a in alternatives]
            for name, alternatives in instance.alternatives.items()
        }
    return payload


def neighbor_payload(neighbor: Neighbor) -> Payload:
    return _compact(
        {
            "id": neighbor.id,
            "name": neighbor.name,
            "space": neighbor.space,
            "types": [simple_type_payload(t) for t in neighbor.types or ()],
            "inbound": [neighbor_payload(n) for n in neighbor.inbound or ()],
            "outbound": [neighbor_payload(n) for n in neighbor.outbound or ()],
        }
    )


def scope_payload(scope: Scope) -> Payload:
    payload = _compact(
        {
            "id": scope.id,
            "label": scope.label,
            "space": scope.space,
            "types": [simple_type_payload(t) for t in scope.types],
            "children": [scope_payload(child) for child in scope.children or ()],
        }
    )
    # unresolved status is meaningful to the UI
    payload["status"] = scope.status
    return payload


def space_payload(space: Space) -> Payload:
    permissions = space.permissions
    return _compact(
        {
            "name": space.name,
            "permissions": {
                "canRead": permissions.can_read,
                "canCreate": permissions.can_create,
                "canDelete": permissions.can_delete,
                "canRelease": permissions.can_release,
                "canSuggest": permissions.can_suggest,
                "canInviteForReview": permissions.can_invite_for_review,
                "canInviteForSuggestion": permissions.can_invite_for_suggestion,
            }
            if permissions is not None
            else None,
        }
    )


def user_profile_payload(profile: UserProfile) -> Payload:
    payload = _compact(
        {
            "id": profile.id,
            "username": profile.username,
            "name": profile.name,
            "givenName": profile.given_name,
            "familyName": profile.family_name,
            "email": profile.email,
            "picture": profile.picture,
        }
    )
    payload["spaces"] = [space_payload(space) for space in profile.spaces]
    return payload
