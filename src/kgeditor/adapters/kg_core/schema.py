"""Pydantic models describing the KG core API payloads."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_ORG: Final[str] = "http://schema.org/"
KG_VOCAB: Final[str] = "https://core.kg.ebrains.eu/vocab/"
KG_META: Final[str] = f"{KG_VOCAB}meta/"

ID: Final[str] = "@id"
TYPE: Final[str] = "@type"
IDENTIFIER: Final[str] = f"{SCHEMA_ORG}identifier"
NAME: Final[str] = f"{SCHEMA_ORG}name"
ALTERNATE_NAME: Final[str] = f"{SCHEMA_ORG}alternateName"
GIVEN_NAME: Final[str] = f"{SCHEMA_ORG}givenName"
FAMILY_NAME: Final[str] = f"{SCHEMA_ORG}familyName"
EMAIL: Final[str] = f"{SCHEMA_ORG}email"

META_SPACE: Final[str] = f"{KG_META}space"
META_COLOR: Final[str] = f"{KG_META}color"
META_LABEL_PROPERTY: Final[str] = f"{KG_META}type/labelProperty"
META_PROPERTIES: Final[str] = f"{KG_META}properties"
META_WIDGET: Final[str] = f"{KG_META}property/widget"
META_SEARCHABLE: Final[str] = f"{KG_META}property/searchable"
META_TARGET_TYPES: Final[str] = f"{KG_META}targetTypes"
META_ALTERNATIVE: Final[str] = f"{KG_META}alternative"
META_VALUE: Final[str] = f"{KG_META}value"
META_SELECTED: Final[str] = f"{KG_META}selected"
META_USER: Final[str] = f"{KG_META}user"
META_CLIENT_SPACE: Final[str] = f"{KG_META}space/clientSpace"
META_INTERNAL_SPACE: Final[str] = f"{KG_META}space/internalSpace"
META_PERMISSIONS: Final[str] = f"{KG_META}permissions"


def _as_list(value: object) -> object:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class KGCoreBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResultEnvelope(KGCoreBaseModel):
    """``{"data": ...}`` wrapper used by every KG core response."""

    data: Any = None
    message: str | None = None
    error: Any = None


class TargetTypePayload(KGCoreBaseModel):
    name: str = Field(alias=IDENTIFIER)


class PropertyPayload(KGCoreBaseModel):
    identifier: str = Field(alias=IDENTIFIER)
    name: str | None = Field(default=None, alias=NAME)
    widget: str | None = Field(default=None, alias=META_WIDGET)
    searchable: bool = Field(default=False, alias=META_SEARCHABLE)
    target_types: list[TargetTypePayload] = Field(
        default_factory=list["TargetTypePayload"], alias=META_TARGET_TYPES
    )


class TypePayload(KGCoreBaseModel):
    identifier: str = Field(alias=IDENTIFIER)
    name: str | None = Field(default=None, alias=NAME)
    color: str | None = Field(default=None, alias=META_COLOR)
    label_property: str | None = Field(default=None, alias=META_LABEL_PROPERTY)
    properties: list[PropertyPayload] = Field(
        default_factory=list["PropertyPayload"], alias=META_PROPERTIES
    )


class TypeResultPayload(KGCoreBaseModel):
    data: TypePayload | None = None


class TypesByNameResponse(KGCoreBaseModel):
    data: dict[str, TypeResultPayload] | None = None


class ReleaseStatusResultPayload(KGCoreBaseModel):
    data: str | None = None


class ReleaseStatusResponse(KGCoreBaseModel):
    data: dict[str, ReleaseStatusResultPayload] | None = None


class UserPayload(KGCoreBaseModel):
    id: str | None = Field(default=None, alias=ID)
    name: str | None = Field(default=None, alias=NAME)
    username: str | None = Field(default=None, alias=ALTERNATE_NAME)


class AlternativePayload(KGCoreBaseModel):
    value: Any = Field(default=None, alias=META_VALUE)
    selected: bool = Field(default=False, alias=META_SELECTED)
    users: list[UserPayload] = Field(default_factory=list["UserPayload"], alias=META_USER)

    _normalize_users = field_validator("users", mode="before")(_as_list)


class InstancePayload(KGCoreBaseModel):
    """The typed part of an instance; its attribute values stay in the raw map."""

    id: str | None = Field(default=None, alias=ID)
    types: list[str] = Field(default_factory=list[str], alias=TYPE)
    space: str | None = Field(default=None, alias=META_SPACE)
    alternatives: dict[str, list[AlternativePayload]] = Field(
        default_factory=dict[str, list[AlternativePayload]], alias=META_ALTERNATIVE
    )

    _normalize_types = field_validator("types", mode="before")(_as_list)

    @field_validator("alternatives", mode="before")
    @classmethod
    def _normalize_alternatives(cls, value: object) -> object:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: _as_list(entry) for key, entry in value.items()}
        return value


class NeighborPayload(KGCoreBaseModel):
    id: str
    name: str | None = None
    space: str | None = None
    types: list[str] | None = None
    inbound: list[NeighborPayload] | None = None
    outbound: list[NeighborPayload] | None = None


class ScopePayload(KGCoreBaseModel):
    id: str
    label: str | None = None
    space: str | None = None
    types: list[str] = Field(default_factory=list[str])
    children: list[ScopePayload] | None = None

    _normalize_types = field_validator("types", mode="before")(_as_list)


class UserProfilePayload(KGCoreBaseModel):
    id: str | None = Field(default=None, alias=ID)
    username: str | None = Field(default=None, alias=ALTERNATE_NAME)
    name: str | None = Field(default=None, alias=NAME)
    given_name: str | None = Field(default=None, alias=GIVEN_NAME)
    family_name: str | None = Field(default=None, alias=FAMILY_NAME)
    email: str | None = Field(default=None, alias=EMAIL)


class UserProfileResponse(KGCoreBaseModel):
    data: UserProfilePayload | None = None


class SpacePayload(KGCoreBaseModel):
    name: str = Field(alias=NAME)
    client_space: bool | None = Field(default=None, alias=META_CLIENT_SPACE)
    internal_space: bool | None = Field(default=None, alias=META_INTERNAL_SPACE)
    permissions: list[str] | None = Field(default=None, alias=META_PERMISSIONS)


class SpacesResponse(KGCoreBaseModel):
    data: list[SpacePayload] | None = None
    total: int | None = None
