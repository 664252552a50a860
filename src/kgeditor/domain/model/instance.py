"""Instance projections handed to the editor UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kgeditor.domain.model.structure import StructureOfField


@dataclass(kw_only=True)
class SimpleType:
    """Type reference of an instance. Display attributes stay unset until enriched."""

    name: str
    label: str | None = None
    color: str | None = None
    label_field: str | None = None


@dataclass(kw_only=True)
class UserSummary:
    id: str | None
    name: str | None = None
    username: str | None = None
    picture: str | None = None


@dataclass(kw_only=True)
class Alternative:
    """A value proposed for a field, attributed to the users who contributed it."""

    value: Any = None
    selected: bool = False
    users: list[UserSummary] = field(default_factory=list[UserSummary])


@dataclass(kw_only=True)
class InstanceLabel:
    id: str | None
    types: list[SimpleType] = field(default_factory=list[SimpleType])
    space: str | None = None
    name: str | None = None


@dataclass(kw_only=True)
class InstanceSummary(InstanceLabel):
    fields: dict[str, StructureOfField] = field(default_factory=dict[str, "StructureOfField"])


@dataclass(kw_only=True)
class InstanceFull(InstanceLabel):
    fields: dict[str, StructureOfField] = field(default_factory=dict[str, "StructureOfField"])
    promoted_fields: list[str] = field(default_factory=list[str])
    label_field: str | None = None
    alternatives: dict[str, list[Alternative]] = field(
        default_factory=dict[str, list[Alternative]]
    )
