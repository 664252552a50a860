"""Public domain model surface."""

from __future__ import annotations

from kgeditor.domain.model.entity import HasId, KGCoreResult, ResultWithOriginalMap
from kgeditor.domain.model.enums import ReleaseStatus, ReleaseTreeScope, SpacePermission, Widget
from kgeditor.domain.model.graph import Neighbor, Scope
from kgeditor.domain.model.instance import (
    Alternative,
    InstanceFull,
    InstanceLabel,
    InstanceSummary,
    SimpleType,
    UserSummary,
)
from kgeditor.domain.model.structure import StructureOfField, StructureOfType
from kgeditor.domain.model.user import Space, SpacePermissions, UserProfile

__all__ = [  # noqa: RUF022
    # base
    "HasId",
    "KGCoreResult",
    "ResultWithOriginalMap",
    # type structures
    "StructureOfField",
    "StructureOfType",
    # instances
    "SimpleType",
    "InstanceLabel",
    "InstanceSummary",
    "InstanceFull",
    "Alternative",
    "UserSummary",
    # trees
    "Neighbor",
    "Scope",
    # users
    "UserProfile",
    "Space",
    "SpacePermissions",
    # enums
    "ReleaseStatus",
    "ReleaseTreeScope",
    "SpacePermission",
    "Widget",
]
