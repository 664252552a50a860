"""Batched lookups against the KG core.

Every lookup takes the full key set of one enrichment call. Implementations
raise on transport failures; a key missing from the returned mapping means the
store has nothing for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from kgeditor.domain.model import (
        KGCoreResult,
        ReleaseTreeScope,
        Space,
        StructureOfType,
        UserProfile,
    )


@runtime_checkable
class TypeStructureLookup(Protocol):
    def get_types_by_name(
        self,
        names: Sequence[str],
        *,
        with_fields: bool = True,
    ) -> Mapping[str, KGCoreResult[StructureOfType]]: ...


@runtime_checkable
class ReleaseStatusLookup(Protocol):
    def get_release_status(
        self,
        ids: Sequence[str],
        *,
        scope: ReleaseTreeScope,
    ) -> Mapping[str, KGCoreResult[str]]: ...


@runtime_checkable
class UserPictureLookup(Protocol):
    def get_user_pictures(self, ids: Sequence[str]) -> Mapping[str, str]: ...


@runtime_checkable
class UserProfileLookup(Protocol):
    def get_user_profile(self) -> UserProfile | None: ...


@runtime_checkable
class SpaceLookup(Protocol):
    def get_spaces(self) -> list[Space]: ...


class KGCoreLookups(
    TypeStructureLookup,
    ReleaseStatusLookup,
    UserPictureLookup,
    UserProfileLookup,
    SpaceLookup,
    Protocol,
):
    """All lookups served by one KG core connection."""


__all__ = [
    "KGCoreLookups",
    "ReleaseStatusLookup",
    "SpaceLookup",
    "TypeStructureLookup",
    "UserPictureLookup",
    "UserProfileLookup",
]
