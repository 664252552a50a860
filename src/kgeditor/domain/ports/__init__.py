"""Ports to the external collaborators consulted during enrichment."""

from __future__ import annotations

from .lookups import (
    KGCoreLookups,
    ReleaseStatusLookup,
    SpaceLookup,
    TypeStructureLookup,
    UserPictureLookup,
    UserProfileLookup,
)

__all__ = [
    "KGCoreLookups",
    "ReleaseStatusLookup",
    "SpaceLookup",
    "TypeStructureLookup",
    "UserPictureLookup",
    "UserProfileLookup",
]
