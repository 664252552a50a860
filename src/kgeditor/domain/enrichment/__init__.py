"""Enrichment of raw store payloads with type structures and related metadata."""

from __future__ import annotations

from .alternatives import normalize_alternatives
from .fields import merge_fields
from .instances import InstanceEnrichment
from .neighbors import enrich_neighbor_recursively
from .scopes import enrich_scope_recursively
from .types import resolve_types
from .users import enrich_user_profile

__all__ = [
    "InstanceEnrichment",
    "enrich_neighbor_recursively",
    "enrich_scope_recursively",
    "enrich_user_profile",
    "merge_fields",
    "normalize_alternatives",
    "resolve_types",
]
