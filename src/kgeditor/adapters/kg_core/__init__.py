"""KG core adapter: batched metadata lookups and payload translation."""

from __future__ import annotations

from .client import KGCoreAPIError, KGCoreClient
from .translator import (
    parse_instance,
    parse_instance_label,
    parse_instance_summary,
    parse_neighbor,
    parse_scope,
    parse_structure_of_type,
)

__all__ = [
    "KGCoreAPIError",
    "KGCoreClient",
    "parse_instance",
    "parse_instance_label",
    "parse_instance_summary",
    "parse_neighbor",
    "parse_scope",
    "parse_structure_of_type",
]
