"""Application orchestration entry points."""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Any

from kgeditor.adapters.kg_core import (
    KGCoreClient,
    parse_instance,
    parse_instance_label,
    parse_instance_summary,
    parse_neighbor,
    parse_scope,
)
from kgeditor.domain.enrichment import (
    InstanceEnrichment,
    enrich_neighbor_recursively,
    enrich_scope_recursively,
    enrich_user_profile,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from kgeditor.domain.model import (
        InstanceFull,
        InstanceLabel,
        Neighbor,
        Scope,
        UserProfile,
    )
    from kgeditor.domain.ports import KGCoreLookups

log = getLogger(__name__)


class InstanceView(StrEnum):
    FULL = "full"
    SUMMARY = "summary"
    LABEL = "label"


def build_instance_enrichment(lookups: KGCoreLookups | None = None) -> InstanceEnrichment:
    active = lookups or KGCoreClient()
    return InstanceEnrichment(types=active, users=active)


def enrich_instance_payload(
    payload: Mapping[str, Any],
    *,
    lookups: KGCoreLookups | None = None,
) -> InstanceFull:
    """Enrich a single raw instance as returned by the KG core."""

    enrichment = build_instance_enrichment(lookups)
    return enrichment.enrich_instance(parse_instance(payload))


def enrich_instance_payloads(
    payloads: Sequence[Mapping[str, Any]],
    *,
    view: InstanceView = InstanceView.FULL,
    lookups: KGCoreLookups | None = None,
) -> dict[str, InstanceLabel]:
    """Enrich a batch of raw instances in the requested projection, keyed by short id."""

    enrichment = build_instance_enrichment(lookups)
    log.info("Enriching %d instances (view=%s)", len(payloads), view)
    # payload position keys the batch so instances without an id are not collapsed
    if view is InstanceView.LABEL:
        labels = {str(i): parse_instance_label(p) for i, p in enumerate(payloads)}
        return dict(enrichment.enrich_instances_label(labels))
    if view is InstanceView.SUMMARY:
        summaries = {str(i): parse_instance_summary(p) for i, p in enumerate(payloads)}
        return dict(enrichment.enrich_instances_summary(summaries))
    full = {str(i): parse_instance(p) for i, p in enumerate(payloads)}
    return dict(enrichment.enrich_instances(full))


def enrich_neighbor_payload(
    payload: Mapping[str, Any],
    *,
    lookups: KGCoreLookups | None = None,
) -> Neighbor:
    return enrich_neighbor_recursively(parse_neighbor(payload), lookup=lookups or KGCoreClient())


def enrich_scope_payload(
    payload: Mapping[str, Any],
    *,
    lookups: KGCoreLookups | None = None,
) -> Scope:
    active = lookups or KGCoreClient()
    return enrich_scope_recursively(parse_scope(payload), types=active, releases=active)


def fetch_user_profile(*, lookups: KGCoreLookups | None = None) -> UserProfile | None:
    """Fetch the current user's profile with spaces and picture attached."""

    active = lookups or KGCoreClient()
    profile = active.get_user_profile()
    if profile is None:
        log.warning("KG core returned no profile for the current user")
        return None
    return enrich_user_profile(profile, spaces=active, pictures=active)
