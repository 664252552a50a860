"""Type metadata and release status for scope trees."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from kgeditor.domain.model import ReleaseTreeScope

from .types import enrich_simple_types, resolve_types

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from kgeditor.domain.model import KGCoreResult, Scope
    from kgeditor.domain.ports import ReleaseStatusLookup, TypeStructureLookup

    from .types import TypesByName

log = getLogger(__name__)


def iter_scopes(root: Scope) -> Iterator[Scope]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children or ()))


def collect_scope_types_and_ids(root: Scope) -> tuple[set[str], set[str]]:
    types: set[str] = set()
    ids: set[str] = set()
    for node in iter_scopes(root):
        types.update(simple_type.name for simple_type in node.types)
        ids.add(node.id)
    return types, ids


def apply_scope_types(root: Scope, types_by_name: TypesByName) -> Scope:
    for node in iter_scopes(root):
        enrich_simple_types(node.types, types_by_name)
    return root


def apply_release_status(root: Scope, statuses: Mapping[str, KGCoreResult[str]]) -> Scope:
    for node in iter_scopes(root):
        result = statuses.get(node.id)
        node.status = result.data if result is not None else None
    return root


def enrich_scope_recursively(
    root: Scope,
    *,
    types: TypeStructureLookup,
    releases: ReleaseStatusLookup,
) -> Scope:
    """Annotate every node of the tree with type metadata and release status."""

    type_names, ids = collect_scope_types_and_ids(root)
    types_by_name = resolve_types(sorted(type_names), lookup=types)
    statuses = releases.get_release_status(sorted(ids), scope=ReleaseTreeScope.TOP_INSTANCE_ONLY)
    log.debug("Resolved release status for %d of %d scope nodes", len(statuses), len(ids))
    apply_scope_types(root, types_by_name)
    return apply_release_status(root, statuses)
