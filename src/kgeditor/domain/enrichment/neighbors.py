"""Type metadata for neighbor graphs.

Two passes: collect every type name in the tree, resolve them in one lookup,
then annotate every node. Traversal uses an explicit stack so that the depth
of a payload is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import enrich_simple_types, resolve_types

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kgeditor.domain.model import Neighbor
    from kgeditor.domain.ports import TypeStructureLookup

    from .types import TypesByName


def iter_neighbors(root: Neighbor) -> Iterator[Neighbor]:
    """Pre-order walk: a node, then its inbound subtrees, then its outbound subtrees."""

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        children = [*(node.inbound or ()), *(node.outbound or ())]
        stack.extend(reversed(children))


def collect_neighbor_types(root: Neighbor) -> set[str]:
    return {
        simple_type.name for node in iter_neighbors(root) for simple_type in node.types or ()
    }


def apply_neighbor_types(root: Neighbor, types_by_name: TypesByName) -> Neighbor:
    for node in iter_neighbors(root):
        enrich_simple_types(node.types, types_by_name)
    return root


def enrich_neighbor_recursively(root: Neighbor, *, lookup: TypeStructureLookup) -> Neighbor:
    types_by_name = resolve_types(sorted(collect_neighbor_types(root)), lookup=lookup)
    return apply_neighbor_types(root, types_by_name)
