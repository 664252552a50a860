"""Identifier simplification.

The store addresses everything with fully-qualified IRIs such as
``https://kg.ebrains.eu/api/instances/<uuid>``. The UI only ever sees the
trailing segment. Simplification mutates payloads in place; input it does not
recognise is handed back untouched.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, cast
from uuid import UUID

if TYPE_CHECKING:
    from kgeditor.domain.model import HasId

ID_KEY = "@id"


def simplify_id(identifier: str | None) -> str | None:
    """Return the trailing path segment of a fully-qualified identifier."""

    if identifier is None:
        return None
    stripped = identifier.rstrip("/")
    if "/" not in stripped:
        return identifier
    return stripped.rsplit("/", 1)[1]


def simplify_fully_qualified_id(identifier: str | None) -> UUID | None:
    """Return the UUID behind a fully-qualified identifier, if it carries one."""

    simple = simplify_id(identifier)
    if not simple:
        return None
    try:
        return UUID(simple)
    except ValueError:
        return None


def simplify_id_if_map[T](value: T) -> T:
    """Simplify the ``@id`` of a mapping and of every identified object nested in it."""

    if isinstance(value, MutableMapping):
        mapping = cast(MutableMapping[str, object], value)
        identifier = mapping.get(ID_KEY)
        if isinstance(identifier, str):
            mapping[ID_KEY] = simplify_id(identifier)
        for key, nested in mapping.items():
            if key != ID_KEY:
                simplify_id_if_map(nested)
    elif isinstance(value, list):
        for item in cast(list[object], value):
            simplify_id_if_map(item)
    return value


def simplify_entity_id[E: HasId](entity: E) -> E:
    entity.id = simplify_id(entity.id)
    return entity
