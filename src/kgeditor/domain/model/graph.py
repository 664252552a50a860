"""Tree-shaped payloads: neighborhoods and release scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kgeditor.domain.model.instance import SimpleType


@dataclass(kw_only=True)
class Neighbor:
    """Node of an incoming/outgoing link graph. ``None`` child lists mean no children."""

    id: str
    name: str | None = None
    space: str | None = None
    types: list[SimpleType] | None = None
    inbound: list[Neighbor] | None = None
    outbound: list[Neighbor] | None = None


@dataclass(kw_only=True)
class Scope:
    """Node of a containment tree, annotated with its release status."""

    id: str
    label: str | None = None
    space: str | None = None
    types: list[SimpleType] = field(default_factory=list["SimpleType"])
    children: list[Scope] | None = None
    status: str | None = None
