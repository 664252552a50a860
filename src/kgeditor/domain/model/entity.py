"""Shared building blocks: identity contract and store envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


class HasId(Protocol):
    """Anything carrying a mutable string identifier."""

    id: str | None


@dataclass(slots=True)
class KGCoreResult[T]:
    """Envelope of a single store lookup. ``data is None`` means "not found"."""

    data: T | None = None


@dataclass(slots=True)
class ResultWithOriginalMap[T]:
    """A parsed store payload together with the untouched attribute map it came from."""

    result: T
    original_map: dict[str, Any] = field(default_factory=dict[str, Any])
