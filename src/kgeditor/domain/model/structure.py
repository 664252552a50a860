"""Type structures: the field templates and display metadata of a type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kgeditor.domain.model.enums import Widget


@dataclass(kw_only=True)
class StructureOfField:
    """Field template of a type.

    ``value`` is empty in the template and only filled on a private copy made
    while merging a specific instance.
    """

    fully_qualified_name: str
    label: str | None = None
    widget: str | None = None
    searchable: bool = False
    target_types: list[str] = field(default_factory=list[str])
    value: Any = None

    @property
    def is_nested(self) -> bool:
        return self.widget == Widget.NESTED


@dataclass(kw_only=True)
class StructureOfType:
    name: str
    label: str | None = None
    color: str | None = None
    label_field: str | None = None
    fields: dict[str, StructureOfField] = field(default_factory=dict[str, StructureOfField])
    promoted_fields: list[str] = field(default_factory=list[str])
