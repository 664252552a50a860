"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ReleaseTreeScope(StrEnum):
    TOP_INSTANCE_ONLY = "TOP_INSTANCE_ONLY"
    CHILDREN_ONLY = "CHILDREN_ONLY"
    CHILDREN_ONLY_RESTRICTED = "CHILDREN_ONLY_RESTRICTED"


class ReleaseStatus(StrEnum):
    """Known release states. Status fields keep the raw string from the store."""

    RELEASED = "RELEASED"
    UNRELEASED = "UNRELEASED"
    HAS_CHANGED = "HAS_CHANGED"


class Widget(StrEnum):
    INPUT_TEXT = "InputText"
    INPUT_TEXT_MULTIPLE = "InputTextMultiple"
    TEXT_AREA = "TextArea"
    INPUT_NUMBER = "InputNumber"
    INPUT_DATE = "InputDate"
    CHECKBOX = "CheckBox"
    SIMPLE_DROPDOWN = "SimpleDropdown"
    DYNAMIC_DROPDOWN = "DynamicDropdown"
    DYNAMIC_TABLE = "DynamicTable"
    NESTED = "Nested"
    UNSUPPORTED = "UnsupportedField"


class SpacePermission(StrEnum):
    READ = "READ"
    CREATE = "CREATE"
    DELETE = "DELETE"
    RELEASE = "RELEASE"
    SUGGEST = "SUGGEST"
    INVITE_FOR_REVIEW = "INVITE_FOR_REVIEW"
    INVITE_FOR_SUGGESTION = "INVITE_FOR_SUGGESTION"
