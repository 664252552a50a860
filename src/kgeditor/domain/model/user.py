"""Users, their profile and the spaces they can work in."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(kw_only=True, frozen=True)
class SpacePermissions:
    can_read: bool = False
    can_create: bool = False
    can_delete: bool = False
    can_release: bool = False
    can_suggest: bool = False
    can_invite_for_review: bool = False
    can_invite_for_suggestion: bool = False


@dataclass(kw_only=True)
class Space:
    name: str
    client_space: bool | None = None
    internal_space: bool | None = None
    permissions: SpacePermissions | None = None

    @property
    def is_user_relevant(self) -> bool:
        """Readable spaces that are neither client nor internal spaces."""
        if self.client_space or self.internal_space:
            return False
        return self.permissions is not None and self.permissions.can_read


@dataclass(kw_only=True)
class UserProfile:
    id: str | None
    username: str | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    spaces: list[Space] = field(default_factory=list[Space])
    picture: str | None = None
