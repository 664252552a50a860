"""User profile enrichment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kgeditor.domain.ids import simplify_fully_qualified_id

if TYPE_CHECKING:
    from kgeditor.domain.model import UserProfile
    from kgeditor.domain.ports import SpaceLookup, UserPictureLookup


def enrich_user_profile(
    profile: UserProfile,
    *,
    spaces: SpaceLookup,
    pictures: UserPictureLookup,
) -> UserProfile:
    """Shorten the profile id and attach the user's spaces and picture."""

    uuid = simplify_fully_qualified_id(profile.id)
    if uuid is not None:
        profile.id = str(uuid)

    profile.spaces = [space for space in spaces.get_spaces() if space.is_user_relevant]

    if profile.id is not None:
        found = pictures.get_user_pictures([profile.id])
        profile.picture = found.get(profile.id)
    return profile
