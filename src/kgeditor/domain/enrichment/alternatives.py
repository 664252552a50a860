"""Normalise alternative proposals and attach contributor pictures."""

from __future__ import annotations

from itertools import chain
from logging import getLogger
from typing import TYPE_CHECKING

from kgeditor.domain.ids import simplify_entity_id, simplify_id_if_map

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kgeditor.domain.model import Alternative, InstanceFull, UserSummary
    from kgeditor.domain.ports import UserPictureLookup

log = getLogger(__name__)


def _iter_alternatives(instance: InstanceFull) -> Iterator[Alternative]:
    return chain.from_iterable(instance.alternatives.values())


def _iter_users(instance: InstanceFull) -> Iterator[UserSummary]:
    for alternative in _iter_alternatives(instance):
        yield from alternative.users


def normalize_alternatives(instance: InstanceFull, *, lookup: UserPictureLookup) -> InstanceFull:
    """Simplify ids inside the alternatives and fetch all user pictures in one call."""

    user_ids: dict[str, None] = {}
    for user in _iter_users(instance):
        simplify_entity_id(user)
        if user.id is not None:
            user_ids.setdefault(user.id, None)

    for alternative in _iter_alternatives(instance):
        simplify_id_if_map(alternative.value)

    if not user_ids:
        return instance

    # TODO: pictures are repeated for every alternative a user contributed to;
    # a root-level id -> picture map would shrink the payload.
    pictures = lookup.get_user_pictures(list(user_ids))
    log.debug("Resolved %d of %d user pictures", len(pictures), len(user_ids))
    for user in _iter_users(instance):
        user.picture = pictures.get(user.id) if user.id is not None else None
    return instance
