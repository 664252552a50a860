"""HTTP client for the KG core API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, cast

from kgeditor.adapters.http_resilience import ResilientClient
from kgeditor.config.kg_core import get_kg_core_config

from .schema import SpacesResponse, UserProfileResponse
from .translator import (
    parse_release_status,
    parse_space,
    parse_types_by_name,
    parse_user_profile,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from kgeditor.config.http_resilience import ResilienceConfig
    from kgeditor.config.kg_core import KGCoreConfig
    from kgeditor.domain.model import (
        KGCoreResult,
        ReleaseTreeScope,
        Space,
        StructureOfType,
        UserProfile,
    )
    from kgeditor.domain.ports import (
        ReleaseStatusLookup,
        SpaceLookup,
        TypeStructureLookup,
        UserPictureLookup,
        UserProfileLookup,
    )

log = getLogger(__name__)

SPACES_PAGE_SIZE = 100


class KGCoreAPIError(RuntimeError):
    """Raised when the KG core API returns an unexpected response."""


class KGCoreClient:
    """Batched lookups against the KG core, one HTTP request per lookup."""

    def __init__(
        self,
        *,
        config: KGCoreConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_kg_core_config()
        self._resilience = self._config.resilience
        self._client_factory = client_factory or ResilientClient

    def get_types_by_name(
        self,
        names: Sequence[str],
        *,
        with_fields: bool = True,
    ) -> dict[str, KGCoreResult[StructureOfType]]:
        return asyncio.run(self._get_types_by_name_async(list(names), with_fields=with_fields))

    def get_release_status(
        self,
        ids: Sequence[str],
        *,
        scope: ReleaseTreeScope,
    ) -> dict[str, KGCoreResult[str]]:
        return asyncio.run(self._get_release_status_async(list(ids), scope=scope))

    def get_user_pictures(self, ids: Sequence[str]) -> dict[str, str]:
        return asyncio.run(self._get_user_pictures_async(list(ids)))

    def get_user_profile(self) -> UserProfile | None:
        return asyncio.run(self._get_user_profile_async())

    def get_spaces(self) -> list[Space]:
        return asyncio.run(self._get_spaces_async())

    async def _get_types_by_name_async(
        self,
        names: list[str],
        *,
        with_fields: bool,
    ) -> dict[str, KGCoreResult[StructureOfType]]:
        if not names:
            return {}
        params = {
            "stage": self._config.stage,
            "withProperties": "true" if with_fields else "false",
        }
        async with self._client_factory(self._resilience) as client:
            payload = await self._request(client, "POST", "types/byName", params=params, json=names)
        types = parse_types_by_name(payload)
        found = sum(result.data is not None for result in types.values())
        log.debug("KG core resolved %d of %d types", found, len(names))
        return types

    async def _get_release_status_async(
        self,
        ids: list[str],
        *,
        scope: ReleaseTreeScope,
    ) -> dict[str, KGCoreResult[str]]:
        if not ids:
            return {}
        params = {"releaseTreeScope": str(scope)}
        async with self._client_factory(self._resilience) as client:
            payload = await self._request(
                client, "POST", "instancesByIds/release/status", params=params, json=ids
            )
        return parse_release_status(payload)

    async def _get_user_pictures_async(self, ids: list[str]) -> dict[str, str]:
        if not ids:
            return {}
        async with self._client_factory(self._resilience) as client:
            payload = await self._request(client, "POST", "users/pictures", json=ids)
        # older deployments answer without the data envelope
        data = payload.get("data")
        pictures = cast(dict[str, object], data) if isinstance(data, dict) else payload
        return {key: value for key, value in pictures.items() if isinstance(value, str)}

    async def _get_user_profile_async(self) -> UserProfile | None:
        async with self._client_factory(self._resilience) as client:
            payload = await self._request(client, "GET", "users/me")
        response = UserProfileResponse.model_validate(payload)
        if response.data is None:
            return None
        return parse_user_profile(response.data)

    async def _get_spaces_async(self) -> list[Space]:
        spaces: list[Space] = []
        offset = 0
        async with self._client_factory(self._resilience) as client:
            while True:
                params = {
                    "permissions": "true",
                    "from": str(offset),
                    "size": str(SPACES_PAGE_SIZE),
                }
                payload = await self._request(client, "GET", "spaces", params=params)
                page = SpacesResponse.model_validate(payload)
                items = page.data or []
                spaces.extend(parse_space(item) for item in items)
                offset += len(items)
                if not items or page.total is None or offset >= page.total:
                    break
        return spaces

    async def _request(
        self,
        client: ResilientClient,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: object = None,
    ) -> dict[str, object]:
        if self._resilience.base_url is None:
            raise KGCoreAPIError("Missing KG core base_url in resilience configuration")
        payload = await client.request_json(method, path, params=params, json=json)
        if not isinstance(payload, dict):
            raise KGCoreAPIError(f"Unexpected KG core response payload for {method} {path}")
        return cast(dict[str, object], payload)


if TYPE_CHECKING:
    _types_check: TypeStructureLookup = KGCoreClient()
    _release_check: ReleaseStatusLookup = KGCoreClient()
    _pictures_check: UserPictureLookup = KGCoreClient()
    _profile_check: UserProfileLookup = KGCoreClient()
    _spaces_check: SpaceLookup = KGCoreClient()
