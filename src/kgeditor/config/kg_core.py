"""KG core API configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import optional_float_env, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, CacheMode, ResilienceConfig, RetryPolicy

DEFAULT_KG_CORE_STAGE = "IN_PROGRESS"
DEFAULT_KG_CORE_TIMEOUT_SECONDS = 30.0
KG_CORE_STAGES = frozenset({"IN_PROGRESS", "RELEASED"})


def _should_cache_payload(payload: object) -> bool:
    # error envelopes come back with a null data member
    return isinstance(payload, dict) and payload.get("data") is not None


def _parse_cache_mode(value: str | None) -> CacheMode:
    if not value:
        return CacheMode.OFF
    try:
        return CacheMode(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in CacheMode)
        raise ConfigurationError(
            f"Unsupported HTTP cache mode {value!r} (expected one of {allowed})"
        ) from exc


@dataclass(frozen=True, slots=True)
class KGCoreConfig:
    resilience: ResilienceConfig
    stage: str = DEFAULT_KG_CORE_STAGE


def build_kg_core_config(
    *,
    base_url: str,
    token: str,
    stage: str = DEFAULT_KG_CORE_STAGE,
    timeout_seconds: float = DEFAULT_KG_CORE_TIMEOUT_SECONDS,
    cache_mode: CacheMode = CacheMode.OFF,
) -> KGCoreConfig:
    """Assemble the KG core configuration for a given endpoint and bearer token."""

    if stage not in KG_CORE_STAGES:
        allowed = ", ".join(sorted(KG_CORE_STAGES))
        raise ConfigurationError(f"Unsupported KG core stage {stage!r} (expected one of {allowed})")

    resilience = ResilienceConfig(
        name="kg-core",
        base_url=base_url.rstrip("/") + "/",
        bearer_token=token,
        timeout_seconds=timeout_seconds,
        retry=RetryPolicy(total=3),
        cache=CacheConfig(mode=cache_mode, should_cache=_should_cache_payload),
    )
    return KGCoreConfig(resilience=resilience, stage=stage)


def get_kg_core_config() -> KGCoreConfig:
    values = require_env_vars(("KG_CORE_API_URL", "KG_CORE_TOKEN"))
    return build_kg_core_config(
        base_url=values["KG_CORE_API_URL"],
        token=values["KG_CORE_TOKEN"],
        stage=os.getenv("KG_CORE_STAGE") or DEFAULT_KG_CORE_STAGE,
        timeout_seconds=optional_float_env(
            "KG_CORE_TIMEOUT_SECONDS", DEFAULT_KG_CORE_TIMEOUT_SECONDS
        ),
        cache_mode=_parse_cache_mode(os.getenv("KG_CORE_HTTP_CACHE")),
    )
