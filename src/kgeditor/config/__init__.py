"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_float_env, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, CacheMode, RateLimit, ResilienceConfig, RetryPolicy
from .kg_core import KGCoreConfig, build_kg_core_config, get_kg_core_config
from .logging import configure_logging
from .storage import get_data_dir, get_http_cache_path

__all__ = [
    "CacheConfig",
    "CacheMode",
    "ConfigurationError",
    "KGCoreConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_kg_core_config",
    "configure_logging",
    "get_data_dir",
    "get_http_cache_path",
    "get_kg_core_config",
    "optional_float_env",
    "require_env_vars",
]
