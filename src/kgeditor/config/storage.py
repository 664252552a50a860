"""Where kgeditor keeps files between runs (currently only the HTTP cache)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

DATA_DIR_ENV: Final = "KGEDITOR_DATA_DIR"
HTTP_CACHE_FILENAME: Final = "kg_core_cache.sqlite"


def get_data_dir() -> Path:
    """``KGEDITOR_DATA_DIR`` if set, else ``kgeditor`` under the user's cache directory."""

    explicit = os.getenv(DATA_DIR_ENV)
    if explicit:
        return Path(explicit).expanduser().resolve()
    if os.name == "nt":
        cache_root = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        cache_root = os.getenv("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return (Path(cache_root) / "kgeditor").expanduser().resolve()


def get_http_cache_path() -> Path:
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / HTTP_CACHE_FILENAME
