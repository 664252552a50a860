from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from kgeditor.config import KGCoreConfig, build_kg_core_config

DATA_DIR = Path(__file__).resolve().parent / "data"

SCHEMA_NAME = "http://schema.org/name"
SCHEMA_FAMILY_NAME = "http://schema.org/familyName"
SCHEMA_AFFILIATION = "http://schema.org/affiliation"


@pytest.fixture(autouse=True)
def _isolated_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("KGEDITOR_DATA_DIR", str(tmp_path / "kgeditor"))


@pytest.fixture
def kg_core_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KG_CORE_API_URL", "https://core.kg.example.org/v3")
    monkeypatch.setenv("KG_CORE_TOKEN", "secret-token")
    monkeypatch.delenv("KG_CORE_STAGE", raising=False)
    monkeypatch.delenv("KG_CORE_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("KG_CORE_HTTP_CACHE", raising=False)


@pytest.fixture
def kg_core_config() -> KGCoreConfig:
    return build_kg_core_config(base_url="https://core.kg.example.org/v3", token="secret-token")


@pytest.fixture
def raw_instance() -> dict[str, Any]:
    return json.loads((DATA_DIR / "instance_person.json").read_text())
