from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from kgeditor.domain.model import UserProfile
from kgeditor.ui import cli
from tests.helpers.lookups import FakeKGCore, make_type

if TYPE_CHECKING:
    from pathlib import Path

NAME = "http://schema.org/name"
PERSON = "https://openminds.ebrains.eu/core/Person"


@pytest.fixture
def fake_core(monkeypatch: pytest.MonkeyPatch) -> FakeKGCore:
    fake = FakeKGCore(
        types={PERSON: make_type(PERSON, label="Person", label_field=NAME, fields=[NAME])},
        statuses={"B": "RELEASED"},
        profile=UserProfile(id="u1", username="ada"),
    )
    monkeypatch.setattr("kgeditor.app.KGCoreClient", lambda: fake)
    return fake


def _write(tmp_path: Path, payload: Any) -> str:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload))
    return str(path)


@pytest.mark.usefixtures("fake_core")
def test_instance_command_prints_enriched_payload(
    raw_instance: dict[str, Any],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["instance", _write(tmp_path, {"data": raw_instance})])

    output = json.loads(capsys.readouterr().out)
    assert output["id"] == "9a4f0b6e-3c1f-4a41-8c2a-2d1b5c2f7e10"
    assert output["labelField"] == NAME
    assert output["fields"][NAME]["value"] == "Ada"


@pytest.mark.usefixtures("fake_core")
def test_instances_command_supports_label_view(
    raw_instance: dict[str, Any],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["instances", _write(tmp_path, [raw_instance]), "--view", "label"])

    output = json.loads(capsys.readouterr().out)
    (label,) = output.values()
    assert label["name"] == "Ada"
    assert "fields" not in label


@pytest.mark.usefixtures("fake_core")
def test_scope_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["scope", _write(tmp_path, {"id": "A", "children": [{"id": "B"}]})])

    output = json.loads(capsys.readouterr().out)
    assert output["status"] is None
    assert output["children"][0]["status"] == "RELEASED"


def test_me_command(fake_core: FakeKGCore, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["me"])

    output = json.loads(capsys.readouterr().out)
    assert output == {"id": "u1", "username": "ada", "spaces": []}
    assert fake_core.profile_calls == 1


def test_invalid_input_exits_with_code_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["instances", _write(tmp_path, {"not": "a list"})])

    assert excinfo.value.code == 2


def test_missing_file_exits_with_code_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scope", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 2


def test_lookup_failure_exits_with_code_1(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def failing_client() -> FakeKGCore:
        raise RuntimeError("KG core unavailable")

    monkeypatch.setattr("kgeditor.app.KGCoreClient", failing_client)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scope", _write(tmp_path, {"id": "A"})])

    assert excinfo.value.code == 1
