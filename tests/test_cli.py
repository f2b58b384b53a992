from __future__ import annotations

import json

from typer.testing import CliRunner

from block_animator.cli import app

runner = CliRunner()

VALID = {
    "enabled": True,
    "type": "fromTo",
    "trigger": "click",
    "properties": {"x": "50px"},
    "timing": {"duration": 2, "ease": "back.out"},
}


def test_validate_valid_text():
    result = runner.invoke(app, ["validate", "--text", json.dumps(VALID)])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"valid": True, "errors": []}


def test_validate_invalid_file_exits_nonzero(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(dict(VALID, enabled="yes")), encoding="utf-8")
    result = runner.invoke(app, ["validate", "-f", str(path)])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["errors"] == ["enabled: Must be a boolean value"]


def test_requires_input():
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 2


def test_rejects_bad_json():
    result = runner.invoke(app, ["sanitize", "-t", "{not json"])
    assert result.exit_code == 2


def test_missing_file(tmp_path):
    result = runner.invoke(app, ["validate", "-f", str(tmp_path / "missing.json")])
    assert result.exit_code == 2


def test_sanitize():
    result = runner.invoke(app, ["sanitize", "-t", json.dumps({"properties": {"x": 7, "rotation": 999}})])
    assert result.exit_code == 0
    config = json.loads(result.stdout)
    assert config["properties"] == {"x": "7px", "rotation": 360.0}
    assert config["enabled"] is False


def test_instruction():
    result = runner.invoke(app, ["instruction", "-t", json.dumps(VALID), "--block-id", "hero"])
    assert result.exit_code == 0
    instruction = json.loads(result.stdout)
    assert instruction["target"]["blockId"] == "hero"
    assert instruction["fromProperties"] == {"x": "-50px"}
    assert instruction["toProperties"] == {"x": "50px"}


def test_instruction_invalid():
    result = runner.invoke(app, ["instruction", "-t", json.dumps(dict(VALID, type="spin"))])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["valid"] is False


def test_instruction_disabled():
    result = runner.invoke(app, ["instruction", "-t", json.dumps(dict(VALID, enabled=False))])
    assert result.exit_code == 1
