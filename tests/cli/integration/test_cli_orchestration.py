"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from schema_ref_resolver.cli import cli


def _write_workspace(tmp_path: Path, *, merge_definitions: bool = True) -> tuple[Path, Path]:
    schemas_dir = tmp_path / "schemas"
    schemas_dir.mkdir()
    (schemas_dir / "Animal.json").write_text(
        json.dumps(
            {
                "$id": "https://example.com/subdir/Animal.json",
                "$schema": "http://json-schema.org/draft-07/schema#",
                "defs": {"pet": {"type": "object"}},
            }
        ),
        encoding="utf-8",
    )
    (schemas_dir / "Unused.json").write_text(
        json.dumps({"$id": "https://example.com/subdir/Unused.json", "type": "string"}),
        encoding="utf-8",
    )
    config = {
        "resolver": {"merge_definitions": merge_definitions},
        "external_schemas": ["schemas/Animal.json", {"path": "schemas/Unused.json"}],
    }
    config_path = tmp_path / "resolver.json"
    config_path.write_text(json.dumps(config), encoding="utf-8")

    root_path = tmp_path / "root.json"
    root_path.write_text(
        json.dumps(
            {
                "$id": "https://example.com/subdir/Owner.json",
                "properties": {"pet": {"$ref": "./Animal.json#/defs/pet"}},
            }
        ),
        encoding="utf-8",
    )
    return config_path, root_path


def test_resolve_command_prints_bundled_document(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path, root_path = _write_workspace(tmp_path)

    result = runner.invoke(
        cli, ["resolve", "--config", str(config_path), "--schema", str(root_path)]
    )

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert document["properties"]["pet"]["$ref"] == "#/definitions/def-0/defs/pet"
    assert document["definitions"] == {"def-0": {"defs": {"pet": {"type": "object"}}}}


def test_resolve_command_writes_output_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path, root_path = _write_workspace(tmp_path)
    output_path = tmp_path / "bundled.json"

    result = runner.invoke(
        cli,
        [
            "resolve",
            "--config",
            str(config_path),
            "--schema",
            str(root_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert list(document["definitions"]) == ["def-0"]


def test_resolve_command_can_override_merge_setting(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path, root_path = _write_workspace(tmp_path, merge_definitions=True)

    result = runner.invoke(
        cli,
        [
            "resolve",
            "--config",
            str(config_path),
            "--schema",
            str(root_path),
            "--merge-definitions",
            "false",
        ],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert "definitions" not in document
    assert document["properties"]["pet"]["$ref"] == "#/definitions/def-0/defs/pet"


def test_definitions_command_exports_every_external_schema(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path, _ = _write_workspace(tmp_path)

    result = runner.invoke(cli, ["definitions", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    document = json.loads(result.output)
    assert document == {
        "definitions": {
            "def-0": {"defs": {"pet": {"type": "object"}}},
            "def-1": {"type": "string"},
        }
    }


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "resolver.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    assert "external_schemas:" in output_path.read_text(encoding="utf-8")


def test_verbose_flag_enables_debug_logging(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    runner = CliRunner()
    config_path, _ = _write_workspace(tmp_path)

    result = runner.invoke(cli, ["--verbose", "definitions", "--config", str(config_path)])

    assert result.exit_code == 0
    assert calls[0]["level"] == logging.DEBUG
