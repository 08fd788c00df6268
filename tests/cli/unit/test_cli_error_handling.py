"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from schema_ref_resolver.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["resolve", "--schema", "/tmp/root.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["definitions", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["definitions", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_root_schema_returns_error_message(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "resolver.yaml"
    config_path.write_text("", encoding="utf-8")
    schema_path = tmp_path / "root.json"
    schema_path.write_text("[]", encoding="utf-8")

    exit_code = main(["resolve", "--config", str(config_path), "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "must be an object" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "resolver.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"


def test_yaml_root_schema_with_date_resolves(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "resolver.yaml"
    config_path.write_text("", encoding="utf-8")
    schema_path = tmp_path / "root.yaml"
    schema_path.write_text("type: string\ndefault: 2024-01-01\n", encoding="utf-8")

    exit_code = main(["resolve", "--config", str(config_path), "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert '"default": "2024-01-01"' in captured.out


def test_invalid_utf8_root_schema_returns_error_message(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "resolver.yaml"
    config_path.write_text("", encoding="utf-8")
    schema_path = tmp_path / "root.json"
    schema_path.write_bytes(b'{"title": "\xff"}')

    exit_code = main(["resolve", "--config", str(config_path), "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not valid UTF-8" in captured.err
    assert "Traceback" not in captured.err


def test_unserializable_schema_returns_error_message(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "resolver.yaml"
    config_path.write_text("", encoding="utf-8")
    schema_path = tmp_path / "root.yaml"
    schema_path.write_text("enum: !!set {a, b}\n", encoding="utf-8")

    exit_code = main(["resolve", "--config", str(config_path), "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not JSON serializable" in captured.err
