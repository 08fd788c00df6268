"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from schema_ref_resolver.configuration import load_configuration
from schema_ref_resolver.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Resolver configuration template" in scaffold
    assert "resolver:" in scaffold
    assert "external_schemas:" in scaffold
    for option in ("application_uri", "target", "def_element", "def_prefix", "delete_id"):
        assert option in scaffold
    assert "comment_id" in scaffold
    assert "merge_definitions" in scaffold


def test_placeholder_configuration_is_loadable(tmp_path: Path) -> None:
    output_path = tmp_path / "resolver.yaml"
    write_placeholder_configuration(output_path)

    parsed = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    configuration = load_configuration(output_path)

    assert parsed["resolver"]["target"] == "draft-07"
    assert configuration.options.merge_definitions is True
    assert configuration.external_schemas == ()


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "resolver.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "resolver.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
