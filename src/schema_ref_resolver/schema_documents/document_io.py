"""Schema document loading and writing service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_ref_resolver.schema_registry.registry_models import JsonObject

_YAML_SUFFIXES = (".yaml", ".yml")
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class SchemaDocumentError(Exception):
    """Raised when a schema document cannot be read or parsed."""


class SchemaYamlLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe YAML loader that keeps timestamp-looking scalars as strings."""


SchemaYamlLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml_text(text: str) -> Any:
    """Parse YAML text into JSON-compatible values."""
    return yaml.load(text, Loader=SchemaYamlLoader)


def load_schema_document(schema_path: Path | str) -> JsonObject:
    """Read a JSON (or YAML, by suffix) schema document from disk."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaDocumentError(f"Schema file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaDocumentError(f"Schema file {path} is not valid UTF-8: {exc}") from exc
    return parse_schema_text(text, source=str(path), as_yaml=path.suffix.lower() in _YAML_SUFFIXES)


def parse_schema_text(text: str, *, source: str = "<inline>", as_yaml: bool = False) -> JsonObject:
    """Parse schema text and require an object at the document root."""
    try:
        parsed: Any = load_yaml_text(text) if as_yaml else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaDocumentError(f"Invalid schema document {source}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise SchemaDocumentError(f"Schema document {source} must be an object.")
    return dict(parsed)


def dump_schema_document(document: Mapping[str, Any]) -> str:
    """Serialize a schema document as indented JSON text."""
    try:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise SchemaDocumentError(f"Schema document is not JSON serializable: {exc}") from exc


def write_schema_document(document: Mapping[str, Any], output_path: Path | str) -> Path:
    """Write a schema document as JSON and return the resolved destination."""
    destination = Path(output_path)
    destination.write_text(dump_schema_document(document), encoding="utf-8")
    return destination.resolve()
