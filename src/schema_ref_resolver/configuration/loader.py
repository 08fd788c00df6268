"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_ref_resolver.resolution.resolver_options import (
    ResolverOptionsError,
    build_resolver_options,
)
from schema_ref_resolver.schema_documents import (
    SchemaDocumentError,
    load_schema_document,
    load_yaml_text,
    parse_schema_text,
)

from .runtime_settings import Configuration, ExternalSchemaSource

_EXTERNAL_SCHEMAS_KEYS = ("external_schemas", "externalSchemas")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = load_yaml_text(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    resolver_section = _optional_mapping(parsed.get("resolver"), "resolver")
    for key in _EXTERNAL_SCHEMAS_KEYS:
        if key in resolver_section:
            raise ConfigurationError(
                "External schemas belong in the top-level 'external_schemas' section."
            )
    external_schemas = _parse_external_schemas_section(
        parsed.get("external_schemas"), path.parent
    )

    try:
        options = build_resolver_options(
            resolver_section,
            external_schemas=[source.document for source in external_schemas],
        )
    except ResolverOptionsError as exc:
        raise ConfigurationError(f"Invalid resolver section: {exc}") from exc

    return Configuration(path=path, options=options, external_schemas=external_schemas)


def _parse_external_schemas_section(
    value: Any, base_path: Path
) -> tuple[ExternalSchemaSource, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("external_schemas must be a list.")
    return tuple(
        _load_external_schema(entry, base_path, f"external_schemas[{position}]")
        for position, entry in enumerate(value)
    )


def _load_external_schema(entry: Any, base_path: Path, label: str) -> ExternalSchemaSource:
    if isinstance(entry, str):
        return _load_schema_path(entry, base_path, label)
    mapping = _require_mapping(entry, label)
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline is not None and path_value is not None:
        raise ConfigurationError(f"{label} must not set both inline and path.")
    if inline is not None:
        if isinstance(inline, Mapping):
            return ExternalSchemaSource(document=dict(inline), source_path=None)
        if isinstance(inline, str):
            try:
                document = parse_schema_text(inline, source=label)
            except SchemaDocumentError as exc:
                raise ConfigurationError(str(exc)) from exc
            return ExternalSchemaSource(document=document, source_path=None)
        raise ConfigurationError(f"{label}.inline must be a mapping or JSON string.")
    if path_value is not None:
        if not isinstance(path_value, str) or not path_value.strip():
            raise ConfigurationError(f"{label}.path must be a non-empty string.")
        return _load_schema_path(path_value, base_path, label)
    raise ConfigurationError(f"{label} requires either inline or path.")


def _load_schema_path(raw_path: str, base_path: Path, label: str) -> ExternalSchemaSource:
    schema_path = _resolve_path(base_path, raw_path)
    if not schema_path.exists():
        raise ConfigurationError(f"{label} schema file not found: {schema_path}")
    try:
        document = load_schema_document(schema_path)
    except SchemaDocumentError as exc:
        raise ConfigurationError(str(exc)) from exc
    return ExternalSchemaSource(document=document, source_path=schema_path)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value
