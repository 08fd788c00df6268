"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_ref_resolver.resolution.resolver_options import ResolverOptions
from schema_ref_resolver.schema_registry.registry_models import JsonObject


@dataclass(frozen=True)
class ExternalSchemaSource:
    """One external schema and where it came from."""

    document: JsonObject
    source_path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    options: ResolverOptions
    external_schemas: tuple[ExternalSchemaSource, ...]
