"""Resolver configuration entities and option normalization."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any

from schema_ref_resolver.schema_registry.registry_models import JsonObject

DRAFT_07 = "draft-07"
DRAFT_08 = "draft-08"

_DEF_ELEMENT_BY_TARGET = {
    DRAFT_07: "definitions",
    DRAFT_08: "$defs",
}

_OPTION_ALIASES = {
    "applicationUri": "application_uri",
    "commentId": "comment_id",
    "defElement": "def_element",
    "defPrefix": "def_prefix",
    "deleteId": "delete_id",
    "externalSchemas": "external_schemas",
    "mergeDefinitions": "merge_definitions",
}

_BOOLEAN_OPTIONS = ("clone", "comment_id", "delete_id", "merge_definitions")
_STRING_OPTIONS = ("application_uri", "def_element", "def_prefix", "target")


class ResolverOptionsError(Exception):
    """Raised when resolver options are unknown or have the wrong type."""


@dataclass(frozen=True)
class ResolverOptions:  # pylint: disable=too-many-instance-attributes
    """Normalized resolver settings.

    `clone` is accepted for compatibility and ignored; inputs are always copied.
    """

    application_uri: str = ""
    clone: bool = False
    comment_id: bool = False
    def_element: str = "definitions"
    def_prefix: str = "def-"
    delete_id: bool = True
    external_schemas: tuple[JsonObject, ...] = field(default_factory=tuple)
    merge_definitions: bool = False
    target: str = DRAFT_07


def build_resolver_options(
    options: Mapping[str, Any] | None = None, **overrides: Any
) -> ResolverOptions:
    """Normalize an option mapping (snake_case or camelCase keys) into `ResolverOptions`."""
    raw: dict[str, Any] = {}
    for source in (options or {}, overrides):
        for key, value in source.items():
            raw[_OPTION_ALIASES.get(key, key)] = value

    known = {option.name for option in fields(ResolverOptions)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ResolverOptionsError(f"Unknown resolver options: {', '.join(unknown)}")

    for name in _BOOLEAN_OPTIONS:
        if name in raw and not isinstance(raw[name], bool):
            raise ResolverOptionsError(f"{name} must be a boolean.")
    for name in _STRING_OPTIONS:
        if name in raw and not isinstance(raw[name], str):
            raise ResolverOptionsError(f"{name} must be a string.")

    if "external_schemas" in raw:
        raw["external_schemas"] = _normalize_external_schemas(raw["external_schemas"])

    if not raw.get("def_element"):
        raw.pop("def_element", None)
        target_element = _DEF_ELEMENT_BY_TARGET.get(raw.get("target", DRAFT_07))
        if target_element is not None:
            raw["def_element"] = target_element

    return ResolverOptions(**raw)


def _normalize_external_schemas(value: Any) -> tuple[JsonObject, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ResolverOptionsError("external_schemas must be a list of schema objects.")
    schemas = []
    for item in value:
        if not isinstance(item, Mapping):
            raise ResolverOptionsError("external_schemas entries must be schema objects.")
        schemas.append(dict(item))
    return tuple(schemas)
