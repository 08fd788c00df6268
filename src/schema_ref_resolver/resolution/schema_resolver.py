"""Schema resolver facade."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from schema_ref_resolver.definition_merging import merge_definitions
from schema_ref_resolver.reachability import used_definitions
from schema_ref_resolver.reference_rewriting import (
    rewrite_external_schemas,
    rewrite_root_schema,
)
from schema_ref_resolver.schema_registry import (
    ExternalSchemaRegistry,
    JsonObject,
    register_external_schemas,
)

from .resolver_options import ResolverOptions, build_resolver_options

_LOGGER = logging.getLogger(__name__)


class InitState(Enum):
    """Lifecycle of the external schema registry inside one resolver."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class SchemaResolver:
    """Rewrite `$ref` values against pre-registered external schemas.

    Construction only stores the options. The external schemas are copied,
    indexed and rewritten on the first call to `resolve` or `definitions`
    and reused afterwards.
    """

    def __init__(self, options: ResolverOptions | None = None) -> None:
        self._options = options or ResolverOptions()
        self._registry = ExternalSchemaRegistry()
        self._state = InitState.UNINITIALIZED

    @property
    def options(self) -> ResolverOptions:
        return self._options

    @property
    def state(self) -> InitState:
        return self._state

    def resolve(self, schema: Mapping[str, Any]) -> JsonObject:
        """Return a copy of `schema` with every resolvable `$ref` made local.

        When `merge_definitions` is enabled the reachable external schemas are
        embedded under `def_element`.
        """
        registry = self._ensure_initialized()
        resolved: JsonObject = copy.deepcopy(dict(schema))
        root_edges = rewrite_root_schema(
            registry,
            resolved,
            default_id=self._options.application_uri,
            def_element=self._options.def_element,
            def_prefix=self._options.def_prefix,
        )
        if self._options.merge_definitions:
            definitions = used_definitions(
                registry, root_edges, def_prefix=self._options.def_prefix
            )
            _LOGGER.debug("Embedding %d reachable definitions", len(definitions))
            merge_definitions(
                resolved,
                copy.deepcopy(definitions),
                def_element=self._options.def_element,
                skip_when_empty=True,
            )
        return resolved

    def definitions(self) -> JsonObject:
        """Return a document holding every external schema as a definition."""
        registry = self._ensure_initialized()
        definitions = used_definitions(
            registry, range(len(registry)), def_prefix=self._options.def_prefix
        )
        document: JsonObject = {}
        merge_definitions(
            document,
            copy.deepcopy(definitions),
            def_element=self._options.def_element,
            skip_when_empty=False,
        )
        return document

    def _ensure_initialized(self) -> ExternalSchemaRegistry:
        if self._state is InitState.INITIALIZED:
            return self._registry
        registry = register_external_schemas(
            self._options.external_schemas,
            delete_id=self._options.delete_id,
            comment_id=self._options.comment_id,
        )
        rewrite_external_schemas(
            registry,
            def_element=self._options.def_element,
            def_prefix=self._options.def_prefix,
        )
        self._registry = registry
        self._state = InitState.INITIALIZED
        _LOGGER.debug("Resolver initialized with %d external schemas", len(registry))
        return registry


def create_resolver(options: Mapping[str, Any] | None = None, **overrides: Any) -> SchemaResolver:
    """Build a `SchemaResolver` from an option mapping or keyword options."""
    return SchemaResolver(build_resolver_options(options, **overrides))
