"""`$ref` rewriting service."""

from __future__ import annotations

import logging
from typing import Any

from schema_ref_resolver.schema_registry.registry_models import (
    ExternalSchemaRegistry,
    JsonObject,
)
from schema_ref_resolver.schema_registry.schema_registration import ID_KEY
from schema_ref_resolver.uri_resolution import absolute_id, get_fragment, get_id

from .rewrite_context import RewriteContext

REF_KEY = "$ref"

_LOGGER = logging.getLogger(__name__)


def definition_path(def_element: str, def_prefix: str, index: int) -> str:
    """Return the local pointer of the definition slot for one external schema."""
    return f"#/{def_element}/{def_prefix}{index}"


def resolve_ref(context: RewriteContext, ref: str) -> str:
    """Rewrite one `$ref` value to a local pointer when its target is known.

    Unknown targets and relative references climbing above their base are
    returned unchanged.
    """
    cached = context.ref_cache.get(ref)
    if cached is not None:
        return cached

    relative_id = get_id(ref)
    fragment = get_fragment(ref)
    target_id = absolute_id(context.current_id, relative_id)
    target_index = context.id_map.get(target_id) if target_id else context.current_index

    if target_index is None:
        result = ref
    elif context.top_schema and target_index == context.current_index:
        result = f"#{fragment}"
    else:
        if target_index != context.current_index:
            context.used_indices.add(target_index)
        result = definition_path(context.def_element, context.def_prefix, target_index) + fragment

    context.ref_cache[ref] = result
    return result


def rewrite_object(context: RewriteContext, item: dict[str, Any]) -> None:
    """Rewrite every `$ref` nested inside an object, in place."""
    for key, value in item.items():
        if isinstance(value, list):
            rewrite_array(context, value)
        elif isinstance(value, dict):
            rewrite_object(context, value)
        elif key == REF_KEY and isinstance(value, str):
            item[key] = resolve_ref(context, value)


def rewrite_array(context: RewriteContext, items: list[Any]) -> None:
    """Rewrite every `$ref` nested inside an array, in place."""
    for value in items:
        if isinstance(value, list):
            rewrite_array(context, value)
        elif isinstance(value, dict):
            rewrite_object(context, value)


def rewrite_external_schemas(
    registry: ExternalSchemaRegistry, *, def_element: str, def_prefix: str
) -> None:
    """Rewrite the registered schemas in place and record their dependency edges."""
    registry.used_edges = []
    for index, schema in enumerate(registry.schemas):
        used_indices: set[int] = set()
        context = RewriteContext(
            schema_list=registry.schemas,
            id_map=registry.id_map,
            current_id=registry.ids[index],
            current_index=index,
            used_indices=used_indices,
            ref_cache={},
            top_schema=False,
            def_element=def_element,
            def_prefix=def_prefix,
        )
        rewrite_object(context, schema)
        registry.used_edges.append(used_indices)
        _LOGGER.debug("External schema %d depends on %s", index, sorted(used_indices))


def rewrite_root_schema(
    registry: ExternalSchemaRegistry,
    schema: JsonObject,
    *,
    default_id: str,
    def_element: str,
    def_prefix: str,
) -> set[int]:
    """Rewrite the root schema in place and return the external indices it uses directly."""
    current_id = schema.get(ID_KEY)
    if not current_id or not isinstance(current_id, str):
        current_id = default_id

    schema_list = [*registry.schemas, schema]
    current_index = len(schema_list) - 1
    id_map = dict(registry.id_map)
    id_map[current_id] = current_index

    used_indices: set[int] = set()
    context = RewriteContext(
        schema_list=schema_list,
        id_map=id_map,
        current_id=current_id,
        current_index=current_index,
        used_indices=used_indices,
        ref_cache={},
        top_schema=True,
        def_element=def_element,
        def_prefix=def_prefix,
    )
    rewrite_object(context, schema)
    return used_indices
