"""External schema registration service."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence

from .registry_models import ExternalSchemaRegistry, JsonObject

ID_KEY = "$id"
SCHEMA_KEY = "$schema"
COMMENT_KEY = "$comment"

_LOGGER = logging.getLogger(__name__)


def register_external_schemas(
    external_schemas: Sequence[Mapping[str, object]],
    *,
    delete_id: bool = True,
    comment_id: bool = False,
) -> ExternalSchemaRegistry:
    """Copy and index the external schemas by `$id`.

    The caller's documents are never modified. Duplicate `$id` values keep
    their own slots, but the identifier map points at the last one.
    """
    registry = ExternalSchemaRegistry()
    for index, original in enumerate(external_schemas):
        schema: JsonObject = copy.deepcopy(dict(original))
        schema_id = schema.get(ID_KEY)
        if isinstance(schema_id, str) and schema_id:
            previous = registry.id_map.get(schema_id)
            if previous is not None:
                _LOGGER.warning(
                    "Duplicate external $id %r at index %d replaces index %d",
                    schema_id,
                    index,
                    previous,
                )
            registry.ids.append(schema_id)
            registry.id_map[schema_id] = index
            if delete_id:
                del schema[ID_KEY]
            if comment_id:
                schema[COMMENT_KEY] = _comment_with_id(schema.get(COMMENT_KEY), schema_id)
        else:
            registry.ids.append("")
        schema.pop(SCHEMA_KEY, None)
        registry.schemas.append(schema)

    _LOGGER.debug(
        "Registered %d external schemas (%d identified)", len(registry), len(registry.id_map)
    )
    return registry


def _comment_with_id(comment: object, schema_id: str) -> str:
    prefix = f"{comment} " if comment else ""
    return f"{prefix}[Originally $id: {schema_id}]"
