"""Definition merging service."""

from __future__ import annotations

from collections.abc import Mapping

from schema_ref_resolver.schema_registry.registry_models import JsonObject


def merge_definitions(
    schema: JsonObject,
    definitions: Mapping[str, JsonObject],
    *,
    def_element: str,
    skip_when_empty: bool,
) -> None:
    """Write `definitions` at the `/`-separated `def_element` path inside `schema`.

    Missing or non-object path segments are replaced by empty objects and
    existing entries with the same key are overwritten.
    """
    if skip_when_empty and not definitions:
        return

    here = schema
    for name in def_element.split("/"):
        child = here.get(name)
        if not isinstance(child, dict):
            child = {}
            here[name] = child
        here = child
    here.update(definitions)
