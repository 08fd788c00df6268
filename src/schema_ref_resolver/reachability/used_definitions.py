"""Transitive closure of external schema dependencies."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from schema_ref_resolver.schema_registry.registry_models import (
    ExternalSchemaRegistry,
    JsonObject,
)


class ExpansionStatus(str, Enum):
    """Worklist status of one external schema index."""

    EXPAND = "expand"
    DONE = "done"


def reachable_indices(registry: ExternalSchemaRegistry, root_edges: Iterable[int]) -> list[int]:
    """Return the sorted external indices reachable from the root's direct edges."""
    status = {index: ExpansionStatus.EXPAND for index in root_edges}
    retry = True
    while retry:
        retry = False
        for index in [key for key, value in status.items() if value is ExpansionStatus.EXPAND]:
            for dependency in registry.edges_of(index):
                if dependency not in status:
                    status[dependency] = ExpansionStatus.EXPAND
                    retry = True
            status[index] = ExpansionStatus.DONE
    return sorted(status)


def used_definitions(
    registry: ExternalSchemaRegistry, root_edges: Iterable[int], *, def_prefix: str
) -> dict[str, JsonObject]:
    """Map each reachable external schema to its generated definition key."""
    return {
        f"{def_prefix}{index}": registry.schemas[index]
        for index in reachable_indices(registry, root_edges)
    }
