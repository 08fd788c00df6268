"""Schema registry entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None
JsonObject: TypeAlias = dict[str, Any]


@dataclass
class ExternalSchemaRegistry:
    """Normalized external schemas indexed by their position in the supplied set.

    `schemas`, `ids` and `used_edges` share the same indexing. `ids` holds an
    empty string for schemas without an absolute identifier. `used_edges` is
    filled once the external schemas have been rewritten.
    """

    schemas: list[JsonObject] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    id_map: dict[str, int] = field(default_factory=dict)
    used_edges: list[set[int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.schemas)

    def edges_of(self, index: int) -> set[int]:
        """Return the precomputed dependency edges of one external schema."""
        if index < len(self.used_edges):
            return self.used_edges[index]
        return set()
