"""Reference rewriting entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from schema_ref_resolver.schema_registry.registry_models import JsonObject


@dataclass(frozen=True)
class RewriteContext:  # pylint: disable=too-many-instance-attributes
    """State for a single traversal of one schema document.

    `used_indices` and `ref_cache` are owned by the caller that builds the
    context and are filled during the traversal. A context is discarded once
    its traversal finishes.
    """

    schema_list: Sequence[JsonObject]
    id_map: Mapping[str, int]
    current_id: str
    current_index: int
    used_indices: set[int]
    ref_cache: dict[str, str]
    top_schema: bool
    def_element: str
    def_prefix: str
