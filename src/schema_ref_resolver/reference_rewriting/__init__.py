"""Reference rewriting exports."""

from .ref_rewriter import (
    REF_KEY,
    definition_path,
    resolve_ref,
    rewrite_array,
    rewrite_external_schemas,
    rewrite_object,
    rewrite_root_schema,
)
from .rewrite_context import RewriteContext

__all__ = [
    "REF_KEY",
    "RewriteContext",
    "definition_path",
    "resolve_ref",
    "rewrite_array",
    "rewrite_external_schemas",
    "rewrite_object",
    "rewrite_root_schema",
]
