"""Resolution domain exports."""

from .resolver_options import (
    DRAFT_07,
    DRAFT_08,
    ResolverOptions,
    ResolverOptionsError,
    build_resolver_options,
)
from .schema_resolver import InitState, SchemaResolver, create_resolver

__all__ = [
    "DRAFT_07",
    "DRAFT_08",
    "InitState",
    "ResolverOptions",
    "ResolverOptionsError",
    "SchemaResolver",
    "build_resolver_options",
    "create_resolver",
]
