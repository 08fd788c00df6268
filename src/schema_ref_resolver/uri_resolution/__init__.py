"""URI resolution exports."""

from .reference_uris import absolute_id, get_fragment, get_id

__all__ = [
    "absolute_id",
    "get_fragment",
    "get_id",
]
