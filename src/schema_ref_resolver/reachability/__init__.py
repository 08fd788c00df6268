"""Reachability exports."""

from .used_definitions import ExpansionStatus, reachable_indices, used_definitions

__all__ = [
    "ExpansionStatus",
    "reachable_indices",
    "used_definitions",
]
