"""Definition merging exports."""

from .definition_merger import merge_definitions

__all__ = ["merge_definitions"]
