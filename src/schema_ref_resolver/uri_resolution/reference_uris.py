"""Restricted URI algebra for `$id` and `$ref` values."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

_CURRENT_SEGMENT = "."
_PARENT_SEGMENT = ".."


def absolute_id(current_id: str, relative_id: str) -> str:
    """Return the absolute form of `relative_id` against the `current_id` base.

    Only values starting with `.` are treated as relative. Leading `.` and `..`
    segments are consumed against the base path (minus its final segment) and
    the remaining segments are appended. A `..` that would climb above the
    base path returns `relative_id` unchanged so callers treat it as
    unresolvable.
    """
    if not relative_id.startswith(_CURRENT_SEGMENT):
        return relative_id

    base = urlsplit(current_id)
    base_path = base.path.split("/") if base.path else [""]
    del base_path[-1:]

    ref_path = relative_id.split("/")
    consumed = 0
    while consumed < len(ref_path) and ref_path[consumed] in (_CURRENT_SEGMENT, _PARENT_SEGMENT):
        if ref_path[consumed] == _PARENT_SEGMENT:
            if not base_path:
                return relative_id
            base_path.pop()
        consumed += 1

    remaining = ref_path[consumed:]
    if consumed == 0 or not remaining:
        return relative_id
    return urlunsplit(base._replace(path="/".join(base_path + remaining)))


def get_id(ref: str) -> str:
    """Return the identifier part of a reference (everything before the first `#`)."""
    identifier, _, _ = ref.partition("#")
    return identifier


def get_fragment(ref: str) -> str:
    """Return the fragment part of a reference without its `#`, or an empty string."""
    _, _, fragment = ref.partition("#")
    return fragment
