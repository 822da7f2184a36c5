"""Path shortening for display in the prompt."""

from __future__ import annotations


def truncate(dir_string: str, length: int) -> str:
    """Keep only the last `length` components of a path; 0 means no truncation."""
    if length == 0:
        return dir_string

    components = dir_string.split("/")
    # A leading "/" yields an empty first component that is not a real one.
    if components[0] == "":
        components = components[1:]

    if len(components) <= length:
        return dir_string

    return "/".join(components[-length:])