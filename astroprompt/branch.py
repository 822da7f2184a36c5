"""Branch name helpers for version-control modules."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import regex

log = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


def _graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def get_graphemes(text: str, length: int) -> str:
    """Return the first `length` extended grapheme clusters of text."""
    return "".join(_graphemes(text)[:length])


def graphemes_len(text: str) -> int:
    """Count the extended grapheme clusters in text."""
    return len(_graphemes(text))


def truncate_branch(name: str, length: int, truncation_symbol: str) -> str:
    """Shorten a branch name to `length` graphemes, marking the cut.

    A non-positive length means no truncation. Only the first grapheme of the
    truncation symbol is used, and only when the name was actually shortened.
    """
    if length <= 0:
        log.warning('"truncation_length" should be a positive value, found %s', length)
        return name

    clusters = _graphemes(name)
    truncated = "".join(clusters[:length])
    if length < len(clusters):
        return truncated + get_graphemes(truncation_symbol, 1)
    return truncated


def _read_stripped(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None


def get_hg_branch_name(directory: str | os.PathLike[str]) -> str:
    """The Mercurial branch recorded in the directory, or "default"."""
    branch = _read_stripped(Path(directory) / ".hg" / "branch")
    return "default" if branch is None else branch


def get_hg_current_bookmark(directory: str | os.PathLike[str]) -> str | None:
    """The active Mercurial bookmark in the directory, if any."""
    return _read_stripped(Path(directory) / ".hg" / "bookmarks.current")