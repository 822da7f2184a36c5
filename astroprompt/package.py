"""Package version detection from project manifests."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from astroprompt.utils import read_file


def format_version(version: str) -> str:
    """Strip quotes and whitespace and ensure a leading "v"."""
    cleaned = version.replace('"', "").strip()
    return cleaned if cleaned.startswith("v") else f"v{cleaned}"


def _lookup_str(document: Any, *keys: str) -> str | None:
    node = document
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, str) else None


def _load_toml(text: str) -> dict[str, Any] | None:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return None


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def extract_cargo_version(file_contents: str) -> str | None:
    """The [package] version from a Cargo.toml."""
    raw = _lookup_str(_load_toml(file_contents), "package", "version")
    return None if raw is None else format_version(raw)


def extract_package_version(file_contents: str) -> str | None:
    """The version field of a package.json."""
    raw = _lookup_str(_load_json(file_contents), "version")
    if raw is None or raw == "null":
        return None
    return format_version(raw)


def extract_poetry_version(file_contents: str) -> str | None:
    """The [tool.poetry] version from a pyproject.toml."""
    raw = _lookup_str(_load_toml(file_contents), "tool", "poetry", "version")
    return None if raw is None else format_version(raw)


def extract_composer_version(file_contents: str) -> str | None:
    """The version field of a composer.json."""
    raw = _lookup_str(_load_json(file_contents), "version")
    if raw is None or raw == "null":
        return None
    return format_version(raw)


_MANIFESTS: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
    ("composer.json", extract_composer_version),
)


def get_package_version(base_dir: str | os.PathLike[str]) -> str | None:
    """The version of the first readable manifest in the directory.

    Manifests are tried in order; the first one that can be read decides the
    result, even when it holds no version.
    """
    base = Path(base_dir)
    for file_name, extract in _MANIFESTS:
        try:
            contents = read_file(base / file_name)
        except (OSError, UnicodeDecodeError):
            continue
        return extract(contents)
    return None