"""Extraction of the Java runtime version from `java -Xinternalversion` output."""

from __future__ import annotations

import os
import re

from astroprompt.utils import exec_cmd

_VERSION = re.compile(r"[0-9.]+")
_PREFIXES = ("JRE (", "VM (")


def parse_jre_version(text: str) -> str | None:
    """Parse the version from text like "JRE (1.8.0_222-b10)" or "VM (11.0.4+11)".

    A vendor tag in the first parentheses, as in "JRE (Zulu 8.40) (1.8.0_222)",
    is skipped in favour of the next parenthesised version.
    """
    for marker in _PREFIXES:
        index = text.find(marker)
        if index != -1:
            rest = text[index + len(marker):]
            break
    else:
        return None

    match = _VERSION.match(rest)
    if match:
        return match.group()

    paren = rest.find("(")
    if paren == -1:
        return None
    match = _VERSION.match(rest, paren + 1)
    return match.group() if match else None


def format_java_version(java_out: str) -> str | None:
    """Return the parsed version prefixed with "v", or None."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def get_java_version() -> str | None:
    """Run the Java runtime (from $JAVA_HOME if set) and return its combined output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    output = exec_cmd(java_command, ["-Xinternalversion"])
    if output is None:
        return None
    return output.stdout + output.stderr