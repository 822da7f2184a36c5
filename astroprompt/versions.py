"""Version strings reported by language toolchains and the Terraform workspace."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from astroprompt.utils import exec_cmd, read_file


def _strip_prefix_repeated(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_suffix_repeated(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def format_go_version(go_stdout: str) -> str | None:
    """Turn "go version go1.13.3 linux/amd64" into "v1.13.3"."""
    parts = go_stdout.split("go version go", 1)
    if len(parts) < 2:
        return None
    words = parts[1].split()
    if not words:
        return None
    return f"v{words[0]}"


def format_haskell_version(haskell_version: str) -> str:
    """Prefix the numeric GHC version with "v"."""
    return f"v{haskell_version.strip()}"


def format_php_version(php_version: str) -> str:
    """Prefix the PHP version with "v"."""
    return f"v{php_version}"


def format_ruby_version(ruby_version: str) -> str | None:
    """Turn "ruby 2.6.0p0 (...)" into "v2.6.0"."""
    words = ruby_version.split()
    if len(words) < 2:
        return None
    raw = words[1].encode("utf-8")
    if len(raw) < 5:
        return None
    try:
        version = raw[:5].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def format_python_version(python_stdout: str) -> str:
    """Turn "Python 3.7.2" (optionally ":: Anaconda, Inc.") into "v3.7.2"."""
    text = _strip_prefix_repeated(python_stdout, "Python ")
    text = _strip_suffix_repeated(text, ":: Anaconda, Inc.")
    return f"v{text.strip()}"


def get_python_version() -> str | None:
    """The output of `python --version`, taken from stderr when stdout is empty."""
    output = exec_cmd("python", ["--version"])
    if output is None:
        return None
    return output.stdout if output.stdout else output.stderr


def get_python_virtual_env() -> str | None:
    """The name of the active virtual environment from $VIRTUAL_ENV."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if name in ("", ".."):
        return None
    return name


def format_terraform_version(version: str) -> str | None:
    """Turn the first line of `terraform version` into "v0.12.14 "."""
    if version == "":
        return None
    first_line = version.split("\n", 1)[0]
    first_line = first_line.removesuffix("\r")
    return _strip_prefix_repeated(first_line, "Terraform ").strip() + " "


def get_terraform_workspace(cwd: str | os.PathLike[str]) -> str | None:
    """The selected Terraform workspace for a directory.

    $TF_WORKSPACE wins; otherwise the environment file in the data directory
    ($TF_DATA_DIR or .terraform) is read, defaulting to "default" when missing.
    """
    workspace_override = os.environ.get("TF_WORKSPACE")
    if workspace_override is not None:
        return workspace_override

    data_dir_env = os.environ.get("TF_DATA_DIR")
    data_dir = Path(data_dir_env) if data_dir_env is not None else Path(cwd) / ".terraform"

    try:
        return read_file(data_dir / "environment")
    except FileNotFoundError:
        return "default"
    except (OSError, UnicodeDecodeError):
        return None