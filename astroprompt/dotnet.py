"""Detection of the .NET SDK version relevant to a directory."""

from __future__ import annotations

import enum
import json
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath

from astroprompt.utils import exec_cmd, read_file

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"

_PROJECT_EXTENSIONS = frozenset({"csproj", "fsproj", "xproj"})


class FileType(enum.Enum):
    """The kinds of file that mark a .NET project."""

    PROJECT_JSON = "project_json"
    PROJECT_FILE = "project_file"
    GLOBAL_JSON = "global_json"
    SOLUTION_FILE = "solution_file"


@dataclass(frozen=True)
class DotNetFile:
    """A .NET-related file found in a directory."""

    path: Path
    file_type: FileType


def get_pinned_sdk_version(json_text: str) -> str | None:
    """The SDK version pinned by the text of a global.json, prefixed with "v"."""
    try:
        document = json.loads(json_text)
    except json.JSONDecodeError:
        return None
    if not isinstance(document, dict):
        return None
    sdk = document.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | os.PathLike[str]) -> str | None:
    """The SDK version pinned by a global.json file, if it can be read."""
    try:
        json_text = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def get_dotnet_file_type(path: str | os.PathLike[str]) -> FileType | None:
    """Classify a path by its file name or extension, case-insensitively."""
    pure = PurePath(path)
    name = pure.name.lower()
    if name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON

    extension = pure.suffix[1:].lower()
    if extension == "sln":
        return FileType.SOLUTION_FILE
    if extension in _PROJECT_EXTENSIONS:
        return FileType.PROJECT_FILE
    return None


def get_local_dotnet_files(directory: str | os.PathLike[str]) -> list[DotNetFile]:
    """The .NET-related files directly inside a directory, in name order."""
    found = []
    for entry in sorted(Path(directory).iterdir()):
        if not entry.is_file():
            continue
        file_type = get_dotnet_file_type(entry)
        if file_type is not None:
            found.append(DotNetFile(path=entry, file_type=file_type))
    return found


def check_directory_for_global_json(path: str | os.PathLike[str]) -> str | None:
    """The pinned version from a global.json in the directory, if there is one."""
    global_json_path = Path(path) / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json_path)
    if global_json_path.exists():
        return get_pinned_sdk_version_from_file(global_json_path)
    return None


def try_find_nearby_global_json(
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Look for a pinned version in the parent directory, then the repository root.

    The parent is skipped when the current directory is the repository root,
    and the current directory itself is never scanned again.
    """
    current = Path(current_dir)
    root = Path(repo_root) if repo_root is not None else None

    check_dirs: list[Path] = []
    if root != current:
        parent = current.parent
        if parent != current:
            check_dirs.append(parent)
    if root is not None and (not check_dirs or check_dirs[-1] != root):
        check_dirs.append(root)

    for directory in check_dirs:
        if directory == current:
            continue
        version = check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def parse_list_sdks(stdout: str) -> str | None:
    """The latest SDK from `dotnet --list-sdks` output, prefixed with "v"."""
    lines = [line.strip() for line in stdout.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
        return None
    latest_sdk = lines[-1]
    bracket = latest_sdk.find("[")
    take_until = bracket - 1
    if bracket == -1 or take_until <= 1:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
        return None
    return f"v{latest_sdk[:take_until]}"


def get_version_from_cli() -> str | None:
    """The version reported by `dotnet --version`."""
    output = exec_cmd("dotnet", ["--version"])
    if output is None:
        return None
    return f"v{output.stdout.strip()}"


def get_latest_sdk_from_cli() -> str | None:
    """The latest installed SDK, falling back to `dotnet --version` on older CLIs."""
    output = exec_cmd("dotnet", ["--list-sdks"])
    if output is None:
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()
    return parse_list_sdks(output.stdout)


def estimate_dotnet_version(
    files: Sequence[DotNetFile],
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Guess the SDK in use without running `dotnet --version`.

    A global.json takes precedence, then a solution file, then any other file.
    """
    relevant = (
        next((f for f in files if f.file_type is FileType.GLOBAL_JSON), None)
        or next((f for f in files if f.file_type is FileType.SOLUTION_FILE), None)
        or next(iter(files), None)
    )
    if relevant is None:
        return None

    if relevant.file_type is FileType.GLOBAL_JSON:
        return get_pinned_sdk_version_from_file(relevant.path) or get_latest_sdk_from_cli()
    if relevant.file_type is FileType.SOLUTION_FILE:
        return get_latest_sdk_from_cli()
    return try_find_nearby_global_json(current_dir, repo_root) or get_latest_sdk_from_cli()