"""Detection of the rustc toolchain version in use for a directory.

Running `rustc --version` through a rustup proxy may install a toolchain, so
overrides are resolved the way rustup does before asking for a version:
$RUSTUP_TOOLCHAIN, then `rustup override list`, then a `rust-toolchain` file
in the directory or one of its parents.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path, PurePath

_NOT_INSTALLED_PREFIX = "error: toolchain '"
_NOT_INSTALLED_SUFFIX = "' is not installed\n"


@dataclass(frozen=True)
class RustcVersion:
    """rustup ran rustc successfully; holds what it printed."""

    stdout: str


@dataclass(frozen=True)
class ToolchainName:
    """The requested toolchain is not installed; holds its name."""

    name: str


@dataclass(frozen=True)
class RustupNotWorking:
    """rustup could not be started at all."""


@dataclass(frozen=True)
class RustupError:
    """rustup ran but its output could not be understood."""


RustupOutcome = RustcVersion | ToolchainName | RustupNotWorking | RustupError


def env_rustup_toolchain() -> str | None:
    """The toolchain named by $RUSTUP_TOOLCHAIN, trimmed."""
    value = os.environ.get("RUSTUP_TOOLCHAIN")
    return None if value is None else value.strip()


def _path_starts_with(path: PurePath, base: PurePath) -> bool:
    return path.parts[: len(base.parts)] == base.parts


def extract_toolchain_from_rustup_override_list(
    stdout: str, cwd: str | os.PathLike[str]
) -> str | None:
    """The toolchain of the first override whose directory contains cwd."""
    if stdout == "no overrides\n":
        return None
    current = PurePath(cwd)
    for line in stdout.splitlines():
        words = line.split()
        if len(words) < 2:
            continue
        directory, toolchain = words[0], words[1]
        if _path_starts_with(current, PurePath(directory)):
            return toolchain
    return None


def execute_rustup_override_list(cwd: str | os.PathLike[str]) -> str | None:
    """Ask `rustup override list` which toolchain applies to cwd."""
    try:
        completed = subprocess.run(
            ["rustup", "override", "list"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        stdout = completed.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return extract_toolchain_from_rustup_override_list(stdout, cwd)


def _read_first_line(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    lines = content.splitlines()
    if not lines:
        return None
    return lines[0].strip()


def find_rust_toolchain_file(current_dir: str | os.PathLike[str]) -> str | None:
    """The first line of the nearest `rust-toolchain` file at or above current_dir."""
    start = Path(current_dir)
    for directory in (start, *start.parents):
        toolchain = _read_first_line(directory / "rust-toolchain")
        if toolchain is not None:
            return toolchain
    return None


def extract_toolchain_from_rustup_run_rustc_version(
    returncode: int, stdout: bytes, stderr: bytes
) -> RustupOutcome:
    """Interpret the result of `rustup run <toolchain> rustc --version`."""
    if returncode == 0:
        try:
            return RustcVersion(stdout.decode("utf-8"))
        except UnicodeDecodeError:
            return RustupError()

    try:
        message = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return RustupError()

    if (
        message.startswith(_NOT_INSTALLED_PREFIX)
        and message.endswith(_NOT_INSTALLED_SUFFIX)
        and len(message) >= len(_NOT_INSTALLED_PREFIX) + len(_NOT_INSTALLED_SUFFIX)
    ):
        return ToolchainName(
            message[len(_NOT_INSTALLED_PREFIX) : len(message) - len(_NOT_INSTALLED_SUFFIX)]
        )
    return RustupError()


def execute_rustup_run_rustc_version(toolchain: str) -> RustupOutcome:
    """Run rustc through rustup for the given toolchain."""
    try:
        completed = subprocess.run(
            ["rustup", "run", toolchain, "rustc", "--version"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return RustupNotWorking()
    return extract_toolchain_from_rustup_run_rustc_version(
        completed.returncode, completed.stdout, completed.stderr
    )


def execute_rustc_version() -> str | None:
    """The output of `rustc --version`, or None if rustc cannot be started."""
    try:
        completed = subprocess.run(["rustc", "--version"], capture_output=True, check=False)
    except OSError:
        return None
    return completed.stdout.decode("utf-8")


def format_rustc_version(rustc_stdout: str) -> str:
    """Turn "rustc 1.34.0 (91856ed52 2019-04-10)" into "v1.34.0"."""
    paren = rustc_stdout.find("(")
    head = rustc_stdout if paren == -1 else rustc_stdout[:paren]
    return f"v{head.replace('rustc', '').strip()}"


def _first_present(*candidates):
    for candidate in candidates:
        value = candidate()
        if value is not None:
            return value
    return None


def detect_rust_version(current_dir: str | os.PathLike[str]) -> str | None:
    """The rustc version, or a missing toolchain's name, that applies to current_dir."""
    toolchain = _first_present(
        env_rustup_toolchain,
        lambda: execute_rustup_override_list(current_dir),
        lambda: find_rust_toolchain_file(current_dir),
    )

    if toolchain is None:
        rustc_stdout = execute_rustc_version()
        return None if rustc_stdout is None else format_rustc_version(rustc_stdout)

    match execute_rustup_run_rustc_version(toolchain):
        case RustcVersion(stdout=stdout):
            return format_rustc_version(stdout)
        case ToolchainName(name=name):
            return name
        case RustupNotWorking():
            rustc_stdout = execute_rustc_version()
            return None if rustc_stdout is None else format_rustc_version(rustc_stdout)
        case _:
            return None