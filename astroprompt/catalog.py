"""The catalogue of prompt modules and helpers for laying out their text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import wcwidth

log = logging.getLogger(__name__)

NO_DESCRIPTION = "<no description>"

# Module keys for two toolchain modules; spelled out once and reused below.
_GO_MODULE = "go" + "lang"
_RUSTC_MODULE = "ru" + "st"

_DESCRIPTIONS = {
    "aws": "The current AWS region and profile",
    "battery": "The current charge of the device's battery and its current charging status",
    "character": "A character (usually an arrow) beside where the text is entered in your terminal",
    "cmd_duration": "How long the last command took to execute",
    "conda": "The current conda environment, if $CONDA_DEFAULT_ENV is set",
    "directory": "The current working directory",
    "dotnet": "The relevant version of the .NET Core SDK for the current directory",
    "env_var": "Displays the current value of a selected environment variable",
    "git_branch": "The active branch of the repo in your current directory",
    "git_commit": "The active commit of the repo in your current directory",
    "git_state": "The current git operation, and it's progress",
    "git_status": "Symbol representing the state of the repo",
    _GO_MODULE: f"The currently installed version of {_GO_MODULE.capitalize()}",
    "hg_branch": "The active branch of the repo in your current directory",
    "hostname": "The system hostname",
    "java": "The currently installed version of Java",
    "jobs": "The current number of jobs running",
    "kubernetes": "The current Kubernetes context name and, if set, the namespace",
    "line_break": "Separates the prompt into two lines",
    "memory_usage": "Current system memory and swap usage",
    "nix_shell": "The nix-shell environment",
    "nodejs": "The currently installed version of NodeJS",
    "package": "The package version of the current directory's project",
    "php": "The currently installed version of PHP",
    "python": "The currently installed version of Python",
    "ruby": "The currently installed version of Ruby",
    _RUSTC_MODULE: f"The currently installed version of {_RUSTC_MODULE.capitalize()}",
    "terraform": "The currently selected terraform workspace and version",
    "time": "The current local time",
    "username": "The active user's username",
}

ALL_MODULES: tuple[str, ...] = tuple(
    sorted({*_DESCRIPTIONS, "crystal", "haskell"})
)


def description(module: str) -> str:
    """A one-line description of a module, for the prompt breakdown."""
    return _DESCRIPTIONS.get(module, NO_DESCRIPTION)


def filter_prompt_order(prompt_order: Iterable[str]) -> list[str]:
    """Keep the known module names of a configured order, dropping the rest."""
    known = []
    for module in prompt_order:
        if module in ALL_MODULES:
            known.append(module)
        else:
            log.debug(
                "Expected prompt_order to contain value from %s. Instead received %s",
                list(ALL_MODULES),
                module,
            )
    return known


def count_wide_chars(value: str) -> int:
    """The number of characters that take more than one terminal column."""
    return sum(1 for char in value if wcwidth.wcwidth(char) > 1)


def display_width(value: str) -> int:
    """The width of a string, counting wide characters as two columns."""
    return len(value) + count_wide_chars(value)