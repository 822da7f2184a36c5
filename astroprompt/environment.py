"""Prompt values taken from the environment, the host and the running system."""

from __future__ import annotations

import logging
import os
import re

from astroprompt.utils import exec_cmd

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")

ROOT_UID = 0


def get_env_value(name: str, default: str | None = None) -> str | None:
    """The value of an environment variable, or the default when it is unset.

    A value that is not valid Unicode yields None rather than the default.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def nix_shell_label(
    shell_type: str | None,
    pure_msg: str,
    impure_msg: str,
    use_name: bool,
    name: str | None,
) -> str | None:
    """The text shown for a nix-shell, given the value of $IN_NIX_SHELL.

    "1" and "impure" mean an impure shell, "pure" a pure one; any other value,
    or none at all, means not inside a nix-shell.
    """
    if shell_type in ("1", "impure"):
        message = impure_msg
    elif shell_type == "pure":
        message = pure_msg
    else:
        return None

    if use_name and name is not None:
        return f"{name} ({message})"
    return message


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut the host name at the first occurrence of trim_at, if it is set."""
    if trim_at:
        index = host.find(trim_at)
        if index != -1:
            return host[:index]
    return host


def parse_jobs(value: str | None) -> int | None:
    """The number of background jobs from its textual form; unset means 0."""
    text = ("0" if value is None else value).strip()
    if not _INTEGER.fullmatch(text):
        return None
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        return None
    return number


def get_uid() -> int | None:
    """The current user's id as reported by `id -u`."""
    output = exec_cmd("id", ["-u"])
    if output is None:
        return None
    text = output.stdout.strip()
    if not text.removeprefix("+").isdigit() or not text.isascii():
        return None
    uid = int(text)
    return uid if uid <= _U32_MAX else None


def should_show_username(
    user: str | None,
    logname: str | None,
    ssh_connection: str | None,
    uid: int | None,
    show_always: bool,
) -> bool:
    """Whether the username belongs in the prompt.

    It does when the user differs from the login name, over SSH, as root, or
    when configured to always show.
    """
    return (
        user != logname
        or ssh_connection is not None
        or uid == ROOT_UID
        or show_always
    )


def format_kib(n_kib: int) -> str:
    """A KiB quantity in the largest fitting binary unit, with no decimals or spaces."""
    n_bytes = max(n_kib, 0) * 1024
    value: float = n_bytes
    unit = "B"
    for power, name in reversed(list(enumerate(_BINARY_UNITS, start=1))):
        if n_bytes > 1024**power:
            value = n_bytes / 1024**power
            unit = name
            break
    return f"{value:.0f}{unit}"


def format_percent(percent: float, zsh: bool = False) -> str:
    """A whole-number percentage; zsh needs the percent sign escaped."""
    sign = "%%" if zsh else "%"
    return f"{percent:.0f}{sign}"