"""Git repository state and commit hash helpers."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from astroprompt.utils import read_file


class RepositoryState(enum.Enum):
    """The operation a repository is in the middle of."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"


@dataclass(frozen=True)
class StateProgress:
    """How far an operation has got, e.g. step 3 of 10 of a rebase."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """The label of an ongoing operation and its progress, if known."""

    label: str
    progress: StateProgress | None = None


_LABELS = {
    RepositoryState.MERGE: "merge",
    RepositoryState.REVERT: "revert",
    RepositoryState.REVERT_SEQUENCE: "revert",
    RepositoryState.CHERRY_PICK: "cherry_pick",
    RepositoryState.CHERRY_PICK_SEQUENCE: "cherry_pick",
    RepositoryState.BISECT: "bisect",
    RepositoryState.APPLY_MAILBOX: "am",
    RepositoryState.APPLY_MAILBOX_OR_REBASE: "am_or_rebase",
}

_REBASE_STATES = frozenset(
    {RepositoryState.REBASE, RepositoryState.REBASE_INTERACTIVE, RepositoryState.REBASE_MERGE}
)


def id_to_hex_abbrev(data: bytes, length: int) -> str:
    """The first `length` characters of the lower-case hex encoding of data."""
    return data.hex()[:length]


def _file_to_count(path: Path) -> int | None:
    try:
        text = read_file(path).strip()
    except (OSError, UnicodeDecodeError):
        return None
    digits = text.removeprefix("+")
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def describe_rebase(root: str | os.PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from the files under .git."""
    dot_git = Path(root) / ".git"

    def progress_from(current_name: str, total_name: str) -> StateProgress | None:
        current = _file_to_count(dot_git / current_name)
        if current is None:
            return None
        total = _file_to_count(dot_git / total_name)
        if total is None:
            return None
        return StateProgress(current=current, total=total)

    if (dot_git / "rebase-merge").exists():
        progress = progress_from("rebase-merge/msgnum", "rebase-merge/end")
    elif (dot_git / "rebase-apply").exists():
        progress = progress_from("rebase-apply/next", "rebase-apply/last")
    else:
        progress = None

    return StateDescription(label="rebase", progress=progress)


def get_state_description(
    state: RepositoryState, root: str | os.PathLike[str]
) -> StateDescription | None:
    """Describe a repository state; a clean repository has no description."""
    if state is RepositoryState.CLEAN:
        return None
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(label=_LABELS[state])