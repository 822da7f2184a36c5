import pytest

from astroprompt.gitinfo import (
    RepositoryState,
    StateDescription,
    StateProgress,
    describe_rebase,
    get_state_description,
    id_to_hex_abbrev,
)


def test_hex_abbrev_full_length_round_trips():
    data = bytes(range(20))
    full = id_to_hex_abbrev(data, 40)
    assert bytes.fromhex(full) == data


def test_hex_abbrev_is_prefix_of_full():
    data = bytes([250, 1, 17, 128, 64, 3, 9])
    full = id_to_hex_abbrev(data, 100)
    abbrev = id_to_hex_abbrev(data, 7)
    assert len(abbrev) == 7
    assert full.startswith(abbrev)
    assert full == full.lower()


def test_hex_abbrev_length_capped_by_data():
    data = bytes([1, 2, 3])
    assert len(id_to_hex_abbrev(data, 50)) == 2 * len(data)
    assert id_to_hex_abbrev(data, 0) == ""


def test_hex_abbrev_pads_each_byte():
    assert id_to_hex_abbrev(bytes([0x0A, 0xFF]), 4) == "0aff"


def test_clean_state_has_no_description(tmp_path):
    assert get_state_description(RepositoryState.CLEAN, tmp_path) is None


@pytest.mark.parametrize(
    "state, label",
    [
        (RepositoryState.MERGE, "merge"),
        (RepositoryState.REVERT, "revert"),
        (RepositoryState.REVERT_SEQUENCE, "revert"),
        (RepositoryState.CHERRY_PICK, "cherry_pick"),
        (RepositoryState.CHERRY_PICK_SEQUENCE, "cherry_pick"),
        (RepositoryState.BISECT, "bisect"),
        (RepositoryState.APPLY_MAILBOX, "am"),
        (RepositoryState.APPLY_MAILBOX_OR_REBASE, "am_or_rebase"),
    ],
)
def test_state_labels(tmp_path, state, label):
    assert get_state_description(state, tmp_path) == StateDescription(label=label)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_rebase_merge_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "3\n")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "10\n")
    assert describe_rebase(tmp_path) == StateDescription("rebase", StateProgress(3, 10))


def test_rebase_apply_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-apply" / "next", " 2 ")
    _write(tmp_path / ".git" / "rebase-apply" / "last", "5")
    assert describe_rebase(tmp_path) == StateDescription("rebase", StateProgress(2, 5))


def test_rebase_without_progress_files(tmp_path):
    (tmp_path / ".git").mkdir()
    assert describe_rebase(tmp_path) == StateDescription("rebase")


def test_rebase_with_unparseable_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "three")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "10")
    assert describe_rebase(tmp_path).progress is None


def test_rebase_with_missing_total(tmp_path):
    _write(tmp_path / ".git" / "rebase-apply" / "next", "4")
    assert describe_rebase(tmp_path).progress is None


@pytest.mark.parametrize(
    "state",
    [RepositoryState.REBASE, RepositoryState.REBASE_INTERACTIVE, RepositoryState.REBASE_MERGE],
)
def test_rebase_states_use_rebase_description(tmp_path, state):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "1")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "4")
    assert get_state_description(state, tmp_path) == describe_rebase(tmp_path)
    assert get_state_description(state, tmp_path).progress == StateProgress(1, 4)